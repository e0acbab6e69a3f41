"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

import json
import logging
from collections.abc import Mapping, Sequence

import numpy as np

from mchain.errors import InvalidCorpus, InvalidRun, MalformedInput

logger = logging.getLogger(__name__)

# padding of the beginning of runs in a corpus
BEGIN = "@@MARKOV_CHAIN_BEGIN"
# padding of the end of runs in a corpus
END = "@@MARKOV_CHAIN_END"
DEFAULT_STATE_SIZE = 1


class NoTransitionType:
    """Returned by Chain.move when the state has never been followed by anything."""

    def __repr__(self):
        return "NO_TRANSITION"

    def __bool__(self):
        return False


NO_TRANSITION = NoTransitionType()


class Chain:
    """
    A Markov chain representing processes that have both beginnings and ends,
    for instance sentences, melodies or chord sequences.

    The model maps state keys (see create_state_key) to the symbols seen after
    that state, each with its number of occurrences:
        {state_key: {follow_key: {"value": symbol, "count": n}}}
    """

    def __init__(self, corpus_or_model, state_size=None, rng=None):
        self.state_size = state_size or DEFAULT_STATE_SIZE
        _check_state_size(self.state_size)
        # seed, Generator or None
        self.rng = np.random.default_rng(rng)
        if isinstance(corpus_or_model, Mapping):
            self.model = _copy_model(corpus_or_model)
        else:
            self.model = Chain.build(corpus_or_model, state_size=self.state_size)

    def __repr__(self):
        return f"Chain(state_size={self.state_size}, states={len(self.model)})"

    def __eq__(self, other):
        if not isinstance(other, Chain):
            return NotImplemented
        # symbols are compared by their encoding, a tuple comes back from JSON as a list
        return self.state_size == other.state_size and _canonical_model(self.model) == _canonical_model(other.model)

    @staticmethod
    def build(corpus, state_size=DEFAULT_STATE_SIZE):
        """Counts, for every state of every padded run, the symbols that follow it.

        Args:
            corpus: a sequence of runs, each run a sequence of symbols
            state_size: number of symbols in a state, at least 1

        Returns:
            the transition table, a dict of dicts of {"value", "count"} records
        """
        _check_state_size(state_size)
        if not _is_sequence(corpus):
            raise InvalidCorpus(f"Corpus must be a sequence of runs, got {type(corpus).__name__}")
        for index, run in enumerate(corpus):
            if not _is_sequence(run):
                raise InvalidRun(index, run)

        model = {}
        begin_padding = create_begin_state(state_size)
        for run in corpus:
            padded_run = begin_padding + list(run) + [END]
            for ngram_start in range(len(run) + 1):
                ngram_end = ngram_start + state_size
                state_key = create_state_key(padded_run[ngram_start:ngram_end])
                follow = padded_run[ngram_end]
                follow_set = model.setdefault(state_key, {})
                follow_key = _encode(follow)
                if follow_key not in follow_set:
                    follow_set[follow_key] = {"value": follow, "count": 0}
                follow_set[follow_key]["count"] += 1
        logger.debug("built model with %d states from %d runs (state size %d)", len(model), len(corpus), state_size)
        return model

    @classmethod
    def from_json(cls, json_data, rng=None):
        """Creates a Chain by hydrating the model from its serialized form.

        json_data is either the JSON text (str or bytes) or the already parsed object.
        """
        if isinstance(json_data, (str, bytes, bytearray)):
            try:
                parsed_data = json.loads(json_data)
            except ValueError as e:
                raise MalformedInput(f"Serialized chain is not valid JSON: {e}") from e
        else:
            parsed_data = json_data
        if not isinstance(parsed_data, dict):
            raise MalformedInput("Serialized chain must be an object with 'stateSize' and 'model'")

        state_size = parsed_data.get("stateSize")
        if not isinstance(state_size, int) or isinstance(state_size, bool) or state_size < 1:
            raise MalformedInput(f"'stateSize' must be a positive integer, got {state_size!r}")
        serialized_model = parsed_data.get("model")
        if not isinstance(serialized_model, list):
            raise MalformedInput("'model' must be a list of [state key, follow entries] pairs")

        model = {}
        for i, entry in enumerate(serialized_model):
            state_key, follow_entries = _unpack_entry(entry, f"model[{i}]")
            if not isinstance(follow_entries, list):
                raise MalformedInput(f"model[{i}] follow entries must be a list")
            follow_map = {}
            for j, follow_entry in enumerate(follow_entries):
                follow_key, follow_data = _unpack_entry(follow_entry, f"model[{i}][1][{j}]")
                _check_record(follow_data, f"model[{i}][1][{j}]")
                follow_map[follow_key] = dict(follow_data)
            model[state_key] = follow_map
        return cls(model, state_size=state_size, rng=rng)

    def to_json(self):
        """Flattens the model into nested [key, value] lists, ready for json.dumps."""
        serialized = []
        for state_key, follow_set in self.model.items():
            follow_entries = [[follow_key, dict(record)] for follow_key, record in follow_set.items()]
            serialized.append([state_key, follow_entries])
        return {"stateSize": self.state_size, "model": serialized}

    def move(self, from_state, rng=None):
        """
        Given a state, chooses the next symbol at random, with a bias towards
        symbols with higher counts. Returns NO_TRANSITION if the state is unknown.
        """
        state = self.model.get(create_state_key(from_state))
        if not state:
            return NO_TRANSITION
        rng = self.rng if rng is None else np.random.default_rng(rng)

        choices = []
        weights = []
        for record in state.values():
            choices.append(record["value"])
            weights.append(record["count"])
        cumulative_distribution = np.cumsum(weights)
        r = rng.random() * cumulative_distribution[-1]
        return choices[bisect(cumulative_distribution, r)]

    def walk(self, from_state=None, max_steps=None, rng=None):
        """Performs a single run of the chain, starting from from_state or from BEGIN paddings.

        Stops when END is drawn or the current state has no continuation. max_steps, if given,
        bounds the number of generated symbols for models that may cycle forever.
        """
        rng = self.rng if rng is None else np.random.default_rng(rng)
        if from_state is None:
            state = create_begin_state(self.state_size)
        else:
            state = list(_as_sequence(from_state))

        steps = []
        while True:
            if max_steps is not None and len(steps) >= max_steps:
                logger.debug("walk stopped after %d steps", max_steps)
                break
            step = self.move(state, rng=rng)
            if step is NO_TRANSITION:
                logger.debug("no continuation found for %s", create_state_key(state))
                break
            if _is_end(step):
                break
            steps.append(step)
            state = state[1:] + [step]
        return steps


def serialize(chain, indent=None):
    """Returns the JSON text of a chain, see Chain.to_json. Compact unless indent is given."""
    separators = (",", ":") if indent is None else None
    return json.dumps(chain.to_json(), indent=indent, separators=separators, ensure_ascii=False)


def deserialize(json_data, rng=None):
    return Chain.from_json(json_data, rng=rng)


def create_state_key(original_state):
    """
    Creates the key used to look up transitions in the model.
    A list or a tuple is taken as a whole state, any other value as a state of size 1.
    """
    return _encode(list(_as_sequence(original_state)))


def create_begin_state(state_size):
    # BEGIN paddings for the beginning of runs, also the default start of a walk
    return [BEGIN] * state_size


def last(seq):
    return seq[-1] if len(seq) else None


def bisect(values, x, high=None):
    """Index where x would be inserted in the sorted values, to the right of equal entries.

    Same as bisect.bisect_right, over values[:high].
    """
    if high is None:
        high = len(values)
    return int(np.searchsorted(np.asarray(values[:high]), x, side="right"))


def _encode(value):
    return json.dumps(_normalize(value), separators=(",", ":"), ensure_ascii=False, sort_keys=True)


def _is_sequence(obj):
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def _as_sequence(state):
    if isinstance(state, (list, tuple)):
        return state
    return [state]


def _is_end(step):
    return isinstance(step, str) and step == END


def _copy_model(model):
    return {
        state_key: {follow_key: dict(record) for follow_key, record in follow_set.items()}
        for state_key, follow_set in model.items()
    }


def _unpack_entry(entry, where):
    if not isinstance(entry, list) or len(entry) != 2:
        raise MalformedInput(f"{where} must be a [key, value] pair")
    key, value = entry
    if not isinstance(key, str):
        raise MalformedInput(f"{where} key must be a string, got {type(key).__name__}")
    return key, value


def _check_record(record, where):
    if not isinstance(record, dict) or "value" not in record or "count" not in record:
        raise MalformedInput(f"{where} must be a record with 'value' and 'count'")
    count = record["count"]
    if not isinstance(count, int) or isinstance(count, bool) or count < 1:
        raise MalformedInput(f"{where} count must be a positive integer, got {count!r}")


def _normalize(value):
    # 1 == 1.0 in Python, both must share a key
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    if isinstance(value, dict):
        return {k: _normalize(v) for k, v in value.items()}
    return value


def _canonical_model(model):
    return {
        state_key: {follow_key: (record["count"], _encode(record["value"])) for follow_key, record in follow_set.items()}
        for state_key, follow_set in model.items()
    }


def _check_state_size(state_size):
    if not isinstance(state_size, int) or isinstance(state_size, bool) or state_size < 1:
        raise ValueError(f"state_size must be a positive integer, got {state_size!r}")
