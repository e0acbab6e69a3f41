"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

from mchain.errors import ChainError, InvalidCorpus, InvalidRun, MalformedInput
from mchain.markov import (
    BEGIN,
    DEFAULT_STATE_SIZE,
    END,
    NO_TRANSITION,
    Chain,
    NoTransitionType,
    bisect,
    create_begin_state,
    create_state_key,
    deserialize,
    last,
    serialize,
)

__all__ = [
    "BEGIN",
    "DEFAULT_STATE_SIZE",
    "END",
    "NO_TRANSITION",
    "Chain",
    "ChainError",
    "InvalidCorpus",
    "InvalidRun",
    "MalformedInput",
    "NoTransitionType",
    "bisect",
    "create_begin_state",
    "create_state_key",
    "deserialize",
    "last",
    "serialize",
]
