"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

import logging
import re

from mchain import Chain, serialize, deserialize

TEXT = """Longtemps, je me suis couché de bonne heure. Parfois, à peine ma bougie éteinte,
mes yeux se fermaient si vite que je n'avais pas le temps de me dire : je m'endors.
Et, une demi-heure après, la pensée qu'il était temps de chercher le sommeil m'éveillait.
Je voulais poser le volume que je croyais avoir encore dans les mains et souffler ma lumière."""

if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    # one run per sentence, one symbol per word
    sentences = [s.strip() for s in re.split(r"(?<=[.:])\s+", TEXT) if s.strip()]
    corpus = [sentence.split() for sentence in sentences]
    chain = Chain(corpus, state_size=2, rng=7)
    for i in range(5):
        print(' '.join(chain.walk()))
    # the chain survives a round trip through its JSON text
    hydrated = deserialize(serialize(chain))
    print(hydrated == chain, hydrated)
