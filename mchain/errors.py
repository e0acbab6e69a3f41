"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""


class ChainError(Exception):
    """Base class for errors raised while building or loading a chain."""


class InvalidCorpus(ChainError, TypeError):
    """Raised when the corpus given to build is not a sequence of runs."""


class InvalidRun(ChainError, TypeError):
    """Raised when one of the runs of a corpus is not a sequence."""

    def __init__(self, index, run):
        super().__init__(
            f"Invalid run in corpus at index {index}: must be a sequence, got {type(run).__name__}"
        )
        self.index = index


class MalformedInput(ChainError, ValueError):
    """Raised when a serialized chain cannot be parsed or has the wrong shape."""
