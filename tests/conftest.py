"""Shared corpora for the chain tests."""

from __future__ import annotations

import pytest


@pytest.fixture()
def corpus() -> list[list[str]]:
    return [sentence.split(" ") for sentence in ("foo bar baz qux.", "foo baz qux bar.")]


@pytest.fixture()
def mixed_corpus() -> list[list[object]]:
    return [
        [[1, 2, 3], {"foo": "bar"}, "qux", 0, {"end": True}],
        [[1, 2, 3], {"foo": "baz"}, "qux", 1, {"end": True}],
        [[1, 2, 3], {"foo": "bar"}, "bar", 0, {"end": True}],
        [[4, 5, 6], {"foo": "baz"}, "bar", 1, {"end": True}],
    ]
