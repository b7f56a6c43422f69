"""Shared index fixtures."""

import pytest

from cmdoc_mcp.index import IndexNode, node_from_mapping

SAMPLE_INDEX = {
    "js": {
        "index": {"__basic": 122},
        "array": {
            "index": {"__basic": 112},
            "splice": {"__basic": 274, "__detail": 608},
            "push": {"__basic": 176},
            "pop": {"__basic": 125},
        },
        "string": {
            "slice": {"__basic": 122},
            "split": {"__basic": 133},
        },
    },
    "git": {
        "commit": {"__basic": 95, "__detail": 384},
        "checkout": {"__basic": 92},
    },
    "node": {
        "__basic": 54,
        "__install": 116,
        "fs": {"readFile": {"__basic": 146}},
    },
}


@pytest.fixture
def sample_root() -> IndexNode:
    return node_from_mapping(SAMPLE_INDEX)


@pytest.fixture
def splice_root() -> IndexNode:
    return node_from_mapping({"array": {"splice": {"__basic": 120}}})


@pytest.fixture
def push_pop_root() -> IndexNode:
    return node_from_mapping({"array": {"push": {"__basic": 176}, "pop": {"__basic": 125}}})
