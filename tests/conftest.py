"""Shared fixtures for sensorcfg tests."""

import json

import pytest


@pytest.fixture
def bro_config() -> str:
    """A parser config with unrelated fields and a non-Stellar transformation."""
    return json.dumps({
        "parserClassName": "org.apache.metron.parsers.bro.BasicBroParser",
        "sensorTopic": "bro",
        "parserConfig": {"dateFormat": "yyyy-MM-dd"},
        "fieldTransformations": [
            {"input": ["protocol"], "transformation": "IP_PROTOCOL"},
        ],
        "readMetadata": False,
    })


@pytest.fixture
def stellar_config() -> str:
    """A parser config whose Stellar transformation maps a and b."""
    return json.dumps({
        "sensorTopic": "squid",
        "fieldTransformations": [
            {"input": ["protocol"], "transformation": "IP_PROTOCOL"},
            {"transformation": "STELLAR", "config": {"a": "1", "b": "2"}, "output": ["a", "b"]},
            {"input": ["junk"], "transformation": "REMOVE"},
        ],
    })
