"""
Unit tests for user_registry.storage.id_strategies.
"""

import re

import pytest

from user_registry.storage.id_strategies import (
    RandomStrategy,
    TimestampStrategy,
    UUID4Strategy,
    _base36_encode,
    get_strategy_from_config,
)
from user_registry.config import settings

BASE36_PATTERN = re.compile(r"^[0-9a-z]+$")


def test_base36_encode_edges():
    assert _base36_encode(0) == "0"
    assert _base36_encode(35) == "z"
    assert _base36_encode(36) == "10"
    with pytest.raises(ValueError):
        _base36_encode(-1)


def test_timestamp_strategy_prefix_is_time_in_base36():
    s = TimestampStrategy(clock=lambda: 1_700_000_000.0)
    prefix = _base36_encode(1_700_000_000_000)
    value = s.generate()
    assert value.startswith(prefix)
    assert len(value) == len(prefix) + 11
    assert BASE36_PATTERN.match(value)


def test_timestamp_strategy_diversity_within_same_millisecond():
    s = TimestampStrategy(clock=lambda: 1_700_000_000.0)
    samples = {s.generate() for _ in range(200)}
    assert len(samples) == 200


def test_uuid4_strategy_shape():
    value = UUID4Strategy().generate()
    assert re.fullmatch(r"[0-9a-f]{32}", value)


def test_random_strategy_length_is_clamped():
    assert len(RandomStrategy(length=20).generate()) == 20
    assert len(RandomStrategy(length=2).generate()) == 8
    assert len(RandomStrategy(length=500).generate()) == 64
    assert BASE36_PATTERN.match(RandomStrategy(length=20).generate())


@pytest.mark.parametrize(
    "name, cls",
    [("timestamp", TimestampStrategy), ("UUID4", UUID4Strategy), ("random", RandomStrategy)],
)
def test_get_strategy_from_config_by_name(name, cls):
    assert isinstance(get_strategy_from_config(name), cls)


def test_get_strategy_from_config_default_is_timestamp(monkeypatch):
    monkeypatch.setattr(settings, "ID_STRATEGY", "timestamp")
    assert isinstance(get_strategy_from_config(), TimestampStrategy)


def test_get_strategy_from_config_unknown():
    with pytest.raises(ValueError, match="Unknown id strategy"):
        get_strategy_from_config("sequential")
