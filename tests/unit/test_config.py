"""Tests for SimulationConfig and PartyGeneratorConfig."""

import dataclasses

import pytest

from dinersim import InvalidTimeStepError, PartyGeneratorConfig, SimulationConfig


class TestPartyGeneratorConfig:
    def test_defaults(self):
        config = PartyGeneratorConfig()
        assert config.arrival_rate == 0.4
        assert (config.min_party_size, config.max_party_size) == (1, 6)
        assert (config.min_dining_time, config.max_dining_time) == (30.0, 90.0)

    @pytest.mark.parametrize("rate", [-0.1, 1.5])
    def test_arrival_rate_must_be_probability(self, rate):
        with pytest.raises(ValueError):
            PartyGeneratorConfig(arrival_rate=rate)

    def test_party_size_bounds(self):
        with pytest.raises(ValueError):
            PartyGeneratorConfig(min_party_size=0)
        with pytest.raises(ValueError):
            PartyGeneratorConfig(min_party_size=4, max_party_size=2)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            PartyGeneratorConfig().arrival_rate = 0.9


class TestSimulationConfig:
    def test_defaults(self):
        config = SimulationConfig()
        assert config.table_capacities == (2, 2, 4, 4, 6)
        assert config.total_capacity == 18
        assert config.duration == 240.0
        assert config.time_step == 5.0

    def test_build_tables_numbers_from_one(self):
        tables = SimulationConfig(table_capacities=(4, 2)).build_tables()
        assert [(t.id, t.capacity) for t in tables] == [(1, 4), (2, 2)]

    def test_build_tables_returns_fresh_objects(self):
        config = SimulationConfig()
        assert config.build_tables()[0] is not config.build_tables()[0]

    def test_invalid_time_step(self):
        with pytest.raises(InvalidTimeStepError):
            SimulationConfig(time_step=0)

    def test_negative_duration(self):
        with pytest.raises(ValueError):
            SimulationConfig(duration=-5)

    def test_requires_tables(self):
        with pytest.raises(ValueError):
            SimulationConfig(table_capacities=())
