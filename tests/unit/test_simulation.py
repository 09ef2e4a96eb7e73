"""Tests for the Simulation driver."""

import pytest

from dinersim import (
    InvalidTimeStepError,
    Restaurant,
    ScheduledPartySource,
    Simulation,
    Table,
)


class TestSimulationLoop:
    def test_enqueues_arrivals_before_stepping(self, make_party):
        party = make_party(30, 30)
        sim = Simulation(
            Restaurant([Table(1, 2)]), ScheduledPartySource([party]),
            duration=5, time_step=5,
        )

        sim.run()

        record = sim.trace[0]
        assert record.arrived_party_size == 2
        assert record.parties_seated == 1
        assert record.seated_ids == tuple(p.id for p in party)
        assert all(p.seated_at is not None for p in party)

    def test_runs_at_least_one_tick(self):
        sim = Simulation(Restaurant([Table(1, 2)]), None, duration=0, time_step=5)
        summary = sim.run()
        assert summary.ticks == 1
        assert sim.restaurant.current_time == 5

    def test_tick_count_matches_duration(self):
        sim = Simulation(Restaurant([Table(1, 2)]), None, duration=240, time_step=5)
        assert sim.run().ticks == 48

    def test_validates_arguments(self):
        with pytest.raises(InvalidTimeStepError):
            Simulation(Restaurant([Table(1, 2)]), None, duration=10, time_step=0)
        with pytest.raises(ValueError):
            Simulation(Restaurant([Table(1, 2)]), None, duration=-1, time_step=5)

    def test_summary_property(self):
        sim = Simulation(Restaurant([Table(1, 2)]), None, duration=10, time_step=5)
        assert sim.summary is None
        summary = sim.run()
        assert sim.summary is summary


class TestServedAccounting:
    def test_counts_turnover_when_table_refilled_in_same_tick(self, make_party):
        # Table 1 empties and refills within the same tick twice, so the
        # seated count never drops even though four people left.
        source = ScheduledPartySource([
            make_party(10, 10),
            make_party(10, 10),
            make_party(100, 100),
            make_party(100, 100),
        ])
        sim = Simulation(
            Restaurant([Table(1, 2), Table(2, 2)]), source,
            duration=40, time_step=10, check_invariants=True,
        )

        summary = sim.run()

        third_tick = sim.trace[2]
        assert third_tick.departed == 2
        assert sim.trace[1].seated == sim.trace[2].seated
        assert summary.patrons_served == 4
        assert summary.patrons_arrived == 8
        assert summary.still_seated == 4

    def test_summary_totals_balance(self, make_party):
        source = ScheduledPartySource([make_party(10), None, make_party(20, 20), make_party(5)])
        sim = Simulation(Restaurant([Table(1, 2)]), source, duration=60, time_step=5)
        s = sim.run()
        assert s.patrons_arrived == s.patrons_served + s.still_seated + s.still_waiting_patrons


class TestFromConfig:
    def test_builds_isolated_simulations(self):
        from dinersim import SimulationConfig

        config = SimulationConfig(duration=60)
        a = Simulation.from_config(config)
        b = Simulation.from_config(config)
        assert a.restaurant is not b.restaurant
        assert a.restaurant.tables[0] is not b.restaurant.tables[0]
        assert [t.capacity for t in a.restaurant.tables] == [2, 2, 4, 4, 6]
