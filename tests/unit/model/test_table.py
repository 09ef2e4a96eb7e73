"""Tests for Table."""

import pytest

from dinersim import InvalidCapacityError, SeatingLedger, Table


class TestTable:
    def test_creates_empty(self):
        table = Table(1, 4)
        assert table.id == 1
        assert table.capacity == 4
        assert table.occupants == ()
        assert table.is_empty is True
        assert table.is_full is False
        assert table.seats_free == 4
        assert table.seated_since is None

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_non_positive_capacity_rejected(self, capacity):
        with pytest.raises(InvalidCapacityError):
            Table(1, capacity)

    def test_capacity_is_read_only(self):
        table = Table(1, 4)
        with pytest.raises(AttributeError):
            table.capacity = 6

    def test_occupants_is_a_snapshot(self, make_person):
        table = Table(1, 2)
        ledger = SeatingLedger()
        ledger.seat(make_person(), table)

        snapshot = table.occupants
        assert isinstance(snapshot, tuple)
        ledger.evict_all(table)
        assert len(snapshot) == 1
        assert table.occupants == ()

    def test_full_table(self, make_person):
        table = Table(1, 1)
        SeatingLedger().seat(make_person(), table, now=15)
        assert table.is_full is True
        assert table.seats_free == 0
        assert table.seated_since == 15
