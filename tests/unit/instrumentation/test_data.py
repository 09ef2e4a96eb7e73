"""Tests for the Data sample container."""

import pytest

from dinersim import Data


class TestData:
    def test_empty_aggregations_are_zero(self):
        data = Data()
        assert data.mean() == 0.0
        assert data.max() == 0.0
        assert data.sum() == 0
        assert data.percentile(0.9) == 0.0
        assert not data

    def test_aggregations(self):
        data = Data()
        for t, v in [(5, 0.0), (10, 10.0), (15, 20.0), (20, 30.0)]:
            data.add_stat(v, t)

        assert data.count() == 4
        assert len(data) == 4
        assert data.mean() == 15.0
        assert data.max() == 30.0
        assert data.sum() == 60.0
        assert data.percentile(0.5) == pytest.approx(15.0)

    def test_percentile_interpolates_and_clamps(self):
        data = Data()
        for t, v in [(5, 40.0), (10, 0.0), (15, 10.0)]:
            data.add_stat(v, t)

        assert data.percentile(0.9) == pytest.approx(34.0)
        assert data.percentile(0.0) == 0.0
        assert data.percentile(1.0) == 40.0

    def test_values_keep_recording_order(self):
        data = Data()
        data.add_stat(5, 20)
        data.add_stat(0, 10)
        assert data.values == [(20.0, 5), (10.0, 0)]

    def test_to_dataframe(self):
        pd = pytest.importorskip("pandas")
        data = Data()
        data.add_stat(12.5, 10)
        df = data.to_dataframe("wait")
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["time", "wait"]
        assert df["wait"].tolist() == [12.5]
