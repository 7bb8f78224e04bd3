import io

import pytest

from geohasher.batch import geohash_records, run_batch
from geohasher.geo import CoordinateRangeError, PrecisionError
from geohasher.models import BatchConfig, BatchStats


def test_geohash_records_with_header() -> None:
    rows = [
        ["lat", "lon", "wthr_date"],
        ["35.451305", "96.751393", "2016-10-03"],
        ["N/A", "96.751393", "2016-10-04"],
        ["", "96.751393", "2016-10-05"],
    ]
    stats = BatchStats()
    out = list(geohash_records(rows, BatchConfig(), stats))

    assert out == [
        ["lat", "lon", "wthr_date", "geohash"],
        ["35.451305", "96.751393", "2016-10-03", "wnkc"],
        ["N/A", "96.751393", "2016-10-04", "error"],
        ["", "96.751393", "2016-10-05", ""],
    ]
    assert stats == BatchStats(rows=3, encoded=1, unparseable=1, nulls=1)


def test_geohash_records_named_columns_any_order() -> None:
    rows = [["lng", "lat"], ["96.751393", "35.451305"]]
    config = BatchConfig(lat_column="lat", lon_column="lng", output_column="gh")
    assert list(geohash_records(rows, config)) == [
        ["lng", "lat", "gh"],
        ["96.751393", "35.451305", "wnkc"],
    ]


def test_geohash_records_without_header_uses_indices() -> None:
    rows = [["x", "90", "180"], ["y", "-90"]]
    config = BatchConfig(header=False, lat_column=1, lon_column=2, precision=12)
    assert list(geohash_records(rows, config)) == [
        ["x", "90", "180", "zzzzzzzzzzzz"],
        ["y", "-90", ""],
    ]


def test_geohash_records_empty_input() -> None:
    assert list(geohash_records([], BatchConfig())) == []


def test_geohash_records_missing_column() -> None:
    with pytest.raises(KeyError):
        list(geohash_records([["a", "b"], ["1", "2"]], BatchConfig()))


def test_geohash_records_named_column_needs_header() -> None:
    with pytest.raises(KeyError):
        list(geohash_records([["1", "2"]], BatchConfig(header=False)))


def test_geohash_records_range_error_propagates() -> None:
    rows = [["lat", "lon"], ["180", "0"]]
    with pytest.raises(CoordinateRangeError):
        list(geohash_records(rows, BatchConfig()))


def test_geohash_records_bad_precision() -> None:
    with pytest.raises(PrecisionError):
        list(geohash_records([["lat", "lon"]], BatchConfig(precision=13)))


def test_run_batch_streams(capsys) -> None:
    source = io.StringIO("lat;lon\n35.451305;96.751393\n0;0\n")
    sink = io.StringIO()
    stats = run_batch(BatchConfig(delimiter=";"), source, sink)

    assert sink.getvalue() == "lat;lon;geohash\n35.451305;96.751393;wnkc\n0;0;s000\n"
    assert stats.encoded == 2
    assert "[Batch] Processed 2 rows" in capsys.readouterr().err


def test_run_batch_files(tmp_path) -> None:
    source = tmp_path / "in.csv"
    target = tmp_path / "out.csv"
    source.write_text("lat,lon\n1,2\n")
    config = BatchConfig(input_path=str(source), output_path=str(target))

    run_batch(config)

    assert target.read_text() == "lat,lon,geohash\n1,2,s01m\n"


def test_geohash_records_missing_column_fails_before_header() -> None:
    records = geohash_records([["a", "b"], ["1", "2"]], BatchConfig())
    with pytest.raises(KeyError):
        next(records)


def test_run_batch_missing_column_writes_nothing() -> None:
    sink = io.StringIO()
    with pytest.raises(KeyError):
        run_batch(BatchConfig(), io.StringIO("a,b\n1,2\n"), sink)
    assert sink.getvalue() == ""


def test_run_batch_bad_precision_leaves_output_untouched(tmp_path) -> None:
    target = tmp_path / "out.csv"
    target.write_text("previous\n")
    config = BatchConfig(precision=13, output_path=str(target))

    with pytest.raises(PrecisionError):
        run_batch(config, io.StringIO("lat,lon\n1,2\n"))

    assert target.read_text() == "previous\n"


def test_geohash_records_numeric_header_name_wins_over_index() -> None:
    rows = [["lon", "2"], ["96.751393", "35.451305"]]
    config = BatchConfig(lat_column=2, lon_column="lon")
    assert list(geohash_records(rows, config)) == [
        ["lon", "2", "geohash"],
        ["96.751393", "35.451305", "wnkc"],
    ]


def test_geohash_records_numeric_reference_falls_back_to_index() -> None:
    rows = [["x", "y"], ["35.451305", "96.751393"]]
    config = BatchConfig(lat_column=0, lon_column=1)
    assert list(geohash_records(rows, config)) == [
        ["x", "y", "geohash"],
        ["35.451305", "96.751393", "wnkc"],
    ]
