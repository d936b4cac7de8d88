from datetime import datetime

import pytest
from dateutil import tz

from climate_stats.aggregation.region_stats import RegionSummary
from climate_stats.report.formatter import (
    BANNER,
    ReportFormatter,
    format_ctime,
    resolve_timezone,
)


def summary(code: str = "TN", **overrides) -> RegionSummary:
    values = dict(
        region_code=code,
        record_count=17097,
        max_temp_f=110.4,
        max_temp_at=datetime(2015, 8, 3, 11, 0, 0, tzinfo=tz.UTC),
        min_temp_f=-11.1,
        min_temp_at=datetime(2015, 2, 20, 4, 0, 0, tzinfo=tz.UTC),
        lightning_count=781,
        snow_count=107,
        avg_humidity=49.44,
        avg_temp=58.26,
        avg_cloud=53.02,
        avg_pressure=100000.0,
    )
    values.update(overrides)
    return RegionSummary(**values)


def test_format_ctime_pads_day() -> None:
    moment = datetime(2015, 8, 3, 11, 0, 0, tzinfo=tz.UTC)
    assert format_ctime(moment, tz.UTC) == "Mon Aug  3 11:00:00 2015"


def test_format_ctime_converts_zone() -> None:
    moment = datetime(2015, 12, 30, 12, 0, 0, tzinfo=tz.UTC)
    zone = tz.gettz("America/Los_Angeles")
    assert format_ctime(moment, zone) == "Wed Dec 30 04:00:00 2015"


def test_render_region_block() -> None:
    text = ReportFormatter(zone=tz.UTC).render([summary()])

    assert text.splitlines() == [
        "States found: TN ",
        "-- State: TN --",
        "Number of Records: 17097",
        "Average Humidity: 49.4%",
        "Average Temperature: 58.3F",
        "Max Temperature: 110.4F",
        "Max Temperature on: Mon Aug  3 11:00:00 2015",
        "Min Temperature: -11.1F",
        "Min Temperature on: Fri Feb 20 04:00:00 2015",
        "Lightning Strikes: 781",
        "Records with Snow Cover: 107",
        "Average Cloud Cover: 53.0%",
    ]


def test_render_keeps_snapshot_order() -> None:
    text = ReportFormatter(zone=tz.UTC).render([summary("WA"), summary("TN"), summary("CA")])

    lines = text.splitlines()
    assert lines[0] == "States found: WA TN CA "
    assert [l for l in lines if l.startswith("-- State:")] == [
        "-- State: WA --",
        "-- State: TN --",
        "-- State: CA --",
    ]


def test_render_empty_snapshot() -> None:
    assert ReportFormatter(zone=tz.UTC).render([]) == "States found: \n"


def test_banner_is_optional() -> None:
    assert BANNER not in ReportFormatter(zone=tz.UTC).render([])
    assert ReportFormatter(zone=tz.UTC, show_banner=True).render([]).startswith(BANNER + "\n")


def test_resolve_timezone() -> None:
    assert resolve_timezone("") == tz.tzlocal()
    assert resolve_timezone("UTC") is not None
    with pytest.raises(ValueError):
        resolve_timezone("Nowhere/Special")
