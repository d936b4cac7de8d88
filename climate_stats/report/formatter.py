from datetime import datetime, tzinfo
from typing import List, Optional, Sequence
from dateutil import tz
from ..aggregation.region_stats import RegionSummary

BANNER = (
    "Welcome. This program performs analysis on climate data provided by "
    "the National Oceanic and Atmospheric Administration (NOAA)."
)

def resolve_timezone(name: str = "") -> tzinfo:
    """Empty name means the local zone; anything else goes through dateutil's zone lookup."""
    if not name:
        return tz.tzlocal()
    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown time zone: {name!r}")
    return zone

def format_ctime(moment: datetime, zone: tzinfo) -> str:
    # same layout as C's ctime(), e.g. "Mon Aug  3 11:00:00 2015"
    local = moment.astimezone(zone)
    return f"{local:%a %b} {local.day:2d} {local:%H:%M:%S %Y}"

class ReportFormatter:
    def __init__(self, zone: Optional[tzinfo] = None, show_banner: bool = False):
        self.zone = zone or tz.tzlocal()
        self.show_banner = show_banner

    def render(self, snapshot: Sequence[RegionSummary]) -> str:
        lines: List[str] = []
        if self.show_banner:
            lines.append(BANNER)

        lines.append("States found: " + "".join(f"{s.region_code} " for s in snapshot))
        for s in snapshot:
            lines.extend(self._region_block(s))

        return "\n".join(lines) + "\n"

    def _region_block(self, s: RegionSummary) -> List[str]:
        return [
            f"-- State: {s.region_code} --",
            f"Number of Records: {s.record_count}",
            f"Average Humidity: {s.avg_humidity:.1f}%",
            f"Average Temperature: {s.avg_temp:.1f}F",
            f"Max Temperature: {s.max_temp_f:.1f}F",
            f"Max Temperature on: {format_ctime(s.max_temp_at, self.zone)}",
            f"Min Temperature: {s.min_temp_f:.1f}F",
            f"Min Temperature on: {format_ctime(s.min_temp_at, self.zone)}",
            f"Lightning Strikes: {s.lightning_count}",
            f"Records with Snow Cover: {s.snow_count}",
            f"Average Cloud Cover: {s.avg_cloud:.1f}%",
        ]
