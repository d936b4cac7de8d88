from typing import Dict, List, Tuple
from .region_stats import RegionStats, RegionSummary
from ..ingestion.schema import Observation
from ..utils.logging import get_logger

logger = get_logger(__name__)

class AggregationStore:
    """Running per-region statistics, kept in first-seen region order.

    A single store spans every input stream of a run, so feeding lines split
    across several streams gives the same result as one concatenated stream.
    """

    def __init__(self):
        self._regions: Dict[str, RegionStats] = {}

    def observe(self, obs: Observation) -> None:
        # a fold, not a set union: every call counts as one record
        stats = self._regions.get(obs.region_code)
        if stats is None:
            self._regions[obs.region_code] = RegionStats.seed(obs)
            logger.debug(f"New region {obs.region_code!r} (#{len(self._regions)})")
            return
        stats.update(obs)

    def snapshot(self) -> Tuple[RegionSummary, ...]:
        return tuple(stats.summarize() for stats in self._regions.values())

    def region_codes(self) -> List[str]:
        return list(self._regions)

    @property
    def total_records(self) -> int:
        return sum(stats.record_count for stats in self._regions.values())

    def __len__(self) -> int:
        return len(self._regions)

    def __contains__(self, region_code: object) -> bool:
        return region_code in self._regions
