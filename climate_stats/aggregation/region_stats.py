from dataclasses import dataclass, field
from datetime import datetime
from ..ingestion.schema import Observation

class RunningSum:
    """Neumaier compensated sum.

    Keeps a separate compensation term so the rounding error stays bounded no
    matter how many samples are folded in.
    """

    __slots__ = ("_total", "_compensation")

    def __init__(self, start: float = 0.0):
        self._total = float(start)
        self._compensation = 0.0

    def add(self, value: float) -> None:
        t = self._total + value
        if abs(self._total) >= abs(value):
            self._compensation += (self._total - t) + value
        else:
            self._compensation += (value - t) + self._total
        self._total = t

    @property
    def value(self) -> float:
        return self._total + self._compensation


@dataclass(frozen=True)
class RegionSummary:
    """Read-only view of one region's statistics at snapshot time."""

    region_code: str
    record_count: int
    max_temp_f: float
    max_temp_at: datetime
    min_temp_f: float
    min_temp_at: datetime
    lightning_count: int
    snow_count: int
    avg_humidity: float
    avg_temp: float
    avg_cloud: float
    avg_pressure: float


@dataclass
class RegionStats:
    region_code: str
    record_count: int
    max_temp_f: float
    max_temp_at: datetime
    min_temp_f: float
    min_temp_at: datetime
    lightning_count: int
    snow_count: int
    humidity_sum: RunningSum = field(default_factory=RunningSum)
    temp_sum: RunningSum = field(default_factory=RunningSum)
    cloud_sum: RunningSum = field(default_factory=RunningSum)
    pressure_sum: RunningSum = field(default_factory=RunningSum)

    @classmethod
    def seed(cls, obs: Observation) -> "RegionStats":
        return cls(
            region_code=obs.region_code,
            record_count=1,
            max_temp_f=obs.temp_f,
            max_temp_at=obs.observed_at,
            min_temp_f=obs.temp_f,
            min_temp_at=obs.observed_at,
            lightning_count=int(obs.has_lightning),
            snow_count=int(obs.has_snow),
            humidity_sum=RunningSum(obs.humidity_pct),
            temp_sum=RunningSum(obs.temp_f),
            cloud_sum=RunningSum(obs.cloud_cover_pct),
            pressure_sum=RunningSum(obs.pressure_pa),
        )

    def update(self, obs: Observation) -> None:
        self.record_count += 1

        # strict comparisons: on a tie the earliest observation keeps the extreme
        if obs.temp_f > self.max_temp_f:
            self.max_temp_f = obs.temp_f
            self.max_temp_at = obs.observed_at
        if obs.temp_f < self.min_temp_f:
            self.min_temp_f = obs.temp_f
            self.min_temp_at = obs.observed_at

        self.lightning_count += int(obs.has_lightning)
        self.snow_count += int(obs.has_snow)

        self.humidity_sum.add(obs.humidity_pct)
        self.temp_sum.add(obs.temp_f)
        self.cloud_sum.add(obs.cloud_cover_pct)
        self.pressure_sum.add(obs.pressure_pa)

    @property
    def avg_humidity(self) -> float:
        return self.humidity_sum.value / self.record_count

    @property
    def avg_temp(self) -> float:
        return self.temp_sum.value / self.record_count

    @property
    def avg_cloud(self) -> float:
        return self.cloud_sum.value / self.record_count

    @property
    def avg_pressure(self) -> float:
        return self.pressure_sum.value / self.record_count

    def summarize(self) -> RegionSummary:
        return RegionSummary(
            region_code=self.region_code,
            record_count=self.record_count,
            max_temp_f=self.max_temp_f,
            max_temp_at=self.max_temp_at,
            min_temp_f=self.min_temp_f,
            min_temp_at=self.min_temp_at,
            lightning_count=self.lightning_count,
            snow_count=self.snow_count,
            avg_humidity=self.avg_humidity,
            avg_temp=self.avg_temp,
            avg_cloud=self.avg_cloud,
            avg_pressure=self.avg_pressure,
        )
