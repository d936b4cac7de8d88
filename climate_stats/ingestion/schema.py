from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Field order of one tab-delimited NOAA observation line
FIELD_NAMES = (
    "region_code",
    "epoch_millis",
    "geohash",
    "humidity_pct",
    "snow_flag",
    "cloud_cover_pct",
    "lightning_flag",
    "pressure_pa",
    "surface_temp_k",
)

class Observation(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        allow_inf_nan=False,
        str_strip_whitespace=True,
    )

    region_code: str = Field(min_length=1)
    observed_at: datetime
    geohash: str = ""
    humidity_pct: float
    has_snow: bool
    cloud_cover_pct: float
    has_lightning: bool
    pressure_pa: float
    surface_temp_k: float
    temp_f: float

    @field_validator("has_snow", "has_lightning", mode="before")
    @classmethod
    def _indicator(cls, v: Any) -> bool:
        # NOAA exports write the flags either as 0/1 or as 0.0/1.0
        if isinstance(v, str):
            try:
                v = float(v)
            except ValueError:
                raise ValueError(f"indicator must be 0 or 1, got {v!r}")
        if isinstance(v, bool) or v in (0, 1):
            return bool(v)
        raise ValueError(f"indicator must be 0 or 1, got {v!r}")
