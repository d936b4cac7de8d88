import math
import re
from datetime import datetime
from typing import Any, Dict, Optional, Union
from dateutil import tz
from .schema import FIELD_NAMES, Observation
from .validator import ObservationValidator
from ..errors import MalformedRecord

DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")

NUMERIC_FIELDS = (
    "epoch_millis",
    "humidity_pct",
    "snow_flag",
    "cloud_cover_pct",
    "lightning_flag",
    "pressure_pa",
    "surface_temp_k",
)

def kelvin_to_fahrenheit(temp_k: float) -> float:
    return temp_k * 1.8 - 459.67

def epoch_millis_to_datetime(epoch_ms: int) -> datetime:
    """Truncate to whole seconds (toward zero) and return an aware UTC datetime."""
    seconds = abs(epoch_ms) // 1000
    if epoch_ms < 0:
        seconds = -seconds
    return datetime.fromtimestamp(seconds, tz=tz.UTC)

class RecordParser:
    def __init__(self, validator: Optional[ObservationValidator] = None, encoding: str = "utf-8"):
        self.validator = validator or ObservationValidator()
        self.encoding = encoding

    def decode(self, raw: bytes) -> str:
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise MalformedRecord(f"line is not valid {self.encoding}: {e.reason}")

    def split(self, line: Union[str, bytes]) -> Dict[str, str]:
        if isinstance(line, bytes):
            line = self.decode(line)

        # only the line terminator is dropped; the last field keeps everything else
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]

        fields = line.split("\t")
        if len(fields) != len(FIELD_NAMES):
            raise MalformedRecord(
                f"expected {len(FIELD_NAMES)} tab-separated fields, got {len(fields)}", line
            )
        return {name: value.strip() for name, value in zip(FIELD_NAMES, fields)}

    def normalize(self, fields: Dict[str, str]) -> Dict[str, Any]:
        # plain decimal notation only; int()/float() would also take "1_000" or "nan"
        for name in NUMERIC_FIELDS:
            if not DECIMAL_RE.match(fields[name]):
                raise MalformedRecord(f"{name} is not a number: {fields[name]!r}")

        epoch_ms = self._to_int(fields["epoch_millis"], "epoch_millis")
        temp_k = self._to_float(fields["surface_temp_k"], "surface_temp_k")

        try:
            observed_at = epoch_millis_to_datetime(epoch_ms)
        except (OverflowError, OSError, ValueError) as e:
            raise MalformedRecord(f"epoch_millis out of range: {epoch_ms} ({e})")

        # remaining numeric fields are coerced by the schema
        return {
            "region_code": fields["region_code"],
            "observed_at": observed_at,
            "geohash": fields["geohash"],
            "humidity_pct": fields["humidity_pct"],
            "has_snow": fields["snow_flag"],
            "cloud_cover_pct": fields["cloud_cover_pct"],
            "has_lightning": fields["lightning_flag"],
            "pressure_pa": fields["pressure_pa"],
            "surface_temp_k": temp_k,
            "temp_f": kelvin_to_fahrenheit(temp_k),
        }

    def parse(self, line: Union[str, bytes]) -> Observation:
        record = self.normalize(self.split(line))
        obs, err = self.validator.validate(record)
        if obs is None:
            raise MalformedRecord(err, line)
        return obs

    def _to_float(self, s: str, name: str) -> float:
        try:
            value = float(s)
        except ValueError:
            raise MalformedRecord(f"{name} is not a number: {s!r}")
        if not math.isfinite(value):
            raise MalformedRecord(f"{name} is not finite: {s!r}")
        return value

    def _to_int(self, s: str, name: str) -> int:
        try:
            return int(s)
        except ValueError:
            # tolerate integral values written with a decimal point
            value = self._to_float(s, name)
            if not value.is_integer():
                raise MalformedRecord(f"{name} is not an integer: {s!r}")
            return int(value)
