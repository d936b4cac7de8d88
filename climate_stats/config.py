from dataclasses import dataclass, field
import os

MISSING_FILE_POLICIES = ("skip", "abort")

def _env(name: str, default: str):
    # read when Settings() is built, so a run picks up the current environment
    return field(default_factory=lambda: os.environ.get(name, default))

def _env_flag(name: str, default: str = "0"):
    return field(
        default_factory=lambda: os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")
    )

@dataclass(frozen=True)
class Settings:
    # Input
    # "skip" logs unreadable files and keeps going, "abort" stops the whole run
    missing_file_policy: str = _env("CLIMATE_MISSING_FILE_POLICY", "skip")
    input_encoding: str = _env("CLIMATE_INPUT_ENCODING", "utf-8")

    # Report
    report_timezone: str = _env("CLIMATE_REPORT_TZ", "")  # empty = local zone
    show_banner: bool = _env_flag("CLIMATE_SHOW_BANNER")

    # Logging
    log_level: str = _env("LOG_LEVEL", "INFO")

    def __post_init__(self):
        if self.missing_file_policy not in MISSING_FILE_POLICIES:
            raise ValueError(
                f"missing_file_policy must be one of {MISSING_FILE_POLICIES}, "
                f"got {self.missing_file_policy!r}"
            )
