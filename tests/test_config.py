import dataclasses

import pytest

from climate_stats.config import Settings


def test_policies_accepted() -> None:
    assert Settings(missing_file_policy="skip").missing_file_policy == "skip"
    assert Settings(missing_file_policy="abort").missing_file_policy == "abort"


def test_unknown_policy_rejected() -> None:
    with pytest.raises(ValueError):
        Settings(missing_file_policy="retry")


def test_settings_are_frozen() -> None:
    s = Settings(missing_file_policy="skip")
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.log_level = "DEBUG"


def test_replace_revalidates() -> None:
    with pytest.raises(ValueError):
        dataclasses.replace(Settings(missing_file_policy="skip"), missing_file_policy="ignore")


def test_environment_read_at_construction(monkeypatch) -> None:
    monkeypatch.setenv("CLIMATE_MISSING_FILE_POLICY", "abort")
    monkeypatch.setenv("CLIMATE_SHOW_BANNER", "yes")
    monkeypatch.setenv("CLIMATE_REPORT_TZ", "UTC")

    s = Settings()

    assert s.missing_file_policy == "abort"
    assert s.show_banner is True
    assert s.report_timezone == "UTC"


def test_bad_policy_in_environment(monkeypatch) -> None:
    monkeypatch.setenv("CLIMATE_MISSING_FILE_POLICY", "bogus")
    with pytest.raises(ValueError):
        Settings()
