"""Tests for noaa_aurora.config."""

import pytest

from noaa_aurora import AuroraConfig, DateFormat
from noaa_aurora.config import DEFAULT_SWPC_HOST

_ENV_VARS = (
    "NOAA_AURORA_CACHE",
    "NOAA_AURORA_SWPC",
    "NOAA_AURORA_DATE_FORMAT",
    "NOAA_AURORA_TIMEOUT",
    "NOAA_AURORA_AGENT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestAuroraConfigDefaults:
    """Tests for default values and validation."""

    def test_defaults(self):
        config = AuroraConfig()
        assert config.cache == 120.0
        assert config.swpc == DEFAULT_SWPC_HOST
        assert config.date_format is DateFormat.DATETIME
        assert config.timeout == 30.0
        assert config.agent.startswith("noaa-aurora/")

    def test_base_url_adds_scheme(self):
        assert AuroraConfig().base_url == "https://services.swpc.noaa.gov"

    def test_base_url_keeps_scheme(self):
        config = AuroraConfig(swpc="http://localhost:8080/")
        assert config.base_url == "http://localhost:8080"

    def test_date_format_from_string(self):
        assert AuroraConfig(date_format="unix").date_format is DateFormat.UNIX

    def test_blank_host_uses_default(self):
        assert AuroraConfig(swpc="  ").swpc == DEFAULT_SWPC_HOST

    def test_no_cache(self):
        assert AuroraConfig.no_cache().cache == 0.0

    def test_negative_cache_raises(self):
        with pytest.raises(ValueError, match="cache"):
            AuroraConfig(cache=-5)

    def test_zero_timeout_raises(self):
        with pytest.raises(ValueError, match="timeout"):
            AuroraConfig(timeout=0)

    def test_str(self):
        assert "cache=120.0" in str(AuroraConfig())


class TestAuroraConfigFromEnv:
    """Tests for AuroraConfig.from_env()."""

    def test_unset_keeps_defaults(self):
        assert AuroraConfig.from_env() == AuroraConfig()

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("NOAA_AURORA_CACHE", "0")
        monkeypatch.setenv("NOAA_AURORA_SWPC", "swpc.example.org")
        monkeypatch.setenv("NOAA_AURORA_DATE_FORMAT", "iso")
        monkeypatch.setenv("NOAA_AURORA_TIMEOUT", "5")
        monkeypatch.setenv("NOAA_AURORA_AGENT", "my-agent/1.0")
        config = AuroraConfig.from_env()
        assert config.cache == 0.0
        assert config.base_url == "https://swpc.example.org"
        assert config.date_format is DateFormat.ISO
        assert config.timeout == 5.0
        assert config.agent == "my-agent/1.0"

    def test_bad_number_raises(self, monkeypatch):
        monkeypatch.setenv("NOAA_AURORA_CACHE", "two minutes")
        with pytest.raises(ValueError):
            AuroraConfig.from_env()
