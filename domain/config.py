"""
Configuration module for the SMS transaction gateway.

All configuration values are loaded from environment variables with sensible defaults.
See .env.example for all available configuration options.
"""
import os
from dataclasses import dataclass
from datetime import timedelta


def _get_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    return int(os.getenv(key, default))


def _get_bool(key: str, default: bool) -> bool:
    """Get bool from environment variable ("1", "true", "yes", "on" are truthy)."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class RetentionConfig:
    """How long stored transactions are kept before the sweep removes them."""
    retention_hours: int = _get_int("RETENTION_HOURS", 24)

    @property
    def retention_window(self) -> timedelta:
        return timedelta(hours=self.retention_hours)


@dataclass
class SweepScheduleConfig:
    """Daily sweep trigger, in UTC."""
    enabled: bool = _get_bool("SWEEP_SCHEDULE_ENABLED", True)
    hour: int = _get_int("SWEEP_SCHEDULE_HOUR", 0)
    minute: int = _get_int("SWEEP_SCHEDULE_MINUTE", 0)


# Global config instances (lazy loaded)
_retention_config = None
_schedule_config = None


def get_retention_config() -> RetentionConfig:
    """Get retention configuration."""
    global _retention_config
    if _retention_config is None:
        _retention_config = RetentionConfig()
    return _retention_config


def get_schedule_config() -> SweepScheduleConfig:
    """Get sweep schedule configuration."""
    global _schedule_config
    if _schedule_config is None:
        _schedule_config = SweepScheduleConfig()
    return _schedule_config


def reload_config():
    """Force reload of all configuration from environment variables."""
    global _retention_config, _schedule_config
    _retention_config = RetentionConfig(retention_hours=_get_int("RETENTION_HOURS", 24))
    _schedule_config = SweepScheduleConfig(
        enabled=_get_bool("SWEEP_SCHEDULE_ENABLED", True),
        hour=_get_int("SWEEP_SCHEDULE_HOUR", 0),
        minute=_get_int("SWEEP_SCHEDULE_MINUTE", 0),
    )
