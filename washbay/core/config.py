import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise RuntimeError(f"Expected an integer setting, got {value!r}.") from exc


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


APP_ENV = os.getenv("APP_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ALLOW_ORIGINS = _get_list(os.getenv("CORS_ALLOW_ORIGINS"), ["http://localhost:3000"])

DEFAULT_SERVICE_DURATION_MINUTES = _get_int(os.getenv("DEFAULT_SERVICE_DURATION_MINUTES"), 60)
SUGGESTION_OFFSET_LIMIT_HOURS = 3
SUGGESTION_MAX_OFFSET_HOURS = _get_int(os.getenv("SUGGESTION_MAX_OFFSET_HOURS"), 3)
MAX_SUGGESTIONS = _get_int(os.getenv("MAX_SUGGESTIONS"), 3)


@dataclass(frozen=True)
class SchedulerSettings:
    default_duration_minutes: int = 60
    suggestion_max_offset_hours: int = 3
    max_suggestions: int = 3


def load_scheduler_settings() -> SchedulerSettings:
    return SchedulerSettings(
        default_duration_minutes=DEFAULT_SERVICE_DURATION_MINUTES,
        suggestion_max_offset_hours=SUGGESTION_MAX_OFFSET_HOURS,
        max_suggestions=MAX_SUGGESTIONS,
    )


def validate_runtime_config() -> None:
    if DEFAULT_SERVICE_DURATION_MINUTES <= 0:
        raise RuntimeError("DEFAULT_SERVICE_DURATION_MINUTES must be positive.")
    if not 0 <= SUGGESTION_MAX_OFFSET_HOURS <= SUGGESTION_OFFSET_LIMIT_HOURS:
        raise RuntimeError(
            f"SUGGESTION_MAX_OFFSET_HOURS must be between 0 and {SUGGESTION_OFFSET_LIMIT_HOURS}."
        )
    if MAX_SUGGESTIONS < 0:
        raise RuntimeError("MAX_SUGGESTIONS cannot be negative.")
    if APP_ENV.lower() == "production" and "*" in CORS_ALLOW_ORIGINS:
        raise RuntimeError("CORS_ALLOW_ORIGINS cannot be '*' in production.")
