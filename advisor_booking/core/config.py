import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value)


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

AVAILABILITY_URL = os.getenv(
    "AVAILABILITY_URL",
    "https://www.thinkful.com/api/advisors/availability",
)
# Unset means the upstream call may wait forever.
AVAILABILITY_TIMEOUT_SECONDS = _get_float(os.getenv("AVAILABILITY_TIMEOUT_SECONDS"))

CORS_ALLOW_ORIGINS = _get_list(os.getenv("CORS_ALLOW_ORIGINS"), default=["*"])

SEED_DEMO_BOOKING = _get_bool(os.getenv("SEED_DEMO_BOOKING"), default=False)


def validate_runtime_config() -> None:
    if not AVAILABILITY_URL.strip():
        raise RuntimeError("AVAILABILITY_URL must be set.")
