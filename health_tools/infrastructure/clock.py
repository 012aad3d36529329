"""Reference date for date-dependent calculators."""

from datetime import date


def get_today() -> date:
    """Server local date; overridden in tests through FastAPI dependency_overrides."""
    return date.today()
