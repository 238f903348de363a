# weather/formatting.py
# Plain-text rendering of alerts and forecast periods.

from decimal import Decimal
from typing import Optional, Union

from .models import AlertFeature, ForecastPeriod

SEPARATOR = "---"


def format_number(value: Union[int, float]) -> str:
    """Render a number the way it appeared in JSON: 72.0 -> "72", 5e-05 -> "0.00005"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    # shortest round-trip digits, never exponent notation
    return format(Decimal(repr(value)), "f")


def _or(value: Optional[str], placeholder: str) -> str:
    return value if value is not None else placeholder


def format_alert(alert: AlertFeature) -> str:
    return "\n".join([
        f"Event: {_or(alert.event, 'Unknown')}",
        f"Area: {_or(alert.area_desc, 'Unknown')}",
        f"Severity: {_or(alert.severity, 'Unknown')}",
        f"Status: {_or(alert.status, 'Unknown')}",
        f"Headline: {_or(alert.headline, 'No headline')}",
        SEPARATOR,
    ])


def format_period(period: ForecastPeriod) -> str:
    temperature = (
        format_number(period.temperature) if period.temperature is not None else "Unknown"
    )
    return "\n".join([
        f"{_or(period.name, 'Unknown')}:",
        f"Temperature: {temperature}°{_or(period.temperature_unit, 'F')}",
        f"Wind: {_or(period.wind_speed, 'Unknown')} {_or(period.wind_direction, '')}",
        _or(period.short_forecast, "No forecast available"),
        SEPARATOR,
    ])
