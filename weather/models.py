# weather/models.py
# Request-scoped views of the NWS JSON payloads. Parsing is lenient:
# unknown keys are ignored and wrongly-typed values are treated as absent.

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _items(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _text(value: Any) -> Optional[str]:
    """A string field is absent when missing, null or empty."""
    if value is None or value == "":
        return None
    return str(value)


def _number(value: Any) -> Optional[float]:
    # bool is an int subclass; a JSON true is not a temperature
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


@dataclass(frozen=True)
class AlertFeature:
    event: Optional[str] = None
    area_desc: Optional[str] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    headline: Optional[str] = None

    @classmethod
    def from_json(cls, feature: Any) -> "AlertFeature":
        props = _mapping(_mapping(feature).get("properties"))
        return cls(
            event=_text(props.get("event")),
            area_desc=_text(props.get("areaDesc")),
            severity=_text(props.get("severity")),
            status=_text(props.get("status")),
            headline=_text(props.get("headline")),
        )


@dataclass(frozen=True)
class ForecastPeriod:
    name: Optional[str] = None
    temperature: Optional[float] = None
    temperature_unit: Optional[str] = None
    wind_speed: Optional[str] = None
    wind_direction: Optional[str] = None
    short_forecast: Optional[str] = None

    @classmethod
    def from_json(cls, period: Any) -> "ForecastPeriod":
        period = _mapping(period)
        return cls(
            name=_text(period.get("name")),
            temperature=_number(period.get("temperature")),
            temperature_unit=_text(period.get("temperatureUnit")),
            wind_speed=_text(period.get("windSpeed")),
            wind_direction=_text(period.get("windDirection")),
            short_forecast=_text(period.get("shortForecast")),
        )


@dataclass(frozen=True)
class AlertsResponse:
    features: Tuple[AlertFeature, ...] = ()

    @classmethod
    def from_json(cls, data: Any) -> "AlertsResponse":
        features = _items(_mapping(data).get("features"))
        return cls(features=tuple(AlertFeature.from_json(f) for f in features))


@dataclass(frozen=True)
class PointsResponse:
    forecast_url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Any) -> "PointsResponse":
        props = _mapping(_mapping(data).get("properties"))
        return cls(forecast_url=_text(props.get("forecast")))


@dataclass(frozen=True)
class ForecastResponse:
    periods: Tuple[ForecastPeriod, ...] = ()

    @classmethod
    def from_json(cls, data: Any) -> "ForecastResponse":
        props = _mapping(_mapping(data).get("properties"))
        periods = _items(props.get("periods"))
        return cls(periods=tuple(ForecastPeriod.from_json(p) for p in periods))
