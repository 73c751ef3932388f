"""Text rendering for NWS alert features and forecast periods.

Every record field is optional upstream. Fields are pulled through one
placeholder table so a missing value always renders as its placeholder
instead of being dropped.
"""
from typing import Any, Mapping

SEPARATOR = "---"

ALERT_FIELDS = {
    "event": "Unknown",
    "areaDesc": "Unknown",
    "severity": "Unknown",
    "status": "Unknown",
    "headline": "No headline",
}

PERIOD_FIELDS = {
    "name": "Unknown",
    "temperature": "Unknown",
    "temperatureUnit": "F",
    "windSpeed": "Unknown",
    "windDirection": "",
    "shortForecast": "No forecast available",
}


def with_defaults(record: Mapping[str, Any] | None, table: Mapping[str, str]) -> dict[str, str]:
    """Pick the fields named in ``table``, substituting placeholders.

    ``None`` and empty strings count as missing; ``0`` does not.
    """
    record = record or {}
    values = {}
    for key, placeholder in table.items():
        value = record.get(key)
        values[key] = placeholder if value is None or value == "" else str(value)
    return values


def format_alert(feature: Mapping[str, Any]) -> str:
    """Format an alert feature into a readable block."""
    props = with_defaults(feature.get("properties"), ALERT_FIELDS)
    return "\n".join([
        f"Event: {props['event']}",
        f"Area: {props['areaDesc']}",
        f"Severity: {props['severity']}",
        f"Status: {props['status']}",
        f"Headline: {props['headline']}",
        SEPARATOR,
    ])


def format_period(period: Mapping[str, Any]) -> str:
    p = with_defaults(period, PERIOD_FIELDS)
    wind = f"{p['windSpeed']} {p['windDirection']}".rstrip()
    return "\n".join([
        f"{p['name']}:",
        f"Temperature: {p['temperature']}°{p['temperatureUnit']}",
        f"Wind: {wind}",
        p["shortForecast"],
        SEPARATOR,
    ])


def format_coordinate(value: float) -> str:
    """Render a coordinate as the caller wrote it: ``40.0`` becomes ``40``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_alerts(state: str, features: list) -> str:
    return f"Active alerts for {state}:\n\n" + "\n".join(format_alert(f) for f in features)


def format_forecast(latitude: float, longitude: float, periods: list) -> str:
    header = f"Forecast for {format_coordinate(latitude)}, {format_coordinate(longitude)}:"
    return header + "\n\n" + "\n".join(format_period(p) for p in periods)
