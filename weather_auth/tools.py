"""Tool handlers and auth resources served by the weather MCP server.

Every handler returns exactly one :class:`ToolResult`. Failures below a
handler (denied session, backend faults, unusable NWS data) come back as text,
never as exceptions.
"""
import json
import logging
from typing import Annotated, Optional

from pydantic import Field

from .formatting import format_alerts, format_coordinate, format_forecast
from .nws import NWSClient
from .outcome import Denied, Ok
from .registry import tool
from .result import ToolResult
from .session import Session, require_auth

logger = logging.getLogger("weather_auth.tools")

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

AUTH_SUCCESS_TEXT = "Authentication successful! You can now access weather tools."
AUTH_FAILURE_TEXT = "Authentication failed. Please check your email and password."

LOGIN_DOCUMENT = {
    "description": "Authentication resource for Weather MCP Server",
    "instructions": "Use this resource to authenticate with email and password",
    "schema": {
        "email": "string (required)",
        "password": "string (required)",
    },
    "example": {
        "email": "user@example.com",
        "password": "your-password",
    },
}


class WeatherTools:
    def __init__(self, session: Session, nws: NWSClient):
        self.session = session
        self.nws = nws

    @tool("authenticate")
    async def authenticate(
        self,
        email: Annotated[str, Field(pattern=EMAIL_PATTERN, description="User email address")],
        password: Annotated[str, Field(min_length=1, description="User password")],
    ) -> ToolResult:
        """Authenticate with email and password to access weather tools"""
        outcome = await self.session.sign_in(email, password)
        if isinstance(outcome, Ok):
            return ToolResult.text(AUTH_SUCCESS_TEXT)
        if isinstance(outcome, Denied):
            return ToolResult.text(AUTH_FAILURE_TEXT)
        return ToolResult.text(f"Authentication error: {outcome.reason}")

    @tool("get-alerts")
    async def get_alerts(
        self,
        state: Annotated[str, Field(min_length=2, max_length=2, description="Two-letter state code (e.g. CA, NY)")],
    ) -> ToolResult:
        """Get weather alerts for a US state (requires authentication)"""
        denied = require_auth(self.session)
        if denied:
            return denied

        state_code = state.upper()
        outcome = await self.nws.fetch(self.nws.alerts_url(state_code))
        if not isinstance(outcome, Ok):
            return ToolResult.text("Failed to retrieve alerts data")

        features = outcome.value.get("features") or []
        if not features:
            return ToolResult.text(f"No active alerts for {state_code}")

        try:
            return ToolResult.text(format_alerts(state_code, features))
        except (AttributeError, TypeError) as e:
            logger.exception(f"[get-alerts] malformed alert features: {e}")
            return ToolResult.text("Failed to retrieve alerts data")

    @tool("get-forecast")
    async def get_forecast(
        self,
        latitude: Annotated[float, Field(ge=-90, le=90, description="Latitude of the location")],
        longitude: Annotated[float, Field(ge=-180, le=180, description="Longitude of the location")],
    ) -> ToolResult:
        """Get weather forecast for a location by coordinates (requires authentication)"""
        denied = require_auth(self.session)
        if denied:
            return denied

        points = await self.nws.fetch(self.nws.points_url(latitude, longitude))
        if not isinstance(points, Ok):
            return ToolResult.text(
                f"Failed to retrieve grid point data for coordinates: {format_coordinate(latitude)}, "
                f"{format_coordinate(longitude)}. "
                "This location may not be supported by the NWS API (only US locations are supported)."
            )

        forecast_url = _forecast_url(points.value)
        if not forecast_url:
            return ToolResult.text("Failed to get forecast URL from grid point data")

        forecast = await self.nws.fetch(forecast_url)
        if not isinstance(forecast, Ok):
            return ToolResult.text("Failed to retrieve forecast data")

        properties = forecast.value.get("properties")
        periods = (properties.get("periods") if isinstance(properties, dict) else None) or []
        if not periods:
            return ToolResult.text("No forecast periods available")

        try:
            return ToolResult.text(format_forecast(latitude, longitude, periods))
        except (AttributeError, TypeError) as e:
            logger.exception(f"[get-forecast] malformed forecast periods: {e}")
            return ToolResult.text("Failed to retrieve forecast data")

    def login_document(self) -> str:
        """Describe how to authenticate with this server."""
        return json.dumps(LOGIN_DOCUMENT, indent=2)

    def status_document(self) -> str:
        """Report whether the session is currently authenticated."""
        authenticated = self.session.is_authenticated()
        return json.dumps({
            "authenticated": authenticated,
            "message": "User is currently authenticated" if authenticated else "User is not authenticated",
        }, indent=2)


def _forecast_url(points_data: dict) -> Optional[str]:
    properties = points_data.get("properties")
    if not isinstance(properties, dict):
        return None
    url = properties.get("forecast")
    return url if isinstance(url, str) and url else None
