"""Client for the National Weather Service API (api.weather.gov)."""
import logging
from typing import Optional

import httpx

from .config import HTTP_TIMEOUT, NWS_API_BASE, USER_AGENT
from .outcome import Ok, Outcome, Unavailable

logger = logging.getLogger("weather_auth.nws")


class NWSClient:
    """Stateless fetch-and-decode helper; one request per call, no retries."""

    def __init__(self, base_url: str = NWS_API_BASE, user_agent: str = USER_AGENT,
                 timeout: float = HTTP_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._transport = transport

    def alerts_url(self, state: str) -> str:
        return f"{self.base_url}/alerts?area={state}"

    def points_url(self, latitude: float, longitude: float) -> str:
        return f"{self.base_url}/points/{latitude:.4f},{longitude:.4f}"

    async def fetch(self, url: str) -> Outcome:
        """GET ``url`` and decode the JSON body.

        Returns ``Ok(dict)`` or ``Unavailable(reason)``; transport errors,
        non-success statuses and undecodable bodies are logged, never raised.
        """
        headers = {"User-Agent": self.user_agent, "Accept": "application/geo+json"}
        async with httpx.AsyncClient(follow_redirects=True, transport=self._transport) as client:
            try:
                response = await client.get(url, headers=headers, timeout=self.timeout)
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPStatusError as e:
                logger.warning(f"[NWS API Error] {url} returned {e.response.status_code}")
                return Unavailable(f"HTTP error! status: {e.response.status_code}")
            except Exception as e:
                logger.exception(f"[NWS API Error] {e}")
                return Unavailable(str(e) or type(e).__name__)

        if not isinstance(data, dict):
            logger.warning(f"[NWS API Error] {url} returned a non-object body")
            return Unavailable("Unexpected response body")
        return Ok(data)
