# weather/nws.py
# Thin async helper around the NOAA/NWS public API (https://api.weather.gov).
# Every failure is logged and collapsed into None; nothing here raises.

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/1.0"
ACCEPT = "application/geo+json"


def alerts_url(state_code: str) -> str:
    return f"{NWS_API_BASE}/alerts?area={state_code}"


def _four_places(value: float) -> str:
    # ties round away from zero, not to even
    return format(Decimal(value).quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP), "f")


def points_url(latitude: float, longitude: float) -> str:
    return f"{NWS_API_BASE}/points/{_four_places(latitude)},{_four_places(longitude)}"


async def make_nws_request(url: str) -> Optional[Dict[str, Any]]:
    """GET ``url`` from NWS and return the decoded JSON object.

    Returns None on a non-2xx status, an unusable URL, a transport error,
    or a body that is not a JSON object. There is no retry.
    """
    headers = {
        "User-Agent": USER_AGENT,
        "Accept": ACCEPT,
    }
    logger.debug("GET %s", url)
    async with httpx.AsyncClient(follow_redirects=True) as client:
        try:
            r = await client.get(url, headers=headers)
            r.raise_for_status()
            data = r.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Error making NWS request to %s: %s", url, e)
            return None
        except ValueError as e:
            logger.error("Malformed JSON from %s: %s", url, e)
            return None
    if not isinstance(data, dict):
        logger.error("Unexpected payload from %s: %s", url, type(data).__name__)
        return None
    return data
