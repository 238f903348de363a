# weather/weather.py
# A minimal MCP server that exposes two tools using NOAA/NWS public APIs
# Tools:
#   - get-alerts(state: str)
#   - get-forecast(latitude: float, longitude: float)
#
# Run:
#   pip install -e .
#   weather-mcp            (or: python -m weather)

import functools
import logging
import sys
from typing import Annotated, Any, Awaitable, Callable, Optional, TypeVar

import anyio
from mcp.server.fastmcp import FastMCP
from mcp.server.stdio import stdio_server
from mcp.types import ToolAnnotations
from pydantic import Field

from .formatting import format_alert, format_number, format_period
from .models import AlertsResponse, ForecastResponse, PointsResponse
from .nws import alerts_url, make_nws_request, points_url

logger = logging.getLogger(__name__)

SERVER_NAME = "weather"
SERVER_VERSION = "1.0.0"

mcp = FastMCP(SERVER_NAME)

READ_ONLY = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=True,
)

T = TypeVar("T")


class Unavailable(Exception):
    """A tool could not produce an answer; the message is the answer."""


def require(value: Optional[T], message: str) -> T:
    """Return ``value``, or abort the current tool with ``message``.

    Aborts when ``value`` is None or an empty list/tuple.
    """
    if value is None or (isinstance(value, (list, tuple)) and not value):
        raise Unavailable(message)
    return value


def reports_unavailable(fn: Callable[..., Awaitable[str]]) -> Callable[..., Awaitable[str]]:
    """Turn :class:`Unavailable` raised inside a tool into its text result.

    Every tool goes through this so lookup failures reach the client as
    ordinary output, never as protocol errors.
    """
    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> str:
        try:
            return await fn(*args, **kwargs)
        except Unavailable as e:
            logger.info("%s: %s", fn.__name__, e)
            return str(e)
    return wrapper


@mcp.tool(name="get-alerts", description="Get weather alerts for a state", annotations=READ_ONLY)
@reports_unavailable
async def get_alerts(
    state: Annotated[str, Field(min_length=2, max_length=2, description="Two-letter state code (e.g. CA, NY)")],
) -> str:
    state_code = state.upper()
    data = require(await make_nws_request(alerts_url(state_code)), "Failed to retrieve alerts data")
    features = require(AlertsResponse.from_json(data).features, f"No active alerts for {state_code}")

    alerts = "\n".join(format_alert(f) for f in features)
    return f"Active alerts for {state_code}:\n\n{alerts}"


@mcp.tool(name="get-forecast", description="Get weather forecast for a location", annotations=READ_ONLY)
@reports_unavailable
async def get_forecast(
    latitude: Annotated[float, Field(ge=-90, le=90, description="Latitude of the location")],
    longitude: Annotated[float, Field(ge=-180, le=180, description="Longitude of the location")],
) -> str:
    coords = f"{format_number(latitude)}, {format_number(longitude)}"

    # Step 1: resolve gridpoint from lat/lon
    points = require(
        await make_nws_request(points_url(latitude, longitude)),
        f"Failed to retrieve grid point data for coordinates: {coords}. "
        "This location may not be supported by the NWS API (only US locations are supported).",
    )
    forecast_url = require(
        PointsResponse.from_json(points).forecast_url,
        "Failed to get forecast URL from grid point data",
    )

    # Step 2: fetch forecast periods
    forecast = require(await make_nws_request(forecast_url), "Failed to retrieve forecast data")
    periods = require(ForecastResponse.from_json(forecast).periods, "No forecast periods available")

    text = "\n".join(format_period(p) for p in periods)
    return f"Forecast for {coords}:\n\n{text}"


async def serve() -> None:
    """Attach to stdio and serve until the host closes the stream."""
    # FastMCP.run_stdio_async neither reports when the transport is attached
    # nor takes a server version, so drive the low-level server directly.
    server = mcp._mcp_server
    options = server.create_initialization_options().model_copy(
        update={"server_version": SERVER_VERSION}
    )
    async with stdio_server() as (read_stream, write_stream):
        # stdout carries the protocol; the notice goes to stderr
        logger.info("Weather MCP Server running on stdio")
        await server.run(read_stream, write_stream, options)


def main() -> None:
    logging.basicConfig(level=logging.INFO, stream=sys.stderr, format="%(levelname)s: %(message)s")
    try:
        anyio.run(serve)
    except Exception as e:
        logger.critical("Fatal error in main(): %s", e, exc_info=True)
        sys.exit(1)

