# weather/client.py
# Minimal MCP client that launches the weather server over stdio and calls tools.
#
# Usage:
#   weather-client                       (launches: python -m weather)
#   weather-client path/to/server ...    (any other stdio server command)
# Then try commands:
#   alerts CA
#   forecast 37.78 -122.42

import sys
import asyncio
from contextlib import AsyncExitStack
from typing import Any, Dict, List, Optional, Tuple

from mcp import ClientSession
from mcp.client.stdio import stdio_client
from mcp.client.stdio import StdioServerParameters

PROMPT = "\nQuery (alerts <STATE> | forecast <LAT> <LON> | quit): "
USAGE = "Unknown command. Try: alerts CA  |  forecast 37.78 -122.42"


def parse_command(line: str) -> Optional[Tuple[str, Dict[str, Any]]]:
    """Map a query line to ``(tool name, arguments)``; None means quit.

    Raises ValueError with a usage hint for anything else.
    """
    parts = line.split()
    if not parts:
        raise ValueError(USAGE)
    command = parts[0].lower()
    if command == "quit":
        return None
    if command == "alerts":
        if len(parts) != 2:
            raise ValueError("Usage: alerts <STATE>")
        return "get-alerts", {"state": parts[1]}
    if command == "forecast":
        if len(parts) != 3:
            raise ValueError("Usage: forecast <LAT> <LON>")
        try:
            lat, lon = float(parts[1]), float(parts[2])
        except ValueError:
            raise ValueError("Usage: forecast <LAT> <LON>") from None
        return "get-forecast", {"latitude": lat, "longitude": lon}
    raise ValueError(USAGE)


def server_parameters(argv: List[str]) -> StdioServerParameters:
    if argv:
        return StdioServerParameters(command=argv[0], args=argv[1:], env=None)
    return StdioServerParameters(command=sys.executable, args=["-m", "weather"], env=None)


async def main(argv: List[str]) -> None:
    async with AsyncExitStack() as stack:
        reader, writer = await stack.enter_async_context(stdio_client(server_parameters(argv)))
        session: ClientSession = await stack.enter_async_context(ClientSession(reader, writer))
        await session.initialize()

        tools = (await session.list_tools()).tools
        print("Connected. Tools available:", [t.name for t in tools])

        while True:
            try:
                q = input(PROMPT).strip()
            except (EOFError, KeyboardInterrupt):
                break
            if not q:
                continue

            try:
                call = parse_command(q)
            except ValueError as e:
                print(e)
                continue
            if call is None:
                break

            name, arguments = call
            res = await session.call_tool(name, arguments)
            text = res.content[0].text if res.content else ""
            print(f"Error: {text}" if res.isError else text)


def cli() -> None:
    asyncio.run(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
