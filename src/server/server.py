"""Server bootstrap for the UVL analyzer MCP service.

Creates the low-level MCP server, wires the tool catalog and dispatcher,
and runs the server over the stdio transport.
"""

import asyncio
import logging
import sys

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from config import LOG_LEVEL, SERVER_NAME, SERVER_VERSION
from core.log import configure_logging
from tools.dispatcher import register as register_dispatcher

logger = logging.getLogger(__name__)

server = Server(SERVER_NAME, version=SERVER_VERSION)


def register_all() -> None:
    register_dispatcher(server)


register_all()


async def run_stdio() -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("UVL analyzer MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    configure_logging(LOG_LEVEL)
    try:
        asyncio.run(run_stdio())
    except Exception:
        logger.exception("Error starting server")
        sys.exit(1)


if __name__ == "__main__":
    main()
