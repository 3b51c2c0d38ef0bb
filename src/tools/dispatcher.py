"""MCP handlers that list and run the feature-model analysis tools.

Registers 'tools/list' and 'tools/call' on a low-level MCP server. A
call is validated, run against a fresh analysis session and rendered
as a single text block; any failure aborts the call with one error.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from mcp.server.lowlevel import Server
from mcp.types import TextContent, Tool

from clients.flamapy_client import FlamapySession
from core.errors import ProcessingError, UnknownOperationError
from core.interfaces import SessionFactory
from core.models import parse_request
from tools.catalog import OPERATIONS_BY_NAME, list_tools

logger = logging.getLogger(__name__)


async def dispatch(
    name: str,
    arguments: Optional[Mapping[str, Any]],
    *,
    session_factory: SessionFactory,
) -> List[TextContent]:
    """Run one analysis tool and return its formatted result.

    Raises:
      UnknownOperationError if the name is not cataloged; InvalidInputError
      if the arguments do not match the tool's request model (no session is
      created); ProcessingError if the engine fails to load the model or to
      run the operation.
    """
    op = OPERATIONS_BY_NAME.get(name)
    if op is None:
        raise UnknownOperationError(name)

    request = parse_request(op.request_model, arguments)

    try:
        session = session_factory(request.content)
        await session.initialize()
        result = await op.call(session, request)
    except ProcessingError:
        raise
    except Exception as e:
        raise ProcessingError(f"Error processing UVL content: {e}") from e

    if result is None:
        raise ProcessingError(f"Error processing UVL content: {name} returned no result")

    return [TextContent(type="text", text=op.formatter(result))]


def register(server: Server, *, session_factory: Optional[SessionFactory] = None) -> None:
    factory = session_factory or FlamapySession

    @server.list_tools()
    async def handle_list_tools() -> List[Tool]:
        return list_tools()

    # Arguments are validated by dispatch() so schema errors surface as InvalidInputError
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[dict]) -> List[TextContent]:
        logger.info("Calling tool %s", name)
        try:
            return await dispatch(name, arguments, session_factory=factory)
        except Exception as e:
            logger.error("Tool %s failed: %s", name, e)
            raise
