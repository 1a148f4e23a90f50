#!/usr/bin/env python3
# MIT License
#
# Copyright (c) 2025 Auth Flow Simulator Contributors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
MCP server setup and tool error handling for the Auth Flow Simulator
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, Optional, TypeVar

from mcp.server.fastmcp import FastMCP

from ..config import settings
from ..error_handling import create_error_response

logger = logging.getLogger(__name__)

T = TypeVar("T")

mcp = FastMCP(settings.server_name)


def get_mcp_server(host: Optional[str] = None, port: Optional[int] = None) -> FastMCP:
    """Return the shared FastMCP instance, bound to host/port for HTTP transports."""
    if host is not None:
        mcp.settings.host = host
    if port is not None:
        mcp.settings.port = port
    return mcp


def handle_tool_errors(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator to handle standard error patterns for MCP tools.

    Simulated failures come back as results, so anything caught here is
    misuse or a bug.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        tool_name = func.__name__
        try:
            return await func(*args, **kwargs)  # type: ignore[misc]
        except ValueError as e:
            logger.warning(f"Validation error in {tool_name}: {e}")
            return f"❌ **Invalid input**: {str(e)}"
        except Exception as e:
            logger.exception(f"Unexpected error in {tool_name}")
            response = create_error_response(e, tool_name)
            hint = response.get("_ai_suggestion") or response.get("_human_action", "")
            return (
                f"❌ **Unexpected error in {tool_name}**: {response['error_type']}: "
                f"{response['error']}\n\n*{hint}*"
            )

    return wrapper  # type: ignore[return-value]
