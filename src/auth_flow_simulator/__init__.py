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
Auth Flow Simulator
Mock login, 2FA, password reset, OAuth and session flows for local development

The engine (``AuthFlowSimulator``) is usable directly. ``main`` and
``http_main`` expose it as MCP tools.

CRITICAL: the stdio transport reserves stdout for MCP JSON-RPC messages.
All logging goes to stderr.
"""

import asyncio
import logging
import sys

from .config import settings

# Configure logging to stderr only - stdout carries the MCP stdio protocol
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)

from .core import (  # noqa: E402
    AuthEvent,
    AuthEventType,
    AuthFlowConfig,
    AuthFlowSimulator,
    AuthResult,
    AuthSession,
    LoginCredentials,
    OAuthCallback,
    PasswordResetConfirm,
    PasswordResetRequest,
    SimulatorOptions,
    SimulatorState,
    TwoFactorCode,
    User,
    create_auth_flow_simulator,
    create_dev_simulator,
    create_prod_simulator,
    create_mock_user,
    create_test_simulator,
    generate_2fa_code,
    is_valid_email,
    validate_password_strength,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AuthEvent",
    "AuthEventType",
    "AuthFlowConfig",
    "AuthFlowSimulator",
    "AuthResult",
    "AuthSession",
    "LoginCredentials",
    "OAuthCallback",
    "PasswordResetConfirm",
    "PasswordResetRequest",
    "SimulatorOptions",
    "SimulatorState",
    "TwoFactorCode",
    "User",
    "create_auth_flow_simulator",
    "create_dev_simulator",
    "create_prod_simulator",
    "create_server",
    "create_mock_user",
    "create_test_simulator",
    "generate_2fa_code",
    "http_main",
    "is_valid_email",
    "main",
    "validate_password_strength",
]


def create_server(host=None, port=None):
    """Create and return the MCP server instance.

    Returns:
        The configured FastMCP server with all tools registered.
    """
    from .core.server import get_mcp_server

    # Tools register with the mcp instance via decorators when imported
    from .tools import (  # noqa: F401
        check_session,
        confirm_password_reset,
        list_events,
        logout,
        oauth_callback,
        request_password_reset,
        reset_simulator,
        simulate_login,
        simulator_state,
        start_simulator,
        stop_simulator,
        verify_2fa,
    )

    return get_mcp_server(host=host, port=port)


def main() -> None:
    """Run the MCP server with stdio transport (default)"""
    logger.info("Starting Auth Flow Simulator MCP server (stdio)")
    logger.info(f"Settings: {settings.to_dict()}")

    try:
        server = create_server()
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


def http_main(host: str = "127.0.0.1", port: int = 8087) -> None:
    """Run the MCP server with FastMCP's streamable HTTP transport.

    Args:
        host: Host to bind to (default: 127.0.0.1 for localhost only)
        port: Port to bind to (default: 8087)
    """
    logger.info(f"Starting Auth Flow Simulator MCP server (HTTP) on {host}:{port}")

    try:
        server = create_server(host=host, port=port)
        asyncio.run(server.run_streamable_http_async())
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception:
        logger.exception("Server error")
        raise
