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
OAuth tool: provider callback
"""

from ..core.models import OAuthCallback
from ..core.server import handle_tool_errors, mcp
from ..formatting import format_auth_result
from .lifecycle import get_simulator


@mcp.tool(
    description=(
        "Simulate an OAuth provider callback. Creates the provider user on first use. "
        "Pass expected_state to reject a mismatched state value."
    )
)
@handle_tool_errors
async def oauth_callback(provider: str, code: str, state: str, expected_state: str = "") -> str:
    """
    Simulate an OAuth callback.

    Args:
        provider: Provider name, e.g. google or github
        code: Authorization code (not verified)
        state: State returned by the provider
        expected_state: State issued when the flow began (optional)

    Returns:
        Formatted callback result with the new session
    """
    result = await get_simulator().simulate_oauth_callback(
        OAuthCallback(code=code, state=state, provider=provider),
        expected_state=expected_state or None,
    )
    return format_auth_result(f"OAuth ({provider})", result)
