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
Login tools: credential login and 2FA verification
"""

from ..core.models import LoginCredentials, TwoFactorCode
from ..core.server import handle_tool_errors, mcp
from ..formatting import format_auth_result
from .lifecycle import get_simulator


@mcp.tool(
    description=(
        "Simulate a login. Any password of 6+ characters is accepted for a known email. "
        "Users with 2FA enabled must follow up with verify_2fa."
    )
)
@handle_tool_errors
async def simulate_login(email: str, password: str, remember_me: bool = False) -> str:
    """
    Simulate a credential login.

    Args:
        email: Account email (exact match)
        password: Any string of at least six characters
        remember_me: Issue a 30-day session instead of 30 minutes

    Returns:
        Formatted login result
    """
    result = await get_simulator().simulate_login(
        LoginCredentials(email=email, password=password, remember_me=remember_me)
    )
    return format_auth_result("Login", result)


@mcp.tool(description="Complete a 2FA challenge. Any six-digit code is accepted.")
@handle_tool_errors
async def verify_2fa(user_id: str, code: str, method: str = "totp") -> str:
    result = await get_simulator().simulate_2fa(user_id, TwoFactorCode(code=code, method=method))
    return format_auth_result("2FA verification", result)
