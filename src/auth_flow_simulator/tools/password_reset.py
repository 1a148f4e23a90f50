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
Password reset tools: request and confirm
"""

from ..core.models import PasswordResetConfirm, PasswordResetRequest
from ..core.server import handle_tool_errors, mcp
from ..formatting import format_auth_result
from .lifecycle import get_simulator


@mcp.tool(
    description=(
        "Request a password reset. Always reports success so account existence is not revealed."
    )
)
@handle_tool_errors
async def request_password_reset(email: str, redirect_url: str = "") -> str:
    result = await get_simulator().simulate_password_reset_request(
        PasswordResetRequest(email=email, redirect_url=redirect_url or None)
    )
    return format_auth_result("Password reset request", result)


@mcp.tool(description="Confirm a password reset. Any token is accepted.")
@handle_tool_errors
async def confirm_password_reset(token: str, new_password: str = "") -> str:
    result = await get_simulator().simulate_password_reset_confirm(
        PasswordResetConfirm(token=token, new_password=new_password or None)
    )
    return format_auth_result("Password reset", result)
