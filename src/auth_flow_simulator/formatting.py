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
Markdown rendering of simulator results for MCP tool output
"""

from typing import Any

from .config import settings
from .core.helpers import generate_2fa_code
from .core.models import AuthEvent, AuthResult, SimulatorState


def format_auth_result(action: str, result: AuthResult) -> str:
    """Format the result of any simulated auth operation"""
    if result.requires_2fa:
        user_id = result.user.id if result.user else "N/A"
        return f"""🔐 **{action}: Two-Factor Required**

**User ID:** `{user_id}`
**Email:** {result.user.email if result.user else "N/A"}

**Next:** Use `verify_2fa` with this user ID and any six-digit code, e.g. `{generate_2fa_code()}`."""

    if not result.success:
        return f"❌ **{action} failed**: {result.error or 'Unknown error'}"

    output = [f"✅ **{action} succeeded**"]

    if result.user:
        output.append("")
        output.append(f"**User:** {result.user.name} ({result.user.email})")
        output.append(f"**User ID:** `{result.user.id}`")

    if result.session:
        session = result.session
        output.append(f"**Session ID:** `{session.id}`")
        output.append(f"**Expires At:** {session.expires_at.isoformat()}")
        output.append(f"\n---\n*Session ID: {session.id}*")

    return "\n".join(output)


def format_lifecycle(action: str, is_running: bool) -> str:
    state = "running" if is_running else "stopped"
    return f"⚙️ **Simulator {action}**\n\n**Status:** {state}"


def format_state(state: SimulatorState) -> str:
    """Format simulator_state response"""
    output = ["📊 **Simulator State**", ""]
    output.append(f"**Status:** {'running' if state.is_running else 'stopped'}")
    output.append(f"**Users:** {len(state.users)}")
    output.append(f"**Active Sessions:** {len(state.sessions)}")
    output.append(f"**Events:** {len(state.events)}")

    output.append("\n**Users:**")
    for user in state.users:
        two_factor = " (2FA)" if user.two_factor_enabled else ""
        output.append(f"- `{user.id[:8]}...` {user.email}{two_factor}")

    if state.sessions:
        output.append("\n**Sessions:**")
        for session in state.sessions:
            output.append(
                f"- `{session.id}` user `{session.user_id[:8]}...` "
                f"(expires {session.expires_at.isoformat()})"
            )

    config: dict[str, Any] = state.config.to_dict()
    output.append("\n**Config:**")
    for key, value in config.items():
        output.append(f"- {key}: {value}")

    return "\n".join(output)


def format_event_list(events: list[AuthEvent], limit: int = 0) -> str:
    """Format list_events response, newest last"""
    count = len(events)
    if count == 0:
        return "📋 **No Events**\n\nNothing has been recorded yet."

    limit = limit or settings.max_events_display
    shown = events[-limit:]

    output = [f"📋 **Auth Events** ({count})", ""]
    if count > len(shown):
        output.append(f"*... {count - len(shown)} earlier events omitted*")

    start = count - len(shown) + 1
    for i, event in enumerate(shown, start):
        mark = "✅" if event.success else "❌"
        line = f"{i}. {mark} `{event.type.value}` at {event.timestamp.isoformat()}"
        if event.error:
            line += f" - {event.error}"
        output.append(line)

    return "\n".join(output)
