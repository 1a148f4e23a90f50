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
Error handling utilities with assistant-friendly responses.
Turns unexpected exceptions from the tool layer into structured hints.
"""

import logging
from typing import Any

from .config import settings

logger = logging.getLogger(__name__)


def create_error_response(error: Exception, context: str) -> dict[str, Any]:
    """
    Create error response with recovery hints.

    Args:
        error: The exception that occurred
        context: Name of the tool or operation that failed

    Returns:
        Dict with error details and suggested next steps
    """
    error_type = type(error).__name__
    error_msg = str(error)

    response: dict[str, Any] = {
        "success": False,
        "error": error_msg,
        "error_type": error_type,
        "context": context,
    }

    # Config errors
    if "config option" in error_msg.lower():
        response.update(
            {
                "_ai_diagnosis": "Simulator configuration rejected",
                "_ai_suggestion": (
                    "Use enable_2fa, enable_password_reset, enable_oauth, session_timeout, "
                    "max_login_attempts or lockout_duration"
                ),
                "_human_action": "Fix the config mapping passed to the simulator",
            }
        )

    # Session errors
    elif "session" in error_msg.lower() or error_type == "KeyError":
        response.update(
            {
                "_ai_diagnosis": "Session not found or invalid",
                "_ai_suggestion": "Inspect active sessions with simulator_state",
                "_ai_recovery": "Log in again with simulate_login",
                "_human_action": "Verify the session ID",
            }
        )

    # Timeout errors
    elif error_type == "TimeoutError":
        response.update(
            {
                "_ai_diagnosis": "Operation exceeded timeout",
                "_ai_context": {"delay_ms": settings.delay_ms},
                "_human_action": "Lower AUTH_SIM_DELAY_MS or use AUTH_SIM_PRESET=test",
            }
        )

    else:
        response.update(
            {
                "_ai_diagnosis": f"Unexpected error in {context}",
                "_ai_suggestion": "Check server logs for details",
                "_ai_context": {"error_type": error_type},
            }
        )

    return response
