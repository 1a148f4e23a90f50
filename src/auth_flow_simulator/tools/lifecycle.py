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
Lifecycle and introspection tools: start, stop, reset, state, events
"""

import logging
from typing import Optional

from ..core.factory import create_simulator_from_settings
from ..core.server import handle_tool_errors, mcp
from ..core.simulator import AuthFlowSimulator
from ..formatting import format_event_list, format_lifecycle, format_state

logger = logging.getLogger(__name__)

# Initialize global simulator (will be created on first use)
_simulator: Optional[AuthFlowSimulator] = None


def get_simulator() -> AuthFlowSimulator:
    """Lazy initialization of the shared simulator"""
    global _simulator
    if _simulator is None:
        logger.info("Creating shared simulator")
        _simulator = create_simulator_from_settings()
    return _simulator


def set_simulator(simulator: Optional[AuthFlowSimulator]) -> None:
    """Replace the shared simulator. ``None`` recreates it on next use."""
    global _simulator
    _simulator = simulator


@mcp.tool(description="Start the auth flow simulator.")
@handle_tool_errors
async def start_simulator() -> str:
    simulator = get_simulator()
    await simulator.start()
    return format_lifecycle("started", simulator.is_running)


@mcp.tool(description="Stop the auth flow simulator. Operations remain callable.")
@handle_tool_errors
async def stop_simulator() -> str:
    simulator = get_simulator()
    await simulator.stop()
    return format_lifecycle("stopped", simulator.is_running)


@mcp.tool(description="Reseed default users and clear all sessions and events.")
@handle_tool_errors
async def reset_simulator() -> str:
    simulator = get_simulator()
    simulator.reset()
    return format_lifecycle("reset", simulator.is_running)


@mcp.tool(description="Show users, active sessions, config and event count.")
@handle_tool_errors
async def simulator_state() -> str:
    return format_state(get_simulator().get_state())


@mcp.tool(description="List recorded auth events, most recent last.")
@handle_tool_errors
async def list_events(limit: int = 0) -> str:
    """
    List recorded auth events.

    Args:
        limit: Maximum number of events to show (0 uses the configured default)

    Returns:
        Formatted event log
    """
    if limit < 0:
        raise ValueError("limit must be zero or positive")
    return format_event_list(get_simulator().get_events(), limit)
