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
Factory functions for common simulator setups.
"""

import logging
from dataclasses import replace
from typing import Any, Optional

from ..config import settings
from .models import SimulatorOptions
from .simulator import AuthFlowSimulator

logger = logging.getLogger(__name__)


def create_auth_flow_simulator(
    options: Optional[SimulatorOptions] = None, **overrides: Any
) -> AuthFlowSimulator:
    """
    Create a simulator, optionally overriding individual option fields.

    Examples:
        >>> sim = create_auth_flow_simulator(delay_ms=0, enable_logging=False)
    """
    options = options or SimulatorOptions()
    if overrides:
        options = replace(options, **overrides)
    return AuthFlowSimulator(options)


def create_dev_simulator() -> AuthFlowSimulator:
    """Logging on and a slightly longer delay for a more visible simulation."""
    return create_auth_flow_simulator(
        enable_logging=True,
        delay_ms=200,
        config={
            "enable_2fa": True,
            "enable_password_reset": True,
            "enable_oauth": True,
            "session_timeout": 60,
            "max_login_attempts": 10,
            "lockout_duration": 5,
        },
    )


def create_prod_simulator() -> AuthFlowSimulator:
    """Production-like limits with logging off."""
    return create_auth_flow_simulator(
        enable_logging=False,
        delay_ms=100,
        config={
            "enable_2fa": True,
            "enable_password_reset": True,
            "enable_oauth": True,
            "session_timeout": 30,
            "max_login_attempts": 5,
            "lockout_duration": 15,
        },
    )


def create_test_simulator() -> AuthFlowSimulator:
    """No delay and tight limits for test suites."""
    return create_auth_flow_simulator(
        enable_logging=False,
        delay_ms=0,
        config={
            "enable_2fa": True,
            "enable_password_reset": True,
            "enable_oauth": True,
            "session_timeout": 5,
            "max_login_attempts": 3,
            "lockout_duration": 1,
        },
    )


_PRESETS = {
    "dev": create_dev_simulator,
    "prod": create_prod_simulator,
    "test": create_test_simulator,
}


def create_simulator_from_settings() -> AuthFlowSimulator:
    """Create the simulator selected by AUTH_SIM_PRESET."""
    factory = _PRESETS.get(settings.preset)
    if factory is not None:
        logger.info(f"Creating '{settings.preset}' simulator")
        return factory()

    if settings.preset != "default":
        logger.warning(
            f"Unknown AUTH_SIM_PRESET '{settings.preset}', using defaults. "
            f"Valid options: default, {', '.join(_PRESETS)}"
        )
    return create_auth_flow_simulator()
