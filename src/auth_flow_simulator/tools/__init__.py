"""MCP tools for the Auth Flow Simulator"""

from .lifecycle import (
    get_simulator,
    list_events,
    reset_simulator,
    set_simulator,
    simulator_state,
    start_simulator,
    stop_simulator,
)
from .login import simulate_login, verify_2fa
from .oauth import oauth_callback
from .password_reset import confirm_password_reset, request_password_reset
from .sessions import check_session, logout

__all__ = [
    "check_session",
    "confirm_password_reset",
    "get_simulator",
    "list_events",
    "logout",
    "oauth_callback",
    "request_password_reset",
    "reset_simulator",
    "set_simulator",
    "simulate_login",
    "simulator_state",
    "start_simulator",
    "stop_simulator",
    "verify_2fa",
]
