"""Simulator engine, models and factories"""

# Engine only - the FastMCP instance lives in core.server and is imported by tools
from .factory import (
    create_auth_flow_simulator,
    create_dev_simulator,
    create_prod_simulator,
    create_simulator_from_settings,
    create_test_simulator,
)
from .helpers import (
    create_mock_user,
    format_date,
    generate_2fa_code,
    generate_device_info,
    generate_id,
    generate_reset_token,
    is_valid_email,
    validate_password_strength,
)
from .models import (
    AuthEvent,
    AuthEventType,
    AuthFlowConfig,
    AuthResult,
    AuthSession,
    DeviceInfo,
    LoginCredentials,
    OAuthCallback,
    PasswordResetConfirm,
    PasswordResetRequest,
    SimulatorOptions,
    SimulatorState,
    TwoFactorCode,
    User,
)
from .simulator import AuthFlowSimulator

__all__ = [
    "AuthEvent",
    "AuthEventType",
    "AuthFlowConfig",
    "AuthFlowSimulator",
    "AuthResult",
    "AuthSession",
    "DeviceInfo",
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
    "create_simulator_from_settings",
    "create_mock_user",
    "create_test_simulator",
    "format_date",
    "generate_2fa_code",
    "generate_device_info",
    "generate_id",
    "generate_reset_token",
    "is_valid_email",
    "validate_password_strength",
]
