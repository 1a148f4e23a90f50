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

"""Shared data models for the simulator engine.

Attribute names are Python-native. ``to_dict`` renders each record with the
key names existing callers consume (``userId``, ``requires2FA``, ...).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class AuthEventType(Enum):
    """Fixed set of tags carried by audit events"""

    LOGIN_ATTEMPT = "login-attempt"
    LOGIN_SUCCESS = "login-success"
    LOGIN_FAILURE = "login-failure"
    TWO_FACTOR_REQUIRED = "2fa-required"
    TWO_FACTOR_SUCCESS = "2fa-success"
    TWO_FACTOR_FAILURE = "2fa-failure"
    PASSWORD_RESET_REQUESTED = "password-reset-requested"
    PASSWORD_RESET_COMPLETED = "password-reset-completed"
    OAUTH_INITIATED = "oauth-initiated"
    OAUTH_CALLBACK = "oauth-callback"
    SESSION_CREATED = "session-created"
    SESSION_EXPIRED = "session-expired"
    LOGOUT = "logout"


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass
class User:
    """Identity record. Email is the lookup key."""

    id: str
    email: str
    name: str
    email_verified: bool = True
    two_factor_enabled: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_login_at: Optional[datetime] = None
    avatar: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "emailVerified": self.email_verified,
            "twoFactorEnabled": self.two_factor_enabled,
            "createdAt": _iso(self.created_at),
        }
        if self.last_login_at is not None:
            data["lastLoginAt"] = _iso(self.last_login_at)
        if self.avatar is not None:
            data["avatar"] = self.avatar
        return data


@dataclass
class DeviceInfo:
    user_agent: str
    ip_address: str
    device_type: str
    browser: Optional[str] = None
    os: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "userAgent": self.user_agent,
            "ipAddress": self.ip_address,
            "deviceType": self.device_type,
        }
        if self.browser is not None:
            data["browser"] = self.browser
        if self.os is not None:
            data["os"] = self.os
        return data


@dataclass
class AuthSession:
    """A logged-in session owned by one user"""

    id: str
    user_id: str
    token: str
    expires_at: datetime
    created_at: datetime
    refresh_token: Optional[str] = None
    device_info: Optional[DeviceInfo] = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "userId": self.user_id,
            "token": self.token,
            "expiresAt": _iso(self.expires_at),
            "createdAt": _iso(self.created_at),
        }
        if self.refresh_token is not None:
            data["refreshToken"] = self.refresh_token
        if self.device_info is not None:
            data["deviceInfo"] = self.device_info.to_dict()
        return data


@dataclass
class AuthEvent:
    """Append-only audit record"""

    type: AuthEventType
    timestamp: datetime
    success: bool
    data: dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
    user_id: Optional[str] = None
    session_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "type": self.type.value,
            "timestamp": _iso(self.timestamp),
            "success": self.success,
            "data": dict(self.data),
        }
        if self.error is not None:
            result["error"] = self.error
        if self.user_id is not None:
            result["userId"] = self.user_id
        if self.session_id is not None:
            result["sessionId"] = self.session_id
        return result


# camelCase option names accepted alongside the field names
_CONFIG_ALIASES = {
    "enable2FA": "enable_2fa",
    "enablePasswordReset": "enable_password_reset",
    "enableOAuth": "enable_oauth",
    "sessionTimeout": "session_timeout",
    "maxLoginAttempts": "max_login_attempts",
    "lockoutDuration": "lockout_duration",
}


@dataclass
class AuthFlowConfig:
    """Feature toggles and limits.

    The toggles and ``session_timeout`` are advisory. ``max_login_attempts``
    and ``lockout_duration`` only tag failed-login events.
    """

    enable_2fa: bool = True
    enable_password_reset: bool = True
    enable_oauth: bool = True
    session_timeout: int = 30  # minutes
    max_login_attempts: int = 5
    lockout_duration: int = 15  # minutes

    @classmethod
    def from_partial(cls, overrides: Optional[Mapping[str, Any]] = None) -> AuthFlowConfig:
        """Merge a partial mapping over the defaults.

        Raises:
            ValueError: If a key names no config field
        """
        if not overrides:
            return cls()

        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in overrides.items():
            name = _CONFIG_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown config option: {key}")
            values[name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "enable2FA": self.enable_2fa,
            "enablePasswordReset": self.enable_password_reset,
            "enableOAuth": self.enable_oauth,
            "sessionTimeout": self.session_timeout,
            "maxLoginAttempts": self.max_login_attempts,
            "lockoutDuration": self.lockout_duration,
        }


@dataclass
class LoginCredentials:
    email: str
    password: Optional[str] = None
    remember_me: bool = False


@dataclass
class TwoFactorCode:
    code: str
    method: str = "totp"  # sms | email | totp | app


@dataclass
class PasswordResetRequest:
    email: str
    redirect_url: Optional[str] = None


@dataclass
class PasswordResetConfirm:
    token: str
    new_password: Optional[str] = None


@dataclass
class OAuthCallback:
    code: str
    state: str
    provider: str


@dataclass
class AuthResult:
    """Outcome of a simulated operation. Unset fields stay ``None``."""

    success: bool
    user: Optional[User] = None
    session: Optional[AuthSession] = None
    error: Optional[str] = None
    requires_2fa: Optional[bool] = None
    requires_password_reset: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"success": self.success}
        if self.user is not None:
            data["user"] = self.user.to_dict()
        if self.session is not None:
            data["session"] = self.session.to_dict()
        if self.error is not None:
            data["error"] = self.error
        if self.requires_2fa is not None:
            data["requires2FA"] = self.requires_2fa
        if self.requires_password_reset is not None:
            data["requiresPasswordReset"] = self.requires_password_reset
        return data


@dataclass
class SimulatorOptions:
    """Construction options.

    ``None`` for ``enable_logging`` or ``delay_ms`` falls back to the
    environment-driven settings.
    """

    config: Optional[Mapping[str, Any]] = None
    mock_users: Optional[list[User]] = None
    enable_logging: Optional[bool] = None
    delay_ms: Optional[int] = None
    clock: Optional[Callable[[], datetime]] = None


@dataclass
class SimulatorState:
    """Aggregate root owned by exactly one simulator instance"""

    users: list[User] = field(default_factory=list)
    sessions: list[AuthSession] = field(default_factory=list)
    events: list[AuthEvent] = field(default_factory=list)
    config: AuthFlowConfig = field(default_factory=AuthFlowConfig)
    is_running: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "users": [u.to_dict() for u in self.users],
            "sessions": [s.to_dict() for s in self.sessions],
            "events": [e.to_dict() for e in self.events],
            "config": self.config.to_dict(),
            "isRunning": self.is_running,
        }
