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
In-memory authentication flow simulator.
Emulates login, 2FA, password reset, OAuth callback and session lifecycle
without a real identity provider.
"""

import copy
import logging
import re
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any, Optional, Union

from ..config import settings
from .helpers import create_mock_user, delay, generate_id, generate_reset_token, utcnow
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

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
INVALID_PASSWORD = "Invalid password"
INVALID_2FA_CODE = "Invalid 2FA code"
INVALID_OAUTH_STATE = "Invalid OAuth state"
TWO_FACTOR_REQUIRED = "Two-factor authentication required"
USER_NOT_FOUND = "User not found"
SESSION_NOT_FOUND = "Session not found"
SESSION_EXPIRED = "Session expired"


class AuthFlowSimulator:
    """
    Simulates authentication flows against in-memory state.

    Every public operation awaits the configured delay first, then mutates
    state synchronously, so concurrent calls on one event loop interleave only
    at the delay. Failures are returned as ``AuthResult(success=False)``,
    never raised.
    """

    def __init__(self, options: Optional[SimulatorOptions] = None):
        """
        Initialize the simulator.

        Args:
            options: Seed users, partial config, logging toggle, delay and clock

        Raises:
            ValueError: If ``options.config`` names an unknown option
        """
        options = options or SimulatorOptions()
        self.delay_ms = options.delay_ms if options.delay_ms is not None else settings.delay_ms
        self.enable_logging = (
            options.enable_logging
            if options.enable_logging is not None
            else settings.enable_logging
        )
        self._clock: Callable[[], datetime] = options.clock or utcnow
        self._code_pattern = re.compile(settings.two_factor_code_pattern)
        self._failed_attempts: dict[str, int] = {}

        users = list(options.mock_users) if options.mock_users is not None else None
        self._state = SimulatorState(
            users=users if users is not None else self._create_default_users(),
            config=AuthFlowConfig.from_partial(options.config),
        )

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    # Lifecycle

    async def start(self) -> None:
        """Mark the simulator running."""
        self._state.is_running = True
        self._log("Simulator started")
        self._emit_event(AuthEventType.LOGIN_ATTEMPT, True, {"lifecycle": "started"})

    async def stop(self) -> None:
        """Mark the simulator stopped. Operations stay callable."""
        self._state.is_running = False
        self._log("Simulator stopped")
        self._emit_event(AuthEventType.LOGOUT, True, {"lifecycle": "stopped"})

    def reset(self) -> None:
        """Reseed default users and clear sessions, events and attempt counters."""
        self._state.users = self._create_default_users()
        self._state.sessions = []
        self._state.events = []
        self._failed_attempts.clear()
        self._log("Simulator reset")

    # Flows

    async def simulate_login(self, credentials: LoginCredentials) -> AuthResult:
        """
        Simulate a credential login.

        Unknown emails and bad passwords both return "Invalid credentials"
        so callers cannot probe for accounts.
        """
        await self._delay()

        email = credentials.email
        user = self._find_user_by_email(email)
        if user is None:
            self._emit_event(
                AuthEventType.LOGIN_FAILURE,
                False,
                {"email": email},
                USER_NOT_FOUND,
            )
            return AuthResult(success=False, error=INVALID_CREDENTIALS)

        if not self._validate_password(credentials.password):
            self._emit_event(
                AuthEventType.LOGIN_FAILURE,
                False,
                {"user_id": user.id, "email": email, **self._record_failed_attempt(user)},
                INVALID_PASSWORD,
            )
            return AuthResult(success=False, error=INVALID_CREDENTIALS)

        self._failed_attempts.pop(user.id, None)

        if user.two_factor_enabled:
            self._emit_event(AuthEventType.TWO_FACTOR_REQUIRED, True, {"user_id": user.id})
            return AuthResult(
                success=False,
                user=user,
                requires_2fa=True,
                error=TWO_FACTOR_REQUIRED,
            )

        session = self._create_session(user, remember_me=bool(credentials.remember_me))
        self._emit_event(
            AuthEventType.LOGIN_SUCCESS, True, {"user_id": user.id, "session_id": session.id}
        )
        return AuthResult(success=True, user=user, session=session)

    async def simulate_2fa(self, user_id: str, code: Union[TwoFactorCode, str]) -> AuthResult:
        """
        Simulate second-factor verification.

        Any six-digit code is accepted; the code is not bound to a prior login.
        """
        await self._delay()

        user = self._find_user_by_id(user_id)
        if user is None:
            return AuthResult(success=False, error=USER_NOT_FOUND)

        raw_code = code.code if isinstance(code, TwoFactorCode) else code
        if not isinstance(raw_code, str) or not self._code_pattern.fullmatch(raw_code):
            self._emit_event(
                AuthEventType.TWO_FACTOR_FAILURE, False, {"user_id": user_id}, INVALID_2FA_CODE
            )
            return AuthResult(success=False, error=INVALID_2FA_CODE)

        session = self._create_session(user, remember_me=False)
        self._emit_event(
            AuthEventType.TWO_FACTOR_SUCCESS, True, {"user_id": user_id, "session_id": session.id}
        )
        return AuthResult(success=True, user=user, session=session)

    async def simulate_password_reset_request(self, request: PasswordResetRequest) -> AuthResult:
        """
        Simulate a password reset request.

        Always succeeds so the result never reveals whether the email exists.
        The generated token is recorded on the event only.
        """
        await self._delay()

        user = self._find_user_by_email(request.email)
        if user is None:
            self._emit_event(
                AuthEventType.PASSWORD_RESET_REQUESTED, True, {"email": request.email}
            )
            return AuthResult(success=True)

        reset_token = generate_reset_token()
        self._emit_event(
            AuthEventType.PASSWORD_RESET_REQUESTED,
            True,
            {"user_id": user.id, "reset_token": reset_token},
        )
        return AuthResult(success=True)

    async def simulate_password_reset_confirm(self, confirm: PasswordResetConfirm) -> AuthResult:
        """Accept any reset token. No stored password changes."""
        await self._delay()

        self._emit_event(AuthEventType.PASSWORD_RESET_COMPLETED, True, {"token": confirm.token})
        return AuthResult(success=True)

    async def simulate_oauth_callback(
        self, callback: OAuthCallback, expected_state: Optional[str] = None
    ) -> AuthResult:
        """
        Simulate the return leg of an OAuth authorization.

        Args:
            callback: Provider name, authorization code and state
            expected_state: State issued when the flow began. When given, a
                mismatch fails the callback before any user or session exists.

        Returns:
            AuthResult with the provider user and a fresh session
        """
        await self._delay()

        if expected_state is not None and callback.state != expected_state:
            self._emit_event(
                AuthEventType.OAUTH_CALLBACK,
                False,
                {"provider": callback.provider},
                INVALID_OAUTH_STATE,
            )
            return AuthResult(success=False, error=INVALID_OAUTH_STATE)

        user = self._find_or_create_oauth_user(callback.provider)
        session = self._create_session(user, remember_me=False)
        self._emit_event(
            AuthEventType.OAUTH_CALLBACK,
            True,
            {"user_id": user.id, "session_id": session.id, "provider": callback.provider},
        )
        return AuthResult(success=True, user=user, session=session)

    async def simulate_logout(self, session_id: str) -> AuthResult:
        await self._delay()

        session = self._find_session(session_id)
        if session is None:
            return AuthResult(success=False, error=SESSION_NOT_FOUND)

        self._state.sessions.remove(session)
        self._emit_event(AuthEventType.LOGOUT, True, {"session_id": session_id})
        return AuthResult(success=True)

    async def check_session(self, session_id: str) -> AuthResult:
        """
        Validate a session, dropping it if it has expired.

        Expired sessions are only removed here, never swept in the background.
        """
        await self._delay()

        session = self._find_session(session_id)
        if session is None:
            self._emit_event(
                AuthEventType.SESSION_EXPIRED, False, {"session_id": session_id}, SESSION_NOT_FOUND
            )
            return AuthResult(success=False, error=SESSION_NOT_FOUND)

        if session.is_expired(self._clock()):
            self._state.sessions = [s for s in self._state.sessions if s.id != session_id]
            self._emit_event(
                AuthEventType.SESSION_EXPIRED, False, {"session_id": session_id}, SESSION_EXPIRED
            )
            return AuthResult(success=False, error=SESSION_EXPIRED)

        user = self._find_user_by_id(session.user_id)
        if user is None:
            logger.warning(f"Session {session_id} references missing user {session.user_id}")
            return AuthResult(success=False, error=USER_NOT_FOUND)

        return AuthResult(success=True, user=user, session=session)

    # Introspection

    def get_state(self) -> SimulatorState:
        """Snapshot of the simulator state. Records are deep copies."""
        return SimulatorState(
            users=copy.deepcopy(self._state.users),
            sessions=copy.deepcopy(self._state.sessions),
            events=copy.deepcopy(self._state.events),
            config=copy.deepcopy(self._state.config),
            is_running=self._state.is_running,
        )

    def get_events(self) -> list[AuthEvent]:
        """Copy of the event log in append order."""
        return copy.deepcopy(self._state.events)

    # Internals

    def _create_default_users(self) -> list[User]:
        now = self._clock()
        return [
            create_mock_user("john@example.com", "John Doe", False, created_at=now),
            create_mock_user("jane@example.com", "Jane Smith", False, created_at=now),
            create_mock_user("admin@example.com", "Admin User", True, created_at=now),
        ]

    def _find_user_by_email(self, email: Optional[str]) -> Optional[User]:
        return next((u for u in self._state.users if u.email == email), None)

    def _find_user_by_id(self, user_id: Optional[str]) -> Optional[User]:
        return next((u for u in self._state.users if u.id == user_id), None)

    def _find_session(self, session_id: Optional[str]) -> Optional[AuthSession]:
        return next((s for s in self._state.sessions if s.id == session_id), None)

    def _validate_password(self, password: Optional[str]) -> bool:
        # Length check only; nothing is hashed or stored
        return isinstance(password, str) and len(password) >= settings.min_password_length

    def _record_failed_attempt(self, user: User) -> dict[str, Any]:
        """Count a failed password for event tagging. Nothing is ever locked."""
        attempts = self._failed_attempts.get(user.id, 0) + 1
        self._failed_attempts[user.id] = attempts
        config = self._state.config
        return {
            "failed_attempts": attempts,
            "lockout_threshold_reached": attempts >= config.max_login_attempts,
            "lockout_duration": config.lockout_duration,
        }

    def _create_session(self, user: User, remember_me: bool = False) -> AuthSession:
        now = self._clock()
        if remember_me:
            lifetime = timedelta(days=settings.remember_me_days)
        else:
            lifetime = timedelta(minutes=settings.session_minutes)

        session = AuthSession(
            id=generate_id(),
            user_id=user.id,
            token=generate_id(),
            refresh_token=generate_id(),
            created_at=now,
            expires_at=now + lifetime,
            device_info=DeviceInfo(
                user_agent=settings.device_user_agent,
                ip_address=settings.device_ip_address,
                device_type=settings.device_type,
            ),
        )
        self._state.sessions.append(session)
        self._emit_event(
            AuthEventType.SESSION_CREATED, True, {"user_id": user.id, "session_id": session.id}
        )
        return session

    def _find_or_create_oauth_user(self, provider: str) -> User:
        email = f"oauth-{provider}@{settings.oauth_email_domain}"
        user = self._find_user_by_email(email)
        if user is None:
            user = create_mock_user(email, f"{provider} User", False, created_at=self._clock())
            self._state.users.append(user)
        return user

    def _emit_event(
        self,
        event_type: AuthEventType,
        success: bool,
        data: Optional[dict[str, Any]] = None,
        error: Optional[str] = None,
    ) -> AuthEvent:
        payload = dict(data or {})
        event = AuthEvent(
            type=event_type,
            timestamp=self._clock(),
            success=success,
            data=payload,
            error=error,
            user_id=payload.get("user_id"),
            session_id=payload.get("session_id"),
        )
        self._state.events.append(event)
        self._log(f"Event: {event_type.value} - {'SUCCESS' if success else 'FAILURE'}", payload)
        return event

    async def _delay(self) -> None:
        await delay(self.delay_ms)

    def _log(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        if self.enable_logging:
            logger.info(f"[AuthFlowSimulator] {message} {data or ''}".rstrip())
