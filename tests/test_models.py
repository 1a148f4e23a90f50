"""
Tests for model serialization and config merging
"""

from datetime import datetime, timedelta, timezone

import pytest

from auth_flow_simulator.core.models import (
    AuthEvent,
    AuthEventType,
    AuthFlowConfig,
    AuthResult,
    AuthSession,
    DeviceInfo,
    SimulatorState,
    User,
)

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_user(**overrides):
    values = {"id": "u1", "email": "a@x.com", "name": "A", "created_at": NOW}
    values.update(overrides)
    return User(**values)


def make_session(**overrides):
    values = {
        "id": "s1",
        "user_id": "u1",
        "token": "t",
        "refresh_token": "r",
        "created_at": NOW,
        "expires_at": NOW + timedelta(minutes=30),
        "device_info": DeviceInfo("agent", "127.0.0.1", "desktop"),
    }
    values.update(overrides)
    return AuthSession(**values)


class TestAuthFlowConfig:
    def test_defaults(self):
        assert AuthFlowConfig.from_partial(None) == AuthFlowConfig()
        assert AuthFlowConfig.from_partial({}) == AuthFlowConfig()

    def test_camel_case_aliases(self):
        config = AuthFlowConfig.from_partial(
            {
                "enable2FA": False,
                "enablePasswordReset": False,
                "enableOAuth": False,
                "sessionTimeout": 60,
                "maxLoginAttempts": 10,
                "lockoutDuration": 5,
            }
        )
        assert config == AuthFlowConfig(False, False, False, 60, 10, 5)

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="enable3FA"):
            AuthFlowConfig.from_partial({"enable3FA": True})

    def test_to_dict_uses_camel_case_names(self):
        assert AuthFlowConfig().to_dict() == {
            "enable2FA": True,
            "enablePasswordReset": True,
            "enableOAuth": True,
            "sessionTimeout": 30,
            "maxLoginAttempts": 5,
            "lockoutDuration": 15,
        }


class TestAuthResult:
    def test_unset_fields_omitted(self):
        assert AuthResult(success=False, error="Invalid credentials").to_dict() == {
            "success": False,
            "error": "Invalid credentials",
        }

    def test_two_factor_result(self):
        data = AuthResult(success=False, user=make_user(), requires_2fa=True).to_dict()
        assert data["requires2FA"] is True
        assert data["user"]["email"] == "a@x.com"
        assert "session" not in data

    def test_success_result(self):
        data = AuthResult(success=True, user=make_user(), session=make_session()).to_dict()
        assert data["session"]["userId"] == "u1"
        assert data["session"]["refreshToken"] == "r"
        assert data["session"]["deviceInfo"] == {
            "userAgent": "agent",
            "ipAddress": "127.0.0.1",
            "deviceType": "desktop",
        }
        assert data["session"]["expiresAt"] == "2025-01-01T00:30:00+00:00"


class TestRecords:
    def test_user_optional_fields(self):
        data = make_user().to_dict()
        assert "lastLoginAt" not in data
        assert "avatar" not in data
        assert data["emailVerified"] is True
        assert data["twoFactorEnabled"] is False

        data = make_user(avatar="https://img", last_login_at=NOW).to_dict()
        assert data["avatar"] == "https://img"
        assert data["lastLoginAt"] == NOW.isoformat()

    def test_session_expiry(self):
        session = make_session()
        assert session.is_expired(NOW) is False
        assert session.is_expired(NOW + timedelta(minutes=31)) is True

    def test_event_to_dict(self):
        event = AuthEvent(
            type=AuthEventType.SESSION_EXPIRED,
            timestamp=NOW,
            success=False,
            data={"session_id": "s1"},
            error="Session expired",
            session_id="s1",
        )
        assert event.to_dict() == {
            "type": "session-expired",
            "timestamp": NOW.isoformat(),
            "success": False,
            "data": {"session_id": "s1"},
            "error": "Session expired",
            "sessionId": "s1",
        }

    def test_event_type_values(self):
        assert {t.value for t in AuthEventType} == {
            "login-attempt",
            "login-success",
            "login-failure",
            "2fa-required",
            "2fa-success",
            "2fa-failure",
            "password-reset-requested",
            "password-reset-completed",
            "oauth-initiated",
            "oauth-callback",
            "session-created",
            "session-expired",
            "logout",
        }

    def test_state_to_dict(self):
        state = SimulatorState(users=[make_user()], sessions=[make_session()])
        data = state.to_dict()
        assert set(data) == {"users", "sessions", "events", "config", "isRunning"}
        assert data["isRunning"] is False
        assert data["events"] == []
