"""
Tests for simulator helper utilities
"""

import asyncio
import random
from datetime import datetime, timezone

import pytest

from auth_flow_simulator.core.helpers import (
    create_mock_user,
    delay,
    format_date,
    generate_2fa_code,
    generate_device_info,
    generate_id,
    generate_reset_token,
    is_valid_email,
    validate_password_strength,
)


class TestIds:
    def test_generate_id_unique(self):
        ids = {generate_id() for _ in range(100)}
        assert len(ids) == 100

    def test_reset_token_unique(self):
        assert generate_reset_token() != generate_reset_token()

    def test_2fa_code_shape(self):
        for _ in range(50):
            code = generate_2fa_code()
            assert len(code) == 6
            assert code.isdigit()
            assert not code.startswith("0")


class TestMockUser:
    def test_create_mock_user(self):
        created = datetime(2025, 1, 1, tzinfo=timezone.utc)
        user = create_mock_user("a@x.com", "Ada Lovelace", True, created_at=created)

        assert user.email == "a@x.com"
        assert user.two_factor_enabled is True
        assert user.email_verified is True
        assert user.created_at == created
        assert "name=Ada%20Lovelace" in user.avatar
        assert user.last_login_at is None

    def test_created_at_defaults_to_aware_now(self):
        user = create_mock_user("a@x.com", "A")
        assert user.created_at.tzinfo is not None


class TestValidation:
    @pytest.mark.parametrize(
        "email,expected",
        [
            ("a@x.com", True),
            ("first.last@sub.example.org", True),
            ("no-at-sign.com", False),
            ("a@b", False),
            ("a b@x.com", False),
            ("", False),
        ],
    )
    def test_is_valid_email(self, email, expected):
        assert is_valid_email(email) is expected

    def test_strong_password(self):
        result = validate_password_strength("Str0ng!Pass")
        assert result == {"is_valid": True, "errors": []}

    def test_weak_password_lists_every_rule(self):
        result = validate_password_strength("abc")
        assert result["is_valid"] is False
        assert len(result["errors"]) == 4


class TestDeviceInfo:
    def test_seeded_rng_is_reproducible(self):
        first = generate_device_info(random.Random(7))
        second = generate_device_info(random.Random(7))
        assert first == second
        assert first.device_type in ("desktop", "mobile", "tablet")
        assert first.ip_address.startswith("192.168.1.")


class TestDelay:
    @pytest.mark.asyncio
    async def test_non_positive_delay_does_not_sleep(self, monkeypatch):
        calls = []

        async def fake_sleep(seconds):
            calls.append(seconds)

        monkeypatch.setattr(asyncio, "sleep", fake_sleep)
        await delay(0)
        await delay(-5)
        await delay(250)
        assert calls == [0.25]


def test_format_date():
    assert format_date(datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)) == (
        "2025-01-02 03:04:05 UTC"
    )


def test_helpers_exported_from_package():
    import auth_flow_simulator
    from auth_flow_simulator import core

    assert auth_flow_simulator.generate_2fa_code is generate_2fa_code
    assert auth_flow_simulator.is_valid_email is is_valid_email
    assert auth_flow_simulator.validate_password_strength is validate_password_strength
    assert core.generate_device_info is generate_device_info
    assert core.format_date is format_date
