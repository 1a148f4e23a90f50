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
Small utilities shared by the simulator engine and its callers.
"""

import asyncio
import random
import re
import secrets
import uuid
from datetime import datetime, timezone
from typing import Any, Optional
from urllib.parse import quote

from .models import DeviceInfo, User

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
SPECIAL_CHARACTERS = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")

_USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_6 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.0 Mobile/15E148 Safari/604.1",
    "Mozilla/5.0 (iPad; CPU OS 14_6 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.0 Mobile/15E148 Safari/604.1",
]
_BROWSERS = ["Chrome", "Firefox", "Safari", "Edge"]
_OPERATING_SYSTEMS = ["Windows", "macOS", "iOS", "Android", "Linux"]
_DEVICE_TYPES = ["desktop", "mobile", "tablet"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_id() -> str:
    """Generate a unique opaque identifier."""
    return uuid.uuid4().hex


async def delay(ms: float) -> None:
    """Sleep for ``ms`` milliseconds; non-positive values return immediately."""
    if ms > 0:
        await asyncio.sleep(ms / 1000)


def create_mock_user(
    email: str,
    name: str,
    two_factor_enabled: bool = False,
    created_at: Optional[datetime] = None,
) -> User:
    """
    Build a verified mock user with a generated avatar URL.

    Args:
        email: Lookup key for login and password reset
        name: Display name
        two_factor_enabled: Whether login stops at the 2FA step
        created_at: Creation timestamp (defaults to now, UTC)

    Returns:
        A new User with a fresh id
    """
    return User(
        id=generate_id(),
        email=email,
        name=name,
        avatar=f"https://ui-avatars.com/api/?name={quote(name)}&background=random",
        email_verified=True,
        two_factor_enabled=two_factor_enabled,
        created_at=created_at or utcnow(),
    )


def format_date(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S %Z").strip()


def generate_2fa_code() -> str:
    """Random six-digit code accepted by the 2FA step."""
    return f"{secrets.randbelow(900000) + 100000}"


def generate_reset_token() -> str:
    return secrets.token_urlsafe(32)


def is_valid_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def validate_password_strength(password: str) -> dict[str, Any]:
    """
    Check a password against the usual strength rules.

    Advisory only: the simulator's login step uses a length check, not this.

    Returns:
        Dict with ``is_valid`` and the list of failed rules under ``errors``
    """
    errors = []

    if len(password) < 8:
        errors.append("Password must be at least 8 characters long")
    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"[0-9]", password):
        errors.append("Password must contain at least one number")
    if not SPECIAL_CHARACTERS.search(password):
        errors.append("Password must contain at least one special character")

    return {"is_valid": not errors, "errors": errors}


def generate_device_info(rng: Optional[random.Random] = None) -> DeviceInfo:
    """Random but plausible device details for richer fixtures."""
    rng = rng or random.Random()
    return DeviceInfo(
        user_agent=rng.choice(_USER_AGENTS),
        ip_address=f"192.168.1.{rng.randrange(255)}",
        device_type=rng.choice(_DEVICE_TYPES),
        browser=rng.choice(_BROWSERS),
        os=rng.choice(_OPERATING_SYSTEMS),
    )
