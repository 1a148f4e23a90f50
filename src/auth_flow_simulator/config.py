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
Configuration module for the Auth Flow Simulator
Centralizes simulation constants and environment variables
"""

import os
from dataclasses import dataclass, field
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SimulatorSettings:
    """Configuration for the simulator engine and its MCP server"""

    # Engine defaults
    delay_ms: int = field(default_factory=lambda: int(os.getenv("AUTH_SIM_DELAY_MS", "100")))
    enable_logging: bool = field(
        default_factory=lambda: _env_bool("AUTH_SIM_ENABLE_LOGGING", "true")
    )
    preset: str = field(
        default_factory=lambda: os.getenv("AUTH_SIM_PRESET", "default").strip().lower()
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("AUTH_SIM_LOG_LEVEL", "INFO").strip().upper()
    )

    # Transport Configuration
    transport: str = field(default_factory=lambda: os.getenv("MCP_TRANSPORT", "stdio"))
    http_host: str = field(default_factory=lambda: os.getenv("MCP_HTTP_HOST", "127.0.0.1"))
    http_port: int = field(default_factory=lambda: int(os.getenv("MCP_HTTP_PORT", "8087")))
    server_name: str = "auth-flow-simulator"

    # Simulation Rules
    min_password_length: int = 6
    two_factor_code_pattern: str = r"[0-9]{6}"
    session_minutes: int = 30
    remember_me_days: int = 30

    # Placeholder Device Info
    device_user_agent: str = "AuthFlowSimulator/1.0.0"
    device_ip_address: str = "127.0.0.1"
    device_type: str = "desktop"

    # OAuth
    oauth_email_domain: str = "example.com"

    # Display Configuration
    max_events_display: int = 20

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary"""
        return {
            "delay_ms": self.delay_ms,
            "enable_logging": self.enable_logging,
            "preset": self.preset,
            "log_level": self.log_level,
            "transport": self.transport,
            "http_host": self.http_host,
            "http_port": self.http_port,
            "min_password_length": self.min_password_length,
            "session_minutes": self.session_minutes,
            "remember_me_days": self.remember_me_days,
        }


# Global settings instance
settings = SimulatorSettings()
