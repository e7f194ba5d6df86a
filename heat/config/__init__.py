"""
Configuration Module
====================

Centralized configuration management using Pydantic Settings.
Loads from environment variables with type validation and defaults.

Usage:
    from heat.config import settings

    print(settings.environment)
    print(settings.chain.verifier_mode)
"""

from heat.config.settings import (
    ZERO_ADDRESS,
    Environment,
    LogLevel,
    NullifierBackend,
    Settings,
    VerifierMode,
    get_settings,
)


# Global settings instance (singleton)
settings = get_settings()

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "Environment",
    "LogLevel",
    "VerifierMode",
    "NullifierBackend",
    "ZERO_ADDRESS",
]
