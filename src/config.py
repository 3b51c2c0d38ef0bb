"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
LOG_LEVEL, ENGINE_OUTPUT and the MCP server identity).
"""

from __future__ import annotations

import logging
import os


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_choice(name: str, default: str, choices: set[str]) -> str:
    raw = _env_str(name, default).lower()
    return raw if raw in choices else default


def _env_log_level(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


# Logging (stderr only; stdout carries the MCP stream)
LOG_LEVEL = _env_log_level("LOG_LEVEL", logging.WARNING)

# Where the analysis engine's stdout chatter goes: "discard" or "stderr"
ENGINE_OUTPUT = _env_choice("ENGINE_OUTPUT", "discard", {"discard", "stderr"})

# MCP server identity
SERVER_NAME = _env_str("SERVER_NAME", "UVL Analizer")
SERVER_VERSION = _env_str("SERVER_VERSION", "1.0.0")
