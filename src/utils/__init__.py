# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
"""

from src.utils.logging import get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
]
