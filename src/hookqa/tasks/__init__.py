# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tasks runnable from git hooks."""

from __future__ import annotations

from .base import ExternalTask
from .phpcs import Phpcs, PhpcsConfig

__all__ = ["ExternalTask", "Phpcs", "PhpcsConfig"]
