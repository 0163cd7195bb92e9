# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process construction and execution helpers."""

from __future__ import annotations

from .arguments import ArgumentValue, ProcessArguments
from .builder import CommandRunner, Process, ProcessBuilder
from .runner import TIMEOUT_EXIT_CODE, CommandOptions, run_command

__all__ = [
    "ArgumentValue",
    "CommandOptions",
    "CommandRunner",
    "Process",
    "ProcessArguments",
    "ProcessBuilder",
    "TIMEOUT_EXIT_CODE",
    "run_command",
]
