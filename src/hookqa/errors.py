# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared across hookqa modules."""

from __future__ import annotations

from collections.abc import Sequence


class HookQAError(Exception):
    """Base class for errors raised by hookqa."""


class ConfigError(HookQAError):
    """Raised when task configuration input is invalid."""


class CommandNotFoundError(HookQAError, RuntimeError):
    """Raised when an external executable cannot be located."""

    def __init__(self, command: str, *, searched: Sequence[str] = ()) -> None:
        """Initialise the error for ``command``.

        Args:
            command: Executable name that could not be resolved.
            searched: Extra directories inspected before falling back to ``PATH``.
        """

        locations = ", ".join([*searched, "PATH"])
        super().__init__(f"Executable '{command}' was not found on {locations}")
        self.command = command
        self.searched = tuple(searched)


class SubprocessExecutionError(HookQAError, RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


__all__ = [
    "CommandNotFoundError",
    "ConfigError",
    "HookQAError",
    "SubprocessExecutionError",
]
