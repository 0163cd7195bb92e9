# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Capability protocols injected into tasks."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .process.arguments import ProcessArguments


@runtime_checkable
class ProcessLike(Protocol):
    """Expose the lifecycle and captured streams of an external command."""

    @property
    @abstractmethod
    def command_line(self) -> str:
        """Return the rendered command line.

        Returns:
            str: Command line suitable for copy and paste into a shell.
        """

        raise NotImplementedError

    @property
    @abstractmethod
    def exit_code(self) -> int:
        """Return the exit status once the command has run.

        Returns:
            int: Process exit status.
        """

        raise NotImplementedError

    @property
    @abstractmethod
    def stdout(self) -> str:
        """Return captured standard output.

        Returns:
            str: Text written to stdout.
        """

        raise NotImplementedError

    @property
    @abstractmethod
    def stderr(self) -> str:
        """Return captured standard error.

        Returns:
            str: Text written to stderr.
        """

        raise NotImplementedError

    @abstractmethod
    def run(self) -> ProcessLike:
        """Execute the command synchronously.

        Returns:
            ProcessLike: The finished process.
        """

        raise NotImplementedError

    @abstractmethod
    def is_successful(self) -> bool:
        """Return whether the command exited with status ``0``.

        Returns:
            bool: ``True`` on a zero exit status.
        """

        raise NotImplementedError


@runtime_checkable
class ProcessBuilderPort(Protocol):
    """Locate executables and turn argument lists into processes."""

    @abstractmethod
    def create_arguments_for_command(self, command: str) -> ProcessArguments:
        """Return an argument list headed by the located ``command``.

        Args:
            command: Executable name.

        Returns:
            ProcessArguments: Arguments starting with the executable path.

        Raises:
            CommandNotFoundError: If the executable cannot be located.
        """

        raise NotImplementedError

    @abstractmethod
    def build_process(self, arguments: ProcessArguments) -> ProcessLike:
        """Return a process ready to run ``arguments``.

        Args:
            arguments: Complete argument list including the executable.

        Returns:
            ProcessLike: Process that has not been started yet.
        """

        raise NotImplementedError


@runtime_checkable
class ProcessFormatterPort(Protocol):
    """Turn finished tool processes into user-facing text."""

    @property
    @abstractmethod
    def suggested_files(self) -> Sequence[str]:
        """Return files the last formatted report marked as auto-fixable.

        Returns:
            Sequence[str]: File paths in report order.
        """

        raise NotImplementedError

    @abstractmethod
    def format(self, process: ProcessLike) -> str:
        """Return diagnostic text for ``process`` and refresh :attr:`suggested_files`.

        Args:
            process: Finished primary tool process.

        Returns:
            str: Human-readable diagnostic output.
        """

        raise NotImplementedError

    @abstractmethod
    def format_manual_fixing_output(self, fixer_process: ProcessLike) -> str:
        """Return instructions for running ``fixer_process`` by hand.

        Args:
            fixer_process: Fixer process whose command line is shown.

        Returns:
            str: Rendered instructions.
        """

        raise NotImplementedError


__all__ = ["ProcessBuilderPort", "ProcessFormatterPort", "ProcessLike"]
