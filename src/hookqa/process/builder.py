# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate external tools and turn argument lists into runnable processes."""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from subprocess import CompletedProcess

from ..errors import CommandNotFoundError
from .arguments import ProcessArguments
from .runner import CommandOptions, run_command

CommandRunner = Callable[..., CompletedProcess[str]]


@dataclass(slots=True)
class Process:
    """A command waiting to run, and its captured result once it has."""

    arguments: ProcessArguments
    options: CommandOptions = field(default_factory=CommandOptions)
    runner: CommandRunner = run_command
    _completed: CompletedProcess[str] | None = field(default=None, init=False, repr=False)

    def run(self) -> Process:
        """Execute the command and capture its streams.

        Returns:
            Process: ``self`` to allow chaining.
        """

        self._completed = self.runner(self.arguments.as_list(), options=self.options)
        return self

    @property
    def command_line(self) -> str:
        """Return the command line as a developer would type it."""

        return self.arguments.command_line()

    @property
    def exit_code(self) -> int:
        """Return the exit status of the finished command."""

        return self._result().returncode

    @property
    def stdout(self) -> str:
        """Return captured standard output."""

        return self._result().stdout or ""

    @property
    def stderr(self) -> str:
        """Return captured standard error."""

        return self._result().stderr or ""

    def is_successful(self) -> bool:
        """Return whether the command exited with status ``0``."""

        return self.exit_code == 0

    def _result(self) -> CompletedProcess[str]:
        if self._completed is None:
            raise RuntimeError(f"process '{self.arguments.executable}' has not been run")
        return self._completed


class ProcessBuilder:
    """Resolve tool executables and build :class:`Process` instances."""

    def __init__(
        self,
        *,
        bin_dirs: Sequence[Path] = (),
        cwd: Path | None = None,
        timeout: float | None = None,
        runner: CommandRunner = run_command,
    ) -> None:
        """Create a builder.

        Args:
            bin_dirs: Directories searched before ``PATH``, such as ``vendor/bin``.
            cwd: Working directory for spawned processes.
            timeout: Optional per-process timeout in seconds.
            runner: Callable executing argument lists; defaults to :func:`run_command`.
        """

        self._bin_dirs = tuple(bin_dirs)
        self._options = CommandOptions(cwd=cwd, check=False, capture_output=True, text=True, timeout=timeout)
        self._runner = runner

    def locate(self, command: str) -> Path:
        """Return the absolute path of ``command``.

        Args:
            command: Executable name.

        Returns:
            Path: Resolved executable path.

        Raises:
            CommandNotFoundError: If neither the extra directories nor ``PATH``
                provide the executable.
        """

        for directory in self._bin_dirs:
            candidate = directory / command
            if candidate.is_file() and os.access(candidate, os.X_OK):
                return candidate.resolve()
        resolved = shutil.which(command)
        if resolved is None:
            raise CommandNotFoundError(command, searched=[str(directory) for directory in self._bin_dirs])
        return Path(resolved)

    def create_arguments_for_command(self, command: str) -> ProcessArguments:
        """Return an argument list headed by the located ``command``.

        Raises:
            CommandNotFoundError: If the executable cannot be located.
        """

        return ProcessArguments.for_command(self.locate(command))

    def build_process(self, arguments: ProcessArguments) -> Process:
        """Return a :class:`Process` that will run ``arguments``."""

        return Process(arguments=arguments, options=self._options, runner=self._runner)


__all__ = ["CommandRunner", "Process", "ProcessBuilder"]
