# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import pytest

from hookqa.errors import CommandNotFoundError
from hookqa.process import ProcessArguments


@dataclass
class FakeProcess:
    """In-memory stand-in for :class:`hookqa.process.Process`."""

    exit_code: int = 0
    stdout: str = ""
    stderr: str = ""
    arguments: ProcessArguments = field(default_factory=ProcessArguments)
    ran: bool = False

    @property
    def command_line(self) -> str:
        return " ".join(self.arguments)

    def run(self) -> FakeProcess:
        self.ran = True
        return self

    def is_successful(self) -> bool:
        return self.exit_code == 0


@dataclass
class FakeProcessBuilder:
    """Record lookups and builds while handing out scripted processes."""

    processes: dict[str, FakeProcess] = field(default_factory=dict)
    missing: set[str] = field(default_factory=set)
    located: list[str] = field(default_factory=list)
    built: list[list[str]] = field(default_factory=list)

    def will_return(self, command: str, process: FakeProcess) -> FakeProcess:
        self.processes[command] = process
        return process

    def create_arguments_for_command(self, command: str) -> ProcessArguments:
        self.located.append(command)
        if command in self.missing:
            raise CommandNotFoundError(command)
        return ProcessArguments.for_command(command)

    def build_process(self, arguments: ProcessArguments) -> FakeProcess:
        self.built.append(arguments.as_list())
        process = self.processes[arguments.executable]
        process.arguments = arguments
        return process

    def arguments_for(self, command: str) -> list[str]:
        for built in self.built:
            if built[0] == command:
                return built[1:]
        raise AssertionError(f"{command} was never built")


@dataclass
class FakeFormatter:
    """Formatter returning canned text and fixable files."""

    output: str = "nope"
    fixable: Sequence[str] = ()
    manual_fix_output: str = "fixer-command"
    formatted: list[FakeProcess] = field(default_factory=list)
    manual_fix_requests: list[FakeProcess] = field(default_factory=list)

    @property
    def suggested_files(self) -> Sequence[str]:
        return tuple(self.fixable)

    def format(self, process: FakeProcess) -> str:
        self.formatted.append(process)
        return self.output

    def format_manual_fixing_output(self, fixer_process: FakeProcess) -> str:
        self.manual_fix_requests.append(fixer_process)
        return self.manual_fix_output


@pytest.fixture
def make_process() -> Callable[..., FakeProcess]:
    """Return a factory for scripted processes."""

    def _make(exit_code: int = 0, stdout: str = "", stderr: str = "") -> FakeProcess:
        return FakeProcess(exit_code=exit_code, stdout=stdout, stderr=stderr)

    return _make


@pytest.fixture
def process_builder() -> FakeProcessBuilder:
    return FakeProcessBuilder()


@pytest.fixture
def formatter() -> FakeFormatter:
    return FakeFormatter()
