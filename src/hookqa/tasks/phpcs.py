# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""PHP_CodeSniffer task with optional phpcbf fix suggestions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StringConstraints, field_validator

from ..context import FilesCollection, TaskContext
from ..errors import CommandNotFoundError
from ..interfaces import ProcessLike
from ..process.arguments import ProcessArguments
from ..results import TaskResult
from .base import ExternalTask

REPORT_JSON_FLAG: Final[str] = "--report-json"
FIXER_NOT_FOUND_NOTE: Final[str] = "Info: phpcbf could not get found. Please consider to install it for suggestions."


Option = Annotated[str, StringConstraints(min_length=1)]
Level = Annotated[StrictInt, Field(ge=0)]


class PhpcsConfig(BaseModel):
    """Options accepted by the phpcs task.

    Integer options are strict, so booleans are rejected rather than read as
    ``0``/``1``. Strings, including list items, must be non-empty.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    standard: tuple[Option, ...] = ()
    tab_width: Level | None = None
    encoding: Option | None = None
    whitelist_patterns: tuple[Option, ...] = ()
    ignore_patterns: tuple[Option, ...] = ()
    sniffs: tuple[Option, ...] = ()
    severity: Level | None = None
    error_severity: Level | None = None
    warning_severity: Level | None = None
    triggered_by: tuple[Option, ...] = ("php",)
    report: Option = "full"
    report_width: Level | None = None
    exclude: tuple[Option, ...] = ()

    @field_validator(
        "standard",
        "whitelist_patterns",
        "ignore_patterns",
        "sniffs",
        "triggered_by",
        "exclude",
        mode="before",
    )
    @classmethod
    def _coerce_list(cls, value: object) -> object:
        """Accept a bare string wherever a list of strings is expected."""

        if isinstance(value, str):
            return (value,)
        return value


class FlagKind(str, Enum):
    """How an option value turns into a command-line flag."""

    VALUE = "value"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class OptionFlag:
    """Map one configuration option onto one command-line flag.

    Optional flags are left out when their option is unset or empty; required
    flags are always emitted.
    """

    option: str
    template: str
    kind: FlagKind = FlagKind.VALUE
    required: bool = False

    def apply(self, arguments: ProcessArguments, config: PhpcsConfig) -> None:
        """Append the flag for ``config`` to ``arguments`` when it applies."""

        value = getattr(config, self.option)
        if self.kind is FlagKind.LIST:
            if self.required:
                arguments.add_required_argument(self.template, ",".join(value))
            else:
                arguments.add_optional_comma_separated_argument(self.template, value)
        elif self.required:
            arguments.add_required_argument(self.template, value)
        else:
            arguments.add_optional_argument(self.template, value)


# Order is significant: flags are emitted exactly in this sequence.
PHPCS_FLAGS: Final[tuple[OptionFlag, ...]] = (
    OptionFlag("standard", "--standard={}", FlagKind.LIST),
    OptionFlag("triggered_by", "--extensions={}", FlagKind.LIST, required=True),
    OptionFlag("tab_width", "--tab-width={}"),
    OptionFlag("encoding", "--encoding={}"),
    OptionFlag("report", "--report={}", required=True),
    OptionFlag("report_width", "--report-width={}"),
    OptionFlag("severity", "--severity={}"),
    OptionFlag("error_severity", "--error-severity={}"),
    OptionFlag("warning_severity", "--warning-severity={}"),
    OptionFlag("sniffs", "--sniffs={}", FlagKind.LIST),
    OptionFlag("ignore_patterns", "--ignore={}", FlagKind.LIST),
    OptionFlag("exclude", "--exclude={}", FlagKind.LIST),
)

_FIXER_OPTIONS: Final[frozenset[str]] = frozenset(
    {"standard", "triggered_by", "tab_width", "encoding", "sniffs", "ignore_patterns", "exclude"},
)
PHPCBF_FLAGS: Final[tuple[OptionFlag, ...]] = tuple(flag for flag in PHPCS_FLAGS if flag.option in _FIXER_OPTIONS)


def _fixer_failure_note(fixer: ProcessLike) -> str:
    details = (fixer.stderr or fixer.stdout).strip()
    note = f"Info: phpcbf could not apply the suggested fixes (exit {fixer.exit_code})."
    return f"{note}\n{details}" if details else note


class Phpcs(ExternalTask[PhpcsConfig]):
    """Run phpcs over the candidate files and suggest phpcbf fixes."""

    name: ClassVar[str] = "phpcs"
    config_model: ClassVar[type[BaseModel]] = PhpcsConfig
    command: ClassVar[str] = "phpcs"
    fixer_command: ClassVar[str] = "phpcbf"

    def can_run_in_context(self, context: TaskContext) -> bool:
        return context.applicable_files() is not None

    def filter_files(self, context: TaskContext) -> FilesCollection:
        """Return the files phpcs should inspect for ``context``.

        Args:
            context: Invocation context.

        Returns:
            FilesCollection: Files restricted by extension, whitelist, and
            ignore patterns. Empty for contexts the task does not run under.
        """

        files = context.applicable_files()
        if files is None:
            return FilesCollection()
        cfg = self.config
        return files.extensions(cfg.triggered_by).paths(cfg.whitelist_patterns).not_paths(cfg.ignore_patterns)

    def build_arguments(self, files: FilesCollection) -> ProcessArguments:
        """Return the phpcs argument list for ``files``.

        Raises:
            CommandNotFoundError: If phpcs cannot be located.
        """

        arguments = self._process_builder.create_arguments_for_command(self.command)
        for flag in PHPCS_FLAGS:
            flag.apply(arguments, self.config)
        arguments.add(REPORT_JSON_FLAG)
        arguments.add_files(files)
        return arguments

    def build_fixer_arguments(self, files: Sequence[str]) -> ProcessArguments:
        """Return the phpcbf argument list for the suggested ``files``.

        Raises:
            CommandNotFoundError: If phpcbf cannot be located.
        """

        arguments = self._process_builder.create_arguments_for_command(self.fixer_command)
        for flag in PHPCBF_FLAGS:
            flag.apply(arguments, self.config)
        arguments.add_files(files)
        return arguments

    def run(self, context: TaskContext) -> TaskResult:
        if not self.can_run_in_context(context):
            return TaskResult.skipped(self.name, context)
        files = self.filter_files(context)
        if not files:
            return TaskResult.skipped(self.name, context)

        process = self._process_builder.build_process(self.build_arguments(files)).run()
        if process.is_successful():
            return TaskResult.passed(self.name, context)

        output = self._formatter.format(process)
        suggested = list(self._formatter.suggested_files)
        if not suggested:
            return TaskResult.failed(self.name, context, output)

        try:
            fixer_arguments = self.build_fixer_arguments(suggested)
        except CommandNotFoundError:
            return TaskResult.failed(self.name, context, f"{output}\n{FIXER_NOT_FOUND_NOTE}")

        fixer = self._process_builder.build_process(fixer_arguments).run()
        if not fixer.is_successful():
            return TaskResult.failed(self.name, context, f"{output}\n{_fixer_failure_note(fixer)}")

        return TaskResult.failed_with_fix_suggestion(
            self.name,
            context,
            output + self._formatter.format_manual_fixing_output(fixer),
            fixer.command_line,
        )


__all__ = [
    "FIXER_NOT_FOUND_NOTE",
    "FlagKind",
    "OptionFlag",
    "PHPCBF_FLAGS",
    "PHPCS_FLAGS",
    "Phpcs",
    "PhpcsConfig",
    "REPORT_JSON_FLAG",
]
