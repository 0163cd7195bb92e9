# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared behaviour for tasks wrapping an external command-line tool."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from ..context import TaskContext
from ..errors import ConfigError
from ..interfaces import ProcessBuilderPort, ProcessFormatterPort
from ..results import TaskResult

ConfigT = TypeVar("ConfigT", bound=BaseModel)


def _describe_validation_error(task: str, exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        problems.append(f"{location}: {error['msg']}")
    return f"Invalid configuration for task '{task}': " + "; ".join(problems)


class ExternalTask(ABC, Generic[ConfigT]):
    """Base class for tasks that run an external tool.

    Subclasses declare :attr:`name` and :attr:`config_model` and implement
    :meth:`run`. Collaborators are injected so tests can substitute fakes for
    process execution and output formatting.
    """

    name: ClassVar[str]
    config_model: ClassVar[type[BaseModel]]

    def __init__(
        self,
        process_builder: ProcessBuilderPort,
        formatter: ProcessFormatterPort,
        config: ConfigT | Mapping[str, Any] | None = None,
    ) -> None:
        """Create the task.

        Args:
            process_builder: Port locating executables and building processes.
            formatter: Port rendering tool output.
            config: Resolved configuration model or raw option mapping.

        Raises:
            ConfigError: If ``config`` contains unknown options or invalid values.
        """

        self._process_builder = process_builder
        self._formatter = formatter
        self._config = self.resolve_config(config)

    @property
    def config(self) -> ConfigT:
        """Return the resolved, read-only task configuration."""

        return self._config

    @classmethod
    def resolve_config(cls, raw: ConfigT | Mapping[str, Any] | None) -> ConfigT:
        """Validate ``raw`` against :attr:`config_model`.

        Args:
            raw: Configuration model, option mapping, or ``None`` for defaults.

        Returns:
            ConfigT: Validated configuration.

        Raises:
            ConfigError: If validation fails.
        """

        if isinstance(raw, cls.config_model):
            return raw  # type: ignore[return-value]
        try:
            return cls.config_model.model_validate(dict(raw or {}))  # type: ignore[return-value]
        except ValidationError as exc:
            raise ConfigError(_describe_validation_error(cls.name, exc)) from exc

    @classmethod
    def config_defaults(cls) -> dict[str, Any]:
        """Return every option mapped to its default value."""

        return cls.config_model().model_dump()

    @abstractmethod
    def can_run_in_context(self, context: TaskContext) -> bool:
        """Return whether the task applies to ``context``."""

        raise NotImplementedError

    @abstractmethod
    def run(self, context: TaskContext) -> TaskResult:
        """Execute the task for ``context``.

        Args:
            context: Invocation context supplying candidate files.

        Returns:
            TaskResult: Outcome of the invocation. Tool failures are reported
            through the result rather than raised.
        """

        raise NotImplementedError


__all__ = ["ConfigT", "ExternalTask"]
