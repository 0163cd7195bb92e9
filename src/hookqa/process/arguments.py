# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordered argument list used to describe external tool invocations."""

from __future__ import annotations

import shlex
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

ArgumentValue = str | int | float | Path


def _render(value: ArgumentValue) -> str:
    if isinstance(value, Path):
        return str(value)
    return f"{value}"


@dataclass(slots=True)
class ProcessArguments:
    """Accumulate command-line arguments in insertion order.

    Templates use ``str.format`` with a single positional placeholder, for
    example ``"--report={}"``.
    """

    values: list[str] = field(default_factory=list)

    @classmethod
    def for_command(cls, executable: str | Path) -> ProcessArguments:
        """Return a collection whose first argument is ``executable``."""

        return cls([str(executable)])

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProcessArguments):
            return self.values == other.values
        if isinstance(other, (list, tuple)):
            return self.values == list(other)
        return NotImplemented

    @property
    def executable(self) -> str:
        """Return the command heading the argument list.

        Raises:
            ValueError: If the collection is empty.
        """

        if not self.values:
            raise ValueError("argument list has no executable")
        return self.values[0]

    def add(self, argument: str) -> None:
        """Append ``argument`` verbatim."""

        self.values.append(argument)

    def add_required_argument(self, template: str, value: ArgumentValue) -> None:
        """Append ``template`` rendered with ``value``.

        Args:
            template: Format template carrying one placeholder.
            value: Value substituted into the template.

        Raises:
            ValueError: If ``value`` is an empty string.
        """

        if isinstance(value, str) and not value:
            raise ValueError(f"missing required value for '{template}'")
        self.values.append(template.format(_render(value)))

    def add_optional_argument(self, template: str, value: ArgumentValue | None) -> None:
        """Append ``template`` rendered with ``value`` when a value is present.

        Args:
            template: Format template carrying one placeholder.
            value: Optional value; ``None`` and empty strings emit nothing.
        """

        if value is None or (isinstance(value, str) and not value):
            return
        self.values.append(template.format(_render(value)))

    def add_optional_comma_separated_argument(
        self,
        template: str,
        values: Sequence[ArgumentValue],
    ) -> None:
        """Append ``template`` rendered with the comma-joined ``values`` when non-empty.

        Args:
            template: Format template carrying one placeholder.
            values: Values joined with ``,``; an empty sequence emits nothing.
        """

        if not values:
            return
        self.values.append(template.format(",".join(_render(item) for item in values)))

    def add_files(self, files: Iterable[Path | str]) -> None:
        """Append each of ``files`` as its own argument, preserving order."""

        self.values.extend(str(path) for path in files)

    def as_list(self) -> list[str]:
        """Return a copy of the arguments."""

        return list(self.values)

    def command_line(self) -> str:
        """Return the arguments rendered as a POSIX shell command line."""

        return shlex.join(self.values)


__all__ = ["ArgumentValue", "ProcessArguments"]
