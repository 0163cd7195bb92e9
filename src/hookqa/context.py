# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invocation contexts and the candidate file collection handed to tasks."""

from __future__ import annotations

import fnmatch
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath
from typing import Final

_REGEX_DELIMITERS: Final[dict[str, str]] = {"/": "/", "#": "#", "~": "~", "{": "}"}
_REGEX_FLAGS: Final[dict[str, re.RegexFlag]] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}
_GLOB_CHARS: Final[frozenset[str]] = frozenset("*?[")


class ContextKind(str, Enum):
    """Enumerate the run kinds a task can be invoked under."""

    RUN = "run"
    GIT_PRE_COMMIT = "pre-commit"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class PathPattern:
    """Match file paths against a regex, glob, or plain substring pattern.

    Patterns wrapped in a delimiter pair such as ``/src\\//`` or ``#^lib#i`` are
    compiled as regular expressions. Patterns carrying glob metacharacters are
    matched with :mod:`fnmatch`. Anything else matches when it appears inside
    the POSIX form of the path.
    """

    raw: str
    regex: re.Pattern[str] | None = None
    glob: bool = False

    @classmethod
    def parse(cls, raw: str) -> PathPattern:
        """Return a compiled pattern for ``raw``.

        Args:
            raw: Pattern text supplied by configuration.

        Returns:
            PathPattern: Matcher describing how ``raw`` is applied.
        """

        regex = _compile_delimited(raw)
        if regex is not None:
            return cls(raw=raw, regex=regex)
        return cls(raw=raw, glob=any(char in _GLOB_CHARS for char in raw))

    def matches(self, path: PurePath) -> bool:
        """Return whether ``path`` satisfies the pattern.

        Args:
            path: Candidate file path.

        Returns:
            bool: ``True`` when the path matches.
        """

        text = path.as_posix()
        if self.regex is not None:
            return self.regex.search(text) is not None
        if self.glob:
            return fnmatch.fnmatchcase(text, self.raw) or fnmatch.fnmatchcase(text, f"*/{self.raw}")
        return self.raw in text


def _compile_delimited(raw: str) -> re.Pattern[str] | None:
    if len(raw) < 3:
        return None
    closing = _REGEX_DELIMITERS.get(raw[0])
    if closing is None:
        return None
    end = raw.rfind(closing)
    if end <= 0:
        return None
    modifiers = raw[end + 1 :]
    if any(modifier not in _REGEX_FLAGS for modifier in modifiers):
        return None
    flags = 0
    for modifier in modifiers:
        flags |= _REGEX_FLAGS[modifier]
    try:
        return re.compile(raw[1:end], flags)
    except re.error:
        return None


def _compile_all(patterns: Iterable[str]) -> tuple[PathPattern, ...]:
    return tuple(PathPattern.parse(pattern) for pattern in patterns)


@dataclass(frozen=True, slots=True)
class FilesCollection(Sequence[Path]):
    """Ordered, immutable collection of candidate files.

    Every filter returns a new collection and keeps the original order.
    """

    files: tuple[Path, ...] = ()

    @classmethod
    def of(cls, files: Iterable[Path | str]) -> FilesCollection:
        """Build a collection from raw path values."""

        return cls(tuple(item if isinstance(item, Path) else Path(item) for item in files))

    def __iter__(self) -> Iterator[Path]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __getitem__(self, index: int) -> Path:  # type: ignore[override]
        return self.files[index]

    def extensions(self, extensions: Iterable[str]) -> FilesCollection:
        """Keep files whose suffix is one of ``extensions``.

        Args:
            extensions: Allowed extensions with or without a leading dot.

        Returns:
            FilesCollection: Files carrying an allowed extension.
        """

        allowed = {ext.lower().lstrip(".") for ext in extensions}
        return FilesCollection(tuple(path for path in self.files if path.suffix.lower().lstrip(".") in allowed))

    def paths(self, patterns: Sequence[str]) -> FilesCollection:
        """Keep files matching at least one of ``patterns``.

        Args:
            patterns: Whitelist patterns. An empty sequence keeps every file.

        Returns:
            FilesCollection: Files matching the whitelist.
        """

        if not patterns:
            return self
        compiled = _compile_all(patterns)
        return FilesCollection(
            tuple(path for path in self.files if any(pattern.matches(path) for pattern in compiled)),
        )

    def not_paths(self, patterns: Sequence[str]) -> FilesCollection:
        """Drop files matching any of ``patterns``.

        Args:
            patterns: Ignore patterns.

        Returns:
            FilesCollection: Files that match none of the patterns.
        """

        if not patterns:
            return self
        compiled = _compile_all(patterns)
        return FilesCollection(
            tuple(path for path in self.files if not any(pattern.matches(path) for pattern in compiled)),
        )

    def as_strings(self) -> list[str]:
        """Return the files as command-line ready strings."""

        return [str(path) for path in self.files]


@dataclass(frozen=True, slots=True)
class TaskContext:
    """Describe the run kind and the files a task was invoked with."""

    kind: ContextKind
    files: FilesCollection = field(default_factory=FilesCollection)

    @classmethod
    def run(cls, files: Iterable[Path | str] = ()) -> TaskContext:
        """Return a context for a full run over ``files``."""

        return cls(ContextKind.RUN, FilesCollection.of(files))

    @classmethod
    def pre_commit(cls, files: Iterable[Path | str] = ()) -> TaskContext:
        """Return a context for a git pre-commit run over the staged ``files``."""

        return cls(ContextKind.GIT_PRE_COMMIT, FilesCollection.of(files))

    @classmethod
    def other(cls, files: Iterable[Path | str] = ()) -> TaskContext:
        """Return a context of a kind no built-in task runs under."""

        return cls(ContextKind.OTHER, FilesCollection.of(files))

    def applicable_files(self) -> FilesCollection | None:
        """Return the files a lint task may inspect, or ``None`` for foreign contexts.

        Returns:
            FilesCollection | None: Candidate files for run and pre-commit
            contexts, ``None`` otherwise.
        """

        if self.kind in (ContextKind.RUN, ContextKind.GIT_PRE_COMMIT):
            return self.files
        return None


__all__ = ["ContextKind", "FilesCollection", "PathPattern", "TaskContext"]
