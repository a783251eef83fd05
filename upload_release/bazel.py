"""Определение версии модуля через `bazel mod deps --output json`.

Из графа зависимостей нужен только ``version`` корневого узла: он становится
тегом релиза, если ``--tag`` не указан явно.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .errors import CommandError, ResolutionError
from .process import CommandRunner

__all__ = ["DepsNode", "parse_deps_json", "bazel_mod_deps", "resolve_tag"]


@dataclass(slots=True)
class DepsNode:
    """Узел графа зависимостей bazel (формат ``--output json``)."""

    key: str = ""
    name: str = ""
    version: str = ""
    dependencies: list["DepsNode"] = field(default_factory=list)
    indirect_dependencies: list["DepsNode"] = field(default_factory=list)
    cycles: list[Any] = field(default_factory=list)  # структура не используется
    root: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "DepsNode":
        if not isinstance(data, dict):
            raise ResolutionError(f"expected JSON object, got {type(data).__name__}")

        def _str(key: str) -> str:
            value = data.get(key)
            if value is None:  # отсутствует или null
                return ""
            if not isinstance(value, str):
                raise ResolutionError(f"field {key!r} must be a string")
            return value

        def _list(key: str) -> list[Any]:
            value = data.get(key)
            if value is None:
                return []
            if not isinstance(value, list):
                raise ResolutionError(f"field {key!r} must be a list")
            return value

        root = data.get("root")
        if root is None:
            root = False
        if not isinstance(root, bool):
            raise ResolutionError("field 'root' must be a boolean")

        return cls(
            key=_str("key"),
            name=_str("name"),
            version=_str("version"),
            dependencies=[cls.from_dict({} if d is None else d) for d in _list("dependencies")],
            indirect_dependencies=[cls.from_dict({} if d is None else d) for d in _list("indirectDependencies")],
            cycles=_list("cycles"),
            root=root,
        )


def parse_deps_json(text: str) -> DepsNode:
    """Разбирает вывод ``bazel mod deps --output json``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResolutionError(f"Error parsing JSON: {exc}") from exc
    return DepsNode.from_dict(data)


def bazel_mod_deps(runner: CommandRunner, target: str = "") -> DepsNode:
    cmd = ["bazel", "mod", "deps", "--output", "json"]
    if target:
        cmd.append(target)
    try:
        output = runner.run(cmd, capture_stdout=True)
    except CommandError as exc:
        raise ResolutionError(f"Error executing command: {exc}") from exc
    return parse_deps_json(output)


def resolve_tag(explicit: str, runner: CommandRunner, target: str = "") -> str:
    """Возвращает тег релиза.

    Непустой *explicit* используется как есть, bazel при этом не вызывается.
    Иначе берётся ``version`` из графа зависимостей; пустая версия — ошибка.
    """
    if explicit:
        return explicit

    node = bazel_mod_deps(runner, target)
    if not node.version:
        raise ResolutionError(f"module {node.name or node.key or '<root>'} has no version")
    return node.version
