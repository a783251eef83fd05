from __future__ import annotations

"""Исключения upload_release.

Все ошибки наследуются от `ReleaseError`, чтобы `cli.main` мог одной веткой
`except` превратить их в код возврата 1. Стадии конвейера добавляют к ошибке
контекст (``add_context``), сохраняя исходный тип исключения.
"""

import shlex
from typing import Sequence

__all__ = [
    "ReleaseError",
    "ResolutionError",
    "CommandError",
    "FilesystemError",
    "ConfigError",
]


class ReleaseError(RuntimeError):
    """Базовое исключение upload_release."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.context: list[str] = []

    def add_context(self, context: str) -> "ReleaseError":
        """Добавляет внешний контекст (например, название стадии)."""
        self.context.insert(0, context)
        return self

    def __str__(self) -> str:
        return ": ".join([*self.context, self.message])


class ResolutionError(ReleaseError):
    """Не удалось определить тег релиза (bazel, JSON, пустая версия)."""


class FilesystemError(ReleaseError):
    """Ошибка работы с временным каталогом."""


class ConfigError(ReleaseError):
    """Некорректный или отсутствующий файл конфигурации."""


class CommandError(ReleaseError):
    """Внешняя команда завершилась с ненулевым кодом или не запустилась."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"command failed: {shlex.join(self.command)} (exit {returncode}); "
            f"command output: {stderr.strip()}"
        )
