"""Запуск внешних команд (git, bazel, gh) через subprocess."""
from __future__ import annotations

import pathlib
import shlex
import subprocess
import sys
from typing import Optional, Protocol, Sequence

from .errors import CommandError

__all__ = ["CommandRunner", "SubprocessRunner", "format_command"]


def format_command(args: Sequence[str]) -> str:
    """Строка команды в виде, пригодном для копирования в shell."""
    return shlex.join(list(args))


class CommandRunner(Protocol):
    """Узкий интерфейс исполнителя команд.

    Реальная реализация — `SubprocessRunner`; в тестах подставляется фейк,
    который только записывает вызовы.
    """

    def run(self, args: Sequence[str], *, capture_stdout: bool = False) -> str:
        ...


class SubprocessRunner:
    """Выполняет команды в каталоге *cwd* (по умолчанию — текущий).

    Перед запуском печатает командную строку. stdout потомка выводится в
    терминал как есть (или захватывается при ``capture_stdout=True``),
    stderr всегда собирается в буфер и попадает в `CommandError`.
    """

    def __init__(self, cwd: str | pathlib.Path | None = None) -> None:
        self.cwd: Optional[pathlib.Path] = pathlib.Path(cwd) if cwd is not None else None

    def run(self, args: Sequence[str], *, capture_stdout: bool = False) -> str:
        cmd = list(args)
        print(f"Running command: {format_command(cmd)}")
        sys.stdout.flush()  # чтобы строка не оказалась после вывода потомка

        kwargs = {
            "text": True,
            "encoding": "utf-8",
            "errors": "replace",
            "check": False,
            "stderr": subprocess.PIPE,
            "stdout": subprocess.PIPE if capture_stdout else None,
        }
        if self.cwd is not None:
            kwargs["cwd"] = str(self.cwd)

        try:
            proc = subprocess.run(cmd, **kwargs)  # type: ignore[arg-type]
        except OSError as exc:
            raise CommandError(cmd, -1, str(exc)) from exc

        if proc.returncode != 0:
            raise CommandError(cmd, proc.returncode, proc.stderr or "")
        return proc.stdout if capture_stdout else ""
