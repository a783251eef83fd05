from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Sequence

import pytest

from upload_release.errors import CommandError


class FakeRunner:
    """Записывает команды вместо запуска; по запросу падает на заданной."""

    def __init__(
        self,
        *,
        outputs: dict[str, str] | None = None,
        fail_on: tuple[str, ...] | None = None,
    ) -> None:
        self.calls: list[list[str]] = []
        self.outputs = outputs or {}
        self.fail_on = fail_on

    def run(self, args: Sequence[str], *, capture_stdout: bool = False) -> str:
        cmd = list(args)
        self.calls.append(cmd)
        if self.fail_on is not None and tuple(cmd[: len(self.fail_on)]) == self.fail_on:
            raise CommandError(cmd, 1, "fatal: boom\n")
        if capture_stdout:
            return self.outputs.get(cmd[0], "")
        return ""

    def programs(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def in_tmp(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    # без upload_release.toml/pyproject.toml в cwd используются дефолты
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def created_dirs(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    created: list[str] = []
    real_mkdtemp = tempfile.mkdtemp

    def spy(*args, **kwargs):
        path = real_mkdtemp(*args, **kwargs)
        created.append(path)
        return path

    monkeypatch.setattr(tempfile, "mkdtemp", spy)
    return created
