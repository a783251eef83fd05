from __future__ import annotations

"""Фасад GitRepo поверх `CommandRunner`.

Позволяет писать:

    repo = GitRepo(runner)
    repo.tag("v1.0.0").push_tag("v1.0.0").archive_zip("v1.0.0", out, prefix)

Все ошибки git поднимаются как `CommandError` из исполнителя.
"""

import pathlib

from .process import CommandRunner

__all__ = ["GitRepo"]


class GitRepo:  # noqa: D101 – simple façade
    def __init__(self, runner: CommandRunner) -> None:  # noqa: D401
        self.runner = runner

    def run(self, *args: str) -> None:
        """Выполняет `git <args>`."""
        self.runner.run(["git", *args])

    # ---------------------------------------------------------------------
    # chainable helpers
    # ---------------------------------------------------------------------

    def tag(self, name: str, *, force: bool = True) -> "GitRepo":  # noqa: D401
        # тег ставится на текущий HEAD; существующий тег перезаписывается
        self.run("tag", name, *(["--force"] if force else []))
        return self

    def push_tag(self, name: str, remote: str = "origin", *, force: bool = True) -> "GitRepo":  # noqa: D401
        self.run("push", remote, "tag", name, *(["--force"] if force else []))
        return self

    def archive_zip(self, ref: str, output: pathlib.Path, prefix: str) -> "GitRepo":
        """Упаковывает дерево *ref* в zip; все пути внутри начинаются с *prefix*."""
        self.run("archive", "--format", "zip", "--output", str(output), "--prefix", prefix, ref)
        return self
