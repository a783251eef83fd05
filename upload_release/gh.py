from __future__ import annotations

"""Публикация релиза через GitHub CLI (`gh release create`)."""

import pathlib

from .config import ReleaseOptions
from .process import CommandRunner, format_command
from .utils import substitute_placeholders

__all__ = ["build_release_command", "publish_release"]


def build_release_command(options: ReleaseOptions, tag: str, asset: pathlib.Path) -> list[str]:
    """Собирает аргументы `gh release create` с архивом *asset* в качестве вложения.

    Без ``options.repo`` флаг ``--repo`` не передаётся, и gh берёт
    репозиторий текущего каталога.
    """
    args = ["gh"]
    if options.repo:
        args += ["--repo", options.repo]
    args += [
        "release", "create",
        tag,
        str(asset),
        "--verify-tag",
        "--title", tag,
        "--notes", substitute_placeholders(options.notes, tag=tag, project=options.project_name),
    ]
    if options.is_prerelease(tag):
        args.append("--prerelease")
    if options.draft:
        args.append("--draft")
    return args


def publish_release(runner: CommandRunner, command: list[str], *, dry_run: bool) -> bool:
    """Выполняет *command* или, в режиме dry-run, только печатает его.

    Возвращает True, если команда действительно была выполнена.
    """
    if dry_run:
        print("SKIPPING RELEASE -- GitHub release command would be:")
        print("  " + format_command(command))
        return False

    runner.run(command)
    return True
