"""Конвейер выпуска релиза.

Стадии выполняются строго последовательно:

1. определение тега (``--tag`` или версия из `bazel mod deps`);
2. `git tag <tag> --force`;
3. `git push <remote> tag <tag> --force`;
4. `git archive` в zip внутри временного каталога;
5. `gh release create` (или печать команды в режиме dry-run).

Ошибка любой стадии прерывает конвейер. Уже созданный и отправленный тег
не откатывается. Временный каталог удаляется в любом случае.
"""
from __future__ import annotations

import contextlib
from dataclasses import dataclass, field
from typing import Iterator

from .bazel import resolve_tag
from .config import ReleaseOptions
from .errors import ReleaseError
from .gh import build_release_command, publish_release
from .git import GitRepo
from .process import CommandRunner
from .utils import archive_basename, archive_prefix
from .workspace import temporary_workspace

__all__ = ["ReleaseResult", "run_release"]


@dataclass(slots=True)
class ReleaseResult:
    """Итог запуска."""

    tag: str
    archive_name: str
    command: list[str] = field(default_factory=list)
    published: bool = False  # False в режиме dry-run


@contextlib.contextmanager
def _stage(description: str) -> Iterator[None]:
    """Добавляет к ошибкам `ReleaseError` описание стадии."""
    try:
        yield
    except ReleaseError as exc:
        exc.add_context(description)
        raise


def run_release(options: ReleaseOptions, runner: CommandRunner) -> ReleaseResult:
    with _stage("Error getting default tag from bazel module"):
        tag = resolve_tag(options.tag, runner, options.bazel_target)
    print(f"[upload_release] Тег релиза: {tag}")

    with contextlib.ExitStack() as stack:
        with _stage("Failed to create temporary directory"):
            tmp_dir = stack.enter_context(temporary_workspace(f"{options.project_name}-release"))

        repo = GitRepo(runner)

        with _stage("Failed to create Git tag"):
            repo.tag(tag)

        with _stage("Failed to push Git tag"):
            repo.push_tag(tag, options.remote)

        archive_name = archive_basename(options.project_name, tag)
        archive_path = tmp_dir / archive_name
        with _stage("Failed to archive code"):
            repo.archive_zip(tag, archive_path, archive_prefix(options.project_name, tag))

        command = build_release_command(options, tag, archive_path)
        with _stage("Failed to create GitHub release"):
            published = publish_release(runner, command, dry_run=options.dry_run)

    if published:
        print(f"[upload_release] ✅ Релиз {tag} создан")
    return ReleaseResult(tag=tag, archive_name=archive_name, command=command, published=published)
