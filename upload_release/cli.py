"""upload-release: ставит тег, пакует исходники и создаёт GitHub-релиз.

Запуск (два эквивалентных варианта):
    upload-release [--tag v1.2.3] [--dry-run] [--no-draft] [--repo owner/name]
    # или
    python -m upload_release [--tag v1.2.3] [--dry-run]

Без ``--tag`` версия берётся из `bazel mod deps --output json`.
"""
from __future__ import annotations

import argparse
import sys

from .config import ReleaseOptions, load_config
from .errors import ReleaseError
from .pipeline import run_release
from .process import CommandRunner, SubprocessRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="upload-release",
        description="Создание git-тега, zip-архива исходников и GitHub-релиза",
    )
    parser.add_argument("--tag", default="", help="Git-тег релиза (по умолчанию — версия bazel-модуля)")
    parser.add_argument("--dry-run", action="store_true", help="не создавать GitHub-релиз, только показать команду")
    parser.add_argument(
        "--draft",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="создать релиз в состоянии draft (по умолчанию — из конфига, включено)",
    )
    parser.add_argument("--repo", default=None, help="репозиторий owner/name для gh; пустая строка — текущий")
    parser.add_argument("--config", default=None, help="путь к upload_release.toml")
    return parser


def main(argv: list[str] | None = None, runner: CommandRunner | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        options = ReleaseOptions.from_args(args, load_config(args.config))
        run_release(options, runner or SubprocessRunner())
    except ReleaseError as exc:
        # как и остальной вывод инструмента — в stdout
        print(exc)
        return 1
    return 0


def run(argv: list[str] | None = None) -> None:
    sys.exit(main(argv))


if __name__ == "__main__":
    run()
