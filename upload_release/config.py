"""Загрузка конфигурации upload_release.

Используется класс `Config` с дефолтными значениями.
Источник ищется в следующем порядке:

1. ``upload_release.toml`` в текущем каталоге;
2. ``pyproject.toml`` секция ``[tool.upload_release]``;
3. встроенные значения по умолчанию.

Параметры командной строки имеют приоритет над конфигом: из обоих
собирается `ReleaseOptions`, который и передаётся в конвейер.
"""

from __future__ import annotations

import argparse
import pathlib
import sys
from dataclasses import dataclass
from typing import Any, Iterator

import tomlkit  # type: ignore  # third-party
from packaging.version import InvalidVersion, Version
from tomlkit.exceptions import TOMLKitError

from .errors import ConfigError

__all__ = ["Config", "load_config", "ReleaseOptions"]

# ---------------------------------------------------------------------------
# Config dataclass-like Mapping
# ---------------------------------------------------------------------------


class Config(dict):
    """Словарь-обёртка с дефолтами и парсингом TOML."""

    _DEFAULTS: dict[str, Any] = {
        "project_name": "protobuf-javascript",
        "repo": "gonzojive/protobuf-javascript",
        "remote": "origin",
        "notes": "experimental version with bzlmod support.",
        "draft": True,
        "prerelease": True,  # True | False | "auto"
        "bazel_target": "",
        # служебное
        "dry_run": False,
    }

    # --- construction --------------------------------------------------

    def __init__(self, data: dict[str, Any] | None = None, *, source: str = "<default>") -> None:
        merged = dict(self._DEFAULTS)
        if data:
            # tomlkit-обёртки приводим к обычным python-типам
            merged.update(_unwrap(data))
        super().__init__(merged)
        self["_config_source"] = source

    # --- convenience accessors ----------------------------------------

    def __getattr__(self, item: str) -> Any:
        try:
            return self[item]
        except KeyError as exc:
            raise AttributeError(item) from exc

    def __repr__(self) -> str:
        return f"<Config {dict(self)!r} from {self['_config_source']}>"

    # ------------------------------------------------------------------
    # Parsing helpers
    # ------------------------------------------------------------------

    @classmethod
    def _iter_candidate_files(cls) -> Iterator[pathlib.Path]:
        root = pathlib.Path.cwd()
        yield root / "upload_release.toml"
        yield root / "pyproject.toml"

    @classmethod
    def _parse_toml(cls, path: pathlib.Path) -> dict[str, Any]:
        """Читает файл TOML.

        Для ``pyproject.toml`` возвращает секцию ``[tool.upload_release]``,
        для ``upload_release.toml`` — весь документ.
        """
        try:
            data: Any = tomlkit.parse(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, TOMLKitError) as exc:
            raise ConfigError(f"{path}: {exc}") from exc

        if path.name == "pyproject.toml":
            try:
                return data["tool"]["upload_release"]  # type: ignore[index]
            except KeyError:
                return {}
        return data

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, config_path: str | pathlib.Path | None = None) -> "Config":
        """Загружает конфиг из указанного пути или ищет кандидатов."""

        if config_path is not None:
            path = pathlib.Path(config_path)
            if not path.exists():
                raise ConfigError(f"Конфигурационный файл не найден: {path}")
            return cls(cls._parse_toml(path), source=str(path))

        # auto-discovery
        for candidate in cls._iter_candidate_files():
            if candidate.exists():
                data = cls._parse_toml(candidate)
                return cls(data, source=str(candidate.relative_to(pathlib.Path.cwd())))

        # ни одного файла – возвращаем конфиг по умолчанию
        print("[upload_release] Конфигурационный файл не найден – используются значения по умолчанию", file=sys.stderr)
        return cls()


def _expect(cfg: Config, key: str, kind: type) -> None:
    if not isinstance(cfg[key], kind):
        raise ConfigError(
            f"{key}: ожидается {kind.__name__}, получено {type(cfg[key]).__name__} "
            f"({cfg['_config_source']})"
        )


def _unwrap(data: Any) -> dict[str, Any]:
    if hasattr(data, "unwrap"):
        return data.unwrap()
    return dict(data)


# ---------------------------------------------------------------------------
# Module-level shortcut
# ---------------------------------------------------------------------------


def load_config(config_path: pathlib.Path | str | None = None) -> Config:
    return Config.load(config_path)


# ---------------------------------------------------------------------------
# Options for a single run
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ReleaseOptions:
    """Параметры одного запуска: конфиг, перекрытый аргументами CLI."""

    tag: str = ""
    dry_run: bool = False
    draft: bool = True
    repo: str = "gonzojive/protobuf-javascript"
    project_name: str = "protobuf-javascript"
    remote: str = "origin"
    notes: str = "experimental version with bzlmod support."
    prerelease: bool | str = True
    bazel_target: str = ""

    @classmethod
    def from_args(cls, args: argparse.Namespace, cfg: Config) -> "ReleaseOptions":
        """Собирает параметры; ``None`` в *args* означает «взять из конфига»."""

        def pick(name: str) -> Any:
            value = getattr(args, name, None)
            return cfg[name] if value is None else value

        for key in ("repo", "project_name", "remote", "notes", "bazel_target"):
            _expect(cfg, key, str)
        for key in ("draft", "dry_run"):
            _expect(cfg, key, bool)
        prerelease = cfg["prerelease"]
        if not isinstance(prerelease, bool) and prerelease != "auto":
            raise ConfigError(f"prerelease: ожидается true, false или \"auto\", получено {prerelease!r}")

        return cls(
            tag=args.tag or "",
            dry_run=args.dry_run or cfg["dry_run"],
            draft=pick("draft"),
            repo=pick("repo"),
            project_name=cfg["project_name"],
            remote=cfg["remote"],
            notes=cfg["notes"],
            prerelease=prerelease,
            bazel_target=cfg["bazel_target"],
        )

    def is_prerelease(self, tag: str) -> bool:
        """Нужно ли пометить релиз как pre-release.

        ``prerelease = "auto"`` — решение принимается по версии в теге
        (``v`` в начале отбрасывается): pre/dev-версии PEP 440 считаются
        pre-release, как и теги, которые не удалось разобрать.
        """
        if self.prerelease != "auto":
            return bool(self.prerelease)
        try:
            return Version(tag.removeprefix("v")).is_prerelease
        except InvalidVersion:
            return True
