from __future__ import annotations

"""Вспомогательные утилиты общего назначения для upload_release."""

__all__ = ["substitute_placeholders", "archive_basename", "archive_prefix"]


def substitute_placeholders(text: str, *, tag: str, project: str) -> str:
    """Подставляет плейсхолдеры {TAG} и {PROJECT}.

    Оставляет строку без изменений, если плейсхолдеры отсутствуют.
    """
    return text.replace("{TAG}", tag).replace("{PROJECT}", project)


def archive_basename(project: str, tag: str) -> str:
    """Имя zip-архива: ``<project>-<tag>.zip``."""
    return substitute_placeholders("{PROJECT}-{TAG}.zip", tag=tag, project=project)


def archive_prefix(project: str, tag: str) -> str:
    """Каталог-префикс записей внутри архива: ``<project>-<tag>/``."""
    return substitute_placeholders("{PROJECT}-{TAG}/", tag=tag, project=project)
