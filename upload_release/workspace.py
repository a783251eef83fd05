from __future__ import annotations

"""Временный каталог для артефактов релиза."""

import contextlib
import pathlib
import shutil
import tempfile
from typing import Iterator

from .errors import FilesystemError

__all__ = ["temporary_workspace"]


@contextlib.contextmanager
def temporary_workspace(prefix: str = "upload-release") -> Iterator[pathlib.Path]:
    """Создаёт уникальный временный каталог и удаляет его при выходе из *with*.

    Каталог удаляется рекурсивно и при успехе, и при исключении в теле.
    """
    try:
        path = pathlib.Path(tempfile.mkdtemp(prefix=prefix))
    except OSError as exc:
        raise FilesystemError(str(exc)) from exc

    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
