"""upload_release — выпуск GitHub-релиза с zip-архивом исходников по git-тегу."""

from .config import Config, ReleaseOptions, load_config
from .errors import CommandError, FilesystemError, ReleaseError, ResolutionError
from .pipeline import ReleaseResult, run_release

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ReleaseOptions",
    "load_config",
    "ReleaseError",
    "ResolutionError",
    "CommandError",
    "FilesystemError",
    "ReleaseResult",
    "run_release",
]
