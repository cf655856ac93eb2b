"""Environment configuration for the line logger."""

import os
from dataclasses import dataclass
from typing import Iterable, Optional

from dotenv import load_dotenv

from file_logger import FileLogger
from log_interface import LogFn

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}
SILENT_TOKEN = "silent"


def silent_requested(argv: Optional[Iterable[str]]) -> bool:
    """True when any argument equals ``silent``, ignoring case."""
    return any(arg.lower() == SILENT_TOKEN for arg in (argv or []))


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class LoggerSettings:
    use_gzip: bool = True
    append: bool = False
    silent: bool = False

    @staticmethod
    def from_env() -> "LoggerSettings":
        return LoggerSettings(
            use_gzip=_env_flag("FILE_LOGGER_GZIP", True),
            append=_env_flag("FILE_LOGGER_APPEND", False),
            silent=_env_flag("FILE_LOGGER_SILENT", False),
        )

    def create_logger(self, path: str, logger: LogFn = None) -> FileLogger:
        return FileLogger(
            path,
            use_gzip=self.use_gzip,
            append=self.append,
            silent=self.silent,
            logger=logger,
        )
