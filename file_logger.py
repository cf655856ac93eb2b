import gzip
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

from log_errors import LogError, LogErrorKind
from log_interface import GZ_SUFFIX, LogFn, format_line, has_gz_suffix
from log_sinks import COMPRESSION_LEVEL, PlainFileSink, open_sink

CHUNK_SIZE = 512 * 1024
DIRECTORY_MODE = 0o755


class FileLogger:
    """Line logger that writes to a lazily opened file and mirrors to stdout.

    The file is only created by the first ``write``. With ``use_gzip`` the
    plain file is compressed into ``<path>.gz`` on ``close``, unless lines are
    appended to an existing compressed file, in which case they are written
    compressed directly.
    """

    def __init__(
        self,
        path: str,
        use_gzip: bool = True,
        append: bool = False,
        silent: bool = False,
        logger: LogFn = None,
    ):
        self.path = path
        self.use_gzip = use_gzip
        self.append = append
        self.silent = silent
        self._logger = logger

        self._sink: Optional[PlainFileSink] = None
        self._errors: List[LogError] = []
        self._write_count = 0
        self._existed = bool(path) and os.path.exists(path)
        self._write_gz = use_gzip and append and self._existed

        if not self._write_gz and has_gz_suffix(self.path):
            self.path = self.path[: -len(GZ_SUFFIX)]

    @property
    def write_count(self) -> int:
        return self._write_count

    @property
    def write_compressed_directly(self) -> bool:
        return self._write_gz

    @property
    def file_existed_at_construction(self) -> bool:
        return self._existed

    @property
    def last_error(self) -> Optional[LogError]:
        return self._errors[-1] if self._errors else None

    def __enter__(self) -> "FileLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger(f"[FileLogger] {message}")

    def _fail(self, kind: LogErrorKind, message: str) -> bool:
        self._errors.append(LogError(kind, message))
        self._log(message)
        return False

    def _open(self) -> bool:
        if not self.path:
            return self._fail(
                LogErrorKind.DIRECTORY_RESOLUTION,
                "directory name cannot be determined",
            )

        directory = Path(os.path.dirname(self.path) or ".")
        if not directory.is_dir():
            try:
                _make_dirs(directory)
            except OSError:
                return self._fail(
                    LogErrorKind.DIRECTORY_CREATE,
                    f"could not create folder '{directory}'",
                )

        try:
            self._sink = open_sink(self.path, self.append, self._write_gz)
        except OSError:
            return self._fail(
                LogErrorKind.OPEN,
                f"could not open file '{self.path}' for writing",
            )
        self._log(f"Opened {self.path}")
        return True

    def write(self, text: str, add_newline: bool = True, add_timestamp: bool = True) -> bool:
        if self._sink is None and not self._open():
            return False

        line = format_line(text, add_newline, add_timestamp)
        if not self.silent:
            print(line, end="")

        try:
            self._sink.write(line)
        except (OSError, ValueError):
            return self._fail(LogErrorKind.WRITE, f"could not write text '{line}'")

        self._write_count += 1
        return True

    def close(self) -> bool:
        if self._sink is None:
            return True

        try:
            self._sink.close()
        except OSError:
            return self._fail(LogErrorKind.CLOSE, "could not close file")
        self._sink = None

        if self._write_count == 0 and not self._existed and os.path.exists(self.path):
            self._log(f"Nothing was written, removing {self.path}")
            try:
                os.remove(self.path)
            except OSError:
                return self._fail(
                    LogErrorKind.CLOSE, f"could not delete file '{self.path}'"
                )
        elif self.use_gzip and not self._write_gz:
            return self._gzip()

        return True

    def set_silent(self, silent: bool = True) -> None:
        self.silent = silent

    def get_errors(self) -> List[str]:
        return [error.message for error in self._errors]

    def _gzip(self) -> bool:
        """Compress the finished plain file into ``<path>.gz``.

        The compressed copy is moved into place before the plain file is
        removed; if the move fails the plain file is kept and the temporary
        file is discarded.
        """
        source = self.path
        destination = source if has_gz_suffix(source) else source + GZ_SUFFIX

        try:
            fd, temp = tempfile.mkstemp(suffix=GZ_SUFFIX)
            os.close(fd)
        except OSError:
            return self._fail(
                LogErrorKind.COMPRESSION, f"could not compress file '{source}'"
            )

        try:
            with open(source, "rb") as f_in, gzip.open(
                temp, "wb", compresslevel=COMPRESSION_LEVEL
            ) as f_out:
                shutil.copyfileobj(f_in, f_out, CHUNK_SIZE)
        except OSError:
            _discard(temp)
            return self._fail(
                LogErrorKind.COMPRESSION, f"could not compress file '{source}'"
            )

        try:
            shutil.move(temp, destination)
        except OSError:
            _discard(temp)
            return self._fail(
                LogErrorKind.COMPRESSION,
                f"could not move compressed file to '{destination}'",
            )

        if destination != source:
            try:
                os.remove(source)
            except OSError:
                return self._fail(
                    LogErrorKind.COMPRESSION, f"could not delete file '{source}'"
                )

        self._log(f"Compressed {source} -> {destination}")
        return True


def _discard(path: str) -> None:
    if os.path.exists(path):
        os.remove(path)


def _make_dirs(directory: Path) -> None:
    """Create ``directory`` and every missing ancestor with DIRECTORY_MODE."""
    missing = []
    while not directory.is_dir():
        missing.append(directory)
        if directory.parent == directory:
            break
        directory = directory.parent
    for path in reversed(missing):
        path.mkdir(mode=DIRECTORY_MODE, exist_ok=True)
