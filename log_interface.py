import datetime
from typing import Callable, List, Optional, Protocol, runtime_checkable

LogFn = Optional[Callable[[str], None]]

GZ_SUFFIX = ".gz"
TIMESTAMP_FORMAT = "%d.%m.%y %H:%M:%S"


def has_gz_suffix(path: str) -> bool:
    return path[-len(GZ_SUFFIX):].lower() == GZ_SUFFIX


def format_line(text: str, add_newline: bool = True, add_timestamp: bool = True) -> str:
    """Build one output line: optional local-time prefix, text, optional newline."""
    prefix = ""
    if add_timestamp:
        prefix = datetime.datetime.now().strftime(TIMESTAMP_FORMAT) + " "
    return prefix + text + ("\n" if add_newline else "")


@runtime_checkable
class LineLogger(Protocol):
    def write(self, text: str, add_newline: bool = True, add_timestamp: bool = True) -> bool:
        ...

    def close(self) -> bool:
        ...

    def set_silent(self, silent: bool = True) -> None:
        ...

    def get_errors(self) -> List[str]:
        ...
