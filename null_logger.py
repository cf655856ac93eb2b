from typing import List

from log_interface import LogFn, format_line


class NullLogger:
    """Drop-in stand-in for FileLogger that never touches the filesystem."""

    def __init__(
        self,
        path: str = "",
        use_gzip: bool = True,
        append: bool = False,
        silent: bool = False,
        logger: LogFn = None,
    ):
        self.path = path
        self.silent = silent

    def write(self, text: str, add_newline: bool = True, add_timestamp: bool = True) -> bool:
        line = format_line(text, add_newline, add_timestamp)
        if not self.silent:
            print(line, end="")
        return True

    def close(self) -> bool:
        return True

    def set_silent(self, silent: bool = True) -> None:
        self.silent = silent

    def get_errors(self) -> List[str]:
        return []
