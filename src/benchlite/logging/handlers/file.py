from pathlib import Path

from benchlite.logging.handlers.base import BaseLogHandler


class FileLogHandler(BaseLogHandler):
    """
    A log handler that appends log lines to a progress file.
    """

    def __init__(self, filepath: str | Path) -> None:
        """
        Args:
            filepath (str | Path): File receiving the log lines. Missing parent
                directories are created; an existing file is appended to.
        """
        super().__init__()
        self.filepath = Path(filepath)
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.touch()

    def push(self, buffer: list[str]) -> None:
        with self.filepath.open("a") as file:
            file.writelines(f"{line}\n" for line in buffer)
