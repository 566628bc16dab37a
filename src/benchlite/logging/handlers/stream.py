from typing import TextIO

from benchlite.logging.handlers.base import BaseLogHandler


class StreamLogHandler(BaseLogHandler):
    """
    A log handler that writes log messages, one per line, to a text stream.
    """

    def __init__(self, stream: TextIO) -> None:
        """
        Initialize the StreamLogHandler.

        Args:
            stream (TextIO): Writable text stream, e.g. sys.stdout or io.StringIO.
        """
        super().__init__()
        self.stream = stream

    def push(self, buffer) -> None:
        for log_msg in buffer:
            self.stream.write(log_msg + "\n")
        self.stream.flush()
