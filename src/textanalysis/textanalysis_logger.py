"""
Logger for textanalysis. Every record is written as a single line of JSON.
"""

import inspect
import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime


@dataclass
class LogLine:
    """
    Represents a line in the textanalysis log
    """

    time: str
    level: str
    caller_file: str
    caller_name: str
    caller_line: int
    message: str


class TextAnalysisLogger:
    """
    Logger class
    """

    def __init__(self, name: str = "textanalysis") -> None:
        self.logger = logging.getLogger(name)
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)

    def log(self, message: str, level: int) -> None:
        """
        Log the message at the given level, tagged with the calling location.
        """
        if not self.logger.isEnabledFor(level):
            return

        message = message.replace("\n", " ")

        calframe = inspect.getouterframes(inspect.currentframe(), 2)
        caller_file = calframe[1][1].replace("\\", "/").split("/")[-1]
        caller_line = calframe[1][2]
        caller_name = calframe[1][3]

        log_line = LogLine(
            time=datetime.now().isoformat(),
            level=logging.getLevelName(level),
            caller_file=caller_file,
            caller_name=caller_name,
            caller_line=caller_line,
            message=message,
        )

        self.logger.log(level=level, msg=json.dumps(asdict(log_line)))
