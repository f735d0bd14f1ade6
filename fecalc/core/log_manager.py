"""
Log management for calculator diagnostics.

This module provides centralized logging with categorization and level
filtering. Messages are kept in a buffer so a full log can be saved at the
end of a run, and the ones that pass the filters are echoed to stderr.
"""
import os
import sys
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TextIO


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Startup and configuration messages
    DATA = auto()       # Data file loading messages
    BATTLE = auto()     # Combat resolution messages
    DEBUG = auto()      # Per-formula details
    WARNING = auto()    # Warning messages
    ERROR = auto()      # Error messages


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.DATA: "DAT",
    LogCategory.BATTLE: "BTL",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self) -> str:
        """Format the message for display as `[TAG] text`."""
        tag = CATEGORY_TAGS.get(self.category, "???")
        return f"[{tag}] {self.text}"


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class LogManager:
    """Manages calculator logging with categorization and filtering."""

    def __init__(
        self,
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.WARNING,
        stream: Optional[TextIO] = None,
    ):
        """Initialize the log manager.

        Args:
            max_messages: Maximum number of messages to store in the buffer
            default_level: Minimum level echoed to the stream
            stream: Where visible messages are written (stderr when None)
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.stream = stream

        # Categories not listed default to INFO
        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
        }

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Add a message to the log.

        Args:
            text: The message text
            category: The category of the message
        """
        # Always buffer, so a saved log includes filtered messages
        message = LogMessage(text=text, category=category)
        self.messages.append(message)

        if self._is_visible(message):
            stream = self.stream if self.stream is not None else sys.stderr
            print(message.format(), file=stream)

    def _is_visible(self, message: LogMessage) -> bool:
        message_level = self.category_levels.get(message.category, LogLevel.INFO)
        return message_level.value >= self.log_level.value

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        """Log a system message."""
        self.log(text, LogCategory.SYSTEM)

    def data(self, text: str) -> None:
        """Log a data loading message."""
        self.log(text, LogCategory.DATA)

    def battle(self, text: str) -> None:
        """Log a battle message."""
        self.log(text, LogCategory.BATTLE)

    def debug(self, text: str) -> None:
        """Log a debug message."""
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        """Log a warning message."""
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        """Log an error message."""
        self.log(text, LogCategory.ERROR)

    def save_log_to_file(self, filepath: str) -> bool:
        """Save all buffered messages, including filtered ones, to a file.

        Returns:
            True if save was successful, False otherwise
        """
        try:
            log_dir = os.path.dirname(filepath)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)

            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Combat forecast - Run log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                else:
                    for msg in self.messages:
                        timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                        f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")

            return True

        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return False
