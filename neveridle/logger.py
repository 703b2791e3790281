"""
Console logger gated by the --verbose count.

Status lines go to stdout, warnings and errors to stderr. Streams are looked
up on every write so redirected or captured streams are honoured.
"""

import os
import sys
from datetime import datetime


class Logger:
    """Simple verbosity-aware logging system"""

    COLORS = {
        'DEBUG': '\033[94m',    # Blue
        'INFO': '\033[92m',     # Green
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'RESET': '\033[0m'      # Reset
    }

    def __init__(self, verbosity: int = 0, timestamps: bool = True):
        self.verbosity = verbosity
        self.timestamps = timestamps

    def enabled(self, level: int) -> bool:
        """Check if messages of this verbosity level should be shown"""
        return self.verbosity >= level

    def format(self, level: str, message: str) -> str:
        if not self.timestamps:
            return f"[{level}] {message}"
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        return f"[{timestamp}] [{level}] {message}"

    def colorize(self, level: str, text: str, stream) -> str:
        isatty = getattr(stream, "isatty", None)
        if not isatty or not isatty():
            return text
        if os.getenv("NO_COLOR"):
            return text
        color = self.COLORS.get(level, self.COLORS['RESET'])
        return f"{color}{text}{self.COLORS['RESET']}"

    def write(self, level: str, message: str, stream):
        """Write one formatted line to the given stream"""
        line = self.colorize(level, self.format(level, message), stream)
        print(line, file=stream, flush=True)

    def status(self, message: str, level: int = 1):
        """Report progress on stdout when verbose enough"""
        if self.enabled(level):
            self.write("DEBUG" if level > 1 else "INFO", message, sys.stdout)

    def info(self, message: str):
        self.write("INFO", message, sys.stdout)

    def warning(self, message: str):
        self.write("WARNING", message, sys.stderr)

    def error(self, message: str, level: int = 0):
        if self.enabled(level):
            self.write("ERROR", message, sys.stderr)
