"""
Simple logging system writing to a rich console and an optional log file.
"""

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich.text import Text


def printable(text: str) -> str:
    """Escape lone surrogates left in file names that are not valid UTF-8."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class SimpleLogger:
    """Simple logger that writes to console and file."""

    def __init__(self, log_file: Optional[Path] = None, console: Optional[Console] = None,
                 error_console: Optional[Console] = None):
        self.log_file = log_file
        self.start_time = time.time()
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"\n{'='*60}\n")
                f.write(f"Session started: {datetime.now().isoformat()}\n")
                f.write(f"{'='*60}\n")

    def log(self, message: str, prefix: str = "", error: bool = False, style: str = "") -> None:
        """Log a message to console and file.

        Args:
            message: The message to log
            prefix: Optional prefix like [INFO], [ERROR], etc.
            error: Whether to write to stderr instead of stdout
            style: Rich style applied on the console only
        """
        timestamp = datetime.now().strftime("%H:%M:%S")

        if prefix:
            formatted = f"[{timestamp}] {prefix} {message}"
        else:
            formatted = f"[{timestamp}] {message}"
        formatted = printable(formatted)

        # Text instances are never parsed as markup, so brackets in paths survive
        output = self.error_console if error else self.console
        output.print(Text(formatted, style=style), soft_wrap=True)

        self._write_file(formatted)

    def _write_file(self, line: str) -> None:
        if self.log_file:
            try:
                with open(self.log_file, 'a', encoding='utf-8') as f:
                    f.write(line + '\n')
            except OSError:
                pass  # Don't fail on logging errors

    def progress(self, current: int, total: int, description: str = "") -> None:
        """Show simple progress indicator.

        Args:
            current: Current item number
            total: Total items
            description: Optional description
        """
        percent = (current / total * 100) if total > 0 else 0
        elapsed = time.time() - self.start_time

        if description:
            self.log(f"[{current}/{total}] ({percent:.1f}%) {description} - {elapsed:.1f}s elapsed")
        else:
            self.log(f"[{current}/{total}] ({percent:.1f}%) - {elapsed:.1f}s elapsed")

    def table(self, headers: List[str], rows: List[List[str]], title: str = "") -> None:
        """Print a table on the console and a plain copy to the log file.

        Args:
            headers: Column headers
            rows: Table rows
            title: Optional table title
        """
        if not headers or not rows:
            return

        table = Table(title=title or None)
        for h in headers:
            table.add_column(h)
        for row in rows:
            table.add_row(*(Text(printable(str(cell))) for cell in row))
        self.console.print(table)

        self._write_file("\t".join(headers))
        for row in rows:
            self._write_file(printable("\t".join(str(cell) for cell in row)))

    def section(self, title: str) -> None:
        """Print a section header.

        Args:
            title: Section title
        """
        self.console.print(Rule(Text(title)))
        self._write_file(f"{'='*20} {title} {'='*20}")

    def success(self, message: str) -> None:
        """Log a success message."""
        self.log(message, prefix="[SUCCESS]", style="green")

    def error(self, message: str) -> None:
        """Log an error message."""
        self.log(message, prefix="[ERROR]", error=True, style="bold red")

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.log(message, prefix="[WARNING]", style="yellow")

    def info(self, message: str) -> None:
        """Log an info message."""
        self.log(message, prefix="[INFO]")
