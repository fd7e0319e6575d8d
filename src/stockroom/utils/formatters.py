"""Reusable formatting utilities."""

from typing import List, Sequence

from stockroom.config import Config
from stockroom.ui.colors import Colors


class UIFormatter:
    """Centralized UI formatting logic."""

    @staticmethod
    def format_price(value: float) -> str:
        """Shortest readable form of a price: 2.5, 3.75, 10."""
        return f"{value:g}"

    @staticmethod
    def display_text(value) -> str:
        """
        Printable form of a value loaded from the inventory file.

        Bytes that were not valid UTF-8 come back from the file as lone
        surrogates, which no console can encode. They are shown as \\xNN
        escapes; the stored name keeps the original bytes.
        """
        return (
            str(value)
            .encode(Config.FILE_ENCODING, Config.FILE_ERRORS)
            .decode(Config.FILE_ENCODING, "backslashreplace")
        )

    @staticmethod
    def format_table(headers: Sequence[str], rows: List[Sequence]) -> str:
        """Format data as a table with two-space column gaps."""
        if not rows:
            return ""

        # Calculate column widths
        col_widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                col_widths[i] = max(col_widths[i], len(str(cell)))

        lines = []

        header_line = "  ".join(h.ljust(w) for h, w in zip(headers, col_widths))
        lines.append(f"{Colors.HEADER}{header_line.rstrip()}{Colors.RESET}")
        lines.append(f"{Colors.BORDER}{'-' * len(header_line)}{Colors.RESET}")

        for row in rows:
            row_line = "  ".join(
                str(cell).ljust(w) for cell, w in zip(row, col_widths)
            )
            lines.append(f"{Colors.RESET}{row_line.rstrip()}")

        return "\n".join(lines)
