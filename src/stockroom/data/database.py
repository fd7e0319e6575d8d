"""Handles reading and writing the flat inventory file."""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from stockroom.config import Config
from stockroom.data.record import Record
from stockroom.exceptions import StorageError
from stockroom.utils.validators import InputValidator

# --- Path Management ---


def get_storage_directory():
    """Ensures and returns the directory that holds the activity log."""
    storage_dir = os.path.join(os.path.expanduser("~"), Config.STORAGE_DIR_NAME)
    os.makedirs(storage_dir, exist_ok=True)
    return storage_dir


def get_inventory_path():
    """Returns the path of the inventory file in the working directory."""
    return os.path.join(os.getcwd(), Config.DB_FILENAME)


# --- Field Parse Policy ---

# Value used when a field is missing or unparseable. A bad id is never
# defaulted: the whole line is skipped instead.
FIELD_DEFAULTS = {
    "name": "",
    "quantity": 0,
    "unit_price": 0.0,
}


@dataclass
class LoadReport:
    """What happened while reading an inventory file."""

    loaded: int = 0
    skipped_lines: List[int] = field(default_factory=list)
    defaulted_fields: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """True when every line parsed without skips or defaults."""
        return not self.skipped_lines and not self.defaulted_fields


def parse_line(line: str) -> Optional[Tuple[Record, List[str]]]:
    """
    Parse one line of the inventory file.

    Args:
        line: Raw line without its trailing newline

    Returns:
        (record, names of defaulted fields), or None if the line is skipped
    """
    if not line:
        return None

    fields = line.split(Config.FIELD_DELIMITER)

    record_id = InputValidator.parse_int(fields[0])
    if record_id is None:
        return None

    defaulted = []

    if len(fields) > 1:
        name = fields[1]
    else:
        name = FIELD_DEFAULTS["name"]
        defaulted.append("name")

    quantity = InputValidator.parse_int(fields[2]) if len(fields) > 2 else None
    if quantity is None:
        quantity = FIELD_DEFAULTS["quantity"]
        defaulted.append("quantity")

    unit_price = InputValidator.parse_float(fields[3]) if len(fields) > 3 else None
    if unit_price is None:
        unit_price = FIELD_DEFAULTS["unit_price"]
        defaulted.append("unit_price")

    return Record(record_id, name, quantity, unit_price), defaulted


def format_record(record: Record) -> str:
    """Serialize a record as one line (no trailing newline, no escaping)."""
    d = Config.FIELD_DELIMITER
    return (
        f"{record.id}{d}{record.name}{d}{record.quantity}{d}"
        f"{float(record.unit_price)!r}"
    )


# --- File Operations ---


def read_records(path: str) -> Tuple[List[Record], LoadReport]:
    """
    Read every usable record from an inventory file.

    A missing file is not an error and yields no records. Lines with a
    missing or non-integer id, or with an id already seen, are skipped.

    Raises:
        StorageError: If the file exists but cannot be read
    """
    records: List[Record] = []
    report = LoadReport()

    if not os.path.exists(path):
        logging.info(f"No inventory file at {path}; starting empty")
        return records, report

    seen_ids = set()

    try:
        with open(
            path, "r", encoding=Config.FILE_ENCODING, errors=Config.FILE_ERRORS
        ) as f:
            for line_number, raw_line in enumerate(f, start=1):
                line = raw_line.rstrip("\n")
                if not line:
                    continue

                parsed = parse_line(line)
                if parsed is None:
                    report.skipped_lines.append(line_number)
                    continue

                record, defaulted = parsed
                if record.id in seen_ids:
                    logging.warning(
                        f"Duplicate id {record.id} on line {line_number}; skipped"
                    )
                    report.skipped_lines.append(line_number)
                    continue

                seen_ids.add(record.id)
                records.append(record)
                report.defaulted_fields.extend(
                    (line_number, name) for name in defaulted
                )
    except OSError as e:
        raise StorageError(f"Could not read inventory file '{path}': {e}") from e

    report.loaded = len(records)
    return records, report


def write_records(path: str, records: Iterable[Record]):
    """
    Overwrite the inventory file with the given records.

    Raises:
        StorageError: If the file cannot be opened or written
    """
    lines = [f"{format_record(record)}\n" for record in records]

    try:
        with open(
            path, "w", encoding=Config.FILE_ENCODING, errors=Config.FILE_ERRORS
        ) as f:
            f.writelines(lines)
    except OSError as e:
        raise StorageError(f"Could not write inventory file '{path}': {e}") from e

    return len(lines)
