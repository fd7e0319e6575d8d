"""In-memory inventory and id assignment."""

import logging
from typing import Iterator, List, Optional, Tuple

from stockroom.data import database
from stockroom.data.database import LoadReport
from stockroom.data.record import Record
from stockroom.exceptions import InvalidRecordError, RecordNotFoundError


class Inventory:
    """Owns the records of the active session and the next id to assign."""

    def __init__(self):
        self.records: List[Record] = []
        self.next_id = 1

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    # --- Persistence ---

    def load(self, path: str) -> LoadReport:
        """
        Replace the records with the contents of an inventory file.

        A missing file leaves the inventory empty. The id counter only ever
        moves forward, so loading a file with smaller ids never lowers it.

        Args:
            path: Inventory file path

        Returns:
            LoadReport describing skipped lines and defaulted fields

        Raises:
            StorageError: If the file exists but cannot be read
        """
        records, report = database.read_records(path)

        self.records = records
        if records:
            self.next_id = max(self.next_id, max(r.id for r in records) + 1)

        logging.info(f"Loaded {report.loaded} items from {path}")
        if report.skipped_lines:
            logging.warning(f"Skipped unreadable lines: {report.skipped_lines}")
        for line_number, field_name in report.defaulted_fields:
            logging.warning(
                f"Line {line_number}: '{field_name}' missing or invalid, "
                f"defaulted to {database.FIELD_DEFAULTS[field_name]!r}"
            )
        return report

    def save(self, path: str):
        """Overwrite the inventory file with every record."""
        count = database.write_records(path, self.records)
        logging.info(f"Saved {count} items to {path}")

    # --- Record Operations ---

    def add(self, name: str, quantity: int, unit_price: float) -> int:
        """Append a new record and return its assigned id."""
        if not name:
            raise InvalidRecordError("Item name cannot be empty")

        record = Record(self.next_id, name, quantity, unit_price)
        self.next_id += 1
        self.records.append(record)

        logging.info(f"Added item {record.id} ('{name}')")
        return record.id

    def find_by_id(self, record_id: int) -> Optional[Record]:
        """Return the record with this id, or None."""
        for record in self.records:
            if record.id == record_id:
                return record
        return None

    def remove_by_id(self, record_id: int) -> bool:
        """Delete the record with this id. The id is never handed out again."""
        for index, record in enumerate(self.records):
            if record.id == record_id:
                del self.records[index]
                logging.info(f"Removed item {record_id}")
                return True
        return False

    def update(
        self,
        record_id: int,
        name: Optional[str] = None,
        quantity: Optional[int] = None,
        unit_price: Optional[float] = None,
    ) -> Record:
        """Change the given fields of a record; None keeps the current value."""
        record = self.find_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(f"No item with id {record_id}")

        if name:
            record.name = name
        if quantity is not None:
            record.quantity = quantity
        if unit_price is not None:
            record.unit_price = unit_price

        logging.info(f"Updated item {record_id}")
        return record

    def search_by_name(self, term: str) -> List[Record]:
        """Case-sensitive substring match against record names."""
        return [record for record in self.records if term in record.name]

    # --- Totals ---

    def total_quantity(self) -> int:
        return sum(record.quantity for record in self.records)

    def total_value(self) -> float:
        return sum(record.total_value for record in self.records)


def load_inventory(path: str) -> Tuple[Inventory, LoadReport]:
    """Build an Inventory from the file at path."""
    inventory = Inventory()
    report = inventory.load(path)
    return inventory, report
