"""Inventory record model."""

from dataclasses import dataclass


@dataclass
class Record:
    """One inventory entry. Ids are assigned by the Inventory, never by callers."""

    id: int
    name: str
    quantity: int = 0
    unit_price: float = 0.0

    @property
    def total_value(self) -> float:
        """Stock value of this line (quantity times unit price)."""
        return self.quantity * self.unit_price
