"""Reusable validation utilities."""

import math
import re
from typing import Optional, Tuple

# ASCII digits only; int()/float() would also take "1_000" and other scripts' digits
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class InputValidator:
    """Centralized validation of operator input."""

    @staticmethod
    def parse_int(text: str) -> Optional[int]:
        """Parse a whole-token integer, or None if the token is not one."""
        token = text.strip() if text else ""
        if not _INT_PATTERN.fullmatch(token):
            return None
        return int(token)

    @staticmethod
    def parse_float(text: str) -> Optional[float]:
        """Parse a whole-token finite number, or None if the token is not one."""
        token = text.strip() if text else ""
        if not _FLOAT_PATTERN.fullmatch(token):
            return None
        value = float(token)
        if not math.isfinite(value):
            return None
        return value

    @staticmethod
    def validate_item_name(name: str) -> Tuple[bool, str]:
        """Validate item name."""
        if not name or not name.strip():
            return False, "Name cannot be empty."

        return True, ""

    @staticmethod
    def validate_quantity(text: str) -> Tuple[bool, str]:
        """Quantity must be a whole number; negatives are accepted."""
        if InputValidator.parse_int(text) is None:
            return False, "Invalid number."

        return True, ""

    @staticmethod
    def validate_price(text: str) -> Tuple[bool, str]:
        """Price must be a finite number; negatives are accepted."""
        if InputValidator.parse_float(text) is None:
            return False, "Invalid number."

        return True, ""

    @staticmethod
    def validate_item_id(text: str) -> Tuple[bool, str]:
        """Validate an item id typed by the operator."""
        if InputValidator.parse_int(text) is None:
            return False, "Invalid id."

        return True, ""

    @staticmethod
    def validate_search_term(term: str) -> Tuple[bool, str]:
        """An empty search would match everything, so it is refused."""
        if not term:
            return False, "Empty search."

        return True, ""
