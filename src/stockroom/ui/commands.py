"""Command handlers for the interactive inventory shell."""

import logging
from typing import Callable, Tuple

from stockroom.core.inventory import Inventory
from stockroom.exceptions import CoreException
from stockroom.ui import views
from stockroom.utils.formatters import UIFormatter
from stockroom.utils.validators import InputValidator

# (command, description) in help order
COMMAND_HELP = [
    ("list", "show all items"),
    ("add", "add a new item"),
    ("update", "update an existing item by id"),
    ("remove", "remove item by id"),
    ("search", "search items by name"),
    ("save", "save inventory to file"),
    ("help", "show this help"),
    ("quit", "save & exit"),
]


def _prompt_until_valid(
    prompt_text: str, validator: Callable[[str], Tuple[bool, str]]
) -> str:
    """Keep asking until the validator accepts the answer."""
    value = views.prompt_input(prompt_text)
    valid, msg = validator(value)
    while not valid:
        views.show_warning(msg)
        value = views.prompt_input(prompt_text)
        valid, msg = validator(value)
    return value


def _prompt_item_id(prompt_text: str):
    """Ask once for an item id. Returns None (after reporting) when invalid."""
    id_text = views.prompt_input(prompt_text)
    valid, msg = InputValidator.validate_item_id(id_text)
    if not valid:
        views.show_error(msg)
        return None
    return InputValidator.parse_int(id_text)


# ============================================
# COMMAND HANDLERS
# ============================================


def list_command(inventory: Inventory):
    """
    Show every item with inventory totals.

    Args:
        inventory: Active inventory
    """
    if not len(inventory):
        views.show_info("No items in inventory.")
        return

    views.display_record_table(inventory)
    views.show_totals(
        len(inventory), inventory.total_quantity(), inventory.total_value()
    )


def add_command(inventory: Inventory):
    """
    Add a new item.

    Prompts for name, quantity and price, re-prompting each until valid.

    Args:
        inventory: Active inventory
    """
    views.show_section_header("Add Item")

    try:
        name = _prompt_until_valid("Enter name:", InputValidator.validate_item_name)
        quantity_text = _prompt_until_valid(
            "Enter quantity:", InputValidator.validate_quantity
        )
        price_text = _prompt_until_valid("Enter price:", InputValidator.validate_price)

        record_id = inventory.add(
            name,
            InputValidator.parse_int(quantity_text),
            InputValidator.parse_float(price_text),
        )
        views.show_success(f"Added item id {record_id}.")

    except CoreException as e:
        views.show_error(str(e))
    except KeyboardInterrupt:
        views.show_warning("Add cancelled.")


def update_command(inventory: Inventory):
    """
    Update name, quantity and price of an item.

    Blank answers keep the current value. An invalid quantity or price is
    reported and only that field is left unchanged.

    Args:
        inventory: Active inventory
    """
    views.show_section_header("Update Item")

    try:
        record_id = _prompt_item_id("Enter item id to update:")
        if record_id is None:
            return

        record = inventory.find_by_id(record_id)
        if record is None:
            views.show_error("Item not found.")
            return

        views.show_current_value("name", record.name)
        new_name = views.prompt_input("New name (leave blank to keep):")

        views.show_current_value("qty", record.quantity)
        quantity_text = views.prompt_input("New qty (leave blank to keep):")
        new_quantity = None
        if quantity_text.strip():
            new_quantity = InputValidator.parse_int(quantity_text)
            if new_quantity is None:
                views.show_warning("Invalid qty; update skipped.")

        views.show_current_value("price", UIFormatter.format_price(record.unit_price))
        price_text = views.prompt_input("New price (leave blank to keep):")
        new_price = None
        if price_text.strip():
            new_price = InputValidator.parse_float(price_text)
            if new_price is None:
                views.show_warning("Invalid price; update skipped.")

        inventory.update(
            record_id,
            name=new_name if new_name.strip() else None,
            quantity=new_quantity,
            unit_price=new_price,
        )
        views.show_success("Item updated.")

    except CoreException as e:
        views.show_error(str(e))
    except KeyboardInterrupt:
        views.show_warning("Update cancelled.")


def remove_command(inventory: Inventory):
    """
    Remove an item by id.

    Args:
        inventory: Active inventory
    """
    try:
        record_id = _prompt_item_id("Enter item id to remove:")
        if record_id is None:
            return

        if inventory.remove_by_id(record_id):
            views.show_success("Item removed.")
        else:
            views.show_error("Item not found.")

    except KeyboardInterrupt:
        views.show_warning("Remove cancelled.")


def search_command(inventory: Inventory):
    """
    Search for items whose name contains a term (case-sensitive).

    Args:
        inventory: Active inventory
    """
    try:
        term = views.prompt_input("Enter search term (name substring):")
        valid, msg = InputValidator.validate_search_term(term)
        if not valid:
            views.show_warning(msg)
            return

        matches = inventory.search_by_name(term)
        if matches:
            views.display_record_table(matches)
        else:
            views.show_info("No matches.")

    except KeyboardInterrupt:
        views.show_warning("Search cancelled.")


def save_command(inventory: Inventory, db_path: str, announce: bool = True) -> bool:
    """
    Write the inventory to disk.

    Args:
        inventory: Active inventory
        db_path: Inventory file path
        announce: Print "Saved." on success

    Returns:
        True if the file was written
    """
    try:
        inventory.save(db_path)
    except CoreException as e:
        views.show_error(f"Save failed: {e}")
        return False

    if announce:
        views.show_success("Saved.")
    return True


def help_command(inventory: Inventory):
    """Show the recognized commands."""
    views.display_help(COMMAND_HELP)


# Commands that only need the inventory. save and quit are handled by the shell.
COMMAND_HANDLERS = {
    "list": list_command,
    "add": add_command,
    "update": update_command,
    "remove": remove_command,
    "search": search_command,
    "help": help_command,
}


def get_command_list():
    """All recognized command names, for suggestions."""
    return [cmd for cmd, _ in COMMAND_HELP]


def report_load(report):
    """Surface a non-clean load to the operator."""
    if report.is_clean:
        return
    views.show_load_warnings(report.skipped_lines, len(report.defaulted_fields))
    logging.info("Inventory file loaded with warnings")
