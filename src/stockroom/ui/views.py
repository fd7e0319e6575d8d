"""Handles all user-facing output and display formatting."""

from difflib import get_close_matches
from typing import Iterable, List, Sequence, Tuple

from stockroom.config import Config
from stockroom.data.record import Record
from stockroom.ui.colors import Colors
from stockroom.utils.formatters import UIFormatter

RECORD_HEADERS = ("ID", "Name", "Qty", "Price")


# ============================================
# BANNER & HEADERS
# ============================================


def show_banner():
    """Display application name and the help hint."""
    print(f"{Colors.HEADER}{Config.APP_NAME}{Colors.RESET}")
    print(f"Type '{Colors.PRIMARY}help{Colors.RESET}' for commands.")


def show_section_header(title: str):
    """
    Display section header.

    Args:
        title: Section title text
    """
    print(f"\n{Colors.HEADER}--- {title} ---{Colors.RESET}")


# ============================================
# USER PROMPTS
# ============================================


def prompt_command() -> str:
    """Read one command line. EOFError propagates to the caller."""
    return input(f"{Colors.PROMPT}{Config.COMMAND_PROMPT}{Colors.RESET}").strip()


def prompt_input(prompt_text: str) -> str:
    """
    Prompt for user input.

    Args:
        prompt_text: Prompt text to display

    Returns:
        User input exactly as typed (numeric parsing trims on its own)
    """
    return input(f"{Colors.PROMPT}{prompt_text}{Colors.RESET} ")


def confirm_action(prompt: str) -> bool:
    """
    Prompt for yes/no confirmation.

    Returns:
        True if user confirms (y), False otherwise
    """
    response = input(f"{Colors.WARNING}{prompt} (y/N):{Colors.RESET} ").lower()
    return response.strip() == "y"


def show_current_value(label: str, value):
    """Show a field's value before asking for its replacement."""
    print(
        f"{Colors.LABEL}Current {label}:{Colors.RESET} "
        f"{Colors.VALUE}{UIFormatter.display_text(value)}{Colors.RESET}"
    )


# ============================================
# STATUS MESSAGES
# ============================================


def show_success(message: str):
    print(f"{Colors.SUCCESS}{message}{Colors.RESET}")


def show_error(message: str):
    print(f"{Colors.ERROR}{message}{Colors.RESET}")


def show_warning(message: str):
    print(f"{Colors.WARNING}{message}{Colors.RESET}")


def show_info(message: str):
    print(f"{Colors.INFO}{message}{Colors.RESET}")


# ============================================
# RECORD DISPLAYS
# ============================================


def record_row(record: Record) -> Tuple[str, str, str, str]:
    """Table cells for one record."""
    return (
        str(record.id),
        UIFormatter.display_text(record.name),
        str(record.quantity),
        UIFormatter.format_price(record.unit_price),
    )


def display_record_table(records: Iterable[Record]):
    """
    Display records as an ID/Name/Qty/Price table.

    Args:
        records: Records to show, in display order
    """
    rows = [record_row(record) for record in records]
    if rows:
        print(UIFormatter.format_table(RECORD_HEADERS, rows))


def show_totals(item_count: int, unit_count: int, stock_value: float):
    """
    Display inventory totals under a listing.

    Args:
        item_count: Number of records
        unit_count: Sum of quantities
        stock_value: Sum of quantity times unit price
    """
    print(
        f"{Colors.MUTED}Total: {item_count} items, {unit_count} units, "
        f"value {stock_value:.2f}{Colors.RESET}"
    )


def show_load_warnings(skipped_lines: Sequence[int], defaulted_count: int):
    """Tell the operator that the inventory file had problems."""
    if skipped_lines:
        lines = ", ".join(str(n) for n in skipped_lines)
        show_warning(f"Skipped unreadable lines in inventory file: {lines}")
    if defaulted_count:
        show_warning(
            f"{defaulted_count} missing or invalid fields were set to defaults."
        )


# ============================================
# HELP
# ============================================


def display_help(commands_data: List[Tuple[str, str]]):
    """
    Display the list of recognized commands.

    Args:
        commands_data: (command, description) pairs
    """
    print("Commands:")
    for cmd, desc in commands_data:
        print(f"  {Colors.PRIMARY}{cmd:<8}{Colors.RESET}- {desc}")


def suggest_command(user_input: str, available_commands: List[str]):
    """
    Report an unknown command and suggest a close match if there is one.

    Args:
        user_input: User's input command
        available_commands: List of valid commands
    """
    show_error("Unknown command. Type 'help' for commands.")

    matches = get_close_matches(
        user_input, available_commands, n=1, cutoff=Config.SUGGESTION_CUTOFF
    )
    if matches:
        print(f"{Colors.WARNING}Did you mean: {Colors.PRIMARY}{matches[0]}{Colors.RESET}?")
