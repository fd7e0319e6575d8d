import logging
import os
from typing import Optional

from stockroom.config import Config
from stockroom.core.inventory import Inventory
from stockroom.data import database
from stockroom.exceptions import CoreException
from stockroom.ui import colors, commands, views


def setup_logging():
    """
    Configure logging to file within application storage directory.

    Creates log file in ~/.stockroom/stockroom_activity.log with timestamps.
    """
    storage_dir = database.get_storage_directory()
    log_file_path = os.path.join(storage_dir, Config.LOG_FILE)

    logging.basicConfig(
        filename=log_file_path,
        level=Config.LOG_LEVEL,
        format=Config.LOG_FORMAT,
        datefmt=Config.LOG_DATE_FORMAT,
    )


def start_interactive_shell(
    inventory: Inventory, db_path: str, overwrite_guard: bool = False
) -> str:
    """
    Run the command loop until quit or end of input.

    Args:
        inventory: Loaded inventory
        db_path: File written by save and quit
        overwrite_guard: The file at db_path exists but could not be loaded;
            ask before the first write replaces it

    Returns:
        'QUIT' after a successful quit, 'NOSAVE' when quit was told not to
        overwrite, 'EOF' when input ran out (no save)
    """
    available_commands = commands.get_command_list()

    while True:
        try:
            command = views.prompt_command()

            if not command:
                continue

            if command in ("save", "quit") and overwrite_guard:
                if views.confirm_action("Inventory file could not be loaded. Overwrite it?"):
                    overwrite_guard = False
                    logging.warning("Operator chose to overwrite unreadable inventory file")
                elif command == "save":
                    views.show_warning("Save skipped.")
                    continue
                else:
                    views.show_warning("Exiting without saving.")
                    logging.info("Quit without overwriting unreadable inventory file")
                    return "NOSAVE"

            if command == "quit":
                if commands.save_command(inventory, db_path, announce=False):
                    views.show_success("Goodbye.")
                    logging.info("Quit with save")
                    return "QUIT"
                continue

            if command == "save":
                commands.save_command(inventory, db_path)
                continue

            handler = commands.COMMAND_HANDLERS.get(command)
            if handler is None:
                views.suggest_command(command, available_commands)
                continue

            handler(inventory)

        except EOFError:
            # Input closed: leave without saving
            print()
            logging.info("Input closed; exiting without save")
            return "EOF"

        except KeyboardInterrupt:
            print()
            try:
                if views.confirm_action("Quit without saving?"):
                    logging.info("Interrupted; exiting without save")
                    return "EOF"
            except (EOFError, KeyboardInterrupt):
                print()
                return "EOF"


def start_application():
    """
    Main application entry point.

    Flow:
    1. Setup logging and colors
    2. Load inventory.csv from the working directory
    3. Interactive shell
    """
    setup_logging()
    logging.info(f"{Config.APP_NAME} v{Config.VERSION} starting ({Config.get_environment()})")

    if not colors.should_use_color():
        colors.Colors.disable()

    db_path = database.get_inventory_path()
    inventory = Inventory()
    report: Optional[database.LoadReport] = None

    try:
        report = inventory.load(db_path)
    except CoreException as e:
        views.show_error(f"Could not load inventory: {e}")

    views.show_banner()
    if report is not None:
        commands.report_load(report)

    action = start_interactive_shell(
        inventory, db_path, overwrite_guard=report is None
    )
    logging.info(f"Application shutdown ({action})")
