import logging
import os
from unittest.mock import patch

from stockroom.core.inventory import Inventory, load_inventory
from stockroom.data.record import Record
from stockroom.exceptions import StorageError
from stockroom.ui import cli


def _rows(out):
    return [line.split() for line in out.splitlines()]


class TestInteractiveShell:
    """Test command dispatch in the interactive loop."""

    def test_eof_ends_without_saving(self, db_path, scripted_input):
        scripted_input("add", "Widget", "5", "2.50")
        inventory = Inventory()

        assert cli.start_interactive_shell(inventory, db_path) == "EOF"
        assert len(inventory) == 1
        assert not os.path.exists(db_path)

    def test_eof_inside_command_prompts(self, db_path, scripted_input):
        scripted_input("add", "Widget")
        inventory = Inventory()

        assert cli.start_interactive_shell(inventory, db_path) == "EOF"
        assert len(inventory) == 0

    def test_quit_saves(self, db_path, scripted_input, capsys):
        scripted_input("add", "Widget", "5", "2.50", "quit", "list")
        assert cli.start_interactive_shell(Inventory(), db_path) == "QUIT"

        out = capsys.readouterr().out
        assert "Goodbye." in out
        # Nothing after quit is read
        assert "Widget" not in out.split("Goodbye.")[1]
        with open(db_path, encoding="utf-8") as f:
            assert f.read() == "1,Widget,5,2.5\n"

    def test_failed_quit_keeps_running(self, tmp_path, scripted_input, capsys):
        scripted_input("quit", "help")
        # A directory cannot be written as a file
        action = cli.start_interactive_shell(Inventory(), str(tmp_path))

        assert action == "EOF"
        out = capsys.readouterr().out
        assert "Save failed" in out
        assert "Goodbye." not in out
        assert "Commands:" in out

    def test_save_command(self, db_path, scripted_input, capsys):
        scripted_input("save")
        cli.start_interactive_shell(Inventory(), db_path)

        assert "Saved." in capsys.readouterr().out
        assert os.path.exists(db_path)

    def test_commands_trimmed_and_case_sensitive(self, db_path, scripted_input, capsys):
        scripted_input("  list  ", "LIST", "")
        cli.start_interactive_shell(Inventory(), db_path)

        out = capsys.readouterr().out
        assert out.count("No items in inventory.") == 1
        assert out.count("Unknown command. Type 'help' for commands.") == 1

    def test_unknown_command_suggestion(self, db_path, scripted_input, capsys):
        scripted_input("lst", "list extra")
        cli.start_interactive_shell(Inventory(), db_path)

        out = capsys.readouterr().out
        assert out.count("Unknown command.") == 2
        assert "Did you mean: list?" in out

    def test_invalid_id_does_not_consume_next_line(self, db_path, scripted_input, capsys):
        scripted_input("update", "abc", "list")
        cli.start_interactive_shell(Inventory(), db_path)

        out = capsys.readouterr().out
        assert "Invalid id." in out
        assert "No items in inventory." in out

    def test_empty_search_rejected(self, db_path, scripted_input, capsys):
        scripted_input("add", "Widget", "5", "2.5", "search", "")
        cli.start_interactive_shell(Inventory(), db_path)

        out = capsys.readouterr().out
        assert "Empty search." in out
        assert ["1", "Widget", "5", "2.5"] not in _rows(out)

    def test_interrupt_at_prompt_confirmed(self, db_path, scripted_input):
        scripted_input(KeyboardInterrupt(), "y")
        assert cli.start_interactive_shell(Inventory(), db_path) == "EOF"
        assert not os.path.exists(db_path)

    def test_interrupt_at_prompt_declined(self, db_path, scripted_input):
        scripted_input(KeyboardInterrupt(), "n", "quit")
        assert cli.start_interactive_shell(Inventory(), db_path) == "QUIT"

    def test_undecodable_name_listed_and_kept(self, db_path, scripted_input, capsys):
        with open(db_path, "wb") as f:
            f.write(b"1,Caf\xe9,1,1.0\n")
        inventory, _ = load_inventory(db_path)
        scripted_input("list", "update", "1", "", "", "", "quit")

        assert cli.start_interactive_shell(inventory, db_path) == "QUIT"

        out = capsys.readouterr().out
        assert ["1", "Caf\\xe9", "1", "1"] in _rows(out)
        assert "Current name: Caf\\xe9" in out
        with open(db_path, "rb") as f:
            assert f.read() == b"1,Caf\xe9,1,1.0\n"

    def test_guarded_quit_declined_leaves_file(self, write_inventory_file, scripted_input, capsys):
        path = write_inventory_file("unreadable\n")
        scripted_input("save", "n", "quit", "n")

        action = cli.start_interactive_shell(Inventory(), path, overwrite_guard=True)

        assert action == "NOSAVE"
        out = capsys.readouterr().out
        assert "Save skipped." in out
        assert "Exiting without saving." in out
        with open(path, encoding="utf-8") as f:
            assert f.read() == "unreadable\n"

    def test_guarded_save_confirmed_once(self, write_inventory_file, scripted_input, capsys):
        path = write_inventory_file("unreadable\n")
        scripted_input("save", "y", "add", "Bolt", "1", "0.5", "quit")

        assert cli.start_interactive_shell(Inventory(), path, overwrite_guard=True) == "QUIT"

        out = capsys.readouterr().out
        assert "Saved." in out
        with open(path, encoding="utf-8") as f:
            assert f.read() == "1,Bolt,1,0.5\n"


class TestInventoryScenario:
    """End-to-end session across a restart."""

    def test_add_save_restart_update_remove(self, db_path, scripted_input, capsys):
        scripted_input("add", "Widget", "5", "2.50", "list", "save")
        cli.start_interactive_shell(Inventory(), db_path)

        out = capsys.readouterr().out
        assert "Added item id 1." in out
        assert ["1", "Widget", "5", "2.5"] in _rows(out)

        # Restart
        inventory, report = load_inventory(db_path)
        assert inventory.records == [Record(1, "Widget", 5, 2.5)]
        assert report.is_clean

        scripted_input("update", "1", "", "", "3.75", "save")
        cli.start_interactive_shell(inventory, db_path)
        assert inventory.find_by_id(1) == Record(1, "Widget", 5, 3.75)

        scripted_input("remove", "1", "list", "add", "Gadget", "2", "1.5", "quit")
        assert cli.start_interactive_shell(inventory, db_path) == "QUIT"

        out = capsys.readouterr().out
        assert "Item removed." in out
        assert "No items in inventory." in out
        assert "Added item id 2." in out

        reloaded, _ = load_inventory(db_path)
        assert reloaded.records == [Record(2, "Gadget", 2, 1.5)]


class TestStartApplication:
    """Test application startup."""

    def test_loads_from_working_directory(self, tmp_path, monkeypatch, scripted_input, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "inventory.csv").write_text("4,Gear,1,1.0\nbad,Line,1,1\n")
        scripted_input("add", "Bolt", "3", "0.2", "quit")

        with patch("stockroom.ui.cli.setup_logging"):
            cli.start_application()

        out = capsys.readouterr().out
        assert "Inventory Manager" in out
        assert "Type 'help' for commands." in out
        assert "Skipped unreadable lines in inventory file: 2" in out
        assert "Added item id 5." in out
        assert (tmp_path / "inventory.csv").read_text() == "4,Gear,1,1.0\n5,Bolt,3,0.2\n"

    def test_unreadable_inventory_reported(self, tmp_path, monkeypatch, scripted_input, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "inventory.csv").mkdir()
        scripted_input("list")

        with patch("stockroom.ui.cli.setup_logging"):
            cli.start_application()

        out = capsys.readouterr().out
        assert "Could not load inventory" in out
        assert "No items in inventory." in out

    def test_failed_load_does_not_overwrite_on_quit(self, tmp_path, monkeypatch, scripted_input, capsys):
        monkeypatch.chdir(tmp_path)
        inventory_file = tmp_path / "inventory.csv"
        inventory_file.write_text("1,Gear,1,1.0\n")
        scripted_input("add", "Bolt", "3", "0.2", "quit", "n")

        with patch("stockroom.ui.cli.setup_logging"):
            with patch("stockroom.ui.cli.Inventory.load", side_effect=StorageError("boom")):
                cli.start_application()

        out = capsys.readouterr().out
        assert "Could not load inventory: boom" in out
        assert "Exiting without saving." in out
        assert inventory_file.read_text() == "1,Gear,1,1.0\n"

    def test_setup_logging_uses_storage_dir(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            "stockroom.data.database.get_storage_directory", lambda: str(tmp_path)
        )
        with patch("logging.basicConfig") as mock_config:
            cli.setup_logging()

        kwargs = mock_config.call_args.kwargs
        assert kwargs["filename"] == os.path.join(str(tmp_path), "stockroom_activity.log")
        assert kwargs["level"] in (logging.INFO, logging.DEBUG)
