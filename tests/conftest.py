import pytest

from stockroom.data.record import Record
from stockroom.ui.colors import Colors


@pytest.fixture(scope="session", autouse=True)
def plain_output():
    """Strip ANSI codes so assertions can match printed text."""
    Colors.disable()
    yield


@pytest.fixture
def db_path(tmp_path):
    """Path of a not-yet-existing inventory file in a temp directory."""
    return str(tmp_path / "inventory.csv")


@pytest.fixture
def write_inventory_file(db_path):
    """Write raw text to the inventory file and return its path."""

    def _write(text):
        with open(db_path, "w", encoding="utf-8") as f:
            f.write(text)
        return db_path

    return _write


@pytest.fixture
def scripted_input(monkeypatch):
    """Replace input() with a fixed list of answers, then EOF."""

    def _feed(*lines):
        answers = iter(lines)

        def fake_input(prompt=""):
            try:
                answer = next(answers)
            except StopIteration:
                raise EOFError
            if isinstance(answer, BaseException):
                raise answer
            return answer

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed


@pytest.fixture
def widget():
    return Record(1, "Widget", 5, 2.5)
