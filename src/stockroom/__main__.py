"""Application entry point."""

from stockroom.ui.cli import start_application


def main():
    """Initializes and runs the application."""
    start_application()


if __name__ == "__main__":
    main()
