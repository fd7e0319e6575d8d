"""Custom exceptions for application."""

import logging


class CoreException(Exception):
    """Base exception that logs errors."""

    def __init__(self, message: str):
        self.message = message
        logging.error(f"{self.__class__.__name__}: {message}")
        super().__init__(self.message)


class RecordNotFoundError(CoreException):
    """No record with the requested id."""

    pass


class InvalidRecordError(CoreException):
    """Record fields rejected by the store."""

    pass


class StorageError(CoreException):
    """Inventory file could not be read or written."""

    pass
