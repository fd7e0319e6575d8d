import logging
import os


class Config:
    """
    Application configuration constants.

    Set STOCKROOM_ENV=development for verbose (DEBUG) activity logging.
    """

    # ============================================
    # VERSION & ENVIRONMENT
    # ============================================

    VERSION = "1.0.0"
    APP_NAME = "Inventory Manager"

    # Environment detection (defaults to production)
    IS_PRODUCTION = os.getenv("STOCKROOM_ENV", "production") == "production"

    # ============================================
    # INVENTORY FILE FORMAT
    # ============================================

    DB_FILENAME = "inventory.csv"  # Always resolved against the working directory
    FIELD_DELIMITER = ","
    FIELD_COUNT = 4  # id, name, quantity, price
    FILE_ENCODING = "utf-8"
    FILE_ERRORS = "surrogateescape"  # Keep undecodable bytes in names intact

    # ============================================
    # LOGGING
    # ============================================

    STORAGE_DIR_NAME = ".stockroom"
    LOG_FILE = "stockroom_activity.log"
    LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    if IS_PRODUCTION:
        LOG_LEVEL = logging.INFO
    else:
        LOG_LEVEL = logging.DEBUG

    # ============================================
    # USER INTERFACE SETTINGS
    # ============================================

    COMMAND_PROMPT = "> "
    SUGGESTION_CUTOFF = 0.6  # difflib ratio for "Did you mean" hints

    # ============================================
    # METHODS
    # ============================================

    @classmethod
    def get_environment(cls) -> str:
        """
        Get current environment name.

        Returns:
            'production' or 'development'
        """
        return "production" if cls.IS_PRODUCTION else "development"


# ============================================
# VALIDATION
# ============================================


def validate_config():
    """
    Validate that the file format settings are usable.

    Raises:
        ValueError: If the delimiter would break the line-per-record format
    """
    errors = []

    if len(Config.FIELD_DELIMITER) != 1:
        errors.append("Field delimiter must be a single character")

    if Config.FIELD_DELIMITER in ("\n", "\r"):
        errors.append("Field delimiter cannot be a line break")

    if Config.FIELD_COUNT != 4:
        errors.append("Records are stored as exactly four fields")

    if errors:
        raise ValueError(
            "Configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


# Run validation on import
try:
    validate_config()
except ValueError as e:
    logging.warning(f"Configuration validation warning: {e}")
