"""Logging utilities for tiles.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

and the application configures handlers once at start-up with
setup_tui_logging(). A Textual app owns the terminal, so log records go to
a rotating file under the config directory instead of stderr.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config.constants import (
    LOG_BACKUP_COUNT,
    LOG_FILE_NAME,
    MAX_LOG_BYTES,
    TILES_CONFIG_DIR,
)

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_path(log_dir: Optional[Path] = None) -> Path:
    log_dir = log_dir or TILES_CONFIG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / LOG_FILE_NAME


def setup_tui_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Set up file logging for the TUI.

    The root logger is set to WARNING to avoid noise from third-party libs.
    tiles' own loggers (tiles.*) are set to INFO, or DEBUG when verbose,
    which records every split, close and ignored request.

    Returns:
        The "tiles" package logger
    """
    tiles_logger = logging.getLogger("tiles")
    tiles_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    try:
        log_file = get_log_path(log_dir)

        if not logging.getLogger().handlers:
            handler = RotatingFileHandler(
                log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            logging.basicConfig(level=logging.WARNING, handlers=[handler])

    except OSError as e:
        # Logging is what failed, so report on stderr before the TUI starts
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)

    return tiles_logger
