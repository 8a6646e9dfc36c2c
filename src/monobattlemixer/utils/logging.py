"""Logging utilities."""

# Monobattle Mixer
# Copyright (C) 2025  Monobattle Mixer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


import logging
import os
import sys
import tempfile
from logging.handlers import RotatingFileHandler
from typing import Optional

from monobattlemixer.constants import (
    LOG_APP_FOLDER,
    LOG_BACKUP_COUNT,
    LOG_FILE_NAME,
    LOG_MAX_BYTES,
)

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"

# every module logger lives under this name
PACKAGE_LOGGER_NAME = "monobattlemixer"


def _log_folder() -> Optional[str]:
    """Pick a writable folder for the log file, or None."""
    # Preferred Windows location: %APPDATA%\Monobattle Mixer
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return os.path.join(appdata, LOG_APP_FOLDER, "logs")
    return os.path.join(tempfile.gettempdir(), LOG_APP_FOLDER, "logs")


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up loger for a python module.

    Sets up file handler and console handler

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    lgr.setLevel(logging.INFO)  # Set minimum level
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    file_handler = None
    log_folder = _log_folder()
    if log_folder:
        try:
            os.makedirs(log_folder, exist_ok=True)
            log_path = os.path.join(log_folder, LOG_FILE_NAME)
            # Use RotatingFileHandler to prevent unbounded log growth
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setFormatter(log_formatter)
        except OSError:
            # continue without file logging
            file_handler = None

    # Console Handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(logging.INFO)
    lgr.addHandler(console_handler)
    if file_handler:
        lgr.addHandler(file_handler)
    lgr.debug("logger %s initialized", logger_name)
    return lgr


def set_log_level(level: int) -> None:
    """Set ``level`` on every package logger and its handlers.

    Used to switch the whole package into debug output at run time.
    """
    for name, lgr in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(lgr, logging.Logger):
            continue
        if name != PACKAGE_LOGGER_NAME and not name.startswith(
            PACKAGE_LOGGER_NAME + "."
        ):
            continue
        lgr.setLevel(level)
        for handler in lgr.handlers:
            handler.setLevel(level)


#  LocalWords:  loger
