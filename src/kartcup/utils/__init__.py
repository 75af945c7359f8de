"""Shared helpers for Kart Cup: logging setup and id generation."""

# Kart Cup
# Copyright (C) 2025  Kart Cup developers
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
import uuid

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "kartcup"


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a module logger under the package logger.

    The package logger gets a single console handler on first use; module
    loggers only propagate to it, so one ``setLevel`` on ``kartcup`` changes
    verbosity everywhere.

    Args:
        name: Logger name, usually ``__name__``
        level: Package level set when the handler is created

    Returns:
        Logger for ``name``
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(level)
    return logging.getLogger(name)


def generate_id(prefix: str) -> str:
    """Generate a unique identifier such as ``player_3f2a9c1d7b4e``."""
    return f"{prefix.lower()}_{uuid.uuid4().hex[:12]}"
