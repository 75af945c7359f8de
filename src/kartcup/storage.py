"""Saving and loading the tournament state as a JSON file.

The whole state is written on every save; there is no partial persistence.
"""

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

import json
import os
from pathlib import Path
from typing import Optional, Union

from kartcup.constants import DEFAULT_STATE_FILE, STATE_FILE_ENV_VAR
from kartcup.exceptions import FileLoadException, FileSaveException
from kartcup.models import TournamentState
from kartcup.utils import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


def default_state_path() -> Path:
    """State file from the environment, or ``kartcup.json`` in the cwd."""
    return Path(os.environ.get(STATE_FILE_ENV_VAR, DEFAULT_STATE_FILE))


def save_state(state: TournamentState, path: PathLike) -> None:
    """Write the whole tournament to ``path``.

    Raises:
        FileSaveException: If the file cannot be written
    """
    path = Path(path)
    data = state.to_dict()
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)
    except OSError as e:
        raise FileSaveException(f"Could not save tournament to {path}: {e}") from e
    logger.debug(f"Saved tournament ({state.phase.value}) to {path}")


def load_state(path: Optional[PathLike] = None) -> TournamentState:
    """Read a tournament from ``path``; a missing file gives an empty one.

    Raises:
        FileLoadException: If the file exists but cannot be read or parsed
    """
    path = Path(path) if path is not None else default_state_path()
    if not path.exists():
        logger.debug(f"No state file at {path}, starting fresh")
        return TournamentState()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        state = TournamentState.from_dict(data)
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise FileLoadException(f"Could not load tournament from {path}: {e}") from e

    logger.debug(f"Loaded tournament ({state.phase.value}) from {path}")
    return state
