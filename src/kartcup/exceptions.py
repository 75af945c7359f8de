"""Exceptions for use in Kart Cup"""

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


# ========== Base Application Exception ==========


class KartCupException(Exception):
    """Base exception for all Kart Cup errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Scheduling Exceptions ==========


class SchedulingException(KartCupException):
    """Raised when a schedule attempt hits a forced collision.

    Only the schedule generator's retry loop sees this one.
    """

    pass


# ========== Tournament Exceptions ==========


class TournamentException(KartCupException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid phase for the requested operation."""

    pass


class RaceNotFoundException(TournamentException):
    """Raised when a requested race does not exist."""

    pass


class SessionNotFoundException(TournamentException):
    """Raised when a requested semi-final session does not exist."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(KartCupException):
    """Base exception for validation errors.

    The message is meant to be shown to the operator as is.
    """

    pass


class InvalidPlayerDataException(ValidationException):
    """Raised when player data is invalid or incomplete."""

    pass


class RosterSizeException(ValidationException):
    """Raised when the roster is too small for the requested operation."""

    pass


class InvalidPositionException(ValidationException):
    """Raised when a finish position is invalid (out of range, not a participant)."""

    pass


class IncompleteRacesException(ValidationException):
    """Raised when a phase cannot end because some races have no results."""

    pass


class QualifierSelectionException(ValidationException):
    """Raised when the semi-final qualifier selection is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(KartCupException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
