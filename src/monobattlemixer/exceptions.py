"""Exceptions for use in Monobattle Mixer"""

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


# ========== Base Application Exception ==========


class MixerException(Exception):
    """Base exception for all Monobattle Mixer errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Ledger Exceptions ==========


class LedgerException(MixerException):
    """Base exception for pairing ledger errors."""

    pass


class InconsistentLedgerException(LedgerException):
    """Raised when a pair or participant has no entry in the ledger.

    This is a broken invariant (ledger never initialized, or a participant
    that was not registered), never a normal runtime condition.
    """

    pass


class LedgerStateException(LedgerException):
    """Raised when the ledger is used in the wrong lifecycle state."""

    pass


# ========== Pairing Exceptions ==========


class PairingException(MixerException):
    """Base exception for team partition errors."""

    pass


class NoCandidatePartitionException(PairingException):
    """Raised when a slice yields no candidate matchups."""

    pass


# ========== Participant Exceptions ==========


class ParticipantException(MixerException):
    """Base exception for participant-related errors."""

    pass


class DuplicateParticipantException(ParticipantException):
    """Raised when the same participant name is registered twice."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(MixerException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(MixerException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
