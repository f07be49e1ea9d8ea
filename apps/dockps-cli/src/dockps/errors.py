"""Custom exceptions for the dockps CLI."""

from __future__ import annotations


class DockpsError(Exception):
    """Base exception for all dockps operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class DockerUnavailableError(DockpsError):
    """Could not connect to the Docker daemon."""


class DockerError(DockpsError):
    """Docker API request failed."""


class ConfigError(DockpsError):
    """Environment configuration is invalid."""
