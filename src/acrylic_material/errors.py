"""Exception types raised by the acrylic material pipeline."""
from __future__ import annotations


class AcrylicError(Exception):
    """Base class for every failure surfaced by the package."""


class MissingConfiguration(AcrylicError):
    """Raised when generation starts without a background or blur algorithm."""


class InvalidArgument(AcrylicError, ValueError):
    """Raised for out-of-range parameters or malformed inputs."""


class DimensionMismatch(AcrylicError, ValueError):
    """Raised by strict compositing when layer sizes differ from the base."""


class BlurFailed(AcrylicError):
    """Raised when a blur algorithm cannot produce output for a buffer."""


__all__ = [
    "AcrylicError",
    "MissingConfiguration",
    "InvalidArgument",
    "DimensionMismatch",
    "BlurFailed",
]
