"""Conversion error taxonomy."""

from __future__ import annotations


class BrailleSightError(Exception):
    """Base class for every error raised by the conversion engine."""


class ImageLoadError(BrailleSightError):
    """The source could not be read or its bytes could not be decoded as an image."""


class RenderContextError(BrailleSightError):
    """The pixel-sampling surface could not be produced for this call."""


class InvalidArgumentError(BrailleSightError, ValueError):
    """Degenerate size: non-positive width/height or a zero-area image."""
