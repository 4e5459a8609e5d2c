"""Exceptions raised while generating and rendering presentations."""

from __future__ import annotations


class PresentationError(Exception):
    """Base class for presentation service errors."""


class InvalidInput(PresentationError, ValueError):
    """Raised when a request is missing a topic or asks for an unsupported slide count."""


class UpstreamUnavailable(PresentationError):
    """Raised when the generative-text service cannot produce usable text."""


class ParseFailure(PresentationError):
    """Raised when a generated response contains no usable slide blocks."""


class RenderFailure(PresentationError):
    """Raised when building or writing the presentation file fails."""
