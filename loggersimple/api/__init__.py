"""Requests to the Logger-Simple server."""

from .transport import Transport

__all__ = ["Transport"]
