"""Configuration of the Logger-Simple client."""

from .user import LoggerSimpleConfiguration

__all__ = ["LoggerSimpleConfiguration"]
