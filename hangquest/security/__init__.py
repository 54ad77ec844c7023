"""Input sanitization module for hangquest."""

from hangquest.security.input_sanitizer import InputSanitizer

__all__ = ["InputSanitizer"]
