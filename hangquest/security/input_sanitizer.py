"""Input sanitization for typed guesses and menu choices."""

import re
import unicodedata
from typing import Optional

from hangquest.config import DEFAULT_MAX_INPUT_LENGTH


class InputSanitizer:
    """Turns raw keyboard input into clean text or a single letter."""

    MAX_INPUT_LENGTH = DEFAULT_MAX_INPUT_LENGTH

    def __init__(self, max_length: int = MAX_INPUT_LENGTH) -> None:
        """Initialize sanitizer with configurable limits."""
        self.max_length = max_length

    def sanitize(self, input_text: str) -> str:
        """
        Sanitize input text by:
        1. Normalizing unicode
        2. Removing control characters
        3. Truncating to max length
        4. Stripping whitespace
        """
        if not isinstance(input_text, str):
            raise TypeError(f"Input must be a string, got {type(input_text)}")

        # NFKC composes a base letter and a combining mark into one letter
        normalized = unicodedata.normalize("NFKC", input_text)

        sanitized = re.sub(r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]", "", normalized)

        if len(sanitized) > self.max_length:
            sanitized = sanitized[: self.max_length]

        return sanitized.strip()

    def extract_letter(self, input_text: str) -> Optional[str]:
        """
        Extract a guess from raw input.

        Returns:
            The single alphabetic character typed, or None for anything else
        """
        sanitized = self.sanitize(input_text)
        if len(sanitized) == 1 and sanitized.isalpha():
            return sanitized
        return None

    def parse_option(self, input_text: str) -> Optional[int]:
        """Parse a numeric menu option."""
        sanitized = self.sanitize(input_text)
        if sanitized.isdecimal():
            return int(sanitized)
        return None

    def is_safe(self, input_text: str) -> tuple[bool, Optional[str]]:
        """
        Check if input is usable as a guess.
        Returns (is_safe, error_message).
        """
        if not input_text:
            return False, "Input is empty"

        if len(input_text) > self.max_length:
            return False, f"Input exceeds maximum length of {self.max_length} characters"

        if re.search(r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]", input_text):
            return False, "Input contains control characters"

        if self.extract_letter(input_text) is None:
            return False, "Input is not a single letter"

        return True, None
