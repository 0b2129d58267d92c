"""Text normalization utilities for consistent query and field processing."""

import re
from typing import List


class TextNormalizer:
    """Handles text normalization for case-insensitive matching."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        # Words are separated by runs of whitespace only
        self.whitespace_regex = re.compile(r'\s+')

    def normalize(self, text: str) -> str:
        """
        Normalize text for consistent comparison.

        Args:
            text: Input text to normalize

        Returns:
            Trimmed, lower-cased text
        """
        if not text:
            return ""

        return text.strip().lower()

    def is_blank(self, text: str) -> bool:
        """Check whether text is missing, empty or whitespace-only."""
        return not text or not text.strip()

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into whitespace-delimited words.

        Args:
            text: Input text

        Returns:
            List of non-empty tokens, original case preserved
        """
        if not text:
            return []

        return [token for token in self.whitespace_regex.split(text.strip()) if token]
