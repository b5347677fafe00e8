"""
Prompt Template Module

This module keeps the question generation prompt separate from the user data
that is injected into it. Templates declare their placeholders explicitly and
every value is sanitized before it is formatted in.

The module contains:
- PromptTemplate: A dataclass for prompt templates with explicit placeholders
- sanitize_text: Utility function for text sanitization

Dependencies:
- dataclasses: For template data structures
- typing: For type hints
- re: For regex-based sanitization
- html: For optional HTML entity encoding
- loguru: For logging truncation and unknown placeholders

Author: @kcaparas1630
"""

from typing import Dict, Optional
from dataclasses import dataclass
import re
import html
from loguru import logger

def sanitize_text(text: str, max_length: int = 1000, escape_html: bool = True) -> str:
    """
    Sanitize text input before it is placed in a prompt.

    This function performs multiple sanitization steps:
    1. Optional HTML entity encoding
    2. Strips leading/trailing whitespace
    3. Removes null bytes and other control characters
    4. Configurable length limiting
    5. Normalizes unicode characters

    Args:
        text (str): The text to sanitize
        max_length (int): Maximum allowed length (default: 1000)
        escape_html (bool): Whether to HTML escape the text (default: True)

    Returns:
        str: The sanitized text

    Raises:
        ValueError: If text is None or empty after sanitization
    """
    if text is None:
        raise ValueError("Text cannot be None")

    text = str(text)

    if escape_html:
        text = html.escape(text)

    text = text.strip()

    # Keep newlines and tabs
    text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', text)

    if len(text) > max_length:
        text = text[:max_length]
        logger.warning(f"Text truncated to {max_length} characters")

    text = text.encode('utf-8', errors='ignore').decode('utf-8')

    if not text:
        raise ValueError("Text cannot be empty after sanitization")

    return text

@dataclass
class PromptTemplate:
    """Prompt template with placeholders for safe data injection."""
    template: str
    placeholders: Dict[str, str]
    sanitization_config: Optional[Dict[str, Dict]] = None  # Per-placeholder sanitization config

    def render(self, **kwargs) -> str:
        """
        Render the template with provided data.

        Args:
            **kwargs: Data to inject into placeholders

        Returns:
            str: Rendered prompt with sanitized data

        Raises:
            ValueError: If required placeholders are missing or data is invalid
        """
        missing_placeholders = set(self.placeholders.keys()) - set(kwargs.keys())
        if missing_placeholders:
            raise ValueError(f"Missing required placeholders: {missing_placeholders}")

        sanitized_data = {}
        for key, value in kwargs.items():
            if key not in self.placeholders:
                logger.warning(f"Unknown placeholder key: {key}")
                continue
            config = self.sanitization_config.get(key, {}) if self.sanitization_config else {}
            if config.get('allow_empty') and (value is None or str(value) == ""):
                sanitized_data[key] = ""
                continue
            if not config.get('sanitize', True):
                # Caller composed this value from already sanitized parts
                sanitized_data[key] = str(value)
                continue
            sanitized_data[key] = sanitize_text(
                str(value),
                max_length=config.get('max_length', 1000),
                escape_html=config.get('escape_html', True),
            )

        try:
            return self.template.format(**sanitized_data)
        except KeyError as e:
            raise ValueError(f"Template rendering error: {e}") from e
