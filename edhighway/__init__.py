"""Elite Dangerous trip helpers: route ordering, OCR text and image helpers, settings."""

__version__ = "0.14.0"