"""
Error types for time-display

Every failure is a TimeDisplayError. Call boundaries wrap lower-level
errors with ``raise TimeDisplayError("while ...") from err`` so the
user sees the whole causal chain.
"""

from typing import List


class TimeDisplayError(Exception):
    """Base error carrying a human-readable message"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TimeParseError(TimeDisplayError, ValueError):
    """Malformed time text"""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class TimeRangeError(TimeDisplayError, ValueError):
    """Time value outside the representable tick range"""


class GlyphLookupError(TimeDisplayError, LookupError):
    """Character has no glyph tile"""

    def __init__(self, char: str):
        super().__init__(f"char '{char}' not exists.")
        self.char = char


class RenderError(TimeDisplayError):
    """Text cannot be composed into an image"""


class GlyphBuildError(TimeDisplayError):
    """Glyph asset missing or corrupt"""


class OutputError(TimeDisplayError, OSError):
    """Output directory or image file could not be written"""


def error_chain(error: BaseException) -> List[str]:
    """Messages from the outermost error down to the root cause"""
    messages = []
    seen = set()
    current = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        messages.append(str(current) or current.__class__.__name__)
        current = current.__cause__
    return messages


def format_error_chain(error: BaseException) -> str:
    return ": ".join(error_chain(error))
