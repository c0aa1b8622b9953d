"""
Time Display
Renders stopwatch readings ("M:SS.CC") as images built from digit glyph tiles
"""

from .errors import (
    TimeDisplayError, TimeParseError, TimeRangeError, GlyphLookupError,
    RenderError, GlyphBuildError, OutputError,
)
from .timecode import StopwatchTime
from .glyphs import GlyphSet
from .renderer import TimeRenderer, render_text
from .frames import FramePlan, plan_frames, write_frames, write_still

__all__ = [
    'StopwatchTime', 'GlyphSet', 'TimeRenderer', 'render_text',
    'FramePlan', 'plan_frames', 'write_frames', 'write_still',
    'TimeDisplayError', 'TimeParseError', 'TimeRangeError', 'GlyphLookupError',
    'RenderError', 'GlyphBuildError', 'OutputError',
]
