"""
Time Display Configuration

Central configuration file for all constants and settings.
"""
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

# Fixed-point time
TICKS_PER_SECOND = 1_000_000
TICKS_PER_MINUTE = 60 * TICKS_PER_SECOND
MAX_TICKS = 2 ** 64 - 1

# Command defaults
DEFAULT_OUTPUT = "output.png"
DEFAULT_FRAMES_DIR = "frames"
DEFAULT_FRAMERATE = 60.0
IMAGE_EXTENSION = ".png"
PROMPT = "Enter time (ex: 1:23.45): "

# Bulk mode logs progress every N frames
PROGRESS_LOG_INTERVAL = 500

# Environment overrides
GLYPHS_DIR = os.getenv("TIME_DISPLAY_GLYPHS")
LOG_LEVEL = os.getenv("TIME_DISPLAY_LOG_LEVEL", "WARNING")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Glyph asset file names, keyed by the symbol they draw
GLYPH_FILES = {
    **{str(digit): f"{digit}.png" for digit in range(10)},
    " ": "null.png",
    ":": "min.png",
    ".": "sec.png",
}


@dataclass(frozen=True)
class GlyphStyle:
    """
    Geometry of the built-in seven-segment glyph tiles.

    All sizes are in pixels. Every tile shares ``cell_height``.
    """

    cell_width: int = 40
    cell_height: int = 64
    stroke: int = 6
    padding: int = 4
    colon_width: int = 16
    dot_width: int = 14
    foreground: Tuple[int, int, int, int] = (255, 255, 255, 255)
    background: Tuple[int, int, int, int] = (0, 0, 0, 0)

    def validate(self) -> List[str]:
        """Validate configuration and return list of issues"""
        issues = []

        for field in ('cell_width', 'cell_height', 'colon_width', 'dot_width', 'stroke'):
            value = getattr(self, field)
            if value <= 0:
                issues.append(f"{field} must be positive, got {value}")

        if self.padding < 0:
            issues.append(f"padding must not be negative, got {self.padding}")

        # Two horizontal gaps plus three horizontal strokes must fit
        if self.cell_height < 2 * self.padding + 3 * self.stroke:
            issues.append(f"cell_height {self.cell_height} too small for stroke {self.stroke}")
        if self.cell_width < 2 * self.padding + 2 * self.stroke:
            issues.append(f"cell_width {self.cell_width} too small for stroke {self.stroke}")

        for field in ('foreground', 'background'):
            color = getattr(self, field)
            if not (isinstance(color, tuple) and len(color) == 4 and
                    all(0 <= c <= 255 for c in color)):
                issues.append(f"{field} must be RGBA tuple (0-255), got {color}")

        return issues


@dataclass
class DisplayConfig:
    """Settings resolved from the command line and environment"""

    output: str = DEFAULT_OUTPUT
    frames_dir: str = DEFAULT_FRAMES_DIR
    framerate: float = DEFAULT_FRAMERATE
    glyphs_dir: Optional[str] = GLYPHS_DIR

    def validate(self) -> List[str]:
        """Validate configuration and return list of issues"""
        issues = []

        if not self.framerate > 0 or self.framerate == float("inf"):
            issues.append(f"framerate must be a positive number, got {self.framerate}")

        if self.glyphs_dir is not None and not os.path.isdir(self.glyphs_dir):
            issues.append(f"Glyph directory not found: {self.glyphs_dir}")

        return issues
