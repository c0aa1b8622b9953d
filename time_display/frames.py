"""
Frame output - still images and numbered frame sequences

A FramePlan describes every frame time in [0, length) at a fixed frame
rate, together with the zero-padded width used for frame file names.
Frame times are derived from the frame index on demand.
"""

import logging
import math
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path
from typing import Iterator, List, Union

from PIL import Image

from .config import IMAGE_EXTENSION, PROGRESS_LOG_INTERVAL, TICKS_PER_SECOND
from .errors import OutputError, TimeDisplayError
from .renderer import TimeRenderer
from .timecode import StopwatchTime

PathLike = Union[str, Path]


@dataclass(frozen=True)
class FramePlan:
    """Frame count of a bulk run and the file name width"""
    length: StopwatchTime
    framerate: float
    frame_count: int
    digits: int

    @property
    def frame_interval(self) -> float:
        return 1.0 / self.framerate

    def time_at(self, index: int) -> StopwatchTime:
        """Time shown by frame ``index``, truncated to whole ticks"""
        if not 0 <= index < self.frame_count:
            raise IndexError(f"frame {index} outside 0..{self.frame_count - 1}")
        return StopwatchTime(math.floor(index * TICKS_PER_SECOND / Fraction(self.framerate)))

    def times(self) -> Iterator[StopwatchTime]:
        for index in range(self.frame_count):
            yield self.time_at(index)

    def file_name(self, index: int) -> str:
        return f"{index:0{self.digits}d}{IMAGE_EXTENSION}"


def name_width(frame_count: int) -> int:
    """Digits needed to number ``frame_count`` frames"""
    if frame_count < 1:
        return 1
    return 1 + int(math.floor(math.log10(frame_count)))


def plan_frames(length: StopwatchTime, framerate: float) -> FramePlan:
    """
    Plan frames from zero up to, but excluding, ``length``.

    Frame ``i`` shows ``floor(i / framerate)`` in ticks, so there are
    exactly ``ceil(length * framerate)`` frames and no drift over long runs.
    """
    if not math.isfinite(framerate) or framerate <= 0:
        raise ValueError(f"framerate must be a positive number, got {framerate}")

    frame_count = math.ceil(length.ticks * Fraction(framerate) / TICKS_PER_SECOND)
    return FramePlan(length, framerate, frame_count, name_width(frame_count))

def save_image(img: Image.Image, path: PathLike) -> Path:
    """Write ``img`` as PNG, creating the parent directory if needed"""
    path = Path(path)
    try:
        if path.parent != Path('.'):
            path.parent.mkdir(parents=True, exist_ok=True)
        img.save(path, format='PNG')
    except (OSError, ValueError) as e:
        raise OutputError(f"failed to write {path}") from e
    return path


def write_still(renderer: TimeRenderer, time: StopwatchTime, path: PathLike) -> Path:
    """Render one time reading to ``path``"""
    try:
        img = renderer.render_time(time)
    except TimeDisplayError as e:
        raise TimeDisplayError("while generating image") from e

    try:
        written = save_image(img, path)
    except OutputError as e:
        raise OutputError("while saving image") from e

    logging.info(f"Wrote {written} for {time.render().strip()}")
    return written


def write_frames(renderer: TimeRenderer, plan: FramePlan, out_dir: PathLike) -> List[Path]:
    """
    Render every frame of ``plan`` into ``out_dir``.

    The first failing frame aborts the run; frames already written stay
    on disk.
    """
    out_dir = Path(out_dir)
    if not out_dir.exists():
        try:
            out_dir.mkdir(parents=True)
        except OSError as e:
            raise OutputError("failed create output directory") from e

    logging.info(f"Generating {plan.frame_count} frames at {plan.framerate:g} fps into {out_dir}")

    written = []
    for index, time in enumerate(plan.times()):
        try:
            img = renderer.render_time(time)
        except TimeDisplayError as e:
            raise TimeDisplayError(f"while generating image for {time}") from e

        file_name = plan.file_name(index)
        try:
            written.append(save_image(img, out_dir / file_name))
        except OutputError as e:
            raise OutputError(f"while saving image {file_name}") from e

        if (index + 1) % PROGRESS_LOG_INTERVAL == 0:
            logging.info(f"Wrote {index + 1}/{plan.frame_count} frames")

    logging.info(f"Finished {len(written)} frames in {out_dir}")
    return written
