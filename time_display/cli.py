"""
Command line entry point

    time-display [TIME] [-o OUTPUT]
    time-display bulk [LENGTH] [-o DIR] [-r FPS]

Missing TIME/LENGTH is read interactively from standard input.
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import config
from .config import DisplayConfig
from .errors import TimeDisplayError, TimeParseError, format_error_chain
from .frames import plan_frames, write_frames, write_still
from .glyphs import GlyphSet
from .renderer import TimeRenderer
from .timecode import StopwatchTime


def _add_glyph_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--glyphs', default=config.GLYPHS_DIR, metavar='DIR',
                        help='Directory with 0.png..9.png, null.png, min.png, sec.png '
                             '(default: built-in seven-segment glyphs)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')


def build_single_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='time-display',
        description='Render a stopwatch reading as a PNG image. '
                    "Run 'time-display bulk -h' for frame sequences.")
    parser.add_argument('time', nargs='?',
                        help='Specify time to generate. (ex: 1:23.45)')
    parser.add_argument('-o', '--output', default=config.DEFAULT_OUTPUT,
                        help='Output to specified PNG file.')
    _add_glyph_options(parser)
    return parser


def build_bulk_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='time-display bulk',
        description='Render one PNG per frame from 0 up to LENGTH.')
    parser.add_argument('len', nargs='?', metavar='LENGTH',
                        help='Specify length to generate. (ex: 1:23.45)')
    parser.add_argument('-o', '--output', default=config.DEFAULT_FRAMES_DIR,
                        help='Output directory.')
    parser.add_argument('-r', '--framerate', default=str(config.DEFAULT_FRAMERATE),
                        help='Output framerate')
    _add_glyph_options(parser)
    return parser


def read_time(stdin: TextIO = None, stdout: TextIO = None, stderr: TextIO = None) -> StopwatchTime:
    """Prompt until a valid time is entered"""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    while True:
        stdout.write(config.PROMPT)
        stdout.flush()

        line = stdin.readline()
        if not line:
            raise TimeDisplayError("unexpected end of input")

        try:
            return StopwatchTime.parse(line.strip())
        except TimeParseError as e:
            print(f"Invalid input: {e}", file=stderr)


def _resolve_time(text: Optional[str]) -> StopwatchTime:
    if text is not None:
        try:
            return StopwatchTime.parse(text)
        except TimeParseError as e:
            raise TimeDisplayError("failed parse time") from e

    try:
        return read_time()
    except TimeDisplayError as e:
        raise TimeDisplayError("while reading time from input") from e


def _check_config(settings: DisplayConfig) -> None:
    issues = settings.validate()
    if issues:
        raise TimeDisplayError(f"invalid configuration: {'; '.join(issues)}")


def single(args: argparse.Namespace) -> None:
    t = _resolve_time(args.time)

    settings = DisplayConfig(output=args.output, glyphs_dir=args.glyphs)
    _check_config(settings)

    renderer = TimeRenderer(GlyphSet.load(settings.glyphs_dir))
    write_still(renderer, t, settings.output)


def bulk(args: argparse.Namespace) -> None:
    time_limit = _resolve_time(args.len)

    try:
        rate = float(args.framerate)
    except ValueError as e:
        raise TimeDisplayError("failed parse framerate") from e

    settings = DisplayConfig(frames_dir=args.output, framerate=rate, glyphs_dir=args.glyphs)
    _check_config(settings)

    renderer = TimeRenderer(GlyphSet.load(settings.glyphs_dir))
    plan = plan_frames(time_limit, settings.framerate)
    write_frames(renderer, plan, settings.frames_dir)


def configure_logging(verbose: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(config.LOG_LEVEL.upper())
        # Unknown names come back as "Level <NAME>"
        if not isinstance(level, int):
            raise TimeDisplayError(f"invalid log level \"{config.LOG_LEVEL}\" "
                                   f"in TIME_DISPLAY_LOG_LEVEL")
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def run(argv: List[str]) -> None:
    """Dispatch to the main command or the 'bulk' subcommand"""
    if argv and argv[0] == 'bulk':
        args = build_bulk_parser().parse_args(argv[1:])
        configure_logging(args.verbose)
        try:
            bulk(args)
        except TimeDisplayError as e:
            raise TimeDisplayError("while executing subcommand 'bulk'") from e
        return

    args = build_single_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        single(args)
    except TimeDisplayError as e:
        raise TimeDisplayError("while executing main command") from e


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        run(argv)
    except TimeDisplayError as e:
        print(f"ERROR: {format_error_chain(e)}", file=sys.stderr)
        return 1

    return 0
