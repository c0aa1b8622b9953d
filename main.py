"""
Time Display Main Application

Entry point for rendering stopwatch readings to PNG images.
"""
import sys

from time_display.cli import main

if __name__ == "__main__":
    sys.exit(main())
