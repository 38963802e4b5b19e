#!/usr/bin/env python3
"""
Interactive remote control for a simulated light.

Reads button presses from stdin, one per line, and prints the light state
after each one.

Usage:
    lightremote                 # lenient brightness handling
    lightremote --strict        # reject out-of-range brightness with an error
    echo "on\\nb 40\\nundo" | lightremote

Buttons:
    on | off | brightness <level> (alias: b) | undo | status | quit (alias: exit)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from .core.config import settings
from .domain.models import InvalidBrightnessLevel
from .factory import RemoteSystem, create_light_and_remote

log = logging.getLogger("remote")


# ---------------------------------------------------------------------------
# Button handling
# ---------------------------------------------------------------------------

def format_state(system: RemoteSystem) -> str:
    s = system.light.state()
    return f"light={'ON' if s.is_on else 'OFF'} brightness={s.brightness}"


def handle_line(system: RemoteSystem, line: str, out: TextIO) -> bool:
    """Apply one button press. Returns False when the session should end."""
    parts = line.split()
    if not parts:
        return True

    button, args = parts[0].lower(), parts[1:]
    remote = system.remote

    if button in ("quit", "exit"):
        return False

    try:
        if button == "on":
            remote.press_on_button()
        elif button == "off":
            remote.press_off_button()
        elif button in ("brightness", "b"):
            if len(args) > 1:
                raise ValueError("usage: brightness <level>")
            remote.press_brightness_button(int(args[0]) if args else None)
        elif button == "undo":
            remote.press_undo_button()
        elif button != "status":
            print(f"error: unknown button '{button}'", file=out)
            return True
    except (InvalidBrightnessLevel, ValueError) as e:
        print(f"error: {e}", file=out)
        return True

    print(format_state(system), file=out)
    return True


def run(system: RemoteSystem, lines: TextIO, out: TextIO) -> None:
    log.debug("Remote ready")
    for line in lines:
        if not handle_line(system, line, out):
            break
    log.debug("Remote closed")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def main(argv: Optional[Sequence[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Interactive smart light remote")

    p.add_argument("--strict", action="store_true", default=None,
                   help="Report out-of-range brightness instead of ignoring it "
                        "(default: STRICT_BRIGHTNESS setting)")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)-5s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    system = create_light_and_remote(strict=args.strict)
    run(system, sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()
