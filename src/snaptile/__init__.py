"""
SnapTile 1.0

A headless tiling window manager engine: windows float, are dragged, and
snap to the screen edge or into a recursively halved grid of regions.

Usage:
    python -m snaptile --script events.json
    python -m snaptile --script events.json --width 1920 --height 1080 --profile

Or:
    from snaptile import TilerEngine
    engine = TilerEngine()
"""

import argparse
import json
import logging
import sys
from pathlib import Path

__version__ = "1.0.0"
__author__ = "SnapTile Team"

from snaptile.config import CONFIG_FILE, TilerSettings, load_settings
from snaptile.core import TilerEngine, event_from_dict
from snaptile.models import Size
from snaptile.utils.profiling import profiler


def main(argv=None):
    """Replay an event script and print the resulting snapshot as JSON."""
    parser = argparse.ArgumentParser(
        description="SnapTile - replay window events through the tiling engine"
    )
    parser.add_argument(
        "--script", "-s",
        type=str,
        help="Path to a JSON list of events (reads stdin when omitted)"
    )
    parser.add_argument("--width", type=float, help="Viewport width")
    parser.add_argument("--height", type=float, help="Viewport height")
    parser.add_argument("--seed", type=int, help="Seed for floating placement")
    parser.add_argument(
        "--config", "-c",
        type=str,
        help=f"Settings file (default: {CONFIG_FILE})"
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Print a timing summary after the replay"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"SnapTile {__version__}"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    settings = load_settings(Path(args.config)) if args.config else load_settings()
    if args.seed is not None:
        settings.placement_seed = args.seed
    viewport = Size(args.width or settings.viewport_width,
                    args.height or settings.viewport_height)

    if args.script:
        with open(args.script, 'r', encoding='utf-8') as f:
            raw_events = json.load(f)
    else:
        raw_events = json.load(sys.stdin)

    profiler.enabled = args.profile
    engine = TilerEngine(viewport, settings)
    engine.dispatch_all(event_from_dict(e) for e in raw_events)

    print(json.dumps(engine.snapshot().to_dict(), indent=2))
    if args.profile:
        profiler.print_summary()
    return 0


__all__ = ["TilerEngine", "TilerSettings", "main", "__version__"]
