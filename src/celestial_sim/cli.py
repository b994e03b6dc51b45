# MIT License (see LICENSE)
"""
Command line entry point.

Usage:
    celestial-sim [-r STEPS] [-o OUTPUT] [--scale UNITS] [-v | -q] [FILE]

Loads the run stored in FILE (or starts from the built-in default universe),
advances it STEPS seconds and stores the result in OUTPUT, which defaults to
FILE. A collision ends the run early but is not an error, and neither is
loading a run that already collided: the run is stored unchanged. The exit
status is 0 on success and 1 on invalid input.
"""
from __future__ import annotations
import argparse
import json
import logging
import sys

from .bodies import Moon, Planet, Sun
from .errors import Collision, InvalidInputError, TimelineCollidedError
from .geometry import Orbit, Polar, degrees
from .io import load_timeline, save_timeline
from .profiler import Profiler
from .simulation import Timeline
from .units import RasterScale
from .universe import Universe

logger = logging.getLogger(__name__)


def default_universe() -> Universe:
    """Two suns, a moon and a continent: the universe used without FILE."""
    universe = Universe()
    universe.add(Sun(
        "Greater sun",
        origin=(0.0, 0.0, 0.0),
        orbit=Orbit(Polar(0.01, 0.0, degrees(90)), period_theta=4, period_phi=16),
        radius=0.002,
        energy_output=1.0,
    ))
    universe.add(Sun(
        "Lesser sun",
        origin=(0.0, 0.0, 0.0),
        orbit=Orbit(Polar(0.1, 0.0, degrees(90)), period_theta=16, period_phi=256),
        radius=0.001,
        energy_output=1.0,
    ))
    universe.add(Moon(
        "Zar",
        origin=(0.0, 0.0, 0.0),
        orbit=Orbit(Polar(1.0, 0.0, degrees(90)), period_theta=16, period_phi=256),
        radius=0.001,
    ))
    universe.add(Planet("The continent", origin=(-0.2, -0.2, 0.0), length=0.4, width=0.4))
    return universe


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="celestial-sim",
        description="Run the celestial body simulator.",
    )
    parser.add_argument("file", nargs="?", default=None, help="Saved run to load (JSON).")
    parser.add_argument("-r", "--run", type=int, default=0, metavar="STEPS",
                        help="Run the simulator STEPS seconds.")
    parser.add_argument("-o", "--output", default=None,
                        help="Where to store the run; defaults to FILE.")
    parser.add_argument("--scale", type=float, default=None, metavar="UNITS",
                        help="Grid units per metre.")
    parser.add_argument("--profile", action="store_true", help="Log per-phase timings.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    return parser


def _load(path: str | None, scale: RasterScale, profiler: Profiler | None) -> Timeline:
    """Load the run in path, falling back to the default universe."""
    if path is not None:
        try:
            return load_timeline(path, scale=scale, profiler=profiler)
        except FileNotFoundError:
            logger.error("No such file '%s', using defaults.", path)
        except (OSError, json.JSONDecodeError, InvalidInputError) as e:
            logger.error("Load failure using defaults, error '%s'.", e)
    return Timeline(default_universe(), scale=scale, profiler=profiler)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        scale = RasterScale(args.scale) if args.scale is not None else RasterScale()
        profiler = Profiler() if args.profile else None
        timeline = _load(args.file, scale, profiler)

        try:
            timeline.advance(args.run)
        except Collision:
            logger.critical("There was a collision in the universe, simulation aborted.")
        except TimelineCollidedError:
            logger.critical("The universe already had a collision at t=%s, nothing to run.", timeline.time)

        if profiler is not None:
            for name, stats in profiler.stats.summary().items():
                logger.info("%s: %s", name, stats)
            logger.info("counters: %s", profiler.stats.counters)

        output = args.output or args.file
        if output:
            try:
                save_timeline(timeline, output)
            except OSError as e:
                logger.error("Save failure, error '%s'.", e)
    except InvalidInputError as e:
        logger.critical("Invalid input: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
