"""
Galaxy Generator
================

Procedurally generates a spiral galaxy point cloud over a static star field
and lets you reshape it live.

Usage:
    python main.py                          # Default galaxy
    python main.py --preset pinwheel        # Start from a preset
    python main.py --count 50000 --spin -2  # Override individual parameters
    python main.py --list-presets           # Show available presets

Controls:
    - UP/DOWN: Select parameter
    - LEFT/RIGHT: Change parameter (SHIFT: coarse / brightness); applied on release
    - SPACE/ENTER: Toggle attenuation / Reset Camera
    - TAB: Toggle panel
    - Mouse drag or WASD: Orbit camera
    - Mouse wheel or Q/E: Zoom
    - ESC: Quit
"""

import argparse

from config import galaxy as config
from galaxy import GalaxyParameters


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Procedural galaxy generator")
    parser.add_argument("--preset", type=str, default="classic", help="Start from a named preset")
    parser.add_argument("--list-presets", action="store_true", help="List presets and exit")
    parser.add_argument("--seed", type=int, help="Seed the random source for repeatable galaxies")
    parser.add_argument("--width", type=int, help="Window width")
    parser.add_argument("--height", type=int, help="Window height")

    group = parser.add_argument_group("galaxy parameters")
    group.add_argument("--count", "-n", type=int, help="Number of particles (100-200000)")
    group.add_argument("--size", type=float, help="Point size (0.001-0.1)")
    group.add_argument("--radius", "-r", type=float, help="Galaxy radius (0.01-20)")
    group.add_argument("--branches", "-b", type=int, help="Number of spiral arms (2-20)")
    group.add_argument("--spin", type=float, help="Arm twist per unit radius (-5-5)")
    group.add_argument("--randomness", type=float, help="Noise amplitude (0.01-2)")
    group.add_argument("--randomness-power", type=float, help="Noise falloff exponent (-1-10)")
    group.add_argument("--inside-color", type=str, help="Core color, e.g. '#ff6030'")
    group.add_argument("--outside-color", type=str, help="Rim color, e.g. '#1b3984'")
    group.add_argument("--no-attenuation", action="store_true", help="Disable point size attenuation")
    return parser


def params_from_args(args: argparse.Namespace) -> GalaxyParameters:
    """Preset values overridden by any parameter given on the command line."""
    params = GalaxyParameters.from_preset(args.preset)
    for name in ("count", "size", "radius", "branches", "spin", "randomness",
                 "randomness_power", "inside_color", "outside_color"):
        value = getattr(args, name)
        if value is not None:
            params = params.with_value(name, value)
    if args.no_attenuation:
        params = params.with_value("size_attenuation", False)
    return params.clamped()


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.list_presets:
        for name, overrides in config.PRESETS.items():
            summary = ", ".join(f"{k}={v}" for k, v in overrides.items()) or "defaults"
            print(f"  {name:<10} {summary}")
        return

    params = params_from_args(args)

    # Deferred so --list-presets works without a display
    from core.application import Application

    app = Application(params, seed=args.seed, width=args.width, height=args.height)
    app.run()


if __name__ == "__main__":
    main()
