import argparse
import json
import logging
import sys
from dataclasses import replace

from activity_geometry import __version__, get_git_hash
from activity_geometry.climbs import detect_climbs
from activity_geometry.config import DEFAULTS, climb_params_from_config, get_setting, load_config
from activity_geometry.export import build_poster_data
from activity_geometry.formatters import (
    format_distance,
    format_duration,
    format_gradient,
    format_pace,
    format_power,
)
from activity_geometry.gradient import TwoStopGradient
from activity_geometry.ingest import load_activity
from activity_geometry.models import ActivityStreams, ClimbSummary, Split
from activity_geometry.smoothing import smooth_elevations
from activity_geometry.splits import compute_splits


def build_parser(config: dict | None = None) -> argparse.ArgumentParser:
    """Build argument parser with defaults from config file."""
    if config is None:
        config = {}

    def get_default(key: str):
        return config.get(key, DEFAULTS[key])

    parser = argparse.ArgumentParser(
        prog="activity-geometry",
        description="Detect climbs in a recorded activity and export poster chart data.",
    )
    parser.add_argument("activity_file", help="Path to a .gpx file or a Strava activity .json payload")
    parser.add_argument(
        "--min-gradient",
        type=float,
        default=get_default("min_gradient"),
        help=f"Gradient in %% that opens a climb and minimum climb average (default: {DEFAULTS['min_gradient']})",
    )
    parser.add_argument(
        "--min-length",
        type=float,
        default=get_default("min_length"),
        help=f"Shortest climb kept, in meters (default: {DEFAULTS['min_length']})",
    )
    parser.add_argument(
        "--dip-tolerance",
        type=float,
        default=get_default("dip_tolerance"),
        help=f"Steepest gradient in %% tolerated inside a climb (default: {DEFAULTS['dip_tolerance']})",
    )
    parser.add_argument(
        "--smoothing",
        type=float,
        default=get_default("smoothing"),
        help=f"Elevation smoothing radius in meters (default: {DEFAULTS['smoothing']})",
    )
    parser.add_argument(
        "--no-smoothing",
        action="store_true",
        help="Disable elevation smoothing",
    )
    parser.add_argument(
        "--splits",
        action="store_true",
        help="Also report fixed-distance splits",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print route, profile and climb chart data as JSON instead of a report",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__} ({get_git_hash()})",
    )
    return parser


def format_climb_report(
    name: str,
    climbs: list[ClimbSummary],
    streams: ActivityStreams,
    show_power: bool = True,
) -> str:
    """Climb table; the Power column is left out when show_power is False."""
    lines = [f"=== Climbs: {name or 'Activity'} ==="]
    if not climbs:
        lines.append("No climbs detected.")
        return "\n".join(lines)

    header = f"{'#':>2}  {'Cat':<3}  {'Start':>7}  {'Length':>7}  {'Gain':>6}  {'Grade':>5}"
    lines.append(header + (f"  {'Power':>6}" if show_power else ""))
    for i, climb in enumerate(climbs, start=1):
        start_km = streams.distance[climb.start_index] / 1000
        line = (
            f"{i:>2}  {climb.category.value:<3}  {start_km:>5.1f}km  "
            f"{format_distance(climb.length):>7}  {climb.elevation_gain:>5.0f}m  "
            f"{format_gradient(climb.average_gradient_percent):>5}"
        )
        if show_power:
            power = format_power(climb.average_power_watts) if climb.average_power_watts > 0 else "-"
            line += f"  {power:>6}"
        lines.append(line)
    return "\n".join(lines)


def format_splits_report(splits: list[Split]) -> str:
    lines = ["=== Splits ==="]
    for split in splits:
        hr = f"{split.average_heartrate:.0f} bpm" if split.average_heartrate else "-"
        lines.append(
            f"{split.index:>3}  {format_distance(split.distance_m):>7}  "
            f"{format_duration(split.elapsed_s):>8}  {format_pace(split.average_speed_ms):>5} /km  "
            f"{split.elevation_difference_m:+5.0f}m  {hr}"
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    config = load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        params = climb_params_from_config({
            **config,
            "min_gradient": args.min_gradient,
            "min_length": args.min_length,
            "dip_tolerance": args.dip_tolerance,
        })
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        activity = load_activity(args.activity_file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.activity_file}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error reading activity: {e}", file=sys.stderr)
        sys.exit(1)

    streams = activity.streams
    if len(streams.elevation) < 2:
        print("Error: Activity contains fewer than 2 samples with elevation.", file=sys.stderr)
        sys.exit(1)

    smoothing_radius = 0.0 if args.no_smoothing else args.smoothing
    if smoothing_radius > 0:
        streams = replace(streams, elevation=smooth_elevations(streams.distance, streams.elevation, smoothing_radius))
        activity.streams = streams

    climbs = detect_climbs(streams, params)

    try:
        splits = compute_splits(streams, get_setting(config, "split_distance")) if args.splits else None
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        fill = TwoStopGradient()
        for side, color in enumerate(get_setting(config, "fill_colors")[:2]):
            if color:
                fill.set_stop(side, color)
        try:
            data = build_poster_data(
                activity,
                climbs,
                chart_width=get_setting(config, "chart_width"),
                chart_height=get_setting(config, "chart_height"),
                stride=int(get_setting(config, "profile_stride")),
                route_size=get_setting(config, "route_size"),
                route_padding=get_setting(config, "route_padding"),
                climb_chart_width=get_setting(config, "climb_chart_width"),
                climb_chart_height=get_setting(config, "climb_chart_height"),
                climb_chart_points=int(get_setting(config, "climb_chart_points")),
                fill=fill,
                unhighlighted_decay=get_setting(config, "unhighlighted_decay"),
                splits=splits,
            )
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(json.dumps(data, indent=2))
        return

    # Power is only meaningful for rides with a power meter
    show_power = activity.is_ride and streams.has_power
    print(format_climb_report(activity.name, climbs, streams, show_power=show_power))
    if splits is not None:
        print("")
        print(format_splits_report(splits))
