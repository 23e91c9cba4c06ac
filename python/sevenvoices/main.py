"""sevenvoices CLI - analyze one word.

Usage:
    python -m sevenvoices.main study
    python -m sevenvoices.main zemër --mode open --profile albanian
    python -m sevenvoices.main damage --json
"""

import argparse
import json
import logging
import sys

from . import config as cfg
from .cycle import summarize_path
from .field import build_field
from .profiles import AUTO, list_profiles
from .schema import Path, format_voices
from .scoring import FRONTIER_MARGIN, InvariantViolation
from .solver import DEFAULT_BEAM_WIDTH, MODES, STRICT, SolveOptions, solve_word


def format_path(path: Path) -> str:
    """One-line report of a path."""
    ck = path.checksums
    ops = ", ".join(path.ops) or "-"
    return (
        f"{format_voices(path.voices)}  rings {list(path.ring_path)}  "
        f"V={ck.v} E={ck.e} C={ck.c} kept={path.kept}  ops: {ops}"
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    # Defaults from config.json
    mode = cfg.get_default("mode", STRICT)
    profile = cfg.get_default("profile", AUTO)
    beam_width = cfg.get_default("beam_width", DEFAULT_BEAM_WIDTH)

    parser = argparse.ArgumentParser(
        description="sevenvoices - Seven-Voices word path solver"
    )
    parser.add_argument("word", type=str, help="Word to analyze")
    parser.add_argument(
        "--mode",
        "-m",
        choices=MODES,
        default=mode,
        help=f"Search regime (default: {mode})",
    )
    parser.add_argument(
        "--profile",
        "-p",
        type=str,
        default=profile,
        help=f"Language profile: auto or one of {', '.join(list_profiles())}",
    )
    parser.add_argument(
        "--beam-width",
        "-b",
        type=int,
        default=beam_width,
        help=f"Primary plus frontier size (default: {beam_width})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=cfg.get_default("json", False),
        help="Print the analysis as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=cfg.get_default("verbose", False),
        help="Log engine debug output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = SolveOptions.for_mode(
            args.mode,
            profile=args.profile,
            beam_width=args.beam_width,
            frontier_margin=cfg.get_default("frontier_margin", FRONTIER_MARGIN),
        )
        manifest = cfg.manifest_from_config()
        analysis = solve_word(args.word, options, manifest=manifest)
    except ValueError as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 2
    except InvariantViolation as e:
        print(f"FATAL - {e}", file=sys.stderr)
        return 1

    field = build_field(analysis, manifest)
    cycle = summarize_path(analysis.primary)

    if args.json:
        payload = analysis.to_dict()
        payload["consonant_field"] = field.to_dict()
        payload["cycle"] = cycle.to_dict()
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    print("=" * 60)
    print(f"sevenvoices - {analysis.word}")
    print("=" * 60)
    print(f"Mode: {analysis.mode}   Profile: {analysis.profile}   Engine: {analysis.engine_version}")
    print(f"Base: {format_voices(analysis.base)}")
    print()
    print("Primary:")
    print(f"  {format_path(analysis.primary)}")
    print(f"  {' → '.join(cycle.principles)}  (mod 7 = {cycle.total_mod7}, {cycle.cycle_state})")

    print(f"\nFrontier ({len(analysis.frontier)}):")
    for path in analysis.frontier:
        print(f"  {format_path(path)}")

    print("\nWindows:")
    for window in analysis.windows + analysis.edge_windows:
        print(f"  {window.describe()}")

    print(f"\nConsonant field: {field.smooth_hits} smooth / {field.spiky_hits} spiky")
    print("\nSignals:")
    for signal in analysis.signals:
        print(f"  {signal}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
