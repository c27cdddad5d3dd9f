"""CLI entry point for generating a full 5/3/1 cycle."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from pydantic import ValidationError

from .config import Config
from .contract import build_program, validate_program_request
from .errors import ProgramError
from .logging import setup_logging
from .models import CORE_LIFTS, UNIT_LABELS, WEIGHT_UNITS, LiftProfile
from .summary import strength_summary

logger = logging.getLogger(__name__)


def _parse_plate(value: str) -> dict[str, Any]:
    denomination, sep, pairs = value.partition(":")
    try:
        return {
            "denomination": float(denomination),
            "pairs": int(pairs) if sep else None,
        }
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected DENOM or DENOM:PAIRS, got {value!r}") from None


def _build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fivethreeone-cycle",
        description="Generate a four-week 5/3/1 cycle with plate loadouts for every core lift.",
    )
    for lift in CORE_LIFTS:
        parser.add_argument(
            f"--{lift}",
            required=True,
            type=float,
            help=f"{lift} one-rep max.",
        )
    parser.add_argument(
        "--unit",
        default=config.weight_unit,
        choices=WEIGHT_UNITS,
        help="Weight unit; selects the default bar and plate set.",
    )
    parser.add_argument(
        "--bar-weight",
        default=config.bar_weight,
        type=float,
        help="Bar weight override (defaults to 45 lb / 20 kg).",
    )
    parser.add_argument(
        "--plate",
        action="append",
        type=_parse_plate,
        default=None,
        help="Available plate as DENOM or DENOM:PAIRS (repeatable). Defaults to the unit's stock set.",
    )
    parser.add_argument(
        "--lift",
        action="append",
        choices=CORE_LIFTS,
        default=None,
        help="Only print these lifts (repeatable). Defaults to all four.",
    )
    parser.add_argument(
        "--format",
        default="json",
        choices=("json", "text"),
        help="Output format.",
    )
    return parser


def _render_text(program: dict[str, Any], lifts: Sequence[str]) -> str:
    unit = UNIT_LABELS[program["unit"]]
    lines: list[str] = []
    for lift in lifts:
        profile = program["lifts"][lift]["profile"]
        lines.append(f"{lift}: 1RM {profile['one_rep_max']} {unit}, TM {profile['training_max']} {unit}")
        for week in program["lifts"][lift]["weeks"]:
            lines.append(f"  week {week['week']}")
            for key in ("warmup_sets", "main_sets", "bbb_sets"):
                for workout_set in week[key]:
                    plates = workout_set["plates"]["plates"]
                    loadout = ", ".join(f"{p['count']}x{p['weight']}" for p in plates) or "bar only"
                    reps = f"{workout_set['reps']}{'+' if workout_set['is_amrap'] else ''}"
                    lines.append(
                        f"    {workout_set['set_type']:<6} {workout_set['set_number']}  "
                        f"{reps:>3} x {workout_set['weight']} {unit} "
                        f"({workout_set['percentage']}%)  [{loadout}]"
                    )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> None:
    config = Config.from_env()
    setup_logging(config.log_format, config.log_level)
    args = _build_parser(config).parse_args(argv)

    payload: dict[str, Any] = {
        "unit": args.unit,
        "one_rep_maxes": {lift: getattr(args, lift) for lift in CORE_LIFTS},
        "bar_weight": args.bar_weight,
    }
    if args.plate:
        payload["plates"] = args.plate

    try:
        request = validate_program_request(payload)
        program = build_program(request)
    except (ValidationError, ProgramError) as exc:
        logger.error("Program generation failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2) from None

    lifts = args.lift or list(CORE_LIFTS)
    if args.format == "text":
        print(_render_text(program, lifts))
    else:
        profiles = {
            lift: LiftProfile(**program["lifts"][lift]["profile"]) for lift in CORE_LIFTS
        }
        output = {
            "unit": program["unit"],
            "bar_weight": program["bar_weight"],
            "lifts": {lift: program["lifts"][lift] for lift in lifts},
            "summary": [row for row in strength_summary(profiles) if row["lift"] in lifts],
        }
        print(json.dumps(output, indent=2, sort_keys=True))
    raise SystemExit(0)


if __name__ == "__main__":
    main()
