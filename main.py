"""
Command line entry point.

    python main.py generate [--kind random|natural|debug] [--count N]
                            [--seed S] [--property NAME] [--save PATH]
    python main.py show PATH
    python main.py validate
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from engine.config import get_config
from engine.error_handler import ArtifactError, ValidationError, log_error
from telemetry.logger import telemetry

KINDS = ("random", "natural", "debug")


def format_summary(record) -> str:
    """One multi-line, human readable description of an artifact."""
    from artifacts.effects import effect_name
    from artifacts.generation import declared_power
    from artifacts.types import TOOL_TYPE

    common = record.common
    lines = [
        f"[{common.id}] {common.sym} {common.name} ({common.color}, {'/'.join(common.materials)})",
        f"  {common.volume} ml, {common.weight} g, "
        f"bash {common.melee_bash} cut {common.melee_cut} stab {common.melee_stab} "
        f"to-hit {common.m_to_hit:+d}",
    ]
    if common.item_flags:
        lines.append(f"  flags: {', '.join(common.item_flags)}")

    def effects_line(label: str, effects) -> None:
        if effects:
            lines.append(f"  {label}: {', '.join(effect_name(e) for e in effects)}")

    if record.type == TOOL_TYPE:
        tool = record.tool
        effects_line("wielded", tool.effects_wielded)
        effects_line("carried", tool.effects_carried)
        effects_line("activated", tool.effects_activated)
        if tool.max_charges:
            lines.append(f"  charges: {tool.max_charges} ({tool.charge_type.name})")
    else:
        armor = record.armor
        lines.append(
            f"  covers {armor.covers!r}, encumber {armor.encumber}, coverage {armor.coverage}%, "
            f"storage {armor.storage} ml"
        )
        effects_line("worn", armor.effects_worn)
    lines.append(f"  power: {declared_power(record)}")
    for text in common.description.splitlines():
        lines.append(f"  | {text}")
    return "\n".join(lines)


def _cmd_generate(args: argparse.Namespace) -> int:
    from artifacts import (
        ArtifactRng,
        generate_fixed_debug_artifact,
        generate_natural_artifact,
        generate_random_artifact,
        get_artifact,
    )
    from artifacts.types import ArtifactProperty
    from engine.utils.save_system import save_artifacts

    prop = None
    if args.property:
        try:
            prop = ArtifactProperty[args.property.upper()]
        except KeyError:
            names = ", ".join(p.name.lower() for p in ArtifactProperty if p != ArtifactProperty.NULL)
            print(f"Unknown property '{args.property}'. Choose from: {names}", file=sys.stderr)
            return 2

    seed = args.seed if args.seed is not None else get_config().seed
    rng = ArtifactRng(seed)

    for _ in range(args.count):
        if args.kind == "natural":
            artifact_id = generate_natural_artifact(prop, rng)
        elif args.kind == "debug":
            artifact_id = generate_fixed_debug_artifact(rng)
        else:
            artifact_id = generate_random_artifact(rng)
        print(format_summary(get_artifact(artifact_id)))
        print()

    if args.save is not None:
        if not save_artifacts(args.save):
            print(f"Could not save artifacts to {args.save}", file=sys.stderr)
            return 1
        print(f"Saved {args.count} artifact(s) to {args.save}")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    from artifacts import get_artifact
    from engine.utils.save_system import load_artifacts

    ids = load_artifacts(args.path)
    if not ids:
        print(f"No artifacts in {args.path}")
    for artifact_id in ids:
        print(format_summary(get_artifact(artifact_id)))
        print()
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    from artifacts.validation import run_full_validation

    report = run_full_validation()
    for table, errors in report["tables"].items():
        status = "ok" if not errors else f"{len(errors)} error(s)"
        print(f"{table:14} {status}")
        for error in errors:
            print(f"    - {error}")
    if not report["overall_valid"]:
        print(f"\n{report['error_count']} problem(s) found")
        return 1
    print("\nAll artifact tables are valid")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate, inspect and validate artifacts")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate new artifacts")
    gen.add_argument("--kind", choices=KINDS, default="random", help="Kind of artifact (default: random)")
    gen.add_argument("--count", type=int, default=1, help="Number of artifacts (default: 1)")
    gen.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    gen.add_argument("--property", default=None, help="Natural artifact property (e.g. glowing)")
    gen.add_argument("--save", type=Path, default=None, help="Save generated artifacts to this file")
    gen.set_defaults(func=_cmd_generate)

    show = sub.add_parser("show", help="Print the artifacts in a save file")
    show.add_argument("path", type=Path)
    show.set_defaults(func=_cmd_show)

    validate = sub.add_parser("validate", help="Check the static artifact tables")
    validate.set_defaults(func=_cmd_validate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    telemetry.enabled = config.telemetry_enabled
    if config.telemetry_enabled:
        telemetry.init(Path(config.telemetry_file))

    try:
        return args.func(args)
    except ValidationError as e:
        # Raised by the import-time table check
        print(f"Artifact tables are invalid: {e}", file=sys.stderr)
        return 1
    except ArtifactError as e:
        log_error(e, args.command)
        print(e.user_message, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
