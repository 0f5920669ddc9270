import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..compare.engine import compare_specs_with_scores
from ..compare.fps import estimate_fps
from ..compare.verdict import compute_verdict
from ..ingestion.benchmarks import refresh_benchmarks
from ..models import ParsedGameRequirements, UserSpecs
from ..processing.payload import decode_specs_payload, encode_specs_payload
from ..processing.requirements import parse_requirements
from ..sources.adapters import parse_source_requirements
from ..sources.steam import SourceError, SteamClient
from ..utils.console import safe_print
from ..utils.logging import get_logger, set_console_level
from .display import display_comparison, display_fps, display_verdict, result_to_dict

logger = get_logger(__name__)

# CLI flag -> (UserSpecs attribute)
MANUAL_FIELDS = (
    ("os", "os"),
    ("cpu", "cpu"),
    ("gpu", "gpu"),
    ("cores", "cpu_cores"),
    ("speed", "cpu_speed_ghz"),
    ("ram", "ram_gb"),
    ("storage", "storage_gb"),
)


class UsageError(Exception):
    """Bad command-line input; reported and mapped to exit code 2."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="canirun",
        description="Check a PC against a game's minimum and recommended requirements",
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging on stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="compare your specs with a game's requirements")
    check.add_argument("--payload", help="scanner payload string (PREFIX:base64)")
    check.add_argument("--os", help="operating system, e.g. 'Windows 11'")
    check.add_argument("--cpu", help="processor name")
    check.add_argument("--gpu", help="graphics card name")
    check.add_argument("--cores", type=int, help="CPU core count")
    check.add_argument("--speed", type=float, help="CPU clock in GHz")
    check.add_argument("--ram", type=float, help="memory in GB")
    check.add_argument("--storage", type=float, help="free storage in GB")
    check.add_argument("--min", dest="min_file", type=Path, help="file with minimum requirements HTML/text")
    check.add_argument("--rec", dest="rec_file", type=Path, help="file with recommended requirements HTML/text")
    check.add_argument("--appid", type=int, help="Steam app id to fetch requirements for")
    check.add_argument("--json", action="store_true", help="print machine-readable JSON")
    check.add_argument("--export", action="store_true", help="also print the specs as a payload string")

    sub.add_parser("refresh-benchmarks", help="refresh CPU/GPU scores from the benchmark feeds")
    return parser


def user_specs_from_args(args: argparse.Namespace) -> UserSpecs:
    if args.payload:
        specs = decode_specs_payload(args.payload)
        if specs is None:
            raise UsageError("payload could not be decoded")
    else:
        specs = UserSpecs()

    for flag, attr in MANUAL_FIELDS:
        value = getattr(args, flag)
        if value is not None:
            setattr(specs, attr, value)
            specs.manual_fields.append(attr)
    return specs


def _read_text(path: Optional[Path]) -> Optional[str]:
    if path is None:
        return None
    return path.read_text(encoding="utf-8")


def load_requirements(args: argparse.Namespace) -> Tuple[ParsedGameRequirements, Optional[str]]:
    if args.appid is not None:
        source = SteamClient().requirements(args.appid)
        return parse_source_requirements(source), source.name
    if args.min_file is None and args.rec_file is None:
        raise UsageError("give --appid or at least one of --min/--rec")
    return parse_requirements(_read_text(args.min_file), _read_text(args.rec_file)), None


def run_check(args: argparse.Namespace) -> int:
    user = user_specs_from_args(args)
    parsed, game_name = load_requirements(args)

    result = compare_specs_with_scores(user, parsed.minimum, parsed.recommended)
    verdict = compute_verdict(result.items)
    fps = estimate_fps(result.scores)
    logger.info("Verdict for %s: %s", game_name or "requirements", verdict.verdict)

    if args.json:
        out = result_to_dict(user, result.items, verdict, fps, game_name)
        if args.export:
            out["payload"] = encode_specs_payload(user)
        safe_print(json.dumps(out, ensure_ascii=False, indent=2))
        return 0

    display_comparison(result.items, game_name)
    display_verdict(verdict)
    display_fps(fps)
    if args.export:
        safe_print(f"\nPayload: {encode_specs_payload(user)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.debug:
        set_console_level(logging.DEBUG)

    try:
        if args.command == "refresh-benchmarks":
            return 0 if refresh_benchmarks() else 1
        return run_check(args)
    except UsageError as e:
        logger.error("%s", e)
        return 2
    except SourceError as e:
        logger.error("Could not fetch requirements: %s", e)
        return 1
    except OSError as e:
        logger.error("Could not read requirements file: %s", e)
        return 1
