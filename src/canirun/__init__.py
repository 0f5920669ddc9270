"""canirun — "can my PC run this game?" requirement checker.

Public API surface — import submodules directly for full access:
  canirun.processing.requirements — requirement blurb parsing
  canirun.match.fuzzy             — hardware name matching
  canirun.compare.engine          — per-component comparison
  canirun.compare.verdict         — overall verdict
  canirun.compare.fps             — FPS estimate
  canirun.app.cli                 — CLI entry point
"""

from .compare.engine import compare_numeric, compare_specs, compare_specs_with_scores
from .compare.fps import estimate_fps
from .compare.verdict import compute_verdict
from .config.benchmarks import HardwareCatalog, get_catalog
from .match.fuzzy import fuzzy_match_hardware
from .models import (
    ComparisonItem,
    FpsEstimate,
    GameRequirements,
    HardwareScores,
    UserSpecs,
    VerdictResult,
)
from .processing.payload import decode_specs_payload, encode_specs_payload
from .processing.requirements import parse_cpu_requirement, parse_requirements


def main():
    """CLI entry point."""
    from .app.main import main as _main
    return _main()


__all__ = [
    "ComparisonItem",
    "FpsEstimate",
    "GameRequirements",
    "HardwareCatalog",
    "HardwareScores",
    "UserSpecs",
    "VerdictResult",
    "compare_numeric",
    "compare_specs",
    "compare_specs_with_scores",
    "compute_verdict",
    "decode_specs_payload",
    "encode_specs_payload",
    "estimate_fps",
    "fuzzy_match_hardware",
    "get_catalog",
    "parse_cpu_requirement",
    "parse_requirements",
    "main",
]
