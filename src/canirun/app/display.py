"""Rendering of comparison results for the CLI (text table or JSON dict)."""

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from ..models import ComparisonItem, FpsEstimate, UserSpecs, VerdictResult
from ..utils.console import render_table, safe_print, status_mark

VERDICT_BANNERS = {
    "pass": "[OK] PASS",
    "minimum": "[!] MINIMUM",
    "fail": "[X] FAIL",
    "unknown": "[?] UNKNOWN",
}


def format_status(status: str) -> str:
    return f"{status_mark(status)} {status}"


def display_comparison(items: List[ComparisonItem], game_name: Optional[str] = None) -> None:
    safe_print("\n" + "=" * 72)
    safe_print((f"Can I run {game_name}?" if game_name else "Requirement check").center(72))
    safe_print("=" * 72)
    rows = [
        (i.label, i.user_value, i.min_value, format_status(i.min_status), i.rec_value, format_status(i.rec_status))
        for i in items
    ]
    safe_print(render_table(("Component", "Yours", "Minimum", "", "Recommended", ""), rows, max_width=30))


def display_verdict(verdict: VerdictResult) -> None:
    safe_print("\n" + "-" * 72)
    safe_print(f"{VERDICT_BANNERS.get(verdict.verdict, verdict.verdict)}  {verdict.title}")
    safe_print(verdict.description)
    if verdict.upgrade_items:
        safe_print("\nSuggested upgrades:")
        for u in verdict.upgrade_items:
            safe_print(f"  - {u.component}: {u.current} -> {u.required}")
    if verdict.warn_components:
        safe_print(f"\nVerify manually: {', '.join(verdict.warn_components)}")


def display_fps(fps: FpsEstimate) -> None:
    if fps.confidence == "none":
        safe_print("\nEstimated FPS: not enough data")
        return
    safe_print(
        f"\nEstimated FPS: {fps.low}-{fps.high} (~{fps.mid}), "
        f"bottleneck: {fps.bottleneck}, confidence: {fps.confidence}"
    )


def result_to_dict(
    user: UserSpecs,
    items: List[ComparisonItem],
    verdict: VerdictResult,
    fps: FpsEstimate,
    game_name: Optional[str] = None,
) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "user": user.to_dict(),
        "items": [asdict(i) for i in items],
        "verdict": asdict(verdict),
        "fps": asdict(fps),
    }
    if game_name:
        out["game"] = game_name
    return out
