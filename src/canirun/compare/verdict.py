"""Reduce the per-component comparison into one overall verdict."""

from typing import List

from ..config.scoring_constants import NO_REQUIREMENT
from ..models import ComparisonItem, UpgradeItem, VerdictResult


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def _names(labels: List[str]) -> str:
    return ", ".join(labels)


def compute_verdict(items: List[ComparisonItem]) -> VerdictResult:
    """
    Decision order:
      1. any minimum fail                         -> fail
      2. every status pass                        -> pass
      3. only pass/info, at least one info        -> unknown (likely OK)
      4. minimum tier pass/info                   -> minimum
      5. anything else                            -> unknown (manual check)
    Rows where neither tier published a value are ignored.
    """
    relevant = [
        i for i in items
        if not (i.min_value == NO_REQUIREMENT and i.rec_value == NO_REQUIREMENT)
    ]
    if not relevant:
        return VerdictResult(
            verdict="pass",
            title="No Requirements Published",
            description="This game does not list system requirements, so there is nothing to fail.",
        )

    failed: List[str] = []
    warned: List[str] = []
    upgrades: List[UpgradeItem] = []
    rec_failed = False

    for item in relevant:
        if item.min_status == "fail":
            failed.append(item.label)
            required = item.min_value if item.min_value != NO_REQUIREMENT else item.rec_value
            upgrades.append(UpgradeItem(item.label, item.user_value, required))
        elif item.rec_status == "fail":
            rec_failed = True
            upgrades.append(UpgradeItem(item.label, item.user_value, item.rec_value))
        if {item.min_status, item.rec_status} & {"warn", "info"} and item.label not in warned:
            warned.append(item.label)

    def result(verdict: str, title: str, description: str) -> VerdictResult:
        return VerdictResult(verdict, title, description, failed, warned, upgrades)

    if failed:
        return result(
            "fail",
            "You Need To Upgrade",
            f"Your system does not meet the minimum requirements for {_plural(len(failed), 'component')}: "
            f"{_names(failed)}.",
        )

    statuses = [s for i in relevant for s in (i.min_status, i.rec_status)]
    if all(s == "pass" for s in statuses):
        return result("pass", "No Upgrade Needed!", "Your system meets or exceeds the recommended requirements.")

    if all(s in ("pass", "info") for s in statuses):
        pronoun = "it" if len(warned) == 1 else "them"
        return result(
            "unknown",
            "Likely OK, Verify Manually",
            f"We couldn't compare {_names(warned)} accurately. Check {pronoun} manually to be sure.",
        )

    if all(i.min_status in ("pass", "info") for i in relevant):
        if rec_failed:
            asks = _names([u.component for u in upgrades])
            description = (
                "Your system meets the minimum requirements but falls short of the "
                f"recommended specs for {asks}."
            )
        else:
            description = (
                "Your system meets the minimum requirements; the recommended tier "
                f"could not be fully checked ({_names(warned)})."
            )
        return result("minimum", "Upgrade Recommended" if rec_failed else "Meets Minimum", description)

    return result(
        "unknown",
        "Manual Check Needed",
        "We couldn't determine a clear verdict. Please review the comparison details.",
    )
