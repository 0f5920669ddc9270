"""Per-component comparison of a user's machine against both requirement tiers."""

from typing import List, Optional

from ..config.benchmarks import HardwareCatalog, get_catalog
from ..config.scoring_constants import (
    LABEL_CPU,
    LABEL_GPU,
    LABEL_OS,
    LABEL_RAM,
    LABEL_STORAGE,
    NO_REQUIREMENT,
    UNKNOWN_VALUE,
)
from ..models import (
    ComparisonItem,
    ComparisonResult,
    GameRequirements,
    HardwareScores,
    UserSpecs,
)
from ..processing.normalize import parse_gb
from ..utils.logging import get_logger
from .hardware import compare_cpu, compare_gpu
from .platform import compare_os

logger = get_logger(__name__)


def compare_numeric(user_value: Optional[float], req_text: Optional[str]) -> str:
    """RAM / storage: pass when the user has at least the first GB/MB/TB quantity."""
    if not req_text or not req_text.strip():
        return "pass"
    if user_value is None:
        return "info"
    req_value = parse_gb(req_text)
    if req_value is None:
        return "info"
    return "pass" if user_value >= req_value else "fail"


def promote_tiers(min_status: str, rec_status: str, min_published: bool = True, rec_published: bool = True):
    """
    An unmatchable tier next to a tier that passed a published requirement
    counts as passing. A ``pass`` that only means "nothing published" promotes
    nothing.
    """
    if min_status == "info" and rec_status == "pass" and rec_published:
        return "pass", "pass"
    if rec_status == "info" and min_status == "pass" and min_published:
        return "pass", "pass"
    return min_status, rec_status


def _format_number(value: float) -> str:
    return f"{value:g}"


def cpu_display(user: UserSpecs) -> str:
    if user.cpu:
        return f"{user.cpu} ({user.cpu_cores} cores)" if user.cpu_cores else user.cpu
    if user.cpu_cores:
        return f"{user.cpu_cores} cores detected"
    return UNKNOWN_VALUE


def ram_display(user: UserSpecs) -> str:
    if not user.ram_gb:
        return UNKNOWN_VALUE
    text = f"{_format_number(user.ram_gb)} GB"
    return f"{text} (approx.)" if user.ram_approximate else text


def storage_display(user: UserSpecs) -> str:
    if not user.storage_gb:
        return UNKNOWN_VALUE
    return f"{_format_number(user.storage_gb)} GB"


def _published(text: Optional[str]) -> bool:
    return bool(text and text.strip())


def _item(
    label: str,
    user_value: str,
    min_text: str,
    rec_text: str,
    min_status: str,
    rec_status: str,
    user_known: bool,
) -> ComparisonItem:
    if user_known:
        min_status, rec_status = promote_tiers(min_status, rec_status, _published(min_text), _published(rec_text))
    return ComparisonItem(
        label=label,
        user_value=user_value,
        min_value=min_text or NO_REQUIREMENT,
        rec_value=rec_text or NO_REQUIREMENT,
        min_status=min_status,
        rec_status=rec_status,
    )


def compare_specs_with_scores(
    user: UserSpecs,
    minimum: Optional[GameRequirements],
    recommended: Optional[GameRequirements],
    catalog: Optional[HardwareCatalog] = None,
) -> ComparisonResult:
    """Five :class:`ComparisonItem` rows plus the catalog scores behind them."""
    catalog = catalog or get_catalog()
    min_req = minimum or GameRequirements()
    rec_req = recommended or GameRequirements()

    min_cpu = compare_cpu(user, min_req.cpu, catalog)
    rec_cpu = compare_cpu(user, rec_req.cpu, catalog)
    min_gpu = compare_gpu(user.gpu, min_req.gpu, catalog)
    rec_gpu = compare_gpu(user.gpu, rec_req.gpu, catalog)

    items: List[ComparisonItem] = [
        _item(
            LABEL_OS, user.os or UNKNOWN_VALUE, min_req.os, rec_req.os,
            compare_os(user.os, min_req.os, catalog), compare_os(user.os, rec_req.os, catalog),
            bool(user.os),
        ),
        _item(
            LABEL_CPU, cpu_display(user), min_req.cpu, rec_req.cpu, min_cpu.status, rec_cpu.status,
            bool(user.cpu) or user.cpu_cores is not None or user.cpu_speed_ghz is not None,
        ),
        _item(
            LABEL_GPU, user.gpu or UNKNOWN_VALUE, min_req.gpu, rec_req.gpu, min_gpu.status, rec_gpu.status,
            bool(user.gpu),
        ),
        _item(
            LABEL_RAM, ram_display(user), min_req.ram, rec_req.ram,
            compare_numeric(user.ram_gb, min_req.ram), compare_numeric(user.ram_gb, rec_req.ram),
            user.ram_gb is not None,
        ),
        _item(
            LABEL_STORAGE, storage_display(user), min_req.storage, rec_req.storage,
            compare_numeric(user.storage_gb, min_req.storage), compare_numeric(user.storage_gb, rec_req.storage),
            user.storage_gb is not None,
        ),
    ]

    scores = HardwareScores(
        user_gpu_score=_first(min_gpu.user_score, rec_gpu.user_score),
        rec_gpu_score=rec_gpu.req_score,
        min_gpu_score=min_gpu.req_score,
        user_cpu_score=_first(min_cpu.user_score, rec_cpu.user_score),
        rec_cpu_score=rec_cpu.req_score,
        min_cpu_score=min_cpu.req_score,
    )
    logger.debug("Comparison statuses: %s", [(i.label, i.min_status, i.rec_status) for i in items])
    return ComparisonResult(items=items, scores=scores)


def _first(*values: Optional[float]) -> Optional[float]:
    return next((v for v in values if v is not None), None)


def compare_specs(
    user: UserSpecs,
    minimum: Optional[GameRequirements],
    recommended: Optional[GameRequirements],
    catalog: Optional[HardwareCatalog] = None,
) -> List[ComparisonItem]:
    return compare_specs_with_scores(user, minimum, recommended, catalog).items
