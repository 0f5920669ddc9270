"""CPU and GPU comparison against the hardware catalog."""

import re
from statistics import mean
from typing import List, NamedTuple, Optional

from ..config.benchmarks import HardwareCatalog
from ..config.rules import CPU_FAMILIES
from ..config.scoring_constants import CPU_SPEED_TOLERANCE
from ..match.fuzzy import fuzzy_match_hardware, match_phrase, strip_spec_noise
from ..models import UserSpecs
from ..processing.normalize import clean_gpu_string, infer_cpu_vendor, strip_qualifiers
from ..processing.requirements import parse_cpu_requirement
from ..utils.logging import get_logger

logger = get_logger(__name__)

# " or " is the documented separator; Steam pages also use a spaced slash
# ("Intel Core i5-4460 / AMD FX-6300").
_ALTERNATIVE_SEP = re.compile(r"\s+or\s+|\s+/\s+", re.IGNORECASE)

# a concrete model: a 3-5 digit number ("2500K", "FX-8350") or Apple M-series
_CPU_MODEL_HINT = re.compile(r"(?<![\d.])\d{3,5}(?![\d.])|\bm[1-4]\b", re.IGNORECASE)
_MEMORY_QTY = re.compile(r"\d+(?:\.\d+)?\s*(?:gb|mb|tb)\b", re.IGNORECASE)

_GPU_API = re.compile(
    r"\b(?:directx|direct3d|dx\s?\d+|opengl|vulkan|metal|shader\s*model|pixel\s*shader|sm\s?\d)",
    re.IGNORECASE,
)
_GPU_BRAND = re.compile(
    r"\b(?:nvidia|geforce|gtx|rtx|gt\s?\d+|quadro|amd|ati|radeon|rx\s?\d+|r[579]\s?\d{3}|"
    r"hd\s?\d{3,4}|vega|intel|iris|uhd|arc|apple|m[1-4])\b",
    re.IGNORECASE,
)

_COMPILED_FAMILIES = tuple(
    (family, re.compile(req_pat, re.IGNORECASE), re.compile(member_pat, re.IGNORECASE))
    for family, req_pat, member_pat in CPU_FAMILIES
)


class HardwareCheck(NamedTuple):
    status: str
    user_score: Optional[float] = None
    req_score: Optional[float] = None


def requirement_alternatives(text: str) -> List[str]:
    return [p.strip() for p in _ALTERNATIVE_SEP.split(text or "") if p.strip()]


def _by_score(user_score: float, bar: float) -> str:
    return "pass" if user_score >= bar else "fail"


# =========================
# CPU
# =========================
def has_cpu_model(text: str) -> bool:
    s = _MEMORY_QTY.sub(" ", strip_spec_noise(text))
    return bool(_CPU_MODEL_HINT.search(s))


def family_bar(text: str, catalog: HardwareCatalog, qualified: bool) -> Optional[float]:
    """Average catalog score of a named family ("Intel i5"), or its minimum when qualified."""
    for family, req_re, member_re in _COMPILED_FAMILIES:
        if not req_re.search(text):
            continue
        members = [catalog.cpu[n] for n in catalog.names("cpu") if member_re.search(n)]
        if not members:
            continue
        bar = min(members) if qualified else mean(members)
        logger.debug("CPU family %s -> bar %.1f (%d members)", family, bar, len(members))
        return bar
    return None


def compare_cpu_specs(user: UserSpecs, text: str, user_known: bool) -> str:
    """Clock speed (with tolerance) and core count only."""
    parsed = parse_cpu_requirement(text)
    if user_known and parsed.model is None:
        # every catalogued CPU clears a generic "2 GHz dual core" ask
        return "pass"

    checks = []
    if parsed.speed_ghz is not None and user.cpu_speed_ghz is not None:
        checks.append(user.cpu_speed_ghz >= parsed.speed_ghz * (1 - CPU_SPEED_TOLERANCE))
    if parsed.cores is not None and user.cpu_cores is not None:
        checks.append(user.cpu_cores >= parsed.cores)

    if not checks:
        return "info"
    if all(checks):
        return "pass"
    if not any(checks):
        return "fail"
    return "warn"


def _cpu_alternative(
    user: UserSpecs,
    alt: str,
    qualified: bool,
    user_score: Optional[float],
    catalog: HardwareCatalog,
) -> HardwareCheck:
    # (a) named model
    if has_cpu_model(alt):
        req_match = match_phrase(alt, catalog.names("cpu"))
        if req_match is not None:
            bar = catalog.cpu[req_match]
            if user_score is not None:
                return HardwareCheck(_by_score(user_score, bar), user_score, bar)
            status = compare_cpu_specs(user, alt, user_known=False)
            return HardwareCheck(status, None, bar)

    # (b) family without a (known) model
    bar = family_bar(alt, catalog, qualified)
    if bar is not None and user_score is not None:
        return HardwareCheck(_by_score(user_score, bar), user_score, bar)

    # (c) clock / cores
    return HardwareCheck(compare_cpu_specs(user, alt, user_known=user_score is not None), user_score, bar)


def compare_cpu(user: UserSpecs, req_cpu: Optional[str], catalog: HardwareCatalog) -> HardwareCheck:
    """
    Alternatives are tried in order, same-vendor ones first; the first
    ``pass`` wins. Otherwise the first fail/warn is reported, else info.
    """
    if not req_cpu or not req_cpu.strip():
        return HardwareCheck("pass")

    if not user.cpu and user.cpu_cores is None and user.cpu_speed_ghz is None:
        return HardwareCheck("info")
    user_match = fuzzy_match_hardware(user.cpu, catalog.names("cpu")) if user.cpu else None
    user_score = catalog.score("cpu", user_match)

    text, qualified = strip_qualifiers(req_cpu)
    alternatives = requirement_alternatives(text)
    vendor = infer_cpu_vendor(user.cpu)
    if vendor is not None:
        alternatives.sort(key=lambda a: 0 if infer_cpu_vendor(a) == vendor else 1)

    decided: Optional[HardwareCheck] = None
    for alt in alternatives:
        check = _cpu_alternative(user, alt, qualified, user_score, catalog)
        logger.debug("CPU alternative %r -> %s", alt, check.status)
        if check.status == "pass":
            return check
        if decided is None and check.status in ("fail", "warn"):
            decided = check

    if decided is not None:
        return decided
    return HardwareCheck("info", user_score)


# =========================
# GPU
# =========================
def is_capability_only(text: str) -> bool:
    """True for asks like "DirectX 11 compatible, 2 GB VRAM" that name no product."""
    s = _MEMORY_QTY.sub(" ", text or "")
    return bool(_GPU_API.search(s)) and not _GPU_BRAND.search(s)


def compare_gpu(user_gpu: Optional[str], req_gpu: Optional[str], catalog: HardwareCatalog) -> HardwareCheck:
    """The weakest matched alternative is the bar; pass when the user's GPU reaches it."""
    if not req_gpu or not req_gpu.strip():
        return HardwareCheck("pass")
    if not user_gpu or not user_gpu.strip():
        return HardwareCheck("info")

    names = catalog.names("gpu")
    user_match = fuzzy_match_hardware(clean_gpu_string(user_gpu), names)
    user_score = catalog.score("gpu", user_match)

    text, _ = strip_qualifiers(req_gpu)
    if is_capability_only(text):
        return HardwareCheck("pass" if user_score is not None else "info", user_score)

    bars = []
    for alt in requirement_alternatives(text):
        req_match = match_phrase(alt, names)
        if req_match is not None:
            bars.append(catalog.gpu[req_match])
    bar = min(bars) if bars else None

    if bar is None or user_score is None:
        logger.debug("GPU unresolved: user=%r requirement=%r", user_match, req_gpu)
        return HardwareCheck("info", user_score, bar)
    return HardwareCheck(_by_score(user_score, bar), user_score, bar)
