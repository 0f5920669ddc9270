"""Operating-system comparison: platform family first, then version order."""

from typing import List, Optional, Tuple

from ..config.benchmarks import HardwareCatalog, get_catalog
from ..config.rules import OS_LINES
from ..match.fuzzy import fuzzy_match_hardware, match_phrase, split_alternatives
from ..processing.normalize import (
    detect_os_platform,
    detect_os_platforms,
    is_vague_os_requirement,
    normalize_os_text,
    strip_qualifiers,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)


def os_line(name: str) -> Tuple[Optional[str], str]:
    """(platform, product line) of an OS catalog entry."""
    if name in OS_LINES:
        return OS_LINES[name]
    return detect_os_platform(name), name


def platform_candidates(catalog: HardwareCatalog, platform: str) -> List[str]:
    return [n for n in catalog.names("os") if os_line(n)[0] == platform]


def compare_os(user_os: Optional[str], req_os: Optional[str], catalog: Optional[HardwareCatalog] = None) -> str:
    """
    pass / fail / warn / info for one requirement tier.

    - no requirement -> pass; no user OS -> info
    - requirement naming no platform: "any"/bitness-only -> pass, else info
    - user platform not among the required ones -> warn (never fail)
    - same platform: version order inside one product line, else pass
    """
    if not req_os or not req_os.strip():
        return "pass"
    if not user_os or not user_os.strip():
        return "info"

    req_text, _ = strip_qualifiers(normalize_os_text(req_os))
    req_platforms = detect_os_platforms(req_text)
    if not req_platforms:
        return "pass" if is_vague_os_requirement(req_text) else "info"

    user_text = normalize_os_text(user_os)
    user_platform = detect_os_platform(user_text)
    if user_platform is None:
        return "info"
    if user_platform not in req_platforms:
        logger.debug("OS platform mismatch: user=%s required=%s", user_platform, sorted(req_platforms))
        return "warn"

    catalog = catalog or get_catalog()
    candidates = platform_candidates(catalog, user_platform)
    user_match = fuzzy_match_hardware(user_text, candidates)
    if user_match is None:
        return "pass"
    user_line = os_line(user_match)[1]

    bars = []
    for alt in split_alternatives(req_text):
        req_match = match_phrase(alt, candidates)
        if req_match is not None and os_line(req_match)[1] == user_line:
            bars.append(catalog.score("os", req_match))
    if not bars:
        # ordering cannot be established; a known OS on the right platform passes
        return "pass"

    user_score = catalog.score("os", user_match)
    status = "pass" if user_score >= min(bars) else "fail"
    logger.debug("OS %r vs %r -> %s", user_match, req_os, status)
    return status
