"""Requirement text parsing: storefront HTML blurbs -> per-tier field records."""

import re
from typing import Optional

from bs4 import BeautifulSoup

from ..models import GameRequirements, ParsedCPUSpecs, ParsedGameRequirements
from ..utils.logging import get_logger

logger = get_logger(__name__)

_LINE_RE = re.compile(r"^([^:]+):\s*(.+)$")

# (bucket, key substrings) in routing order; the first bucket whose keyword
# appears in the normalized key receives the line.
FIELD_ROUTES = (
    ("os", ("os", "operating")),
    ("cpu", ("processor", "cpu")),
    ("gpu", ("graphics", "video", "gpu")),
    ("ram", ("memory", "ram")),
    ("storage", ("storage", "hard", "disk", "space")),
)

_GHZ_RE = re.compile(r"@?\s*(\d+(?:\.\d+)?)\s*GHz", re.IGNORECASE)
_MHZ_RE = re.compile(r"@?\s*(\d+)\s*MHz", re.IGNORECASE)
_CORE_PATTERNS = (
    (re.compile(r"dual[\s-]?core", re.IGNORECASE), 2),
    (re.compile(r"quad[\s-]?core", re.IGNORECASE), 4),
    (re.compile(r"hexa[\s-]?core", re.IGNORECASE), 6),
    (re.compile(r"octa[\s-]?core", re.IGNORECASE), 8),
    (re.compile(r"(\d+)[\s-]?cores?", re.IGNORECASE), None),
)
_STRIP_PATTERNS = (
    re.compile(r"@?\s*\d+(?:\.\d+)?\s*(?:GHz|MHz)", re.IGNORECASE),
    re.compile(r"\d+\s*-?\s*cores?\b", re.IGNORECASE),
    re.compile(r"(?:dual|quad|hexa|octa)[\s-]?core", re.IGNORECASE),
)
_CPU_MODEL_MARKER = re.compile(r"intel|amd|ryzen|core\s*i[3579]|apple\s*m\d", re.IGNORECASE)


def strip_html(html: str) -> str:
    """Line-oriented plain text: <br>, </li>, </ul> become newlines, entities decoded."""
    soup = BeautifulSoup(html, "html.parser")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(["li", "ul"]):
        tag.append("\n")
    return soup.get_text().strip()


def _route_key(key: str) -> Optional[str]:
    for bucket, needles in FIELD_ROUTES:
        if any(n in key for n in needles):
            return bucket
    return None


def parse_section(text: str) -> Optional[GameRequirements]:
    """Route ``Key: value`` lines into the five buckets; None if no such line exists."""
    result = GameRequirements()
    seen_pair = False

    for line in (l.strip() for l in text.split("\n")):
        if not line:
            continue
        m = _LINE_RE.match(line)
        if not m:
            continue
        seen_pair = True
        key = m.group(1).lower().replace("*", "").strip()
        value = m.group(2).strip()
        bucket = _route_key(key)
        if bucket is None:
            continue
        if not getattr(result, bucket):
            setattr(result, bucket, value)

    return result if seen_pair else None


def parse_requirements(
    minimum_html: Optional[str] = None,
    recommended_html: Optional[str] = None,
) -> ParsedGameRequirements:
    """Parse both tiers. A tier with no text, or no ``Key: value`` lines, is None."""
    parsed = ParsedGameRequirements(
        minimum=parse_section(strip_html(minimum_html)) if minimum_html else None,
        recommended=parse_section(strip_html(recommended_html)) if recommended_html else None,
    )
    logger.debug(
        "Parsed requirements: minimum=%s recommended=%s",
        parsed.minimum is not None,
        parsed.recommended is not None,
    )
    return parsed


def parse_cpu_requirement(text: str) -> ParsedCPUSpecs:
    """
    Pull clock speed, core count and a model name out of a CPU requirement.

      "2.6 GHz Quad Core"        -> model=None, speed 2.6, cores 4
      "Intel Core i5 @ 3.6 GHz"  -> model="Intel Core i5", speed 3.6, cores None

    Only the first alternative is meaningful; split on " or " beforehand.
    """
    raw = text or ""
    speed: Optional[float] = None
    cores: Optional[int] = None

    m = _GHZ_RE.search(raw)
    if m:
        speed = float(m.group(1))
    else:
        m = _MHZ_RE.search(raw)
        if m:
            speed = int(m.group(1)) / 1000

    for pattern, count in _CORE_PATTERNS:
        m = pattern.search(raw)
        if m:
            cores = count if count is not None else int(m.group(1))
            break

    stripped = raw
    for pattern in _STRIP_PATTERNS:
        stripped = pattern.sub("", stripped)
    stripped = re.sub(r"\s+", " ", stripped).strip()

    model = stripped if len(stripped) > 2 and _CPU_MODEL_MARKER.search(stripped) else None
    return ParsedCPUSpecs(model=model, speed_ghz=speed, cores=cores, raw=raw)
