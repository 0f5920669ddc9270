"""Storefront payload adapters.

Each adapter knows one source's JSON shape and hands the comparison core
the same :class:`RawRequirements` pair of tier blurbs, so Steam/RAWG/IGDB
field names stop here.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ..models import ParsedGameRequirements
from ..processing.requirements import parse_requirements

_TIER_PREFIX = re.compile(r"^\s*(?:minimum|recommended)\s*:\s*", re.IGNORECASE)


@dataclass(frozen=True)
class RawRequirements:
    minimum: Optional[str] = None
    recommended: Optional[str] = None


def _text_or_none(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


@dataclass(frozen=True)
class SteamRequirements:
    """``appdetails`` ``data`` object; ``pc_requirements`` is ``[]`` when a game has none."""

    name: str
    pc_requirements: Mapping[str, Any]
    header_image: Optional[str] = None
    source: str = "steam"

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "SteamRequirements":
        reqs = data.get("pc_requirements")
        return cls(
            name=str(data.get("name") or ""),
            pc_requirements=reqs if isinstance(reqs, Mapping) else {},
            header_image=data.get("header_image"),
        )

    def to_raw(self) -> RawRequirements:
        return RawRequirements(
            minimum=_text_or_none(self.pc_requirements.get("minimum")),
            recommended=_text_or_none(self.pc_requirements.get("recommended")),
        )


@dataclass(frozen=True)
class RawgRequirements:
    """RAWG game detail; requirements sit on the ``PC`` entry of ``platforms``."""

    name: str
    minimum: Optional[str]
    recommended: Optional[str]
    source: str = "rawg"

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "RawgRequirements":
        minimum = recommended = None
        for entry in data.get("platforms") or []:
            platform = entry.get("platform") or {}
            if str(platform.get("slug", "")).lower() != "pc" and str(platform.get("name", "")).lower() != "pc":
                continue
            reqs = entry.get("requirements_en") or entry.get("requirements") or {}
            minimum = _text_or_none(reqs.get("minimum"))
            recommended = _text_or_none(reqs.get("recommended"))
            break
        return cls(name=str(data.get("name") or ""), minimum=minimum, recommended=recommended)

    def to_raw(self) -> RawRequirements:
        # plain text with a leading "Minimum:" / "Recommended:" header
        return RawRequirements(
            minimum=_TIER_PREFIX.sub("", self.minimum) if self.minimum else None,
            recommended=_TIER_PREFIX.sub("", self.recommended) if self.recommended else None,
        )


@dataclass(frozen=True)
class IgdbRequirements:
    """Normalised IGDB record: ``{"name": ..., "requirements": {"minimum", "recommended"}}``."""

    name: str
    minimum: Optional[str]
    recommended: Optional[str]
    source: str = "igdb"

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "IgdbRequirements":
        reqs = data.get("requirements") or {}
        return cls(
            name=str(data.get("name") or ""),
            minimum=_text_or_none(reqs.get("minimum")),
            recommended=_text_or_none(reqs.get("recommended")),
        )

    def to_raw(self) -> RawRequirements:
        return RawRequirements(minimum=self.minimum, recommended=self.recommended)


SourceRequirements = Union[SteamRequirements, RawgRequirements, IgdbRequirements]

ADAPTERS = {
    "steam": SteamRequirements,
    "rawg": RawgRequirements,
    "igdb": IgdbRequirements,
}


def adapter_for(source: str, data: Mapping[str, Any]) -> SourceRequirements:
    try:
        adapter = ADAPTERS[source.lower()]
    except KeyError:
        raise ValueError(f"unknown requirement source: {source!r}") from None
    return adapter.from_payload(data)


def parse_source_requirements(adapter: SourceRequirements) -> ParsedGameRequirements:
    raw = adapter.to_raw()
    return parse_requirements(raw.minimum, raw.recommended)
