"""Token-overlap fuzzy matching of free-form hardware text to catalog names.

Numeric tokens (anything containing a digit) weigh three times as much as
plain words, so model numbers decide the match: "RTX 3070" vs "RTX 3060"
matters far more than whether the input said "GeForce".
"""

import re
from functools import lru_cache
from typing import Iterable, List, NamedTuple, Optional, Sequence

from ..config.scoring_constants import (
    FUZZY_ACCEPT_THRESHOLD,
    FUZZY_NOISE_WORDS,
    FUZZY_NUMERIC_WEIGHT,
    FUZZY_TEXT_WEIGHT,
)

_ALTERNATIVE_SPLIT = re.compile(r" or ", re.IGNORECASE)
_SPEC_NOISE = (
    re.compile(r"\d+(?:\.\d+)?\s*(?:ghz|mhz)\b", re.IGNORECASE),
    re.compile(r"\d+\s*-?\s*cores?\b", re.IGNORECASE),
    re.compile(r"\d+\s*-?\s*threads?\b", re.IGNORECASE),
)
_TRADEMARKS = re.compile(r"[®™©]+")
_TOKEN_SPLIT = re.compile(r"[\s\-/,@()]+")
_DIGIT_LETTER = re.compile(r"(\d)([a-z])")
_HAS_DIGIT = re.compile(r"\d")


class MatchScore(NamedTuple):
    candidate: str
    normalized: float
    raw: int


def split_alternatives(text: str) -> List[str]:
    """Split requirement text on a literal " or " (any case)."""
    return [p.strip() for p in _ALTERNATIVE_SPLIT.split(text or "") if p.strip()]


def strip_spec_noise(text: str) -> str:
    """Remove clock speed, core and thread counts that would pollute model tokens."""
    for pattern in _SPEC_NOISE:
        text = pattern.sub(" ", text)
    return text


def _raw_tokens(text: str) -> List[str]:
    text = _TRADEMARKS.sub("", text.lower())
    return [t for t in _TOKEN_SPLIT.split(text) if t]


def tokenize(text: str) -> List[str]:
    """Lowercase tokens, with digit->letter boundaries split ("6gb" -> "6", "gb")."""
    tokens: List[str] = []
    for tok in _raw_tokens(text):
        tokens.extend(_DIGIT_LETTER.sub(r"\1 \2", tok).split())
    return tokens


@lru_cache(maxsize=8192)
def _candidate_tokens(candidate: str) -> tuple:
    return tuple(tokenize(candidate))


def _input_tokens(text: str) -> List[str]:
    # noise is dropped both before and after the digit split so that
    # "direct3d11" goes away whole rather than as "direct3" + "d11"
    tokens: List[str] = []
    for tok in _raw_tokens(text):
        if tok in FUZZY_NOISE_WORDS:
            continue
        tokens.extend(t for t in _DIGIT_LETTER.sub(r"\1 \2", tok).split() if t not in FUZZY_NOISE_WORDS)
    return tokens


def is_numeric_token(token: str) -> bool:
    return bool(_HAS_DIGIT.search(token))


def _same_hundred(input_token: str, candidate_token: str) -> bool:
    """A round hundred in a "600 series" ask covers 650/660/670, not 750."""
    if not (input_token.isdigit() and candidate_token.isdigit()):
        return False
    value = int(input_token)
    if value < 100 or value % 100 != 0:
        return False
    return int(candidate_token) // 100 == value // 100


def _token_hits(candidate_token: str, input_tokens: Sequence[str], has_series: bool) -> bool:
    if is_numeric_token(candidate_token):
        return any(
            it == candidate_token or (has_series and _same_hundred(it, candidate_token))
            for it in input_tokens
        )
    return any(
        it == candidate_token or candidate_token in it or it in candidate_token
        for it in input_tokens
    )


def score_phrase(phrase: str, candidates: Iterable[str]) -> Optional[MatchScore]:
    """Best candidate for one alternative phrase, or None if nothing overlaps."""
    cleaned = strip_spec_noise(phrase)
    has_series = "series" in _raw_tokens(cleaned)
    input_tokens = _input_tokens(cleaned)
    if not input_tokens:
        return None

    best: Optional[MatchScore] = None
    for candidate in candidates:
        hit = 0
        total = 0
        for ct in _candidate_tokens(candidate):
            weight = FUZZY_NUMERIC_WEIGHT if is_numeric_token(ct) else FUZZY_TEXT_WEIGHT
            total += weight
            if _token_hits(ct, input_tokens, has_series):
                hit += weight
        if total == 0:
            continue
        normalized = hit / total
        if best is None or normalized > best.normalized or (
            normalized == best.normalized and hit > best.raw
        ):
            best = MatchScore(candidate, normalized, hit)
    return best


def best_match(text: str, candidates: Sequence[str]) -> Optional[MatchScore]:
    """Best-scoring candidate across all " or " alternatives (unthresholded)."""
    best: Optional[MatchScore] = None
    for phrase in split_alternatives(text):
        scored = score_phrase(phrase, candidates)
        if scored is None:
            continue
        if best is None or scored.normalized > best.normalized or (
            scored.normalized == best.normalized and scored.raw > best.raw
        ):
            best = scored
    return best


def accept(scored: Optional[MatchScore]) -> Optional[str]:
    if scored is None or scored.normalized < FUZZY_ACCEPT_THRESHOLD:
        return None
    return scored.candidate


def fuzzy_match_hardware(text: str, candidates: Sequence[str]) -> Optional[str]:
    """Resolve ``text`` to the closest candidate name, or None below threshold."""
    if not text or not text.strip():
        return None
    return accept(best_match(text, candidates))


def match_phrase(phrase: str, candidates: Sequence[str]) -> Optional[str]:
    """Thresholded match of a single phrase (no alternative splitting)."""
    if not phrase or not phrase.strip():
        return None
    return accept(score_phrase(phrase, candidates))
