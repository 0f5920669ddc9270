"""HardwareCatalog: the name -> relative score lookup used by the comparator.

The catalog is built from the curated tables in :mod:`canirun.config.rules`
plus, when present, benchmark CSVs written by the feed refresh
(:mod:`canirun.ingestion.benchmarks`). Curated entries always win.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

import numpy as np
import pandas as pd

from ..utils.logging import get_logger
from .rules import CPU_SCORES, GPU_SCORES, OS_SCORES
from .scoring_constants import FEED_SCORE_FLOOR, FEED_SCORE_SPAN
from .settings import BENCH_CPU_PATH, BENCH_GPU_PATH

logger = get_logger(__name__)

NAMESPACES = ("cpu", "gpu", "os")

# raw benchmark columns accepted when a CSV has no prebuilt "score"
RAW_SCORE_COLUMNS = ("multicore_score", "opencl", "vulkan", "metal", "cuda", "perf_idx")

_WARNED_KEYS: set[str] = set()
_DEFAULT_CATALOG = None


def _warn_once(key: str, msg: str, *args) -> None:
    if key in _WARNED_KEYS:
        return
    _WARNED_KEYS.add(key)
    logger.warning(msg, *args)


class HardwareCatalog:
    """Immutable snapshot of the three score namespaces."""

    def __init__(
        self,
        cpu: Mapping[str, float],
        gpu: Mapping[str, float],
        os: Optional[Mapping[str, float]] = None,
    ):
        self._tables = {
            "cpu": MappingProxyType(dict(cpu)),
            "gpu": MappingProxyType(dict(gpu)),
            "os": MappingProxyType(dict(os if os is not None else OS_SCORES)),
        }

    @property
    def cpu(self) -> Mapping[str, float]:
        return self._tables["cpu"]

    @property
    def gpu(self) -> Mapping[str, float]:
        return self._tables["gpu"]

    @property
    def os(self) -> Mapping[str, float]:
        return self._tables["os"]

    def names(self, namespace: str) -> List[str]:
        return list(self._table(namespace).keys())

    def score(self, namespace: str, name: Optional[str]) -> Optional[float]:
        if name is None:
            return None
        return self._table(namespace).get(name)

    def _table(self, namespace: str) -> Mapping[str, float]:
        if namespace not in self._tables:
            raise KeyError(f"unknown catalog namespace: {namespace!r}")
        return self._tables[namespace]

    def __len__(self) -> int:
        return sum(len(t) for t in self._tables.values())

    @classmethod
    def from_static(cls) -> "HardwareCatalog":
        return cls(CPU_SCORES, GPU_SCORES, OS_SCORES)


def normalize_feed_scores(raw: pd.Series) -> pd.Series:
    """Map raw benchmark numbers onto 10..100 relative to the table maximum."""
    x = pd.to_numeric(raw, errors="coerce")
    xmax = float(x.max()) if x.notna().any() else 0.0
    if xmax <= 0:
        return pd.Series(np.nan, index=raw.index)
    return np.round(x / xmax * FEED_SCORE_SPAN + FEED_SCORE_FLOOR)


def _safe_load_bench(path: Path) -> Optional[pd.DataFrame]:
    """
    bench csv format expectation:
      - name (or model): str
      - score (0-100) or one raw column from RAW_SCORE_COLUMNS
    """
    if not path.exists():
        _warn_once(f"missing_file:{path.name}", "%s not found; using curated table only.", path.name)
        return None

    try:
        df = pd.read_csv(path, encoding="utf-8")
    except Exception as e:
        _warn_once(f"read_error:{path.name}", "%s could not be read: %s", path.name, e)
        return None

    name_col = "name" if "name" in df.columns else "model" if "model" in df.columns else None
    if name_col is None:
        _warn_once(f"missing_name:{path.name}", "%s missing required 'name' column.", path.name)
        return None

    if "score" in df.columns:
        scores = pd.to_numeric(df["score"], errors="coerce")
    else:
        raw_col = next((c for c in RAW_SCORE_COLUMNS if c in df.columns), None)
        if raw_col is None:
            _warn_once(f"missing_score:{path.name}", "%s missing score column.", path.name)
            return None
        scores = normalize_feed_scores(df[raw_col])

    out = pd.DataFrame({
        "name": df[name_col].fillna("").astype(str).str.strip(),
        "score": scores,
    })
    out = out[(out["name"] != "") & out["score"].notna() & (out["score"] > 0)]
    return out.drop_duplicates(subset=["name"], keep="first").reset_index(drop=True)


def merge_scores(curated: Mapping[str, float], feed: Optional[pd.DataFrame]) -> Dict[str, float]:
    """Curated names first (their order drives tie-breaks), then feed-only names."""
    merged: Dict[str, float] = dict(curated)
    if feed is None:
        return merged
    added = 0
    for name, score in zip(feed["name"], feed["score"]):
        if name not in merged:
            merged[name] = float(score)
            added += 1
    logger.info("Merged %d benchmark entries into curated table (%d curated).", added, len(curated))
    return merged


def build_catalog(
    cpu_path: Path = BENCH_CPU_PATH,
    gpu_path: Path = BENCH_GPU_PATH,
) -> HardwareCatalog:
    cpu = merge_scores(CPU_SCORES, _safe_load_bench(cpu_path))
    gpu = merge_scores(GPU_SCORES, _safe_load_bench(gpu_path))
    return HardwareCatalog(cpu, gpu, OS_SCORES)


def get_catalog() -> HardwareCatalog:
    """Process-wide default catalog, built on first use."""
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = build_catalog()
    return _DEFAULT_CATALOG


def reset_catalog() -> None:
    """Drop the cached default so the next :func:`get_catalog` re-reads the CSVs."""
    global _DEFAULT_CATALOG
    _DEFAULT_CATALOG = None
