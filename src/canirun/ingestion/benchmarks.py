"""Benchmark feed refresh: Geekbench browser JSON -> data/bench_{cpu,gpu}.csv."""

import os
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Tuple

import pandas as pd
import requests

from ..config.benchmarks import normalize_feed_scores, reset_catalog
from ..config.settings import (
    BENCH_CPU_PATH,
    BENCH_GPU_PATH,
    GEEKBENCH_CPU_URL,
    GEEKBENCH_GPU_URL,
    HTTP_TIMEOUT_S,
)
from ..sources.steam import build_session
from ..utils.logging import get_logger

logger = get_logger(__name__)

# most portable API first
GPU_SCORE_KEYS = ("opencl", "vulkan", "metal", "cuda")


def _devices(payload: Any) -> list:
    if isinstance(payload, Mapping):
        devices = payload.get("devices")
        return devices if isinstance(devices, list) else []
    return []


def cpu_frame(devices: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"name": d.get("name"), "raw": d.get("multicore_score")} for d in devices if isinstance(d, Mapping)],
        columns=["name", "raw"],
    )
    return _finish(df)


def gpu_frame(devices: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    rows = []
    for d in devices:
        if not isinstance(d, Mapping):
            continue
        raw = next((d.get(k) for k in GPU_SCORE_KEYS if d.get(k)), None)
        rows.append({"name": d.get("name"), "raw": raw})
    return _finish(pd.DataFrame(rows, columns=["name", "raw"]))


def _finish(df: pd.DataFrame) -> pd.DataFrame:
    df["name"] = df["name"].fillna("").astype(str).str.strip()
    df["raw"] = pd.to_numeric(df["raw"], errors="coerce")
    df = df[(df["name"] != "") & (df["raw"] > 0)].copy()
    df["score"] = normalize_feed_scores(df["raw"])
    return (
        df.drop_duplicates(subset=["name"], keep="first")[["name", "score", "raw"]]
        .reset_index(drop=True)
    )


def _tmp_path(path: Path) -> Path:
    return path.with_suffix(path.suffix + ".tmp")


def _write_csvs(frames: Iterable[Tuple[pd.DataFrame, Path]]) -> None:
    """Stage every frame next to its target, then swap them in together."""
    staged = []
    try:
        for df, path in frames:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = _tmp_path(path)
            staged.append((tmp, path))
            df.to_csv(tmp, index=False, encoding="utf-8")
    except OSError:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise
    for tmp, path in staged:
        os.replace(tmp, path)


def _fetch(session: requests.Session, url: str, timeout_s: float) -> Optional[list]:
    try:
        resp = session.get(url, timeout=timeout_s)
        resp.raise_for_status()
        return _devices(resp.json())
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Benchmark feed %s unavailable: %s", url, exc)
        return None


def refresh_benchmarks(
    session: Optional[requests.Session] = None,
    cpu_path: Path = BENCH_CPU_PATH,
    gpu_path: Path = BENCH_GPU_PATH,
    timeout_s: float = HTTP_TIMEOUT_S,
) -> bool:
    """Fetch both feeds and rewrite the CSVs. Any failure keeps the old files."""
    session = session or build_session()
    logger.info("Refreshing benchmark feeds...")

    cpu_devices = _fetch(session, GEEKBENCH_CPU_URL, timeout_s)
    gpu_devices = _fetch(session, GEEKBENCH_GPU_URL, timeout_s)
    if cpu_devices is None or gpu_devices is None:
        return False

    cpu_df = cpu_frame(cpu_devices)
    gpu_df = gpu_frame(gpu_devices)
    if cpu_df.empty or gpu_df.empty:
        logger.warning("Benchmark feeds returned no usable rows (cpu=%d, gpu=%d)", len(cpu_df), len(gpu_df))
        return False

    try:
        _write_csvs([(cpu_df, cpu_path), (gpu_df, gpu_path)])
    except OSError as exc:
        logger.warning("Could not write benchmark CSVs: %s", exc)
        return False

    reset_catalog()
    logger.info("[OK] Benchmarks refreshed: %d CPUs, %d GPUs", len(cpu_df), len(gpu_df))
    return True
