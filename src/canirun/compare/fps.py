"""Heuristic frame-rate range from the catalog scores behind a comparison."""

import math
from typing import NamedTuple, Optional

from ..config.scoring_constants import (
    FPS_BALANCED_BAND,
    FPS_HALF_LIFE_POINTS,
    FPS_MAX,
    FPS_MIN_ANCHOR,
    FPS_REC_ANCHOR,
    FPS_UNCERTAINTY,
)
from ..models import FpsEstimate, HardwareScores


class ComponentFps(NamedTuple):
    fps: Optional[float]
    fails_min: bool = False


NO_ESTIMATE = FpsEstimate(low=0, high=0, mid=0, bottleneck="balanced", confidence="none")


def component_fps(
    user_score: Optional[float],
    min_score: Optional[float],
    rec_score: Optional[float],
) -> ComponentFps:
    """
    One component's fps on its own.

    Below minimum it scales linearly under 30 fps; otherwise 60 fps at the
    reference score (recommended, else minimum), doubling every
    FPS_HALF_LIFE_POINTS above it and halving every FPS_HALF_LIFE_POINTS below.
    """
    if user_score is None or (min_score is None and rec_score is None):
        return ComponentFps(None)

    if min_score is not None and user_score < min_score:
        return ComponentFps(FPS_MIN_ANCHOR * (user_score / min_score), fails_min=True)

    reference = rec_score if rec_score is not None else min_score
    return ComponentFps(FPS_REC_ANCHOR * 2 ** ((user_score - reference) / FPS_HALF_LIFE_POINTS))


def estimate_fps(scores: HardwareScores) -> FpsEstimate:
    gpu = component_fps(scores.user_gpu_score, scores.min_gpu_score, scores.rec_gpu_score)
    cpu = component_fps(scores.user_cpu_score, scores.min_cpu_score, scores.rec_cpu_score)

    if gpu.fps is None and cpu.fps is None:
        return NO_ESTIMATE

    if gpu.fps is not None and cpu.fps is not None:
        if gpu.fails_min or cpu.fails_min:
            # a component below minimum caps the frame rate on its own
            mid = min(gpu.fps, cpu.fps)
            bottleneck = "gpu" if gpu.fps <= cpu.fps else "cpu"
        else:
            mid = math.sqrt(gpu.fps * cpu.fps)
            if abs(gpu.fps - cpu.fps) <= min(gpu.fps, cpu.fps) * FPS_BALANCED_BAND:
                bottleneck = "balanced"
            else:
                bottleneck = "gpu" if gpu.fps < cpu.fps else "cpu"
    elif gpu.fps is not None:
        mid, bottleneck = gpu.fps, "gpu"
    else:
        mid, bottleneck = cpu.fps, "cpu"

    has_both_rec = scores.rec_gpu_score is not None and scores.rec_cpu_score is not None
    confidence = "good" if has_both_rec else "limited"

    mid = max(1.0, min(mid, FPS_MAX))
    return FpsEstimate(
        low=max(1, math.floor(mid * (1 - FPS_UNCERTAINTY))),
        high=math.ceil(mid * (1 + FPS_UNCERTAINTY)),
        mid=round(mid),
        bottleneck=bottleneck,
        confidence=confidence,
    )
