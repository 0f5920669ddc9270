"""Records exchanged between the parser, comparator, verdict and FPS stages."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List, Optional

# ComparisonStatus: "pass" | "fail" | "warn" | "info"
# Verdict: "pass" | "minimum" | "fail" | "unknown"
# Bottleneck: "gpu" | "cpu" | "balanced"
# Confidence: "good" | "limited" | "none"
STATUSES = ("pass", "fail", "warn", "info")
VERDICTS = ("pass", "minimum", "fail", "unknown")


@dataclass
class UserSpecs:
    os: str = ""
    cpu: str = ""
    gpu: str = ""
    cpu_cores: Optional[int] = None
    cpu_speed_ghz: Optional[float] = None
    ram_gb: Optional[float] = None
    storage_gb: Optional[float] = None
    detection_source: str = "auto"      # "auto" | "script"
    ram_approximate: bool = False
    guessed_fields: List[str] = field(default_factory=list)
    manual_fields: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class GameRequirements:
    """One requirement tier. ``""`` means the parser did not find the field."""

    os: str = ""
    cpu: str = ""
    gpu: str = ""
    ram: str = ""
    storage: str = ""

    def is_empty(self) -> bool:
        return not any((self.os, self.cpu, self.gpu, self.ram, self.storage))


@dataclass
class ParsedGameRequirements:
    minimum: Optional[GameRequirements] = None
    recommended: Optional[GameRequirements] = None


@dataclass(frozen=True)
class ParsedCPUSpecs:
    model: Optional[str]
    speed_ghz: Optional[float]
    cores: Optional[int]
    raw: str

    def is_empty(self) -> bool:
        return self.model is None and self.speed_ghz is None and self.cores is None


@dataclass
class ComparisonItem:
    label: str
    user_value: str
    min_value: str
    rec_value: str
    min_status: str
    rec_status: str


@dataclass
class UpgradeItem:
    component: str
    current: str
    required: str


@dataclass
class VerdictResult:
    verdict: str
    title: str
    description: str
    failed_components: List[str] = field(default_factory=list)
    warn_components: List[str] = field(default_factory=list)
    upgrade_items: List[UpgradeItem] = field(default_factory=list)


@dataclass
class HardwareScores:
    """Catalog scores behind a comparison; ``None`` where nothing resolved."""

    user_gpu_score: Optional[float] = None
    rec_gpu_score: Optional[float] = None
    min_gpu_score: Optional[float] = None
    user_cpu_score: Optional[float] = None
    rec_cpu_score: Optional[float] = None
    min_cpu_score: Optional[float] = None


@dataclass(frozen=True)
class FpsEstimate:
    low: int
    high: int
    mid: int
    bottleneck: str
    confidence: str


@dataclass
class ComparisonResult:
    items: List[ComparisonItem]
    scores: HardwareScores
