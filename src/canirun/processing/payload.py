"""Scanner -> checker handoff string: ``"<PREFIX>:<base64 JSON>"``."""

import base64
import binascii
import json
import math
from typing import Any, Optional

from ..config.settings import PAYLOAD_PREFIX
from ..models import UserSpecs
from ..utils.logging import get_logger

logger = get_logger(__name__)

# JSON key -> UserSpecs attribute
_NUMERIC_FIELDS = (
    ("cpuCores", "cpu_cores"),
    ("cpuSpeedGHz", "cpu_speed_ghz"),
    ("ramGB", "ram_gb"),
    ("storageGB", "storage_gb"),
)


def _number_or_none(value: Any) -> Optional[float]:
    # bool is an int subclass; true/false are not quantities
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def decode_specs_payload(text: str, prefix: str = PAYLOAD_PREFIX) -> Optional[UserSpecs]:
    """Decode a scanner payload. Anything malformed returns None, never raises."""
    if not isinstance(text, str):
        return None
    trimmed = text.strip()
    marker = f"{prefix}:"
    if not trimmed.startswith(marker):
        return None

    try:
        raw = base64.b64decode(trimmed[len(marker):], validate=True)
        data = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (binascii.Error, ValueError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        logger.debug("Rejected specs payload: %s", e)
        return None

    if not isinstance(data, dict):
        return None
    if not isinstance(data.get("os"), str) or not isinstance(data.get("cpu"), str):
        return None
    gpu = data.get("gpu")
    if gpu is not None and not isinstance(gpu, str):
        return None

    specs = UserSpecs(
        os=data["os"],
        cpu=data["cpu"],
        gpu=gpu or "",
        detection_source="script",
        ram_approximate=False,
    )
    for key, attr in _NUMERIC_FIELDS:
        setattr(specs, attr, _number_or_none(data.get(key)))
    return specs


def encode_specs_payload(specs: UserSpecs, prefix: str = PAYLOAD_PREFIX) -> str:
    """Inverse of :func:`decode_specs_payload` for the fields the scanner writes."""
    data = {
        "os": specs.os,
        "cpu": specs.cpu,
        "gpu": specs.gpu or None,
    }
    for key, attr in _NUMERIC_FIELDS:
        value = getattr(specs, attr)
        if value is not None:
            data[key] = value
    encoded = base64.b64encode(json.dumps(data).encode("utf-8")).decode("ascii")
    return f"{prefix}:{encoded}"
