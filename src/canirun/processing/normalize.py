import re
from typing import Optional, Set, Tuple

from ..config.rules import GPU_CODENAMES, MACOS_CODENAMES, MACOS_VERSION_NAMES, PLATFORM_KEYWORDS


# =========================
# Quantities
# =========================
_GB_RE = re.compile(r"(\d+(?:\.\d+)?)\s*GB", re.IGNORECASE)
_MB_RE = re.compile(r"(\d+(?:\.\d+)?)\s*MB", re.IGNORECASE)
_TB_RE = re.compile(r"(\d+(?:\.\d+)?)\s*TB", re.IGNORECASE)


def parse_gb(text: Optional[str]) -> Optional[float]:
    """
    First size quantity in ``text``, in GB.
      "8 GB RAM"          -> 8.0
      "16384 MB"          -> 16.0
      "1 TB available"    -> 1024.0
      "a lot of space"    -> None
    """
    if not text:
        return None
    m = _GB_RE.search(text)
    if m:
        return float(m.group(1))
    m = _MB_RE.search(text)
    if m:
        return float(m.group(1)) / 1024
    m = _TB_RE.search(text)
    if m:
        return float(m.group(1)) * 1024
    return None


# =========================
# Requirement qualifiers
# =========================
_QUALIFIER_RE = re.compile(
    r"\s*(?:\bor\s+(?:better|higher|newer|equivalent|above|faster|similar|greater|later)\b"
    r"|\band\s+(?:up|above|higher|newer|later)\b"
    r"|\+)",
    re.IGNORECASE,
)


def strip_qualifiers(text: str) -> Tuple[str, bool]:
    """Remove "or better" style qualifiers; the flag says whether any were present."""
    cleaned, count = _QUALIFIER_RE.subn("", text or "")
    return re.sub(r"\s+", " ", cleaned).strip(), count > 0


# =========================
# GPU strings (lspci / codenames)
# =========================
_PCI_SLOT_RE = re.compile(r"^\s*(?:[0-9a-f]{4}:)?[0-9a-f]{2}:[0-9a-f]{2}\.[0-9a-f]\s+", re.IGNORECASE)
_PCI_CLASS_RE = re.compile(r"^(?:vga compatible controller|3d controller|display controller)\s*:\s*", re.IGNORECASE)
_REV_RE = re.compile(r"\(rev\s+[0-9a-f]+\)", re.IGNORECASE)
_BRACKET_RE = re.compile(r"\[([^\]]+)\]")
_VENDOR_TAGS = {"amd/ati", "ati", "amd"}
_PRODUCT_BRAND_RE = re.compile(
    r"\b(?:radeon|geforce|quadro|titan|rtx|gtx|rx|arc|iris|uhd|hd\s+graphics|firepro)\b", re.IGNORECASE
)


def gpu_vendor(text: str) -> Optional[str]:
    s = (text or "").lower()
    if "nvidia" in s:
        return "NVIDIA"
    if "intel" in s:
        return "Intel"
    if "amd" in s or "advanced micro" in s or "ati " in s:
        return "AMD"
    return None


def resolve_gpu_codename(text: str) -> Optional[str]:
    """Map an unbranded silicon codename ("GA104", "Navi 10") to a catalog product."""
    s = (text or "").lower()
    for pattern, product in GPU_CODENAMES:
        if re.search(pattern, s):
            return product
    return None


def clean_gpu_string(text: Optional[str]) -> str:
    """
    Reduce scanner GPU output to something the matcher can resolve.
      "01:00.0 VGA compatible controller: NVIDIA Corporation GA104 [GeForce RTX 3070] (rev a1)"
          -> "NVIDIA GeForce RTX 3070"
      "Intel Corporation Raptor Lake-P [UHD Graphics] (rev 04)" -> "Intel UHD Graphics"
      "NVIDIA Corporation TU106"                                -> "NVIDIA GeForce RTX 2060"
    Browser renderer strings and plain product names pass through unchanged.
    """
    s = _PCI_SLOT_RE.sub("", text or "")
    s = _PCI_CLASS_RE.sub("", s.strip())
    s = _REV_RE.sub("", s).strip()
    if not s:
        return ""

    brackets = [b.strip() for b in _BRACKET_RE.findall(s) if b.strip().lower() not in _VENDOR_TAGS]
    if brackets:
        device = brackets[-1]
        # "[Radeon RX 5600 OEM/5600 XT / 5700/5700 XT]" lists a whole die family
        if "/" in device:
            codename = resolve_gpu_codename(_BRACKET_RE.sub(" ", s))
            if codename:
                return codename
        vendor = gpu_vendor(s)
        if vendor and vendor.lower() not in device.lower():
            return f"{vendor} {device}"
        return device

    if not _PRODUCT_BRAND_RE.search(s):
        codename = resolve_gpu_codename(s)
        if codename:
            return codename

    s = s.replace("Advanced Micro Devices, Inc.", "AMD").replace("Corporation", "")
    return re.sub(r"\s+", " ", s).strip()


# =========================
# Operating systems
# =========================
_PATCH_VERSION_RE = re.compile(r"(\d+\.\d+)\.\d+")
_MAC_VERSION_RE = re.compile(r"\b(?:mac\s?os(?:\s?x)?|os\s?x)\s*(\d+(?:\.\d+)?)", re.IGNORECASE)
_BITNESS_RE = re.compile(r"\b(?:32|64)[\s-]?bits?\b", re.IGNORECASE)
_ANY_RE = re.compile(r"\bany\b", re.IGNORECASE)

_PLATFORM_PATTERNS = {
    platform: tuple(re.compile(p, re.IGNORECASE) for p in patterns)
    for platform, patterns in PLATFORM_KEYWORDS.items()
}
_MACOS_CODENAME_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(c) for c in MACOS_CODENAMES) + r")\b", re.IGNORECASE
)


def _macos_codename(version: str) -> Optional[str]:
    major, _, minor = version.partition(".")
    if major == "10":
        return MACOS_VERSION_NAMES.get(f"10.{minor}") if minor else None
    return MACOS_VERSION_NAMES.get(major)


def normalize_os_text(text: Optional[str]) -> str:
    """
    Trim patch versions and name macOS releases so they match catalog entries.
      "macOS 14.2.1"         -> "macOS 14.2 Sonoma"
      "Ubuntu 22.04.3 LTS"   -> "Ubuntu 22.04 LTS"
    """
    s = _PATCH_VERSION_RE.sub(r"\1", (text or "").strip())
    m = _MAC_VERSION_RE.search(s)
    if m:
        codename = _macos_codename(m.group(1))
        if codename and codename.lower() not in s.lower():
            s = f"{s} {codename}"
    return s


def detect_os_platforms(text: Optional[str]) -> Set[str]:
    """Every platform family named in ``text`` (requirements may list several)."""
    s = text or ""
    found = {
        platform
        for platform, patterns in _PLATFORM_PATTERNS.items()
        if any(p.search(s) for p in patterns)
    }
    if _MACOS_CODENAME_RE.search(s):
        found.add("macos")
    return found


def detect_os_platform(text: Optional[str]) -> Optional[str]:
    """Single platform of a user's OS string; None if unknown or ambiguous."""
    found = detect_os_platforms(text)
    if len(found) == 1:
        return next(iter(found))
    return None


def is_vague_os_requirement(text: Optional[str]) -> bool:
    """True for asks like "Any 64-bit OS" that name no platform at all."""
    s = text or ""
    if detect_os_platforms(s):
        return False
    return bool(_ANY_RE.search(s) or _BITNESS_RE.search(s))


# =========================
# CPUs
# =========================
_CPU_VENDOR_PATTERNS = (
    ("intel", re.compile(r"\bintel\b|\bcore\s*(?:i[3579]|2\s*(?:duo|quad))|\bpentium\b|\bceleron\b|\bxeon\b|\bi[3579]-\d", re.IGNORECASE)),
    ("amd", re.compile(r"\bamd\b|\bryzen\b|\bathlon\b|\bphenom\b|\bfx-?\d|\bthreadripper\b", re.IGNORECASE)),
    ("apple", re.compile(r"\bapple\b|\bm[1-4](?:\s+(?:pro|max|ultra))?\b", re.IGNORECASE)),
)


def infer_cpu_vendor(text: Optional[str]) -> Optional[str]:
    """'intel' | 'amd' | 'apple' | None."""
    s = text or ""
    for vendor, pattern in _CPU_VENDOR_PATTERNS:
        if pattern.search(s):
            return vendor
    return None
