"""
Comparison and estimation constants.

Every tunable number used by the matcher, comparator, verdict and FPS model
lives here so it can be adjusted (and tested) in one place.
"""

# ── Fuzzy matching ───────────────────────────────────────────────────
FUZZY_ACCEPT_THRESHOLD = 0.60   # normalized hit-weight share needed to accept
FUZZY_NUMERIC_WEIGHT = 3        # tokens containing a digit (model numbers)
FUZZY_TEXT_WEIGHT = 1

# Dropped from *input* tokens only; candidate tokens are never filtered.
FUZZY_NOISE_WORDS = frozenset({
    # renderer / API noise (WebGL renderer strings, driver names)
    "angle", "opengl", "direct3d11", "direct3d12", "d3d11", "d3d12",
    "vulkan", "metal", "google", "inc", "corporation", "technologies",
    "vs_4_0", "ps_4_0", "vs_5_0", "ps_5_0", "vs_6_0", "ps_6_0",
    # requirement text connectives
    "equivalent", "better", "compatible", "above", "later", "with",
    "or", "and", "series", "higher", "newer",
})

# ── CPU comparison ───────────────────────────────────────────────────
CPU_SPEED_TOLERANCE = 0.10      # user clock may be 10% under the ask

# ── FPS model ────────────────────────────────────────────────────────
FPS_MIN_ANCHOR = 30             # fps when user score == minimum score (below-min path)
FPS_REC_ANCHOR = 60             # fps when user score == reference score
FPS_HALF_LIFE_POINTS = 25       # score points per doubling / halving
FPS_MAX = 300
FPS_UNCERTAINTY = 0.25          # fixed ±25% band
FPS_BALANCED_BAND = 0.15        # gpu/cpu within 15% of the smaller ⇒ balanced

# ── Display ──────────────────────────────────────────────────────────
NO_REQUIREMENT = "—"
UNKNOWN_VALUE = "Unknown"

LABEL_OS = "Operating System"
LABEL_CPU = "Processor"
LABEL_GPU = "Graphics"
LABEL_RAM = "Memory (RAM)"
LABEL_STORAGE = "Storage"

# ── Catalog normalization ────────────────────────────────────────────
FEED_SCORE_FLOOR = 10           # external feeds map onto 10..100
FEED_SCORE_SPAN = 90
