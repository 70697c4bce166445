"""Tunable constants for trace normalization and projection."""

from __future__ import annotations

# ── Reference synthesis & delta ──────────────────────────────────────────────

REFERENCE_WINDOW = 5  # samples either side; window is [i - W, i + W)
RPM_REFERENCE_FACTOR = 0.98
DELTA_SCALE = -0.5  # positive delta reads as time lost
DELTA_SPEED_DIVISOR = 100.0
DELTA_PRECISION = 3

# ── Decimation ───────────────────────────────────────────────────────────────

MAX_CHART_SAMPLES = 500

# ── Canvas projection ────────────────────────────────────────────────────────

CANVAS_WIDTH = 400.0
CANVAS_HEIGHT = 300.0
CANVAS_MARGIN = 50.0
TRACK_SPAN_X = 300.0
TRACK_SPAN_Y = 200.0
MIN_VALID_FIXES = 11

# Procedural figure-eight used when the lap has no usable GPS
FALLBACK_CENTER_X = 200.0
FALLBACK_CENTER_Y = 150.0
FALLBACK_RADIUS_X = 100.0
FALLBACK_HARMONIC_X = 30.0
FALLBACK_RADIUS_Y = 80.0
FALLBACK_HARMONIC_Y = 40.0
FALLBACK_PATH_SAMPLES = 200

# ── Sectors ──────────────────────────────────────────────────────────────────

SECTOR_COUNT = 3
CURSOR_MAX = 100.0

# ── Heatmap ──────────────────────────────────────────────────────────────────

HEAT_COLORS: dict[str, str] = {
    "fast": "#22C55E",
    "mid": "#F59E0B",
    "slow": "#EF4444",
}
