"""Synthetic Series: deterministic monthly fallback for the labor-market charts.

Invariants:
    - Output is always two series, informality first, unemployment second
    - Each mapping has exactly `months` consecutive "YYYY-MM" keys, ascending,
      ending at the month that contains `end` (UTC today when omitted)
    - Informality stays in [30, 50], unemployment in [5, 15], one decimal
    - Same (months, end) -> identical output

Design Decisions:
    - Smooth sin/cos drift around a slight downward trend, no randomness
    - Keys follow the Series shape the structured prompt asks Gemini for, so the
      client cannot tell fallback data from generated data by shape
"""

import math
from datetime import date, datetime, timezone

INFORMALITY_NAME = "Taxa de informalidade"
UNEMPLOYMENT_NAME = "Taxa de desocupacao"

INFORMALITY_SEED = 40.0
UNEMPLOYMENT_SEED = 9.5
INFORMALITY_BOUNDS = (30.0, 50.0)
UNEMPLOYMENT_BOUNDS = (5.0, 15.0)


def _reference_month(end: date | datetime | None) -> tuple[int, int]:
    if end is None:
        end = datetime.now(timezone.utc)
    elif isinstance(end, datetime) and end.tzinfo is not None:
        end = end.astimezone(timezone.utc)
    return end.year, end.month


def month_labels(months: int, end: date | datetime | None = None) -> list[str]:
    """Ascending "YYYY-MM" labels for `months` months ending at `end`'s month."""
    year, month = _reference_month(end)
    labels = []
    for back in range(months - 1, -1, -1):
        index = year * 12 + (month - 1) - back
        labels.append(f"{index // 12:04d}-{index % 12 + 1:02d}")
    return labels


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return max(low, min(high, value))


def build_synthetic_series(
    months: int = 12, end: date | datetime | None = None,
) -> list[dict]:
    """Build the informality/unemployment fallback series."""
    labels = month_labels(months, end)
    informality = INFORMALITY_SEED
    unemployment = UNEMPLOYMENT_SEED
    series_inf: dict[str, float] = {}
    series_des: dict[str, float] = {}
    for i, label in enumerate(labels):
        delta_inf = math.sin(i / 3) * 0.15 - 0.12
        delta_des = math.cos(i / 4) * 0.12 - 0.10
        informality = _clamp(round(informality + delta_inf, 1), INFORMALITY_BOUNDS)
        unemployment = _clamp(round(unemployment + delta_des, 1), UNEMPLOYMENT_BOUNDS)
        series_inf[label] = informality
        series_des[label] = unemployment
    return [
        {"name": INFORMALITY_NAME, "results": [{"series": series_inf}]},
        {"name": UNEMPLOYMENT_NAME, "results": [{"series": series_des}]},
    ]
