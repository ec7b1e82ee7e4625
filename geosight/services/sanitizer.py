"""Coordinate sanitation for parsed Gemini answers."""

import math
import warnings
from typing import Any

from geosight.exceptions import CoordinateDefaultedWarning
from geosight.models.analysis import AnalysisResult, RawAnalysis


def _coordinate(name: str, value: Any) -> float:
    # bool is an int subclass but never a coordinate
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            if math.isfinite(value):
                return float(value)
        except OverflowError:
            # int too large for a float
            pass
    warnings.warn(
        f"Invalid {name} received ({value!r}), defaulting to 0",
        CoordinateDefaultedWarning,
        stacklevel=3,
    )
    return 0.0


def sanitize(raw: RawAnalysis | AnalysisResult) -> AnalysisResult:
    """Return an immutable result whose coordinates are finite numbers.

    Never raises. Already-sanitized results come back equal to themselves.
    """
    fields = raw.model_dump()
    fields["latitude"] = _coordinate("latitude", raw.latitude)
    fields["longitude"] = _coordinate("longitude", raw.longitude)
    return AnalysisResult.model_validate(fields)
