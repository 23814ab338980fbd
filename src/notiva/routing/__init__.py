"""Query routing module for notiva."""

from .classifier import AvailabilitySource, QueryClassifier, classify
from .models import QueryClassification, StandardCategory
from .patterns import (
    detect_standard_category,
    is_encyclopedia_query,
    is_standard_response,
    is_weather_query,
    normalize,
)

__all__ = [
    "AvailabilitySource",
    "QueryClassification",
    "QueryClassifier",
    "StandardCategory",
    "classify",
    "detect_standard_category",
    "is_encyclopedia_query",
    "is_standard_response",
    "is_weather_query",
    "normalize",
]
