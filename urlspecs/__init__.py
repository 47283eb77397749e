# urlspecs/__init__.py

from .errors import (
    UrlSpecsError,
    InvalidUrlError,
    InvalidHostError,
    PredictionServiceError,
)
from .preprocessing import FeatureVector, extract

__all__ = [
    "UrlSpecsError",
    "InvalidUrlError",
    "InvalidHostError",
    "PredictionServiceError",
    "FeatureVector",
    "extract",
]
