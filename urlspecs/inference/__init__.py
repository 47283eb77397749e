# urlspecs/inference/__init__.py

from .prediction_client import (
    PredictionClient,
    PredictionResult,
    to_prediction_features,
)

__all__ = [
    "PredictionClient",
    "PredictionResult",
    "to_prediction_features",
]
