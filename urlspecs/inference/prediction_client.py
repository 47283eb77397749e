# urlspecs/inference/prediction_client.py

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..config import PREDICTION_API_URL, REQUEST_TIMEOUT
from ..errors import PredictionServiceError
from ..preprocessing.url_processing import FeatureVector

logger = logging.getLogger(__name__)

# Field names the service expects where they differ from ours.
SERVICE_RENAMES = {
    "SpecialCharRatioInURL": "SpacialCharRatioInURL",
}
# Sent as-is instead of being stringified.
UNSTRINGIFIED_FIELDS = {"URLLength", "TLD", "Domain"}


class PredictionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prediction: str
    proba_percentile: Optional[float] = Field(default=None, alias="probaPercentile")
    probas: Dict[str, float] = Field(default_factory=dict)
    ignored: bool = False

    @field_validator("prediction", mode="before")
    @classmethod
    def _label_as_str(cls, v):
        # the service may answer with a numeric class label
        return str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v


def format_number(value: Any) -> str:
    """Stringify a number the way the service's other clients do: 1.0 -> "1", 0.25 -> "0.25"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_prediction_features(fv: FeatureVector) -> Dict[str, Any]:
    """Map a FeatureVector onto the request fields of the prediction service."""
    payload: Dict[str, Any] = {}
    for name, value in fv.as_dict().items():
        if name == "URL":
            continue
        key = SERVICE_RENAMES.get(name, name)
        payload[key] = value if name in UNSTRINGIFIED_FIELDS else format_number(value)
    return payload


class PredictionClient:
    """Submits feature vectors to the remote prediction service."""

    def __init__(
        self,
        api_url: str = PREDICTION_API_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def predict(self, fv: FeatureVector) -> PredictionResult:
        body = {"features": to_prediction_features(fv)}
        try:
            resp = self.session.post(self.api_url, json=body, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Prediction request for %s failed: %s", fv.url, exc)
            raise PredictionServiceError(f"Prediction service unavailable: {exc}") from exc

        try:
            result = PredictionResult.model_validate(data["result"])
        except (KeyError, TypeError, ValidationError) as exc:
            logger.warning("Malformed prediction response for %s: %s", fv.url, exc)
            raise PredictionServiceError(f"Malformed prediction response: {exc}") from exc

        logger.debug("Prediction for %s: %s", fv.url, result)
        return result
