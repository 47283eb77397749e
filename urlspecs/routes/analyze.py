# urlspecs/routes/analyze.py

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..errors import InvalidHostError, InvalidUrlError, PredictionServiceError
from ..inference.prediction_client import PredictionClient
from ..preprocessing.url_processing import extract

logger = logging.getLogger(__name__)

router = APIRouter()

# one client per process, shares its HTTP connection pool
prediction_client = PredictionClient()


class UrlRequest(BaseModel):
    url: str


def _extract_or_422(raw: str):
    try:
        return extract(raw)
    except (InvalidUrlError, InvalidHostError) as exc:
        logger.info("Rejected URL %r: %s", raw, exc)
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/extract")
def extract_features(req: UrlRequest):
    fv = _extract_or_422(req.url)
    return {"features": fv.as_dict()}


@router.post("/predict")
def predict(req: UrlRequest):
    fv = _extract_or_422(req.url)
    try:
        result = prediction_client.predict(fv)
    except PredictionServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc))

    return {
        "features": fv.as_dict(),
        "result": result.model_dump(by_alias=True),
    }
