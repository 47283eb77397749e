# urlspecs/main.py

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import LOG_FORMAT, LOG_LEVEL
from .routes.analyze import router as analyze_router

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

app = FastAPI(
    title="URL Specs Feature API",
    description="Extract lexical URL features and score them with the remote phishing model",
    version="1.0.0"
)

# Allow CORS from anywhere.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount the feature endpoints.
app.include_router(analyze_router, prefix="", tags=["features"])
