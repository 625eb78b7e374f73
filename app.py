from __future__ import annotations

import logging

# Bring in the FastAPI toolkit plus the shared settings.
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from routers import sessions


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Build the FastAPI application that issues session ids.
app = FastAPI(title=settings.app_title)


# Let local dev origins call the API without CORS complaints.
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Register each router so their endpoints become reachable.
app.include_router(sessions.router)


# Lightweight root endpoint acts as a ping for operators.
@app.get("/")
def root():
    return {"message": f"{settings.app_title} running ({settings.environment})"}
