"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pes.config import Config

from .routes import people

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Missing configuration fails startup, not the first request
    Config.get_person_service()
    logger.info("Person Enrichment Service ready")
    yield


app = FastAPI(
    title="PersonEnrichmentService API",
    description="Stores people and enriches each record with age, gender and nationality guesses looked up by first name.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400, content={"detail": jsonable_encoder(exc.errors())}
    )


app.include_router(people.router)
