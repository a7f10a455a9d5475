"""FastAPI web application for openhours."""

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from openhours import __version__
from openhours.config import API_HOST, API_PORT, now
from openhours.models.schedule import Boundary
from openhours.parser import InvalidLayoutError, Splitter

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="openhours API",
    description="Splits weekly opening-hours layouts and tells you whether a place is open",
    version=__version__,
)


# Request/response models
class LayoutRequest(BaseModel):
    """Layout to evaluate against a reference instant."""
    layout: str = Field("", description='Opening-hours layout, e.g. "Mo-Fr 08:00-18:00"')
    reference: Optional[datetime] = Field(
        None, description="Instant to evaluate; defaults to now in the configured timezone"
    )


class SplitResponse(BaseModel):
    """Response for layout split."""
    reference: datetime
    boundaries: List[Boundary]
    matched: bool
    match_index: Optional[int]
    formatted: str


class MatchResponse(BaseModel):
    """Response for layout match."""
    reference: datetime
    matched: bool


def _splitter_for(request: LayoutRequest) -> Splitter:
    return Splitter(request.reference or now())


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/split", response_model=SplitResponse)
async def split_layout(request: LayoutRequest):
    """Split a layout into the boundaries of the reference week."""
    splitter = _splitter_for(request)
    try:
        result = splitter.split(request.layout)
    except InvalidLayoutError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SplitResponse(
        reference=result.reference,
        boundaries=result.boundaries,
        matched=result.matched,
        match_index=result.match_index,
        formatted=splitter.format(),
    )


@app.post("/match", response_model=MatchResponse)
async def match_layout(request: LayoutRequest):
    """Check whether the reference instant falls inside the layout's opening hours."""
    splitter = _splitter_for(request)
    try:
        matched = splitter.match(request.layout)
    except InvalidLayoutError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug(f"Match {request.layout!r} at {splitter.reference.isoformat()}: {matched}")
    return MatchResponse(reference=splitter.reference, matched=matched)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
