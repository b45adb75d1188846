"""
HTTP API for Phone Finder.

Run with: uvicorn api:app --reload

Endpoints:
- POST /api/chat     {"message": str} -> {"response": str, "phones"?: [...]}
- GET  /api/catalog  full catalog as a list of phones
- GET  /api/health   liveness check with catalog size
"""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, ValidationError

from catalog_loader import load_catalog
from config.settings import get_settings
from core.errors import MalformedRequestError
from core.orchestrator import QueryEngine
from core.structured_logging import LogContext, get_logger, setup_logging


# =============================================================================
# WIRE MODELS
# =============================================================================

class ChatRequest(BaseModel):
    """Body of POST /api/chat."""
    model_config = ConfigDict(extra="ignore")

    message: str


class ReviewOut(BaseModel):
    user: str
    comment: str


class PhoneOut(BaseModel):
    """A phone as sent to the UI for card rendering."""
    id: Optional[str] = None
    brand: str
    model: str
    price: int
    specs: Optional[Dict[str, str]] = None
    features: List[str] = []
    pros: List[str] = []
    cons: List[str] = []
    reviews: Optional[List[ReviewOut]] = None


class ChatResponse(BaseModel):
    """Body returned by POST /api/chat; phones is left out when empty."""
    response: str
    phones: Optional[List[PhoneOut]] = None


def parse_chat_request(body: Any) -> str:
    """
    Validate a decoded chat body and return the message.

    Raises:
        MalformedRequestError: If the body isn't an object with a string message
    """
    if not isinstance(body, dict):
        raise MalformedRequestError("Request body must be a JSON object")
    try:
        return ChatRequest.model_validate(body).message
    except ValidationError as e:
        raise MalformedRequestError("Request body must include a string 'message'") from e


# =============================================================================
# APPLICATION
# =============================================================================

def create_app(engine: Optional[QueryEngine] = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        engine: Query engine to serve (loads the configured catalog if None)
    """
    settings = get_settings()
    if engine is None:
        engine = QueryEngine(load_catalog(settings.catalog_path), debug_mode=settings.debug)

    logger = get_logger("api")
    app = FastAPI(title="Phone Finder")
    app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"], allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"]
    )

    @app.get("/api/health")
    def health():
        return {"ok": True, "phones": len(app.state.engine.catalog)}

    @app.get("/api/catalog")
    def get_catalog():
        return JSONResponse([p.to_dict() for p in app.state.engine.catalog])

    @app.post("/api/chat")
    async def chat(req: Request):
        with LogContext() as ctx:
            ctx.log_request("/api/chat")
            try:
                try:
                    body = await req.json()
                except ValueError as e:
                    raise MalformedRequestError("Request body is not valid JSON") from e
                message = parse_chat_request(body)
            except MalformedRequestError as e:
                logger.warning(
                    f"Malformed chat request: {e}",
                    extra={"event": "malformed_request", "request_id": ctx.request_id, "status_code": 400}
                )
                ctx.log_response(status_code=400)
                return JSONResponse({"error": str(e)}, status_code=400)

            try:
                payload = await run_in_threadpool(
                    app.state.engine.process, message, request_id=ctx.request_id
                )
            except Exception:
                # Already logged with stack trace by the orchestrator
                ctx.log_response(status_code=500)
                return JSONResponse(
                    {"error": "Something went wrong. Please try again."},
                    status_code=500
                )

            ctx.log_response(status_code=200, products_shown=len(payload.matched_records))
            wire = ChatResponse.model_validate(payload.to_wire())
            return JSONResponse(wire.model_dump(exclude_none=True))

    return app


def _bootstrap() -> FastAPI:
    settings = get_settings()
    setup_logging(log_dir=settings.log_dir, console_level=settings.log_level)
    return create_app()


app = _bootstrap()
