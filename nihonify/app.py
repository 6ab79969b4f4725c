from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .eras import SORTED_ERAS, Jidai
from .japanese_calendar import (
    InvalidDateError,
    eras_in,
    from_datetime,
    normalise_era_notation,
    parse_date,
    render_nenkou,
    resolve,
)
from .models import (
    DetectRequest,
    DetectResponse,
    EraListResponse,
    EraResponse,
    NenkouParseResponse,
    NenkouResponse,
)
from .settings import settings
from .text_detection import contains_japanese

LOG_LEVEL = getattr(logging, settings.log_level.upper(), logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("nihonify.app")
logger.setLevel(LOG_LEVEL)

ALLOWED_ORIGINS = settings.allowed_origins or ["*"]


app = FastAPI(
    title=settings.app_title,
    description=settings.app_description,
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _uptime_seconds() -> float:
    started_at = getattr(app.state, "started_at", None)
    if not started_at:
        return 0.0
    return max(0.0, (datetime.utcnow() - started_at).total_seconds())


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    request.state.request_id = request_id
    start_time = time.perf_counter()
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    if settings.enable_request_logging:
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )

    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", str(uuid4()))
    logger.exception(
        "Unhandled server error",
        extra={"request_id": request_id, "path": request.url.path},
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "サーバー内部で予期しないエラーが発生しました。",
            "request_id": request_id,
        },
        headers={"X-Request-ID": request_id},
    )


@app.on_event("startup")
async def startup() -> None:
    app.state.started_at = datetime.utcnow()
    app.state.settings = settings


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "uptime_seconds": round(_uptime_seconds(), 3),
        "version": app.version,
    }


@app.get("/health/live")
async def health_live() -> Dict[str, Any]:
    return {"status": "ok", "uptime_seconds": round(_uptime_seconds(), 3)}


@app.get("/health/ready")
async def health_ready() -> Dict[str, Any]:
    return {
        "status": "ok",
        "uptime_seconds": round(_uptime_seconds(), 3),
        "eras": len(SORTED_ERAS),
    }


@app.get("/api/eras", response_model=EraListResponse)
async def list_eras(jidai: Optional[Jidai] = None) -> EraListResponse:
    eras = eras_in(jidai) if jidai is not None else list(SORTED_ERAS)
    return EraListResponse(
        eras=[EraResponse.from_era(era) for era in eras],
        total=len(eras),
    )


@app.get("/api/eras/resolve", response_model=EraResponse)
async def resolve_era(timestamp: int = Query(..., description="Unix timestamp in seconds")) -> EraResponse:
    era = resolve(timestamp)
    if era is None:
        raise HTTPException(status_code=404, detail="指定された時刻に該当する元号がありません。")
    return EraResponse.from_era(era)


@app.get("/api/nenkou", response_model=NenkouResponse)
async def convert_date(date: str = Query(..., description="YYYY-MM-DD 形式の西暦日付")) -> NenkouResponse:
    try:
        moment = parse_date(date)
    except InvalidDateError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    era = from_datetime(moment)
    nenkou = render_nenkou(moment)
    if era is None or nenkou is None:
        raise HTTPException(status_code=404, detail="指定された日付は元号で表現できません。")

    return NenkouResponse(
        date=moment.date(),
        era=EraResponse.from_era(era),
        nenkou=nenkou,
    )


@app.get("/api/nenkou/parse", response_model=NenkouParseResponse)
async def parse_nenkou(text: str = Query(..., min_length=1)) -> NenkouParseResponse:
    date_iso = normalise_era_notation(text)
    if date_iso is None:
        raise HTTPException(status_code=404, detail="元号による日付表記が見つかりませんでした。")
    return NenkouParseResponse(text=text, date_iso=date_iso)


@app.post("/api/detect", response_model=DetectResponse)
async def detect(request: DetectRequest) -> DetectResponse:
    return DetectResponse(text=request.text, is_japanese=contains_japanese(request.text))
