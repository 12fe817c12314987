"""PADT Mock — the mocked downstream endpoint."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Request, Response
from starlette.concurrency import run_in_threadpool

from app.services.padt_response import load_template, render

router = APIRouter(tags=["PADT Mock"])

log = structlog.get_logger()


@router.post("/padt", response_class=Response)
async def send_padt_response(request: Request) -> Response:
    """Return the configured XML document with a fresh party ID.

    Non-empty request bodies are always logged; ``debug`` adds the headers.
    """
    settings = request.app.state.settings

    if settings.debug:
        log.debug("padt_request_headers", headers=dict(request.headers))

    body = await request.body()
    if body:
        log.info("padt_request_body", body=body.decode("utf-8", errors="replace"))

    template = await run_in_threadpool(load_template, settings.response_file)
    content = render(template, placeholder=settings.placeholder)
    return Response(content=content, media_type="application/xml")
