"""PADT Mock — usage hint at the root path."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["index"])

USAGE = "use /padt as the URL to POST to\n"


@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def index() -> PlainTextResponse:
    return PlainTextResponse(USAGE, headers={"X-Content-Type-Options": "nosniff"})
