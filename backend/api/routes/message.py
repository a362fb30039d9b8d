"""
Message (echo) API route.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from services.echo import build_echo, resolve_name

router = APIRouter()
logger = logging.getLogger(__name__)


class MessageResponse(BaseModel):
    name: str
    timestamp: str


@router.api_route("", methods=["GET", "POST"], response_model=MessageResponse)
async def message(request: Request, name: Optional[str] = None):
    """Echo back a name and the current time."""
    try:
        logger.info("Function processed for %s %s", request.method, request.url)
        body_text = None
        if not name:
            body_text = (await request.body()).decode("utf-8")
        resolved = resolve_name(name, body_text)
        logger.info("name: %s", resolved)
        return MessageResponse(**build_echo(resolved))
    except Exception as e:
        logger.exception("Unhandled error in /message: %s", e)
        return JSONResponse(status_code=500, content={"message": "Internal Server Error"})
