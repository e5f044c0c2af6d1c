"""
Encode Router - Delegates string encoding to the sidecar process
"""

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from api.schemas.encode import EncodeRequest, EncodeResponse
from api.dependencies import get_runner
from sidecar_encoder.sidecar_runner import SidecarRunner, SidecarError

router = APIRouter()
logger = logging.getLogger(__name__)

SIDECAR_FAILURE_MESSAGE = "Error executing sidecar"


# The body is parsed by hand so that JSON is accepted whatever Content-Type
# the client sent (curl -d defaults to form encoding).
@router.post(
    "/encode",
    response_model=EncodeResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": EncodeRequest.model_json_schema()}},
        }
    },
)
async def encode(
    request: Request,
    runner: SidecarRunner = Depends(get_runner)
):
    """
    Base64-encode `data` by running the sidecar with it as the only argument.

    Every sidecar failure (missing executable, non-zero exit, timeout)
    becomes the same 500 response; the cause is only logged.
    """
    body = await request.body()
    try:
        payload = EncodeRequest.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors(), body=body) from e

    # The child blocks until it exits, so keep it off the event loop.
    try:
        encoded = await run_in_threadpool(runner.encode, payload.data)
    except SidecarError as e:
        logger.error(f"Sidecar invocation failed: {e}", exc_info=True)
        return PlainTextResponse(SIDECAR_FAILURE_MESSAGE, status_code=500)

    return EncodeResponse(encoded=encoded)
