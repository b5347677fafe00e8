from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR
from loguru import logger

def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )

def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    Report malformed request bodies with the same error shape as field validation.

    FastAPI answers schema failures with 422 and a list of errors; clients of this
    service only ever see 400 with an ``error`` message.

    Args:
        request: FastAPI request instance
        exc: RequestValidationError raised while parsing the body

    Returns:
        JSONResponse with 400 status, a summary message and the first schema error
    """
    errors = exc.errors()
    details = None
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        details = f"{location}: {first.get('msg')}" if location else first.get("msg")
    logger.warning(f"Rejected malformed request to {request.url.path}: {details}")
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body", "details": details},
    )

def generic_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "An unexpected error occurred.", "details": str(exc) or "Unknown error"},
    )
