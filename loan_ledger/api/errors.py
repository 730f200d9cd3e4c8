import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from loan_ledger.services.ledger import InvalidPayloadError, NotFoundError

logger = logging.getLogger("loan_ledger.api")


def _get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _error_response(request: Request, *, status_code: int, detail) -> JSONResponse:
    request_id = _get_request_id(request)
    response = JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "request_id": request_id,
        },
    )
    if request_id:
        response.headers["X-Request-ID"] = request_id
    return response


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error_response(request, status_code=404, detail=exc.message)

    @app.exception_handler(InvalidPayloadError)
    async def invalid_payload_handler(request: Request, exc: InvalidPayloadError):
        return _error_response(request, status_code=422, detail=exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(request, status_code=exc.status_code, detail=exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _error_response(request, status_code=422, detail=jsonable_encoder(exc.errors()))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        request_id = _get_request_id(request)
        logger.exception("unhandled_error request_id=%s", request_id, exc_info=exc)
        return _error_response(request, status_code=500, detail="Internal Server Error")
