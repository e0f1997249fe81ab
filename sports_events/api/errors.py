"""Mapping of service errors to HTTP responses."""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..events.errors import ErrorKind, ServiceError

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.EMPTY_UPDATE: 400,
    # Store failures share the client-error status of validation failures
    ErrorKind.REPOSITORY: 400,
}


def error_response(error: ServiceError) -> JSONResponse:
    """Convert a service error into its JSON response."""
    return JSONResponse(status_code=STATUS_CODES[error.kind], content=error.to_dict())


def _request_field_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    errors = []
    for err in exc.errors():
        location = [str(part) for part in err.get('loc', ()) if part != 'body']
        errors.append({
            'field': '.'.join(location) or 'body',
            'message': err.get('msg', 'Invalid value'),
        })
    return errors


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable or missing request bodies as field errors."""
    logger.info(f"Rejected request body for {request.method} {request.url.path}")
    return JSONResponse(status_code=400, content={'errors': _request_field_errors(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
