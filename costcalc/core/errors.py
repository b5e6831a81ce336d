from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger("costcalc.errors")


class CalculationError(ValueError):
    """Base class for calculator input errors (bad enum members and the like)."""


class UnknownPeriodError(CalculationError):
    def __init__(self, period: object, allowed=None):
        self.period = period
        self.allowed = list(allowed) if allowed is not None else None
        message = f"unsupported period {period!r}"
        if self.allowed is not None:
            message += f"; allowed: {', '.join(str(getattr(p, 'value', p)) for p in self.allowed)}"
        super().__init__(message)


class UnknownCurrencyError(CalculationError):
    def __init__(self, currency: object):
        self.currency = currency
        super().__init__(f"unsupported currency {currency!r}")


class AmountOutOfRangeError(CalculationError):
    def __init__(self, amount: object, what: str = "amount"):
        self.amount = amount
        super().__init__(f"{what} {amount!r} is not a finite number")


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "not_found",
                "detail": f"No route for {request.method} {request.url.path}",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "detail": exc.detail},
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def calculation_error_handler(request: Request, exc: CalculationError):  # type: ignore
    logger.info("rejected calculator input", extra={"detail": str(exc)})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "invalid_input",
            "detail": str(exc),
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
