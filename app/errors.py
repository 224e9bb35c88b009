"""Application error taxonomy.

Services raise these; the handlers registered in ``app.main`` turn them into
``ErrorResponse`` bodies with the matching status code.
"""
from pydantic import ValidationError as PydanticValidationError


class AppError(Exception):
    """Base class for errors that map to a client-facing response."""

    status_code = 500
    code = "internal_error"
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input. Carries field-level errors."""

    status_code = 400
    code = "validation_error"
    default_message = "Validation failed"

    def __init__(self, errors: list[dict] | None = None, message: str | None = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([{"field": field, "message": message}])

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        return cls(format_errors(exc.errors()))


class AuthenticationError(AppError):
    status_code = 401
    code = "authentication_error"
    default_message = "Not authenticated"


class AuthorizationError(AppError):
    status_code = 403
    code = "authorization_error"
    default_message = "Not permitted"


class NotFoundError(AppError):
    status_code = 404
    code = "not_found"
    default_message = "Not found"


class DuplicateError(AppError):
    status_code = 409
    code = "duplicate"
    default_message = "Already exists"


class InternalError(AppError):
    pass


def validate_payload(model, payload):
    """Validate ``payload`` against pydantic ``model``, raising ``ValidationError``."""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc)


# Location prefixes FastAPI puts in front of the field name
_LOC_SOURCES = {"body", "query", "path", "header", "cookie"}


def format_errors(errors) -> list[dict]:
    """Flatten pydantic/FastAPI error dicts into ``{field, message}`` pairs."""
    result = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOC_SOURCES:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        message = err.get("msg", "Invalid value")
        # pydantic prefixes messages raised from custom validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        result.append({"field": field, "message": message})
    return result
