from fastapi import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

class BadRequest(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=HTTP_400_BAD_REQUEST, detail=detail)

class InternalServerError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

class ValidationError(BadRequest):
    def __init__(self, detail: str = "Validation error"):
        super().__init__(detail=detail)

class MissingFieldsError(ValidationError):
    def __init__(self, detail: str = "Missing required fields"):
        super().__init__(detail=detail)

class QuestionCountError(ValidationError):
    def __init__(self, minimum: int = 3, maximum: int = 10):
        super().__init__(detail=f"Number of questions must be between {minimum} and {maximum}")


class ProviderError(Exception):
    """The generation provider call failed."""
    def __init__(self, message: str = "Question provider request failed"):
        super().__init__(message)
        self.message = message

class QuotaExceeded(ProviderError):
    """The provider rejected the call because of quota or rate limits."""
    def __init__(self, message: str = "Question provider quota exceeded"):
        super().__init__(message)

class ParseError(Exception):
    """The provider answered, but not with a JSON array of questions."""
    def __init__(self, message: str = "Failed to parse questions from AI response", raw_text: str = None):
        super().__init__(message)
        self.message = message
        self.raw_text = raw_text
