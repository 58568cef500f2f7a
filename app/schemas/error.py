from enum import Enum
from pydantic import BaseModel


class ErrorCategory(Enum):
    VALIDATION = "Validation"
    NOT_FOUND = "Not Found"
    FOREIGN_KEY = "Missing Foreign Key"
    DELETE_INTEGRITY = "Delete Integrity Violation"
    RESOURCE_CONFLICT = "Resource Conflict"
    BAD_REQUEST = "Bad Request"
    INTERNAL = "Internal Server Error"


class ErrorResponse(BaseModel):
    """Error body returned for every failed request.

    ``massage`` is part of the public contract and is spelled that way on purpose.
    """
    status: int
    massage: str
    path: str
