"""Error taxonomy shared by the managers, the record stores and the API"""

from typing import Any, List, Optional

from pydantic import BaseModel, ValidationError


class FieldError(BaseModel):
    """A single rejected field"""
    field: str
    message: str


class FrontdeskError(Exception):
    """Base class for all domain errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(FrontdeskError):
    """The operation targets a record that does not exist"""

    def __init__(self, entity: str, record_id: Any):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.record_id = record_id


class ValidationFailure(FrontdeskError):
    """One or more fields were rejected, by the schema or by the backend"""

    def __init__(self, errors: List[FieldError], message: Optional[str] = None):
        super().__init__(message or "Validation failed")
        self.errors = errors

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ValidationFailure":
        errors = []
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "__root__"
            errors.append(FieldError(field=field, message=err["msg"]))
        return cls(errors)


class TransportFailure(FrontdeskError):
    """The storage collaborator failed or could not be reached"""
