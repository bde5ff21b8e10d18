"""
Request Validation Helpers

Identifier format checks and pydantic-to-envelope glue shared by the
location and shipment services.
"""

import uuid
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .response import RequestValidationFailed

ModelT = TypeVar("ModelT", bound=BaseModel)


def new_identifier() -> str:
    """Generate a record identifier"""
    return str(uuid.uuid4())


def is_valid_identifier(value: Any) -> bool:
    """True when value is a well-formed record identifier (UUID string)"""
    if not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def parse_identifier(value: Any, field: str = "id") -> str:
    """
    Validate a record identifier before it reaches the store.

    Raises:
        RequestValidationFailed: identifier is malformed
    """
    if not is_valid_identifier(value):
        raise RequestValidationFailed([
            {
                "loc": [field],
                "msg": "Invalid identifier",
                "type": "invalid_identifier",
            }
        ])
    return str(uuid.UUID(value))


def parse_model(model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    """Validate a payload against a model, raising the envelope-aware error"""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RequestValidationFailed(e.errors()) from e


__all__ = [
    "new_identifier",
    "is_valid_identifier",
    "parse_identifier",
    "parse_model",
]
