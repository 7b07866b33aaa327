"""Validate a nested properties tree against a Pydantic model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from propreader.errors import PropertiesValidationError

__all__ = ["ValidationErrorDetail", "bind_tree"]

ModelT = TypeVar("ModelT", bound=BaseModel)

_PYDANTIC_TO_CONSTRAINT: dict[str, str] = {
    "missing": "required",
    "string_type": "type",
    "int_type": "type",
    "int_parsing": "type",
    "float_type": "type",
    "float_parsing": "type",
    "bool_type": "type",
    "bool_parsing": "type",
    "model_type": "type",
    "dict_type": "type",
    "greater_than_equal": "minimum",
    "less_than_equal": "maximum",
    "literal_error": "enum",
    "extra_forbidden": "additionalProperties",
}


@dataclass
class ValidationErrorDetail:
    """One field that failed validation."""

    path: str
    message: str
    constraint: str | None = None
    actual: Any = None


def _to_details(error: PydanticValidationError) -> list[ValidationErrorDetail]:
    details: list[ValidationErrorDetail] = []
    for err in error.errors():
        loc = err.get("loc", ())
        pydantic_type = err.get("type", "")
        details.append(
            ValidationErrorDetail(
                path=".".join(str(segment) for segment in loc),
                message=err.get("msg", ""),
                constraint=_PYDANTIC_TO_CONSTRAINT.get(pydantic_type, pydantic_type),
                actual=err.get("input"),
            )
        )
    return details


def bind_tree(tree: dict[str, Any], model: type[ModelT], strict: bool = False) -> ModelT:
    """Build ``model`` from ``tree``.

    With ``strict`` off, Pydantic's usual coercion applies (``"8080"`` fits an
    ``int`` field). Raises PropertiesValidationError listing every failing
    field by its dotted path.
    """
    try:
        return model.model_validate(tree, strict=strict)
    except PydanticValidationError as e:
        details = _to_details(e)
        raise PropertiesValidationError(
            message=f"Properties do not match {model.__name__}: {len(details)} error(s)",
            errors=details,
            cause=e,
        ) from e
