"""Schema Base Classes - camelCase wire format over snake_case Python fields.

Invariants:
    - Request models accept camelCase keys (and snake_case field names)
    - Response models read ORM attributes by field name and dump camelCase keys
    - A required field is "present" when not None and, for strings, not empty
"""

from typing import Any, Iterable

from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class RequestModel(BaseModel):
    """Base for request bodies."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def changes(self) -> dict[str, Any]:
        """Fields the caller actually sent, explicit nulls included."""
        return self.model_dump(exclude_unset=True)


class ResponseModel(BaseModel):
    """Base for payloads built from ORM rows."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value)


def blank_to_none(value: Any) -> Any:
    """Treat an empty string (e.g. `?status=`) as an omitted value."""
    return None if isinstance(value, str) and not value else value


def require_present(model: BaseModel, fields: Iterable[str]) -> None:
    """Raise a single error naming every required field that is missing or empty."""
    missing = [to_camel(f) for f in fields if _is_blank(getattr(model, f))]
    if missing:
        raise PydanticCustomError(
            "missing_fields",
            "Missing required fields: {fields}",
            {"fields": ", ".join(missing)},
        )


def reject_null(value: Any) -> Any:
    """Explicit null is not a valid update for a NOT NULL column."""
    if value is None:
        raise PydanticCustomError("null_not_allowed", "Field cannot be null")
    return value
