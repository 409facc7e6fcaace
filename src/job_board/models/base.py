"""Base model and validation helper shared by the job board models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from job_board.errors import ValidationError


class ApiModel(BaseModel):
    """Accepts the API's camelCase keys as well as the snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def validate_input(model: type[BaseModel], data: Any) -> Any:
    """Validate ``data`` as ``model``, raising our ValidationError on failure.

    The error names the first offending field.
    """
    if isinstance(data, model):
        data = data.model_dump(exclude_unset=True)
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(p) for p in first["loc"]) or model.__name__
        raise ValidationError(field, first["msg"]) from exc
