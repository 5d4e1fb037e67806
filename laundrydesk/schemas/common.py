"""
Shared schema plumbing: camelCase wire names and payload validation
"""
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from laundrydesk.core.exceptions import ValidationFailedError

ModelT = TypeVar("ModelT", bound=BaseModel)


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def validation_issues(exc: ValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into {field, message, type} items"""
    issues = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        issues.append({
            "field": field,
            "message": err.get("msg", "Invalid value"),
            "type": err.get("type", "value_error"),
        })
    return issues


def validate_payload(schema: Type[ModelT], payload: Any) -> ModelT:
    """Validate raw input against a schema or raise ValidationFailedError"""
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise ValidationFailedError(validation_issues(e)) from e


def dump(model: BaseModel) -> Dict[str, Any]:
    """Serialize a schema for the JSON envelope"""
    return model.model_dump(by_alias=True, mode="json")
