"""
PetClinic Owners — Form Binding
================================

What:  Turns submitted form data into either validated owner input or a
       structured list of field errors.
How:   1. Read only the allow-listed form fields (anything else, including
          `id`, is dropped before validation)
       2. Validate with the `OwnerForm` Pydantic schema
       3. Convert Pydantic errors into `FieldError`s keyed by attribute name
Who:   Called by the owner routes; consumed by OwnerService decisions, which
       never see HTTP request objects.

Binding outcome:
    OwnerFormBinding(values, result, data)
    ├── valid:   data is an OwnerForm, result has no errors
    └── invalid: data is None, result lists every failing field
    `values` always holds the entered text so forms can be re-displayed.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from petclinic.schemas.owner import OWNER_FORM_FIELDS, OwnerForm

logger = logging.getLogger(__name__)

# Form fields that must never be bound onto an owner
DISALLOWED_FIELDS = frozenset({"id"})


class FieldError(BaseModel):
    """A rejected value for one field: error code plus display message."""
    field: str
    code: str
    message: str

    model_config = {"frozen": True}


class BindingResult(BaseModel):
    """Field-level errors collected while binding or processing a form."""
    errors: List[FieldError] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def reject_value(self, field_name: str, code: str, message: str) -> None:
        self.errors.append(FieldError(field=field_name, code=code, message=message))

    def field_errors(self, field_name: str) -> List[FieldError]:
        return [error for error in self.errors if error.field == field_name]

    def has_field_errors(self, field_name: str) -> bool:
        return any(error.field == field_name for error in self.errors)


class OwnerFormBinding(BaseModel):
    values: Dict[str, str]
    result: BindingResult
    data: Optional[OwnerForm] = None

    model_config = {"frozen": True}

    @property
    def is_valid(self) -> bool:
        return self.data is not None and not self.result.has_errors


def _as_text(value: Any) -> str:
    # File uploads and missing fields bind as empty text
    return value if isinstance(value, str) else ""


def bind_owner_form(form: Mapping[str, Any]) -> OwnerFormBinding:
    """
    Bind and validate submitted owner form data.

    Args:
        form: Submitted form fields keyed by HTML field name
              (e.g. Starlette's FormData).

    Returns:
        OwnerFormBinding; never raises for invalid input.
    """
    ignored = DISALLOWED_FIELDS.intersection(form.keys())
    if ignored:
        logger.debug("Ignoring disallowed owner form fields: %s", sorted(ignored))

    values = {
        name: _as_text(form.get(param))
        for name, param in OWNER_FORM_FIELDS.items()
    }

    result = BindingResult()
    try:
        data = OwnerForm.model_validate(values)
    except PydanticValidationError as e:
        for error in e.errors():
            field_name = str(error["loc"][0]) if error["loc"] else "owner"
            result.reject_value(field_name, error["type"], error["msg"])
        return OwnerFormBinding(values=values, result=result)

    return OwnerFormBinding(values=values, result=result, data=data)
