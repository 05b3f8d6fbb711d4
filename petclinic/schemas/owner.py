"""
PetClinic Owners — Pydantic Form Schemas
=========================================

What:  Pydantic models describing the owner form contract.
How:   `OwnerForm` is validated from submitted form values after the form
       field names have been mapped to attribute names (see petclinic.forms).
       Validation failures carry a stable error code (`type`) and the
       message shown next to the offending input.

Design Decision:
    The form schema deliberately has no `id` field and ignores extra input,
    so an identifier can never be bound from a request body.
"""

import re
from typing import Dict

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from petclinic.models.owner import Owner

# What: Attribute name → HTML form field name
OWNER_FORM_FIELDS: Dict[str, str] = {
    "first_name": "firstName",
    "last_name": "lastName",
    "address": "address",
    "city": "city",
    "telephone": "telephone",
}

TELEPHONE_PATTERN = re.compile(r"\d{1,10}")

# Longest accepted value per text field, read off the `owners` columns
MAX_LENGTHS: Dict[str, int] = {
    name: Owner.__table__.c[name].type.length
    for name in ("first_name", "last_name", "address", "city")
}


class OwnerForm(BaseModel):
    """
    Validated owner input from the create/update form.

    Rules:
        - every field must not be empty
        - text fields must fit their database column
        - telephone: digits only, at most 10 of them
    """
    first_name: str
    last_name: str
    address: str
    city: str
    telephone: str

    model_config = {"extra": "ignore"}

    @field_validator("first_name", "last_name", "address", "city", "telephone")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("notEmpty", "must not be empty")
        return v

    @field_validator("first_name", "last_name", "address", "city")
    @classmethod
    def size(cls, v: str, info: ValidationInfo) -> str:
        limit = MAX_LENGTHS[info.field_name]
        if len(v) > limit:
            raise PydanticCustomError(
                "size", "size must be between 0 and {max}", {"max": limit}
            )
        return v

    @field_validator("telephone")
    @classmethod
    def digits(cls, v: str) -> str:
        if not TELEPHONE_PATTERN.fullmatch(v):
            raise PydanticCustomError(
                "digits",
                "numeric value out of bounds (<10 digits>.<0 digits> expected)",
            )
        return v
