"""
PetClinic Owners — Handler Outcomes
====================================

What:  Result types returned by OwnerService decisions.
How:   A decision is either a view to render (template name + model) or a
       redirect to another path. The routes translate outcomes into HTTP
       responses in one place (petclinic.rendering).

Search classification:
    SearchOutcome.NO_MATCH      → re-render search form, lastName rejected
    SearchOutcome.SINGLE_MATCH  → redirect to that owner's detail page
    SearchOutcome.MULTI_MATCH   → paginated list view
"""

from enum import Enum
from typing import Any, Dict, Union

from pydantic import BaseModel, Field

from petclinic.schemas.page import Page


class ViewOutcome(BaseModel):
    view: str
    model: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class RedirectOutcome(BaseModel):
    location: str

    model_config = {"frozen": True}


Outcome = Union[ViewOutcome, RedirectOutcome]


class SearchOutcome(str, Enum):
    NO_MATCH = "no_match"
    SINGLE_MATCH = "single_match"
    MULTI_MATCH = "multi_match"


def classify_search(results: Page) -> SearchOutcome:
    """
    Classify a search page. Order matters: an empty page is a no-match even
    when the total count says otherwise (e.g. a page past the last one).
    """
    if results.is_empty:
        return SearchOutcome.NO_MATCH
    if results.total_elements == 1:
        return SearchOutcome.SINGLE_MATCH
    return SearchOutcome.MULTI_MATCH
