"""
PetClinic Owners — Owner Service (Request Handler Decisions)
=============================================================

What:  Decides, for every owner request, which view to render or where to
       redirect, and performs the storage calls that decision needs.
How:   Each operation receives already-bound input (ids, OwnerFormBinding)
       and an OwnerRepository, and returns a ViewOutcome or RedirectOutcome.
Who:   Called by route handlers in petclinic.routes.owners.

Flows:
    create:  begin_create_form → submit_create_form → redirect /owners/{id}
    find:    begin_find_form   → execute_find       → form | redirect | list
    edit:    begin_edit_form   → submit_edit_form   → redirect /owners/{id}
    detail:  show_owner

OwnerService holds no per-request state; one instance serves every request.
"""

import logging
from typing import Optional

from petclinic.config import settings
from petclinic.forms import BindingResult, OwnerFormBinding
from petclinic.models.owner import Owner
from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.services.outcomes import (
    Outcome,
    RedirectOutcome,
    SearchOutcome,
    ViewOutcome,
    classify_search,
)

logger = logging.getLogger(__name__)

VIEWS_OWNER_CREATE_OR_UPDATE_FORM = "owners/createOrUpdateOwnerForm"
VIEWS_FIND_OWNERS = "owners/findOwners"
VIEWS_OWNERS_LIST = "owners/ownersList"
VIEWS_OWNER_DETAILS = "owners/ownerDetails"


def owner_path(owner_id: int) -> str:
    return f"/owners/{owner_id}"


class OwnerService:
    """
    Request handler for owner pages.

    Responsibilities:
        - resolve_owner_for_form(): new owner or stored owner for a form
        - create, find, edit and detail decisions
    """

    def __init__(self, page_size: Optional[int] = None):
        self.page_size = page_size or settings.owners_page_size

    async def resolve_owner_for_form(
        self, owners: OwnerRepository, owner_id: Optional[int]
    ) -> Optional[Owner]:
        """
        Resolve the form-bound owner for a request.

        Returns:
            A new empty Owner when `owner_id` is None (no storage access),
            the stored Owner otherwise, or None when no owner has that id.
        """
        if owner_id is None:
            return Owner()
        return await owners.find_by_id(owner_id)

    # ── Create ────────────────────────────────────────────────────────────

    def begin_create_form(self) -> ViewOutcome:
        return self._form_view(Owner(), BindingResult())

    async def submit_create_form(
        self, owners: OwnerRepository, binding: OwnerFormBinding
    ) -> Outcome:
        """
        Insert a new owner from a bound form.

        Invalid input re-renders the form with the entered values and writes
        nothing. Valid input is saved once and redirects to the new owner.
        """
        if not binding.is_valid:
            return self._form_view(Owner().apply(binding.values), binding.result)

        owner = await self.resolve_owner_for_form(owners, None)
        owner.apply(binding.data.model_dump())
        owner = await owners.save(owner)
        logger.info("Owner %s created (%s)", owner.id, owner.full_name)
        return RedirectOutcome(location=owner_path(owner.id))

    # ── Find ──────────────────────────────────────────────────────────────

    def begin_find_form(self) -> ViewOutcome:
        return ViewOutcome(
            view=VIEWS_FIND_OWNERS,
            model={"owner": Owner(), "errors": BindingResult()},
        )

    async def execute_find(
        self,
        owners: OwnerRepository,
        page: int = 1,
        last_name: Optional[str] = None,
    ) -> Outcome:
        """
        Search owners by last name prefix.

        Args:
            owners: Owner storage
            page: One-based page number
            last_name: Last name prefix; None searches every owner

        Returns:
            no match     → search form with `last_name` rejected as notFound
            single match → redirect to that owner
            multi match  → list view with currentPage, totalPages,
                           totalItems and listOwners
        """
        if last_name is None:
            last_name = ""

        results = await owners.find_by_last_name(last_name, page - 1, self.page_size)
        outcome = classify_search(results)
        logger.debug("Owner search '%s' page %d → %s", last_name, page, outcome.value)

        if outcome is SearchOutcome.NO_MATCH:
            errors = BindingResult()
            errors.reject_value("last_name", "notFound", "not found")
            return ViewOutcome(
                view=VIEWS_FIND_OWNERS,
                model={"owner": Owner(last_name=last_name), "errors": errors},
            )

        if outcome is SearchOutcome.SINGLE_MATCH:
            return RedirectOutcome(location=owner_path(results.content[0].id))

        return ViewOutcome(
            view=VIEWS_OWNERS_LIST,
            model={
                "currentPage": page,
                "totalPages": results.total_pages,
                "totalItems": results.total_elements,
                "listOwners": list(results.content),
            },
        )

    # ── Edit ──────────────────────────────────────────────────────────────

    def begin_edit_form(self, owner: Owner) -> ViewOutcome:
        return self._form_view(owner, BindingResult())

    async def submit_edit_form(
        self,
        owners: OwnerRepository,
        owner: Owner,
        binding: OwnerFormBinding,
        owner_id: int,
    ) -> Outcome:
        """
        Update a stored owner from a bound form.

        The id written is always `owner_id` from the request path, whatever
        the stored or submitted data says. Invalid input re-renders the form
        on a detached copy, leaving the stored owner untouched.
        """
        if not binding.is_valid:
            return self._form_view(Owner(id=owner_id).apply(binding.values), binding.result)

        owner.apply(binding.data.model_dump(), owner_id=owner_id)
        await owners.save(owner)
        logger.info("Owner %s updated", owner_id)
        return RedirectOutcome(location=owner_path(owner_id))

    # ── Detail ────────────────────────────────────────────────────────────

    def show_owner(self, owner: Owner) -> ViewOutcome:
        return ViewOutcome(view=VIEWS_OWNER_DETAILS, model={"owner": owner})

    def _form_view(self, owner: Owner, errors: BindingResult) -> ViewOutcome:
        return ViewOutcome(
            view=VIEWS_OWNER_CREATE_OR_UPDATE_FORM,
            model={"owner": owner, "errors": errors},
        )


# ── Singleton Instance ────────────────────────────────────────────────────
owner_service = OwnerService()
