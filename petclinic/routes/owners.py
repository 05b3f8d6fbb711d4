"""
PetClinic Owners — Owner Route Handlers
========================================

What:  HTML pages for creating, finding, listing, editing and showing owners.
How:   Extracts path/query/form data, binds forms, delegates the decision to
       OwnerService and renders the returned outcome.

Route Inventory:
    GET  /owners/new             empty create form
    POST /owners/new             create → 302 /owners/{id}
    GET  /owners/find            search form
    GET  /owners?page=&lastName= search → form | 302 | list
    GET  /owners/{id}/edit       pre-filled edit form
    POST /owners/{id}/edit       update → 302 /owners/{id}
    GET  /owners/{id}            owner details

Static paths (/owners/new, /owners/find) are registered before
/owners/{owner_id} so they are matched first.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.database import get_db_session
from petclinic.exceptions import NotFoundError
from petclinic.forms import bind_owner_form
from petclinic.models.owner import Owner
from petclinic.rendering import render_outcome
from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.services.owner_service import owner_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Owners"], default_response_class=HTMLResponse)

# Largest page number accepted (32-bit signed int); page * size must fit
# the database's integer type
MAX_PAGE = 2**31 - 1


# ── Dependencies ──────────────────────────────────────────────────────────

async def get_owner_repository(
    db: AsyncSession = Depends(get_db_session),
) -> OwnerRepository:
    return OwnerRepository(db)


async def owner_for_form(
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
) -> Owner:
    """
    Resolve the owner named in the path, or fail with NotFoundError (→ 404).
    """
    owner = await owner_service.resolve_owner_for_form(owners, owner_id)
    if owner is None:
        raise NotFoundError(resource="owner", resource_id=str(owner_id))
    return owner


# ── Create ────────────────────────────────────────────────────────────────

@router.get("/owners/new", summary="Show the new owner form")
async def init_creation_form(request: Request) -> Response:
    return render_outcome(request, owner_service.begin_create_form())


@router.post("/owners/new", summary="Create an owner")
async def process_creation_form(
    request: Request,
    owners: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    binding = bind_owner_form(await request.form())
    outcome = await owner_service.submit_create_form(owners, binding)
    return render_outcome(request, outcome)


# ── Find ──────────────────────────────────────────────────────────────────

@router.get("/owners/find", summary="Show the owner search form")
async def init_find_form(request: Request) -> Response:
    return render_outcome(request, owner_service.begin_find_form())


@router.get("/owners", summary="Search owners by last name")
async def process_find_form(
    request: Request,
    page: int = Query(default=1, ge=1, le=MAX_PAGE, description="One-based page number"),
    last_name: Optional[str] = Query(
        default=None,
        alias="lastName",
        description="Last name prefix; omit to list every owner",
    ),
    owners: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    outcome = await owner_service.execute_find(owners, page=page, last_name=last_name)
    return render_outcome(request, outcome)


# ── Edit ──────────────────────────────────────────────────────────────────

@router.get("/owners/{owner_id}/edit", summary="Show the edit form for an owner")
async def init_update_owner_form(
    request: Request,
    owner: Owner = Depends(owner_for_form),
) -> Response:
    return render_outcome(request, owner_service.begin_edit_form(owner))


@router.post("/owners/{owner_id}/edit", summary="Update an owner")
async def process_update_owner_form(
    request: Request,
    owner_id: int,
    owner: Owner = Depends(owner_for_form),
    owners: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    binding = bind_owner_form(await request.form())
    outcome = await owner_service.submit_edit_form(owners, owner, binding, owner_id)
    return render_outcome(request, outcome)


# ── Detail ────────────────────────────────────────────────────────────────

@router.get("/owners/{owner_id}", summary="Show an owner")
async def show_owner(
    request: Request,
    owner: Owner = Depends(owner_for_form),
) -> Response:
    return render_outcome(request, owner_service.show_owner(owner))
