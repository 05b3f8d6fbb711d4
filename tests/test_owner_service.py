"""
PetClinic Owners — Owner Service Unit Tests
============================================

What:  Tests for OwnerService decisions (create, find, edit, detail).
How:   The repository is an AsyncMock (no database); forms are bound from
       plain dicts. Assertions are on returned outcomes and storage calls.

What we test:
    ✅ Invalid submissions never write and re-render with entered values
    ✅ Valid create saves once and redirects to the new id
    ✅ Search: unset last name == "", one-based → zero-based page, size 5
    ✅ Search: no match / single match / multi match outcomes
    ✅ Edit always persists with the path id
"""

import pytest
from unittest.mock import AsyncMock

from petclinic.forms import bind_owner_form
from petclinic.models.owner import Owner
from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.schemas.page import Page
from petclinic.services.outcomes import RedirectOutcome, ViewOutcome
from petclinic.services.owner_service import (
    OwnerService,
    VIEWS_FIND_OWNERS,
    VIEWS_OWNER_CREATE_OR_UPDATE_FORM,
    VIEWS_OWNER_DETAILS,
    VIEWS_OWNERS_LIST,
)


def _mock_repository():
    owners = AsyncMock(spec=OwnerRepository)

    async def assign_id(owner):
        if owner.id is None:
            owner.id = 7
        return owner

    owners.save.side_effect = assign_id
    return owners


def _davis(n, start=1):
    return [Owner(id=start + i, first_name=f"D{i}", last_name="Davis") for i in range(n)]


class TestOwnerServiceResolve:

    def setup_method(self):
        self.service = OwnerService(page_size=5)

    @pytest.mark.asyncio
    async def test_resolve_without_id_builds_new_owner(self):
        owners = _mock_repository()

        owner = await self.service.resolve_owner_for_form(owners, None)

        assert owner.is_new
        assert owner.last_name == ""
        owners.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_resolve_with_id_fetches(self):
        owners = _mock_repository()
        stored = Owner(id=3, last_name="Black")
        owners.find_by_id.return_value = stored

        assert await self.service.resolve_owner_for_form(owners, 3) is stored
        owners.find_by_id.assert_awaited_once_with(3)

    @pytest.mark.asyncio
    async def test_resolve_unknown_id_returns_none(self):
        owners = _mock_repository()
        owners.find_by_id.return_value = None

        assert await self.service.resolve_owner_for_form(owners, 404) is None


class TestOwnerServiceCreate:

    def setup_method(self):
        self.service = OwnerService(page_size=5)

    def test_begin_create_form(self):
        outcome = self.service.begin_create_form()

        assert outcome.view == VIEWS_OWNER_CREATE_OR_UPDATE_FORM
        assert outcome.model["owner"].is_new
        assert not outcome.model["errors"].has_errors

    @pytest.mark.asyncio
    async def test_valid_create_saves_once_and_redirects(self, owner_form):
        owners = _mock_repository()

        outcome = await self.service.submit_create_form(owners, bind_owner_form(owner_form))

        assert outcome == RedirectOutcome(location="/owners/7")
        owners.save.assert_awaited_once()
        saved = owners.save.await_args.args[0]
        assert saved.first_name == "George"
        assert saved.telephone == "6085551023"

    @pytest.mark.asyncio
    async def test_create_ignores_client_id(self, owner_form):
        owners = _mock_repository()

        outcome = await self.service.submit_create_form(
            owners, bind_owner_form({**owner_form, "id": "999"})
        )

        assert outcome == RedirectOutcome(location="/owners/7")

    @pytest.mark.asyncio
    async def test_invalid_create_rerenders_without_write(self, owner_form):
        owners = _mock_repository()
        binding = bind_owner_form({**owner_form, "address": "", "city": "Sun Prairie"})

        outcome = await self.service.submit_create_form(owners, binding)

        assert isinstance(outcome, ViewOutcome)
        assert outcome.view == VIEWS_OWNER_CREATE_OR_UPDATE_FORM
        assert outcome.model["owner"].city == "Sun Prairie"
        assert outcome.model["owner"].is_new
        assert outcome.model["errors"].has_field_errors("address")
        owners.save.assert_not_awaited()


class TestOwnerServiceFind:

    def setup_method(self):
        self.service = OwnerService(page_size=5)

    def test_begin_find_form(self):
        outcome = self.service.begin_find_form()

        assert outcome.view == VIEWS_FIND_OWNERS
        assert outcome.model["owner"].last_name == ""

    @pytest.mark.asyncio
    async def test_unset_last_name_searches_everything(self):
        owners = _mock_repository()
        owners.find_by_last_name.return_value = Page(content=[], size=5, total_elements=0)

        await self.service.execute_find(owners, page=1, last_name=None)
        await self.service.execute_find(owners, page=1, last_name="")

        calls = [c.args for c in owners.find_by_last_name.await_args_list]
        assert calls == [("", 0, 5), ("", 0, 5)]

    @pytest.mark.asyncio
    async def test_page_number_is_converted_to_zero_based(self):
        owners = _mock_repository()
        owners.find_by_last_name.return_value = Page(
            content=_davis(2), number=3, size=5, total_elements=17
        )

        await self.service.execute_find(owners, page=4, last_name="Davis")

        owners.find_by_last_name.assert_awaited_once_with("Davis", 3, 5)

    @pytest.mark.asyncio
    async def test_no_match_rejects_last_name(self):
        owners = _mock_repository()
        owners.find_by_last_name.return_value = Page(content=[], size=5, total_elements=0)

        outcome = await self.service.execute_find(owners, page=1, last_name="Nobody")

        assert isinstance(outcome, ViewOutcome)
        assert outcome.view == VIEWS_FIND_OWNERS
        assert outcome.model["owner"].last_name == "Nobody"
        errors = outcome.model["errors"].field_errors("last_name")
        assert [(e.code, e.message) for e in errors] == [("notFound", "not found")]

    @pytest.mark.asyncio
    async def test_single_match_redirects(self):
        owners = _mock_repository()
        owners.find_by_last_name.return_value = Page(
            content=[Owner(id=42, last_name="Smith")], size=5, total_elements=1
        )

        outcome = await self.service.execute_find(owners, page=1, last_name="Smith")

        assert outcome == RedirectOutcome(location="/owners/42")

    @pytest.mark.asyncio
    async def test_multi_match_lists_with_pagination(self):
        owners = _mock_repository()
        page_owners = _davis(2, start=11)
        owners.find_by_last_name.return_value = Page(
            content=page_owners, number=2, size=5, total_elements=12
        )

        outcome = await self.service.execute_find(owners, page=3, last_name="Davis")

        assert isinstance(outcome, ViewOutcome)
        assert outcome.view == VIEWS_OWNERS_LIST
        assert outcome.model == {
            "currentPage": 3,
            "totalPages": 3,
            "totalItems": 12,
            "listOwners": page_owners,
        }


class TestOwnerServiceEdit:

    def setup_method(self):
        self.service = OwnerService(page_size=5)

    def test_begin_edit_form(self):
        stored = Owner(id=5, first_name="Jean", last_name="Coleman")

        outcome = self.service.begin_edit_form(stored)

        assert outcome.view == VIEWS_OWNER_CREATE_OR_UPDATE_FORM
        assert outcome.model["owner"] is stored
        assert not outcome.model["owner"].is_new

    @pytest.mark.asyncio
    async def test_edit_uses_path_id(self, owner_form):
        owners = _mock_repository()
        stored = Owner(id=5, first_name="Jean", last_name="Coleman")

        outcome = await self.service.submit_edit_form(
            owners, stored, bind_owner_form({**owner_form, "id": "999"}), 5
        )

        assert outcome == RedirectOutcome(location="/owners/5")
        saved = owners.save.await_args.args[0]
        assert saved.id == 5
        assert saved.first_name == "George"

    @pytest.mark.asyncio
    async def test_edit_path_id_overrides_bound_owner_id(self, owner_form):
        owners = _mock_repository()
        bound = Owner(id=8, last_name="Escobito")

        outcome = await self.service.submit_edit_form(
            owners, bound, bind_owner_form(owner_form), 5
        )

        assert outcome == RedirectOutcome(location="/owners/5")
        assert owners.save.await_args.args[0].id == 5

    @pytest.mark.asyncio
    async def test_invalid_edit_leaves_stored_owner_untouched(self, owner_form):
        owners = _mock_repository()
        stored = Owner(id=5, first_name="Jean", last_name="Coleman")

        outcome = await self.service.submit_edit_form(
            owners, stored, bind_owner_form({**owner_form, "lastName": ""}), 5
        )

        assert outcome.view == VIEWS_OWNER_CREATE_OR_UPDATE_FORM
        assert outcome.model["owner"].id == 5
        assert outcome.model["owner"].first_name == "George"
        assert outcome.model["errors"].has_field_errors("last_name")
        assert stored.last_name == "Coleman"
        owners.save.assert_not_awaited()


class TestOwnerServiceDetail:

    def test_show_owner(self):
        stored = Owner(id=1, last_name="Franklin")

        outcome = OwnerService(page_size=5).show_owner(stored)

        assert outcome == ViewOutcome(view=VIEWS_OWNER_DETAILS, model={"owner": stored})
