# Services package init
"""
PetClinic Owners — Services Layer
==================================

What:  Decision logic between routes (HTTP) and repositories (persistence).

Service Inventory:
    - OwnerService: create/find/edit/detail decisions for owner pages
    - outcomes:     ViewOutcome / RedirectOutcome and search classification
"""
