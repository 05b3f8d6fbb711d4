# Routes package init
"""
PetClinic Owners — Routes Package
==================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - owners.py:  /owners pages (create, find, list, edit, detail)
    - health.py:  GET /health (service health check)

Routes stay THIN: bind request data, call OwnerService, render the outcome.
"""
