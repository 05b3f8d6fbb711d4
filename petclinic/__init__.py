"""
PetClinic Owners — Application Package Initializer
===================================================

What: Marks the `petclinic` directory as a Python package.
Who:  Imported by uvicorn (`petclinic.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │      Routes (HTTP + rendering)      │  ← binding, responses
    ├─────────────────────────────────────┤
    │      Services (request handler)     │  ← pure view/redirect decisions
    ├─────────────────────────────────────┤
    │    Repositories (owner storage)     │  ← queries, pagination
    ├─────────────────────────────────────┤
    │   Models & Schemas / Database       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
