"""
PetClinic Owners — Template Rendering
======================================

What:  Jinja2 template environment and the Outcome → HTTP response mapping.
How:   ViewOutcome(view="owners/ownerDetails", model=...) renders
       templates/owners/ownerDetails.html with the model as context;
       RedirectOutcome(location="/owners/7") becomes a 302 redirect.
"""

from fastapi import Request, status
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from petclinic.config import settings
from petclinic.services.outcomes import Outcome, RedirectOutcome

templates = Jinja2Templates(directory=settings.templates_dir)


def render_outcome(request: Request, outcome: Outcome) -> Response:
    """Turn a handler outcome into the HTTP response sent to the browser."""
    if isinstance(outcome, RedirectOutcome):
        return RedirectResponse(url=outcome.location, status_code=status.HTTP_302_FOUND)
    return templates.TemplateResponse(request, f"{outcome.view}.html", outcome.model)


def render_error(request: Request, status_code: int, message: str, request_id: str = "") -> Response:
    """Render the generic error page."""
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": status_code, "message": message, "request_id": request_id},
        status_code=status_code,
    )
