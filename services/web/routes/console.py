import logging
from typing import Optional
from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field, TypeAdapter

from shared.schemas.tailor import InteractionState, Idle
from ..render import render_page
from ..tailor_client import TailorClient

logger = logging.getLogger(__name__)
router = APIRouter(tags=["console"])

_state_adapter = TypeAdapter(InteractionState)


class SubmitRequest(BaseModel):
    """JSON body for scripted submissions."""
    resume: str = ""
    job_description: str = ""
    role_title: Optional[str] = Field(None, description="Blank or missing means no target role")


def get_tailor_client(request: Request) -> TailorClient:
    """Build a client around the app's shared HTTP connection pool."""
    config = request.app.state.config
    return TailorClient(
        backend_base=config.backend_url,
        http_client=getattr(request.app.state, "http_client", None),
        timeout=config.http_timeout,
    )


@router.get("/", response_class=HTMLResponse)
async def console_page():
    """Serve the empty form."""
    return HTMLResponse(render_page(Idle()))


@router.post("/", response_class=HTMLResponse)
async def submit_form(
    request: Request,
    role_title: str = Form(""),
    resume: str = Form(""),
    job_description: str = Form(""),
):
    """
    Submit the form to the tailoring backend and render the outcome.

    Failures are part of the page, so this always answers 200.
    """
    client = get_tailor_client(request)
    state = await client.submit(resume, job_description, role_title)
    form = {"role_title": role_title, "resume": resume, "job_description": job_description}
    return HTMLResponse(render_page(state, form))


@router.post("/api/submit")
async def submit_json(request: Request, body: SubmitRequest):
    """Same cycle as the form, returning the final InteractionState as JSON."""
    client = get_tailor_client(request)
    state = await client.submit(body.resume, body.job_description, body.role_title)
    return _state_adapter.dump_python(state, mode="json")
