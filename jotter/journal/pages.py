"""
Server-rendered journal pages: entry list and new entry form.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..utils.settings import JOTTER_SIGNIN_URL
from . import handlers
from .store import EntryStore, yield_entry_store

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def format_entry_date(value: datetime) -> str:
    """
    Formats entry creation time as e.g. "March 5, 2024".
    """
    return f"{value:%B} {value.day}, {value.year}"


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["entry_date"] = format_entry_date

router = APIRouter()


@router.get(
    "/view", tags=["pages"], response_class=HTMLResponse, response_model=None
)
async def journal_page(
    request: Request,
    store: EntryStore = Depends(yield_entry_store),
) -> Union[HTMLResponse, RedirectResponse]:
    """
    Lists entries of the current user, newest first.
    """
    if request.state.user_id is None:
        return RedirectResponse(url=JOTTER_SIGNIN_URL)

    entries = await handlers.list_entries_handler(store, request.state.user_id)
    return templates.TemplateResponse(
        request, "journal.html", {"entries": entries.entries}
    )


@router.get(
    "/new", tags=["pages"], response_class=HTMLResponse, response_model=None
)
async def new_entry_page(request: Request) -> Union[HTMLResponse, RedirectResponse]:
    """
    Form to create a new entry.
    """
    if request.state.user_id is None:
        return RedirectResponse(url=JOTTER_SIGNIN_URL)

    return templates.TemplateResponse(request, "new_entry.html", {})
