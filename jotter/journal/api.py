import logging
from uuid import UUID

from fastapi import Depends, FastAPI, Path, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..broodusers import BroodAuthenticator
from ..data import ErrorResponse, VersionResponse
from ..middleware import BroodSessionMiddleware
from ..utils.settings import (
    CORS_ALLOWED_ORIGINS,
    DOCS_PATHS,
    DOCS_TARGET_PATH,
    JOTTER_OPENAPI_LIST,
)
from . import handlers, pages
from .data import JournalEntryResponse, ListJournalEntriesResponse
from .errors import InvalidInput, JournalError
from .store import EntryStore, yield_entry_store
from .version import JOTTER_JOURNALS_VERSION

SUBMODULE_NAME = "journals"

logger = logging.getLogger(__name__)

tags_metadata = [
    {"name": "entries", "description": "Operations with journal entries."},
    {"name": "pages", "description": "Rendered journal pages."},
]

error_responses = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

app = FastAPI(
    title=f"Jotter {SUBMODULE_NAME} submodule",
    description="Jotter API endpoints to create and list personal journal entries.",
    version=JOTTER_JOURNALS_VERSION,
    openapi_tags=tags_metadata,
    openapi_url=f"/{DOCS_TARGET_PATH}/openapi.json"
    if SUBMODULE_NAME in JOTTER_OPENAPI_LIST
    else None,
    docs_url=None,
    redoc_url=f"/{DOCS_TARGET_PATH}",
)
app.state.authenticator = BroodAuthenticator()

# Important to save consistency for middlewares (stack queue)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(BroodSessionMiddleware, whitelist=DOCS_PATHS)


@app.exception_handler(JournalError)
async def journal_error_handler(request: Request, exc: JournalError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


app.include_router(pages.router)


@app.get("/version", response_model=VersionResponse)
async def version() -> VersionResponse:
    """
    Jotter journals submodule version.
    """
    return VersionResponse(version=JOTTER_JOURNALS_VERSION)


@app.get(
    "/entries",
    tags=["entries"],
    response_model=ListJournalEntriesResponse,
    responses=error_responses,
)
async def list_entries(
    request: Request,
    store: EntryStore = Depends(yield_entry_store),
) -> ListJournalEntriesResponse:
    """
    List all entries of the current user, newest first.
    """
    return await handlers.list_entries_handler(store, request.state.user_id)


@app.post(
    "/entries",
    tags=["entries"],
    response_model=JournalEntryResponse,
    responses=error_responses,
)
async def create_entry(
    request: Request,
    store: EntryStore = Depends(yield_entry_store),
) -> JournalEntryResponse:
    """
    Creates a journal entry for the current user.

    - **title** (string): Entry title
    - **content** (string): Entry content
    """
    # Session is checked before the body is parsed, malformed JSON counts as missing fields
    handlers.ensure_user(request.state.user_id)
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json":
        raise InvalidInput()
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    return await handlers.create_entry_handler(store, request.state.user_id, payload)


@app.get(
    "/entries/{entry_id}",
    tags=["entries"],
    response_model=JournalEntryResponse,
    responses=error_responses,
)
async def get_entry(
    request: Request,
    entry_id: UUID = Path(...),
    store: EntryStore = Depends(yield_entry_store),
) -> JournalEntryResponse:
    """
    Gets a single journal entry of the current user.
    """
    return await handlers.get_entry_handler(store, request.state.user_id, entry_id)
