import os
from typing import List


class BugoutAuthConfigurationError(ValueError):
    """
    Raised when Jotter tries to resolve a session using a Bugout authentication server, but no
    such server is specified.
    """


BUGOUT_TIMEOUT_SECONDS_RAW = os.environ.get("BUGOUT_TIMEOUT_SECONDS", 5)
try:
    BUGOUT_TIMEOUT_SECONDS = int(BUGOUT_TIMEOUT_SECONDS_RAW)
except ValueError:
    raise ValueError(
        f"Could not parse BUGOUT_TIMEOUT_SECONDS as int: {BUGOUT_TIMEOUT_SECONDS_RAW}"
    )

# Database
JOTTER_DB_URI = os.environ.get("JOTTER_DB_URI")
if JOTTER_DB_URI is None:
    raise ValueError("JOTTER_DB_URI environment variable not set")

JOTTER_DB_POOL_RECYCLE_SECONDS_RAW = os.environ.get("JOTTER_DB_POOL_RECYCLE_SECONDS")
JOTTER_DB_POOL_RECYCLE_SECONDS = 1800
try:
    if JOTTER_DB_POOL_RECYCLE_SECONDS_RAW is not None:
        JOTTER_DB_POOL_RECYCLE_SECONDS = int(JOTTER_DB_POOL_RECYCLE_SECONDS_RAW)
except ValueError:
    raise ValueError(
        f"JOTTER_DB_POOL_RECYCLE_SECONDS must be an integer: {JOTTER_DB_POOL_RECYCLE_SECONDS_RAW}"
    )

JOTTER_DB_STATEMENT_TIMEOUT_MILLIS_RAW = os.environ.get(
    "JOTTER_DB_STATEMENT_TIMEOUT_MILLIS"
)
JOTTER_DB_STATEMENT_TIMEOUT_MILLIS = 30000
try:
    if JOTTER_DB_STATEMENT_TIMEOUT_MILLIS_RAW is not None:
        JOTTER_DB_STATEMENT_TIMEOUT_MILLIS = int(JOTTER_DB_STATEMENT_TIMEOUT_MILLIS_RAW)
except ValueError:
    raise ValueError(
        f"JOTTER_DB_STATEMENT_TIMEOUT_MILLIS must be an integer: {JOTTER_DB_STATEMENT_TIMEOUT_MILLIS_RAW}"
    )

JOTTER_DB_POOL_SIZE = 2
JOTTER_DB_POOL_SIZE_RAW = os.environ.get("JOTTER_DB_POOL_SIZE")
JOTTER_DB_MAX_OVERFLOW = 2
JOTTER_DB_MAX_OVERFLOW_RAW = os.environ.get("JOTTER_DB_MAX_OVERFLOW")
try:
    if JOTTER_DB_POOL_SIZE_RAW is not None:
        JOTTER_DB_POOL_SIZE = int(JOTTER_DB_POOL_SIZE_RAW)
except ValueError:
    raise ValueError(
        f"Could not parse JOTTER_DB_POOL_SIZE as int: {JOTTER_DB_POOL_SIZE_RAW}"
    )
try:
    if JOTTER_DB_MAX_OVERFLOW_RAW is not None:
        JOTTER_DB_MAX_OVERFLOW = int(JOTTER_DB_MAX_OVERFLOW_RAW)
except ValueError:
    raise ValueError(
        f"Could not parse JOTTER_DB_MAX_OVERFLOW as int: {JOTTER_DB_MAX_OVERFLOW_RAW}"
    )

# Sessions
JOTTER_SESSION_COOKIE = os.environ.get("JOTTER_SESSION_COOKIE", "jotter_session")
JOTTER_SIGNIN_URL = os.environ.get("JOTTER_SIGNIN_URL", "/api/auth/signin")


def auth_url_from_env() -> str:
    """
    Retrieves Bugout authentication server URL from the BUGOUT_AUTH_URL environment variable.
    """
    bugout_auth_url = os.environ.get("BUGOUT_AUTH_URL")
    if bugout_auth_url is None:
        raise BugoutAuthConfigurationError(
            "BUGOUT_AUTH_URL environment variable not set"
        )
    bugout_auth_url = bugout_auth_url.rstrip("/")
    return bugout_auth_url


# CORS
_origins_raw = os.environ.get("JOTTER_CORS_ALLOWED_ORIGINS")
if _origins_raw is None:
    raise ValueError("JOTTER_CORS_ALLOWED_ORIGINS environment variable must be set")
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip() for origin in _origins_raw.split(",") if origin.strip()
]

# OpenAPI
DOCS_TARGET_PATH = "docs"
JOTTER_OPENAPI_LIST: List[str] = []
JOTTER_OPENAPI_LIST_RAW = os.environ.get("JOTTER_OPENAPI_LIST")
if JOTTER_OPENAPI_LIST_RAW is not None:
    JOTTER_OPENAPI_LIST = JOTTER_OPENAPI_LIST_RAW.split(",")

DOCS_PATHS = []
for path in JOTTER_OPENAPI_LIST:
    DOCS_PATHS.append(f"/{path}/{DOCS_TARGET_PATH}")
    DOCS_PATHS.append(f"/{path}/{DOCS_TARGET_PATH}/openapi.json")
