import logging
from typing import Awaitable, Callable, List, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .broodusers import Authenticator
from .utils.settings import JOTTER_SESSION_COOKIE

logger = logging.getLogger(__name__)


def session_token(request: Request) -> Optional[str]:
    """
    Extracts the session token from the authorization header ("Bearer <token>") or, failing
    that, from the session cookie.
    """
    authorization_header = request.headers.get("authorization")
    if authorization_header is not None:
        user_token_list = authorization_header.split()
        if len(user_token_list) == 2 and user_token_list[0].lower() == "bearer":
            return user_token_list[-1]
    return request.cookies.get(JOTTER_SESSION_COOKIE)


class BroodSessionMiddleware(BaseHTTPMiddleware):
    """
    Resolves the session on the request with the authenticator stored in app.state and adds
    a user_id attribute to the request.state. user_id is None for anonymous requests, it is up
    to the route to reject them.
    """

    def __init__(self, app, whitelist: Optional[List[str]] = None):
        self.whitelist: List[str] = []
        if whitelist is not None:
            self.whitelist = whitelist
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        request.state.user_id = None
        if request.url.path in self.whitelist:
            return await call_next(request)

        authenticator: Optional[Authenticator] = getattr(
            request.app.state, "authenticator", None
        )
        if authenticator is None:
            logger.error("No authenticator configured for application")
            return JSONResponse(
                status_code=500, content={"error": "Internal server error"}
            )

        token = session_token(request)
        try:
            user_id = authenticator.resolve(token)
        except Exception as e:
            logger.error(f"Error resolving session: {repr(e)}")
            return JSONResponse(
                status_code=500, content={"error": "Internal server error"}
            )

        request.state.user_id = user_id
        return await call_next(request)
