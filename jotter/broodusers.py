import json
import logging
from typing import Any, Dict, Optional

import requests

from .utils.settings import BUGOUT_TIMEOUT_SECONDS, auth_url_from_env

logger = logging.getLogger(__name__)


class BugoutAuthHTTPError(requests.HTTPError):
    """
    Raised when there is an error making requests against Bugout auth URL.
    """


class BugoutAuthUnexpectedResponse(ValueError):
    """
    Raised when Bugout auth server response is unexpected (e.g. unparseable).
    """


class Authenticator:
    """
    Resolves a session token to the id of the user it belongs to. Returns None when the token
    does not represent an authenticated user.
    """

    def resolve(self, token: Optional[str]) -> Optional[str]:
        raise NotImplementedError()


class BroodAuthenticator(Authenticator):
    """
    Authenticator backed by the Bugout authentication server (Brood).

    Only verified accounts resolve to a user. Tokens rejected by Brood resolve to None, any
    other failure to talk to Brood is raised.
    """

    def __init__(
        self,
        auth_url: Optional[str] = None,
        timeout: int = BUGOUT_TIMEOUT_SECONDS,
    ) -> None:
        self.auth_url = auth_url
        self.timeout = timeout

    def user_info(self, token: str) -> Dict[str, Any]:
        """
        Given an access token, queries Brood for the id of the corresponding user and their
        verification status. Returns the JSON response from the authentication server.
        """
        auth_url = self.auth_url
        if auth_url is None:
            auth_url = auth_url_from_env()
        brood_endpoint = f"{auth_url.rstrip('/')}/auth"

        headers = {"Authorization": f"Bearer {token}"}
        r = requests.get(brood_endpoint, headers=headers, timeout=self.timeout)
        r.raise_for_status()
        try:
            response = r.json()
        except ValueError as e:
            logger.error("Unparseable response when retrieving user with access token")
            raise BugoutAuthUnexpectedResponse(str(e))
        return response

    def resolve(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None

        try:
            response = self.user_info(token)
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code in (401, 403, 404):
                return None
            logger.error(f"Error interacting with Brood API: {str(e)}")
            raise BugoutAuthHTTPError(str(e))

        if not isinstance(response, dict):
            raise BugoutAuthUnexpectedResponse(
                f"Brood API returned invalid response: {json.dumps(response)}"
            )
        user_id: Optional[str] = response.get("user_id")
        verified: Optional[bool] = response.get("verified")
        if user_id is None:
            logger.error(f"Brood API returned invalid response: {json.dumps(response)}")
            raise BugoutAuthUnexpectedResponse("Brood response has no user_id")
        if not verified:
            logger.info(f"Attempted journal access by unverified Brood account: {user_id}")
            return None

        return str(user_id)
