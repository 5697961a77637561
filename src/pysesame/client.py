"""Async HTTP client for the SESAME API."""

import json
import logging
from types import TracebackType
from typing import Any, Mapping, Optional

import aiohttp

from .const import BASE_URL, DEFAULT_TIMEOUT, build_user_agent
from .exceptions import ApiError, ParseError, RequestError

_LOGGER = logging.getLogger(__name__)


class Client:
    """Performs authenticated JSON requests against the SESAME API using aiohttp.

    The access token is sent verbatim in the ``Authorization`` header. A caller
    may pass its own ``aiohttp.ClientSession`` to share a connection pool; that
    session is never closed by the client. Without one, a session is created on
    first use and closed by `close_session`.

    Attributes:
        base_url (str): Root URL every endpoint path is joined to.
        user_agent (str): Value of the ``User-Agent`` header.

    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = BASE_URL,
        user_agent: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            access_token (str): Token issued by the SESAME dashboard.
            base_url (str): API root. Defaults to `BASE_URL`.
            user_agent (Optional[str]): Overrides the default User-Agent.
            session (Optional[aiohttp.ClientSession]): Externally managed session.
            timeout (float): Total timeout for each request, in seconds.

        """
        self._access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent or build_user_agent()
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._managed_session = session is None

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close_session()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            _LOGGER.debug("Creating new aiohttp ClientSession for Client.")
            self._session = aiohttp.ClientSession()
            self._managed_session = True
        return self._session

    async def close_session(self) -> None:
        """Close the aiohttp session if it's managed by this instance."""
        if self._session and not self._session.closed and self._managed_session:
            await self._session.close()
            self._session = None
            _LOGGER.debug("Managed aiohttp session closed by Client.")
        elif self._session and not self._managed_session:
            _LOGGER.debug("Session provided externally, not closing.")

    async def async_get(
        self,
        path: str,
        params: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Make an authenticated GET request and return the decoded JSON body."""
        return await self._async_request(aiohttp.hdrs.METH_GET, path, params=params)

    async def async_post(self, path: str, json_data: Any) -> Any:
        """Make an authenticated POST request with a JSON body."""
        return await self._async_request(
            aiohttp.hdrs.METH_POST,
            path,
            json_data=json_data,
        )

    async def _async_request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        json_data: Any = None,
    ) -> Any:
        """Send one request, classify the status and decode the body.

        Raises:
            RequestError: If the request times out or the connection fails.
            ApiError: If the status code is outside [200, 300).
            ParseError: If a successful body is not valid JSON.

        """
        url = f"{self.base_url}/{path}"
        headers = {
            "Authorization": self._access_token,
            "User-Agent": self.user_agent,
        }
        if method == aiohttp.hdrs.METH_POST:
            headers["Content-Type"] = "application/json"

        session = await self._get_session()

        _LOGGER.debug("Making ASYNC %s request to %s", method, url)
        _LOGGER.debug(
            "Headers: %s",
            {
                k: (v[:4] + "..." if k == "Authorization" else v)
                for k, v in headers.items()
            },
        )
        if params:
            _LOGGER.debug("Params: %s", params)
        if json_data is not None:
            _LOGGER.debug("JSON Data: %s", json_data)

        try:
            async with session.request(
                method,
                url,
                headers=headers,
                params=params or None,
                json=json_data,
                timeout=self._timeout,
            ) as response:
                _LOGGER.debug("Response status code: %s", response.status)

                if not 200 <= response.status < 300:
                    raise ApiError(response.status, await _read_reason(response))

                body = await response.read()

        except TimeoutError as timeout_err:
            err_msg = f"Request timed out: {method} {url}"
            raise RequestError(err_msg) from timeout_err
        except aiohttp.ClientError as req_err:
            err_msg = f"Request error: {req_err}"
            raise RequestError(err_msg) from req_err
        except ValueError as req_err:
            # aiohttp rejects unsendable requests, e.g. CR/LF in a header value
            err_msg = f"Invalid request: {req_err}"
            raise RequestError(err_msg) from req_err

        try:
            return json.loads(body)
        except ValueError as parse_err:
            err_msg = f"Failed to parse the response. ({parse_err})"
            raise ParseError(err_msg) from parse_err


async def _read_reason(response: aiohttp.ClientResponse) -> str:
    """Return the body of a failed response, or "" if it cannot be read."""
    try:
        return await response.text()
    except (aiohttp.ClientError, UnicodeDecodeError):
        return ""
