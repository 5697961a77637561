"""SESAME API endpoints."""

import logging
from types import TracebackType
from typing import List, Optional, Protocol, runtime_checkable
from urllib.parse import quote

from .client import Client
from .const import (
    ACTION_RESULT_ENDPOINT,
    COMMAND_LOCK,
    COMMAND_UNLOCK,
    SESAME_ENDPOINT,
    SESAMES_ENDPOINT,
)
from .exceptions import InvalidArgumentError
from .models import (
    Control,
    ControlCommand,
    ExecutionResult,
    Sesame,
    SesameStatus,
    sesames_from_list,
)

_LOGGER = logging.getLogger(__name__)


@runtime_checkable
class SesameAPI(Protocol):
    """Operations offered by the SESAME API.

    `AsyncSesameAPI` is the implementation backed by HTTP; tests can provide
    any other object with these coroutines.
    """

    async def async_get_list(self) -> List[Sesame]: ...

    async def async_get_status(self, device_id: str) -> SesameStatus: ...

    async def async_control(self, device_id: str, command: str) -> Control: ...

    async def async_get_execution_result(self, task_id: str) -> ExecutionResult: ...


def _sesame_path(device_id: str) -> str:
    return SESAME_ENDPOINT.format(device_id=quote(device_id, safe=""))


class AsyncSesameAPI:
    """Async client of the SESAME API.

    Every method performs exactly one request. Sending a command only returns
    the task id; waiting for the command to complete is up to the caller, by
    polling `async_get_execution_result`.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        *,
        client: Optional[Client] = None,
        **client_kwargs,
    ) -> None:
        """Initialize the API.

        Either pass an existing `Client`, or an access token (and optionally
        any `Client` keyword argument such as ``base_url`` or ``session``).
        """
        if client is None:
            if access_token is None:
                err_msg = "access_token is required when no client is given"
                raise TypeError(err_msg)
            client = Client(access_token, **client_kwargs)
        elif access_token is not None or client_kwargs:
            err_msg = "pass either a client or client settings, not both"
            raise TypeError(err_msg)
        self.client = client

    async def __aenter__(self) -> "AsyncSesameAPI":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the underlying HTTP session."""
        await self.client.close_session()

    async def async_get_list(self) -> List[Sesame]:
        """Return every SESAME linked to the account (GET /sesames)."""
        data = await self.client.async_get(SESAMES_ENDPOINT)
        sesames = sesames_from_list(data)
        _LOGGER.debug("Fetched %d sesames", len(sesames))
        return sesames

    async def async_get_status(self, device_id: str) -> SesameStatus:
        """Return the status of a device (GET /sesame/{device_id})."""
        if not device_id:
            err_msg = f"Invalid deviceID: {device_id}"
            raise InvalidArgumentError(err_msg)

        data = await self.client.async_get(_sesame_path(device_id))
        return SesameStatus.from_dict(data)

    async def async_control(self, device_id: str, command: str) -> Control:
        """Send a command to a device (POST /sesame/{device_id}).

        The command is passed through as-is; the server decides whether it
        is valid.
        """
        if not device_id:
            err_msg = f"Invalid deviceID: {device_id}"
            raise InvalidArgumentError(err_msg)

        cmd = ControlCommand(command=command)
        data = await self.client.async_post(_sesame_path(device_id), cmd.to_dict())
        control = Control.from_dict(data)
        _LOGGER.debug(
            "Command %r for %s accepted as task %s",
            command,
            device_id,
            control.task_id,
        )
        return control

    async def async_lock(self, device_id: str) -> Control:
        """Send the lock command to a device."""
        return await self.async_control(device_id, COMMAND_LOCK)

    async def async_unlock(self, device_id: str) -> Control:
        """Send the unlock command to a device."""
        return await self.async_control(device_id, COMMAND_UNLOCK)

    async def async_get_execution_result(self, task_id: str) -> ExecutionResult:
        """Return the result of a task (GET /action-result?task_id={task_id})."""
        if not task_id:
            err_msg = f"Invalid taskID: {task_id}"
            raise InvalidArgumentError(err_msg)

        data = await self.client.async_get(
            ACTION_RESULT_ENDPOINT,
            params={"task_id": task_id},
        )
        return ExecutionResult.from_dict(data)
