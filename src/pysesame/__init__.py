"""Python library for interacting with the SESAME smart lock API."""

from .api import AsyncSesameAPI, SesameAPI
from .client import Client
from .const import LIB_VERSION
from .exceptions import (
    ApiError,
    InvalidArgumentError,
    ParseError,
    PySesameException,
    RequestError,
)
from .models import Control, ControlCommand, ExecutionResult, Sesame, SesameStatus

__version__ = LIB_VERSION

__all__ = [
    "ApiError",
    "AsyncSesameAPI",
    "Client",
    "Control",
    "ControlCommand",
    "ExecutionResult",
    "InvalidArgumentError",
    "ParseError",
    "PySesameException",
    "RequestError",
    "Sesame",
    "SesameAPI",
    "SesameStatus",
    "__version__",
]
