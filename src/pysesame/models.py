"""Data models for pysesame.

Every model mirrors one JSON object exchanged with the API. Decoding is strict
about types but tolerant of missing keys (zero value) and unknown keys (ignored).
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List

from .const import STATUS_TERMINATED
from .exceptions import ParseError

_ZERO_VALUES: Dict[type, Any] = {str: "", bool: False, int: 0}


def _shape_error(detail: str) -> ParseError:
    return ParseError(f"Failed to parse the response. ({detail})")


def _read_field(data: Dict[str, Any], key: str, kind: type, owner: str) -> Any:
    """Return data[key] checked against kind, or the zero value when absent."""
    value = data.get(key)
    if value is None:
        return _ZERO_VALUES[kind]
    # bool is a subclass of int
    if (kind is int and isinstance(value, bool)) or not isinstance(value, kind):
        raise _shape_error(
            f"{owner}.{key}: expected {kind.__name__}, got {type(value).__name__}",
        )
    return value


class _WireModel:
    """Shared JSON decoding for the dataclasses below."""

    @classmethod
    def from_dict(cls, data: Any):
        """Build an instance from a decoded JSON object."""
        if not isinstance(data, dict):
            raise _shape_error(
                f"expected a JSON object for {cls.__name__}, got {type(data).__name__}",
            )
        return cls(
            **{
                field.name: _read_field(data, field.name, field.type, cls.__name__)
                for field in fields(cls)
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready representation."""
        return asdict(self)


@dataclass
class Sesame(_WireModel):
    """Represents a SESAME device."""

    device_id: str = ""
    serial: str = ""
    nickname: str = ""


@dataclass
class SesameStatus(_WireModel):
    """Represents the reported state of a device."""

    locked: bool = False
    battery: int = 0
    responsive: bool = False


@dataclass
class ControlCommand(_WireModel):
    """Body of a control request, e.g. ``{"command": "lock"}``."""

    command: str = ""


@dataclass
class Control(_WireModel):
    """Acknowledgement of an accepted control command."""

    task_id: str = ""


@dataclass
class ExecutionResult(_WireModel):
    """Outcome of a task created by a control command."""

    status: str = ""
    successful: bool = False
    error: str = ""

    @property
    def is_terminal(self) -> bool:
        """Return True once the task is no longer processing."""
        return self.status == STATUS_TERMINATED


def sesames_from_list(data: Any) -> List[Sesame]:
    """Decode the JSON array returned by the device list endpoint."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise _shape_error(f"expected a JSON array of Sesame, got {type(data).__name__}")
    return [Sesame.from_dict(item) for item in data]
