"""
Outcome of a call to an inventory backend or the notification service.

Every gateway call returns exactly one of:
- Success: the call went through; payload is the decoded body (or None)
- DownstreamError: the backend answered with an error status and a structured body
- TransportError: no usable answer (unreachable, timeout, unparseable error body)
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Success:
    status_code: int
    payload: Any = None


@dataclass(frozen=True)
class DownstreamError:
    status_code: int
    message: Optional[str] = None
    detail: Any = None


@dataclass(frozen=True)
class TransportError:
    message: str


Outcome = Union[Success, DownstreamError, TransportError]
