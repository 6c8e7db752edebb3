from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable


@dataclass(frozen=True)
class HttpRequest:
    """A ready-to-send request: method, absolute URL and one body encoding."""

    method: str
    url: str
    json: Optional[Dict[str, Any]] = None
    data: Optional[Dict[str, str]] = None
    files: Optional[Dict[str, Tuple[str, bytes, str]]] = None
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def is_multipart(self) -> bool:
        return self.files is not None


@runtime_checkable
class IntoRequest(Protocol):
    """Anything that knows which endpoint it targets and how to encode itself."""

    def into_request(self, base_url: str) -> HttpRequest:
        ...


def join_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}{path}"
