"""HTTP operation descriptors handed from request objects to the transport."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .constants import default_base_urls


class Endpoint(str, Enum):
    """Which provider host an operation goes to."""
    API = "api"
    VAULT = "vault"


@dataclass
class Op:
    """Method, path and query for one API call.

    ``values`` holds query-string parameters; request bodies are produced by
    the request object itself, not stored here.
    """

    method: str
    path: str
    endpoint: Endpoint = Endpoint.API
    values: Dict[str, Any] = field(default_factory=dict)
    content_type: Optional[str] = None

    def url(self, base_urls: Optional[Mapping[str, str]] = None) -> str:
        bases = base_urls or default_base_urls()
        base = bases[Endpoint(self.endpoint).value].rstrip("/")
        return f"{base}/{self.path.lstrip('/')}"

    @property
    def has_body(self) -> bool:
        return self.method.upper() in ("POST", "PUT", "PATCH")
