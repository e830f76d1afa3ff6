"""HTTP adapter that tags outgoing requests with the client's User-Agent."""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import BaseAdapter, HTTPAdapter

USER_AGENT = "GoogleGeoApiClientPython/0.1"


def user_agent(existing: str | None) -> str:
    """Return the User-Agent value with the client's agent appended."""
    if not existing:
        return USER_AGENT
    return f"{existing};{USER_AGENT}"


def apply_user_agent(request: requests.PreparedRequest) -> requests.PreparedRequest:
    """Return a copy of the request whose User-Agent carries the client's agent.

    The given request is left unchanged.
    """
    clone = request.copy()
    clone.headers = request.headers.copy()
    clone.headers["User-Agent"] = user_agent(request.headers.get("User-Agent"))
    return clone


class UserAgentAdapter(HTTPAdapter):
    """Adapter that sets the User-Agent, then sends through a base adapter.

    Without a base adapter, requests are sent by the ordinary HTTP adapter.
    A base that is itself a UserAgentAdapter is unwrapped, so the agent is
    never appended twice.
    """

    def __init__(self, base: BaseAdapter | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        while isinstance(base, UserAgentAdapter):
            base = base.base
        self.base = base

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        prepared = apply_user_agent(request)
        if self.base is not None:
            return self.base.send(prepared, **kwargs)
        return super().send(prepared, **kwargs)

    def close(self) -> None:
        if self.base is not None:
            self.base.close()
        super().close()