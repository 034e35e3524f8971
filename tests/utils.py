"""Test utilities for review-app-dns tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from reviewdns.config import HookConfig
from reviewdns.platform import CustomDomain
from reviewdns.utils import DomainNotFoundError

HEROKU_TARGET = "myapp-pr-42-abc123.herokudns.com"


def make_config(app_name: str = "myapp-pr-42", base_domain: str = "example.com") -> HookConfig:
    return HookConfig(
        app_name=app_name,
        base_domain=base_domain,
        heroku_api_token="heroku-token",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@dataclass
class FakeResponse:
    status_code: int
    payload: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        if self.payload is None:
            raise ValueError("No JSON body")
        return self.payload

    @property
    def text(self) -> str:
        return str(self.payload)


class FakeSession:
    def __init__(self, responses: List[FakeResponse]) -> None:
        self.responses = responses
        self.calls: List[Dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)


class StubPlatform:
    """In-memory Heroku stand-in recording every call."""

    def __init__(self, cname: str = HEROKU_TARGET) -> None:
        self.cname = cname
        self.domains: Dict[str, CustomDomain] = {}
        self.calls: List[Any] = []

    def register_hostname(self, app_name: str, hostname: str) -> CustomDomain:
        self.calls.append(("register_hostname", app_name, hostname))
        domain = CustomDomain(hostname=hostname, cname=self.cname, status="pending")
        self.domains[hostname] = domain
        return domain

    def enable_certificate_management(self, app_name: str) -> Dict[str, Any]:
        self.calls.append(("enable_certificate_management", app_name))
        return {"name": app_name, "acm": True}

    def get_domain(self, app_name: str, hostname: str) -> CustomDomain:
        self.calls.append(("get_domain", app_name, hostname))
        if hostname not in self.domains:
            raise DomainNotFoundError(f"No custom domain {hostname}", status_code=404)
        return self.domains[hostname]
