"""Deployment platform client for Heroku custom domains and ACM."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol
from urllib.parse import quote

import requests

from .utils import DomainNotFoundError, PlatformError

HEROKU_API_URL = "https://api.heroku.com"
HEROKU_ACCEPT = "application/vnd.heroku+json; version=3"
LOG = logging.getLogger(__name__)


@dataclass
class CustomDomain:
    """A custom hostname registered on a platform app."""

    hostname: str
    cname: str
    domain_id: Optional[str] = None
    status: Optional[str] = None
    acm_status: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], hostname: str) -> "CustomDomain":
        return cls(
            hostname=payload.get("hostname") or hostname,
            cname=payload.get("cname") or "",
            domain_id=payload.get("id"),
            status=payload.get("status"),
            acm_status=payload.get("acm_status"),
        )


class DeploymentPlatform(Protocol):
    """Deployment platform interface."""

    def register_hostname(self, app_name: str, hostname: str) -> CustomDomain:
        ...

    def enable_certificate_management(self, app_name: str) -> Dict[str, Any]:
        ...

    def get_domain(self, app_name: str, hostname: str) -> CustomDomain:
        ...


class HerokuClient(DeploymentPlatform):
    """Heroku Platform API client using REST API."""

    def __init__(
        self,
        api_token: str,
        session: Optional[requests.Session] = None,
        base_url: str = HEROKU_API_URL,
        timeout: float = 30.0,
    ) -> None:
        self.api_token = api_token
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        """Perform a Heroku API request and return the decoded body."""
        url = f"{self.base_url}{path}"
        headers = kwargs.pop("headers", {})
        headers["Authorization"] = f"Bearer {self.api_token}"
        headers["Accept"] = HEROKU_ACCEPT
        headers["Content-Type"] = "application/json"

        try:
            response = self.session.request(
                method, url, headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as exc:
            LOG.error("Heroku API request %s %s failed: %s", method, path, exc)
            raise PlatformError(str(exc)) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.ok:
            return payload if isinstance(payload, dict) else {}

        message = ""
        if isinstance(payload, dict):
            message = payload.get("message") or ""
        message = message or response.text
        LOG.error("Heroku API error (%s): %s", response.status_code, message)
        raise PlatformError(message, status_code=response.status_code)

    @staticmethod
    def _app_path(app_name: str) -> str:
        return f"/apps/{quote(app_name, safe='')}"

    def register_hostname(self, app_name: str, hostname: str) -> CustomDomain:
        # sni_endpoint stays null; ACM issues the certificate instead.
        payload = self._request(
            "POST",
            f"{self._app_path(app_name)}/domains",
            json={"hostname": hostname, "sni_endpoint": None},
        )
        domain = CustomDomain.from_payload(payload, hostname)
        if not domain.cname:
            raise PlatformError(f"Heroku returned no DNS target for {hostname}")
        return domain

    def enable_certificate_management(self, app_name: str) -> Dict[str, Any]:
        return self._request("POST", f"{self._app_path(app_name)}/acm")

    def get_domain(self, app_name: str, hostname: str) -> CustomDomain:
        try:
            payload = self._request(
                "GET",
                f"{self._app_path(app_name)}/domains/{quote(hostname, safe='')}",
            )
        except PlatformError as exc:
            if exc.status_code != 404:
                raise
            raise DomainNotFoundError(
                f"No custom domain {hostname} on app {app_name}: {exc}",
                status_code=404,
            ) from exc

        domain = CustomDomain.from_payload(payload, hostname)
        if not domain.cname:
            raise PlatformError(f"Heroku returned no DNS target for {hostname}")
        return domain
