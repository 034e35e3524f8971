"""Hook configuration loaded from the process environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .utils import DEFAULT_REGION, ConfigurationError

APP_NAME_VAR = "HEROKU_APP_NAME"
BASE_DOMAIN_VAR = "REVIEW_APP_BASE_DOMAIN"
HEROKU_TOKEN_VAR = "HEROKU_API_TOKEN"
AWS_ACCESS_KEY_VAR = "AWS_ACCESS_KEY_ID"
AWS_SECRET_KEY_VAR = "AWS_SECRET_ACCESS_KEY"
AWS_REGION_VAR = "AWS_REGION"


def derive_hostname(app_name: str, base_domain: str) -> str:
    """Return the custom hostname for a review app.

    Both hooks go through this function, so the hostname created after
    deploy is byte-identical to the one removed before destroy. The app
    name is not validated; Heroku rejects malformed hostnames.
    """
    return f"{app_name}.{base_domain}"


def zone_name_for(base_domain: str) -> str:
    """Return the fully qualified zone name (trailing dot) for a base domain."""
    return f"{base_domain}."


@dataclass(frozen=True)
class HookConfig:
    """Inputs shared by the postdeploy and predestroy hooks."""

    app_name: str
    base_domain: str
    heroku_api_token: str = field(repr=False)
    aws_access_key_id: str = field(repr=False)
    aws_secret_access_key: str = field(repr=False)
    aws_region: str = DEFAULT_REGION

    @property
    def hostname(self) -> str:
        return derive_hostname(self.app_name, self.base_domain)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        app_name: Optional[str] = None,
        base_domain: Optional[str] = None,
    ) -> "HookConfig":
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
            app_name: Overrides ``HEROKU_APP_NAME`` when given
            base_domain: Overrides ``REVIEW_APP_BASE_DOMAIN`` when given

        Raises:
            ConfigurationError: If any required value is missing or blank
        """
        env = os.environ if environ is None else environ

        values: Dict[str, str] = {}
        missing = []
        for var, override in (
            (APP_NAME_VAR, app_name),
            (BASE_DOMAIN_VAR, base_domain),
            (HEROKU_TOKEN_VAR, None),
            (AWS_ACCESS_KEY_VAR, None),
            (AWS_SECRET_KEY_VAR, None),
        ):
            value = (override if override is not None else env.get(var, "")).strip()
            if not value:
                missing.append(var)
            values[var] = value

        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            )

        return cls(
            app_name=values[APP_NAME_VAR],
            base_domain=values[BASE_DOMAIN_VAR].rstrip("."),
            heroku_api_token=values[HEROKU_TOKEN_VAR],
            aws_access_key_id=values[AWS_ACCESS_KEY_VAR],
            aws_secret_access_key=values[AWS_SECRET_KEY_VAR],
            aws_region=env.get(AWS_REGION_VAR, "").strip() or DEFAULT_REGION,
        )
