"""Review app DNS lifecycle handlers for Heroku hooks and CLI use."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from reviewdns.config import HookConfig, derive_hostname
from reviewdns.dns import (
    CREATE,
    DEFAULT_TTL,
    DELETE,
    ChangeInfo,
    CNAMERecord,
    DNSZoneClient,
    HostedZone,
    resolve_zone,
)
from reviewdns.platform import CustomDomain, DeploymentPlatform
from reviewdns.utils import DomainNotFoundError, ReviewDNSError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HookResult:
    """Outcome of a provision or decommission run."""

    hostname: str
    cname: str
    zone_id: str
    change: ChangeInfo


@dataclass(frozen=True)
class DomainStatus:
    """Current Heroku and Route53 view of a review app hostname."""

    hostname: str
    domain: Optional[CustomDomain]
    zone: HostedZone
    record: Optional[CNAMERecord]

    @property
    def in_sync(self) -> bool:
        if self.domain is None or self.record is None:
            return False
        return self.record.target == self.domain.cname.rstrip(".")


def _log(level: int, message: str, **fields: Any) -> None:
    payload = {"message": message, **fields}
    logger.log(level, json.dumps(payload, sort_keys=True, default=str))


def _log_info(message: str, **fields: Any) -> None:
    _log(logging.INFO, message, **fields)


def _log_warning(message: str, **fields: Any) -> None:
    _log(logging.WARNING, message, **fields)


def provision(
    config: HookConfig,
    *,
    platform: DeploymentPlatform,
    zones: DNSZoneClient,
) -> HookResult:
    """Register the review app hostname on Heroku and CREATE its CNAME.

    Nothing is rolled back: if a step after the Heroku registration fails,
    the domain stays registered without a DNS record.
    """
    hostname = derive_hostname(config.app_name, config.base_domain)
    _log_info("registering custom domain", app=config.app_name, hostname=hostname)
    domain = platform.register_hostname(config.app_name, hostname)

    try:
        platform.enable_certificate_management(config.app_name)
        _log_info("enabled automated certificate management", app=config.app_name)

        zone = resolve_zone(zones, config.base_domain)
        _log_info("resolved hosted zone", zone_id=zone.zone_id, zone_name=zone.name)

        change = zones.change_record_set(
            zone.zone_id,
            CREATE,
            CNAMERecord(name=hostname, target=domain.cname, ttl=DEFAULT_TTL),
        )
    except ReviewDNSError as exc:
        _log_warning(
            "custom domain left registered without a DNS record",
            app=config.app_name,
            hostname=hostname,
            cname=domain.cname,
            error=str(exc),
        )
        raise

    _log_info(
        "created CNAME record",
        hostname=hostname,
        cname=domain.cname,
        change_id=change.change_id,
        status=change.status,
    )
    return HookResult(hostname=hostname, cname=domain.cname, zone_id=zone.zone_id, change=change)


def decommission(
    config: HookConfig,
    *,
    platform: DeploymentPlatform,
    zones: DNSZoneClient,
) -> HookResult:
    """DELETE the review app CNAME using the DNS target Heroku reports.

    The Heroku domain and certificate are left for Heroku's own app teardown.
    """
    hostname = derive_hostname(config.app_name, config.base_domain)
    domain = platform.get_domain(config.app_name, hostname)
    _log_info("found custom domain", app=config.app_name, hostname=hostname, cname=domain.cname)

    zone = resolve_zone(zones, config.base_domain)
    _log_info("resolved hosted zone", zone_id=zone.zone_id, zone_name=zone.name)

    change = zones.change_record_set(
        zone.zone_id,
        DELETE,
        CNAMERecord(name=hostname, target=domain.cname, ttl=DEFAULT_TTL),
    )
    _log_info(
        "deleted CNAME record",
        hostname=hostname,
        cname=domain.cname,
        change_id=change.change_id,
        status=change.status,
    )
    return HookResult(hostname=hostname, cname=domain.cname, zone_id=zone.zone_id, change=change)


def inspect(
    config: HookConfig,
    *,
    platform: DeploymentPlatform,
    zones: DNSZoneClient,
) -> DomainStatus:
    """Report the Heroku domain and Route53 record for a review app without changing either."""
    hostname = derive_hostname(config.app_name, config.base_domain)
    try:
        domain: Optional[CustomDomain] = platform.get_domain(config.app_name, hostname)
    except DomainNotFoundError:
        _log_info("custom domain not registered", app=config.app_name, hostname=hostname)
        domain = None

    zone = resolve_zone(zones, config.base_domain)
    record = zones.get_cname(zone.zone_id, hostname)
    return DomainStatus(hostname=hostname, domain=domain, zone=zone, record=record)
