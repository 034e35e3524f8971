"""Route53 hosted zone lookup and CNAME record changes for review apps."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Protocol, TYPE_CHECKING

import boto3
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from .config import zone_name_for
from .utils import AmbiguousZoneError, DNSError, ZoneNotFoundError, normalize_zone_id

if TYPE_CHECKING:  # pragma: no cover
    from mypy_boto3_route53.client import Route53Client
else:
    Route53Client = Any

DEFAULT_TTL = 60
CREATE = "CREATE"
DELETE = "DELETE"
LOG = logging.getLogger(__name__)


def _dns_error(exc: Exception) -> DNSError:
    error_code = None
    if isinstance(exc, ClientError):
        error_code = exc.response.get("Error", {}).get("Code")
    return DNSError(str(exc), error_code=error_code, original_exception=exc)


@dataclass(frozen=True)
class HostedZone:
    """A hosted zone visible to the account."""

    zone_id: str
    name: str
    private: bool = False


@dataclass
class CNAMERecord:
    """Represents a DNS CNAME record."""

    name: str
    target: str
    ttl: int = DEFAULT_TTL


@dataclass(frozen=True)
class ChangeInfo:
    """Outcome of a submitted record set change."""

    change_id: str
    status: str
    submitted_at: Optional[datetime] = None


class DNSZoneClient(Protocol):
    """DNS zone interface."""

    def list_zones(self) -> List[HostedZone]:
        ...

    def change_record_set(self, zone_id: str, action: str, record: CNAMERecord) -> ChangeInfo:
        ...

    def get_cname(self, zone_id: str, name: str) -> Optional[CNAMERecord]:
        ...


class Route53Zones(DNSZoneClient):
    """Route53 zone client using boto3 client."""

    def __init__(self, client: Optional[BaseClient] = None) -> None:
        self.client: Route53Client = client or boto3.client("route53")

    def list_zones(self) -> List[HostedZone]:
        zones: List[HostedZone] = []
        try:
            paginator = self.client.get_paginator("list_hosted_zones")
            for page in paginator.paginate():
                for zone in page.get("HostedZones", []):
                    zones.append(
                        HostedZone(
                            zone_id=normalize_zone_id(zone["Id"]),
                            name=zone["Name"],
                            private=bool(zone.get("Config", {}).get("PrivateZone", False)),
                        )
                    )
        except (ClientError, BotoCoreError) as exc:
            LOG.error("Route53 list_hosted_zones failed: %s", exc)
            raise _dns_error(exc) from exc
        return zones

    def change_record_set(self, zone_id: str, action: str, record: CNAMERecord) -> ChangeInfo:
        if action not in (CREATE, DELETE):
            raise ValueError(f"Unsupported record set action: {action}")

        try:
            resp = self.client.change_resource_record_sets(
                HostedZoneId=zone_id,
                ChangeBatch={
                    "Changes": [
                        {
                            "Action": action,
                            "ResourceRecordSet": {
                                "Name": record.name,
                                "Type": "CNAME",
                                "TTL": record.ttl,
                                "ResourceRecords": [{"Value": record.target}],
                            },
                        }
                    ]
                },
            )
        except (ClientError, BotoCoreError) as exc:
            LOG.error("Route53 %s of %s failed: %s", action, record.name, exc)
            raise _dns_error(exc) from exc

        info = resp.get("ChangeInfo", {})
        return ChangeInfo(
            change_id=info.get("Id", ""),
            status=info.get("Status", ""),
            submitted_at=info.get("SubmittedAt"),
        )

    def get_cname(self, zone_id: str, name: str) -> Optional[CNAMERecord]:
        name = name.rstrip(".")
        try:
            resp = self.client.list_resource_record_sets(
                HostedZoneId=zone_id,
                StartRecordName=name,
                StartRecordType="CNAME",
                MaxItems="1",
            )
        except (ClientError, BotoCoreError) as exc:
            LOG.error("Route53 get_cname failed: %s", exc)
            raise _dns_error(exc) from exc

        record_sets = resp.get("ResourceRecordSets", [])
        if not record_sets:
            return None

        record = record_sets[0]
        if record.get("Name", "").rstrip(".") != name or record.get("Type") != "CNAME":
            return None

        values = record.get("ResourceRecords", [])
        target = values[0].get("Value", "") if values else ""
        return CNAMERecord(name=name, target=target.rstrip("."), ttl=record.get("TTL", DEFAULT_TTL))


def resolve_zone(zones: DNSZoneClient, base_domain: str) -> HostedZone:
    """Return the single hosted zone named exactly ``<base_domain>.``.

    Raises:
        ZoneNotFoundError: If no zone has that name
        AmbiguousZoneError: If more than one zone has that name
    """
    wanted = zone_name_for(base_domain)
    matches = [zone for zone in zones.list_zones() if zone.name == wanted]
    if not matches:
        raise ZoneNotFoundError(f"No hosted zone named {wanted}")
    if len(matches) > 1:
        ids = ", ".join(zone.zone_id for zone in matches)
        raise AmbiguousZoneError(f"{len(matches)} hosted zones named {wanted}: {ids}")
    return matches[0]
