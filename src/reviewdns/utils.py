"""Common utilities for review-app-dns."""
from __future__ import annotations

from typing import Optional

import boto3
import requests
from botocore.client import BaseClient

DEFAULT_REGION = "us-east-1"


def get_route53_client(
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    region: str = DEFAULT_REGION,
) -> BaseClient:
    """Get a Route53 client.

    Args:
        access_key_id: AWS access key; falls back to the default credential chain
        secret_access_key: AWS secret key paired with ``access_key_id``
        region: Signing region handed to boto3; Route53 is a global endpoint,
            so the client resolves to the aws-global partition regardless

    Returns:
        A boto3 Route53 client
    """
    return boto3.client(
        'route53',
        aws_access_key_id=access_key_id,
        aws_secret_access_key=secret_access_key,
        region_name=region,
    )


def get_http_session() -> requests.Session:
    """Get an HTTP session for platform API calls."""
    return requests.Session()


def normalize_zone_id(zone_id: str) -> str:
    """Strip the ``/hostedzone/`` prefix Route53 puts on zone IDs.

    Args:
        zone_id: Zone ID as returned by ``list_hosted_zones``

    Returns:
        The bare zone ID, e.g. ``Z0123456789ABC``
    """
    return zone_id.split("/")[-1]


class ReviewDNSError(Exception):
    """Base exception for review-app-dns operations."""
    pass


class ConfigurationError(ReviewDNSError):
    """Raised when required configuration or credentials are missing."""
    pass


class PlatformError(ReviewDNSError):
    """Raised when a deployment platform API call fails."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class DomainNotFoundError(PlatformError):
    """Raised when the platform has no registration for a custom domain."""
    pass


class ZoneNotFoundError(ReviewDNSError):
    """Raised when no hosted zone matches the base domain."""
    pass


class AmbiguousZoneError(ReviewDNSError):
    """Raised when more than one hosted zone matches the base domain."""
    pass


class DNSError(ReviewDNSError):
    """Raised when a DNS provider call is rejected."""
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.error_code = error_code
        self.original_exception = original_exception
        super().__init__(message)
