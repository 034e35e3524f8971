"""Pytest configuration and fixtures for review-app-dns tests."""

import boto3
import pytest
from moto import mock_aws

from reviewdns.dns import Route53Zones
from reviewdns.utils import normalize_zone_id


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def mock_route53():
    """Mock Route53 client."""
    with mock_aws():
        yield boto3.client("route53", region_name="us-east-1")


@pytest.fixture
def example_zone(mock_route53):
    """Hosted zone example.com. with a Route53Zones client bound to it."""
    zone = mock_route53.create_hosted_zone(Name="example.com.", CallerReference="example")
    zone_id = normalize_zone_id(zone["HostedZone"]["Id"])
    return zone_id, Route53Zones(client=mock_route53)


@pytest.fixture
def hook_env(monkeypatch):
    """Environment as Heroku provides it to review app scripts."""
    monkeypatch.setenv("HEROKU_APP_NAME", "myapp-pr-42")
    monkeypatch.setenv("REVIEW_APP_BASE_DOMAIN", "example.com")
    monkeypatch.setenv("HEROKU_API_TOKEN", "heroku-token")
    monkeypatch.delenv("AWS_REGION", raising=False)


@pytest.fixture
def mock_cli_runner():
    """CLI runner for testing Click commands."""
    from click.testing import CliRunner

    return CliRunner()
