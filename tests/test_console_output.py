"""Unit tests for reviewdns console output module."""

from unittest.mock import patch

import pytest
from rich.console import Console

from reviewdns.console_output import ConsoleOutput
from reviewdns.dns import ChangeInfo, CNAMERecord, HostedZone
from reviewdns.lifecycle.review_apps import DomainStatus, HookResult
from reviewdns.platform import CustomDomain


@pytest.fixture
def console_output():
    output = ConsoleOutput()
    output.console = Console(record=True, width=400, color_system=None)
    return output


def _status(domain, record):
    return DomainStatus(
        hostname="myapp-pr-42.example.com",
        domain=domain,
        zone=HostedZone(zone_id="ZEXAMPLE", name="example.com."),
        record=record,
    )


def test_init_creates_console():
    with patch("reviewdns.console_output.Console") as mock_console_class:
        output = ConsoleOutput()

    mock_console_class.assert_called_once()
    assert output.console is mock_console_class.return_value


def test_print_result(console_output):
    result = HookResult(
        hostname="myapp-pr-42.example.com",
        cname="myapp-pr-42-abc123.herokudns.com",
        zone_id="ZEXAMPLE",
        change=ChangeInfo(change_id="/change/C1", status="PENDING"),
    )

    console_output.print_result("CNAME Created", result)

    text = console_output.console.export_text()
    assert "CNAME Created" in text
    assert "myapp-pr-42.example.com" in text
    assert "myapp-pr-42-abc123.herokudns.com" in text
    assert "/change/C1" in text
    assert "PENDING" in text


def test_print_status_in_sync(console_output):
    status = _status(
        CustomDomain(hostname="myapp-pr-42.example.com", cname="t.herokudns.com", acm_status="cert issued"),
        CNAMERecord(name="myapp-pr-42.example.com", target="t.herokudns.com"),
    )

    console_output.print_status(status)

    text = console_output.console.export_text()
    assert "cert issued" in text
    assert "example.com. (ZEXAMPLE)" in text
    assert "✓" in text


def test_print_status_unregistered(console_output):
    console_output.print_status(_status(None, None))

    text = console_output.console.export_text()
    assert "not registered" in text
    assert "no record" in text
    assert "✗" in text


def test_print_hostname(console_output):
    console_output.print_hostname("myapp-pr-42.example.com")
    assert console_output.console.export_text().strip() == "myapp-pr-42.example.com"


def test_print_messages(console_output):
    console_output.print_error("boom")
    console_output.print_success("done")
    console_output.print_warning("careful")

    text = console_output.console.export_text()
    assert "Error: boom" in text
    assert "done" in text
    assert "Warning: careful" in text


def test_print_error_keeps_bracketed_record_details(console_output):
    message = (
        "An error occurred (InvalidChangeBatch) when calling the ChangeResourceRecordSets "
        "operation: [Tried to create resource record set "
        "[name='myapp-pr-42.example.com.', type='CNAME'] but it already exists]"
    )

    console_output.print_error(message)

    text = console_output.console.export_text()
    assert "[name='myapp-pr-42.example.com.', type='CNAME']" in text


def test_print_warning_keeps_brackets(console_output):
    console_output.print_warning("record [type='CNAME'] drifted")
    assert "record [type='CNAME'] drifted" in console_output.console.export_text()
