"""Console output formatting for review-dns CLI."""
from __future__ import annotations

from rich.markup import escape
from rich.table import Table
from rich.console import Console

from .lifecycle.review_apps import DomainStatus, HookResult


class ConsoleOutput:
    """Handles formatting and displaying output to the console."""

    def __init__(self):
        """Initialize console output with a Rich console instance."""
        self.console = Console()

    def print_result(self, title: str, result: HookResult) -> None:
        """Print the outcome of a DNS record change.

        Args:
            title: Heading shown above the table
            result: Result returned by provision or decommission
        """
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Hostname", style="green")
        table.add_column("CNAME Target", style="magenta")
        table.add_column("Zone", style="blue")
        table.add_column("Change ID", style="yellow")
        table.add_column("Status", style="white")

        table.add_row(
            result.hostname,
            result.cname,
            result.zone_id,
            result.change.change_id,
            result.change.status,
        )

        self.console.print(f"\n[bold underline]{title}[/bold underline]")
        self.console.print(table)

    def print_status(self, status: DomainStatus) -> None:
        """Print the Heroku and Route53 state of a review app hostname.

        Args:
            status: Status returned by inspect
        """
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Hostname", style="green")
        table.add_column("Heroku Target", style="magenta")
        table.add_column("ACM", style="yellow")
        table.add_column("Zone", style="blue")
        table.add_column("DNS Target", style="magenta")
        table.add_column("In Sync", justify="center")

        domain = status.domain
        record = status.record
        table.add_row(
            status.hostname,
            domain.cname if domain else "not registered",
            (domain.acm_status or "") if domain else "",
            f"{status.zone.name} ({status.zone.zone_id})",
            record.target if record else "no record",
            "✓" if status.in_sync else "✗",
            style=None if status.in_sync else "red",
        )

        self.console.print("\n[bold underline]Review App Domain[/bold underline]")
        self.console.print(table)

    def print_hostname(self, hostname: str) -> None:
        self.console.print(hostname)

    def print_error(self, message: str) -> None:
        """Print an error message.

        Args:
            message: Error message to display
        """
        self.console.print(f"[red]Error: {escape(message)}[/red]")

    def print_success(self, message: str) -> None:
        """Print a success message.

        Args:
            message: Success message to display
        """
        self.console.print(f"[green]{escape(message)}[/green]")

    def print_warning(self, message: str) -> None:
        """Print a warning message.

        Args:
            message: Warning message to display
        """
        self.console.print(f"[yellow]Warning: {escape(message)}[/yellow]")
