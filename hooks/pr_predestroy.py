"""Heroku pr-predestroy script wrapper for review app DNS cleanup."""
from __future__ import annotations

from reviewdns.cli import cli


def pr_predestroy() -> None:
    cli(["predestroy"], obj={})


if __name__ == "__main__":
    pr_predestroy()
