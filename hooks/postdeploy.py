"""Heroku postdeploy script wrapper for review app DNS provisioning."""
from __future__ import annotations

from reviewdns.cli import cli


def postdeploy() -> None:
    cli(["postdeploy"], obj={})


if __name__ == "__main__":
    postdeploy()
