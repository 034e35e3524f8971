"""
Review App DNS - Route53 records for Heroku review apps.

This package provides the postdeploy and pr-predestroy hooks that register a
custom hostname for a Heroku review app and keep its CNAME in Route53.
"""

__version__ = "0.1.0"

# Import key components for easier access
from .config import HookConfig, derive_hostname
from .lifecycle.review_apps import provision, decommission, inspect
from .cli import cli as review_dns_cli

main = review_dns_cli

__all__ = [
    "HookConfig",
    "derive_hostname",
    "provision",
    "decommission",
    "inspect",
    "review_dns_cli",
    "main",
]
