"""Helpers for EKS cluster tooling: CIDR values, subnet planning, waiters, manifests and printers."""

__version__ = "0.1.0"