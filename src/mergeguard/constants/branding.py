"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "MERGEGUARD"
CLI_DESCRIPTION: str = f"{BRAND_NAME} pull-request policy engine"
