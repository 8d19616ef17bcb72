"""Integrations with third-party tools (pytest)."""
