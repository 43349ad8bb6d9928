"""Headless runners for stellar exports."""
