"""Utility modules for CI Demo Utils."""
