"""Pydantic models describing CLI input and output."""

from .io import OperationResult, WelcomeMessage

__all__ = ["OperationResult", "WelcomeMessage"]
