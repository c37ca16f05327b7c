"""Tests for the interface factory."""

from unittest.mock import MagicMock

import pytest

from ci_demo_utils.interfaces.cli import CLIInterface
from ci_demo_utils.interfaces.factory import InterfaceFactory
from ci_demo_utils.types import InterfaceType


def test_create_cli_interface() -> None:
    """The CLI type yields a CLIInterface."""
    interface = InterfaceFactory().create(InterfaceType.CLI)

    assert isinstance(interface, CLIInterface)


def test_create_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """The configured interface type is honoured."""
    monkeypatch.setenv("INTERFACE_TYPE", "CLI")

    interface = InterfaceFactory().create_from_settings()

    assert interface.name == "CLI"


def test_create_unsupported_type_raises() -> None:
    """Unknown interface types are rejected."""
    unknown = MagicMock()
    unknown.value = "restapi"

    with pytest.raises(ValueError, match="Unsupported interface type"):
        InterfaceFactory().create(unknown)
