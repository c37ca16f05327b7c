"""CLI interface implementation using Typer."""

import asyncio
import json
import sys
from typing import Annotated, Any

import httpx
import typer
from rich.console import Console

from ci_demo_utils import core
from ci_demo_utils.core import InvalidArgumentError
from ci_demo_utils.fetch import fetch_data
from ci_demo_utils.models.io import OperationResult, WelcomeMessage
from ci_demo_utils.utils.settings import get_fetch_settings

from .base import BaseInterface

# Configure console for better test compatibility
# Force terminal mode even in non-TTY environments
console = Console(force_terminal=True, force_interactive=False)

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Render the result as JSON.",
        is_flag=True,
    ),
]


def _parse_number(raw: str) -> int | float:
    """Parse a CLI operand, keeping integers exact."""
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        msg = f"'{raw}' is not a number."
        raise typer.BadParameter(msg) from None


class CLIInterface(BaseInterface):
    """Command Line Interface implementation."""

    def __init__(self) -> None:
        """Initialize the CLI interface."""
        super().__init__()
        # Factorials of a few thousand exceed the default int-to-str digit limit
        sys.set_int_max_str_digits(0)
        self.app = typer.Typer(
            name="ci-demo-utils",
            help="CI Demo Utils CLI",
            add_completion=False,
        )
        self._setup_commands()

    @property
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """
        return "CLI"

    def _setup_commands(self) -> None:
        """Set up CLI commands."""
        self.app.command(name="welcome")(self.welcome)
        self.app.command(name="add")(self.add)
        self.app.command(name="multiply")(self.multiply)
        self.app.command(name="factorial")(self.factorial)
        self.app.command(name="default")(self.default)
        self.app.command(name="nested")(self.nested)
        self.app.command(name="fetch")(self.fetch)

        # Add a callback that shows welcome when no command is specified
        self.app.callback(invoke_without_command=True)(self._main_callback)

    def _main_callback(self, ctx: typer.Context) -> None:  # pragma: no cover
        """Run when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            self.welcome()
            raise typer.Exit(0)

    def _emit(self, operation: str, result: Any, *, json_output: bool) -> None:
        """Print an operation result as plain text or JSON."""
        if json_output:
            payload = OperationResult(operation=operation, result=result)
            console.print_json(data=payload.model_dump())
        elif result is None:
            console.print("null")
        else:
            console.print(str(result), markup=False, soft_wrap=True)
        console.file.flush()

    def _fail(self, message: str, exc: Exception) -> None:
        """Report an error to the user and exit with status 1."""
        console.print(f"[red]{message}: {exc}[/red]")
        console.file.flush()
        raise typer.Exit(1) from exc

    def welcome(self) -> None:
        """Display welcome message."""
        msg = WelcomeMessage()
        console.print(msg.message)
        console.print(msg.hint)
        console.file.flush()

    def add(
        self,
        a: Annotated[str, typer.Argument(help="First operand.")],
        b: Annotated[str, typer.Argument(help="Second operand.")],
        json_output: JsonFlag = False,
    ) -> None:
        """Add two numbers."""
        result = core.add(_parse_number(a), _parse_number(b))
        self.logger.info("Computed sum", a=a, b=b, result=result)
        self._emit("add", result, json_output=json_output)

    def multiply(
        self,
        a: Annotated[str, typer.Argument(help="First operand.")],
        b: Annotated[str, typer.Argument(help="Second operand.")],
        json_output: JsonFlag = False,
    ) -> None:
        """Multiply two numbers."""
        result = core.multiply(_parse_number(a), _parse_number(b))
        self.logger.info("Computed product", a=a, b=b, result=result)
        self._emit("multiply", result, json_output=json_output)

    def factorial(
        self,
        n: Annotated[int, typer.Argument(help="Non-negative integer.")],
        json_output: JsonFlag = False,
    ) -> None:
        """Compute the factorial of N."""
        try:
            result = core.factorial(n)
        except InvalidArgumentError as exc:
            self.logger.error("Factorial rejected input", n=n, error=str(exc))
            self._fail("Invalid argument", exc)
            return

        self.logger.info("Computed factorial", n=n, result_digits=len(str(result)))
        self._emit("factorial", result, json_output=json_output)

    def default(
        self,
        value: Annotated[
            str | None,
            typer.Argument(help="Value to return when present."),
        ] = None,
        default_value: Annotated[
            str,
            typer.Option("--default", "-d", help="Fallback for an absent value."),
        ] = "default",
        json_output: JsonFlag = False,
    ) -> None:
        """Print VALUE, or the fallback when VALUE is omitted."""
        result = core.get_value_or_default(value, default_value)
        self._emit("default", result, json_output=json_output)

    def nested(
        self,
        container: Annotated[
            str,
            typer.Argument(help='JSON document, e.g. \'{"nested": {"foo": 1}}\'.'),
        ],
        property_name: Annotated[
            str,
            typer.Argument(help="Entry to read from the 'nested' object."),
        ],
        json_output: JsonFlag = False,
    ) -> None:
        """Read PROPERTY_NAME from the 'nested' object of a JSON document."""
        try:
            document = json.loads(container)
        except json.JSONDecodeError as exc:
            self.logger.error("Invalid JSON container", error=str(exc))
            self._fail("Invalid JSON", exc)
            return

        result = core.get_nested_property(document, property_name)
        self._emit("nested", result, json_output=json_output)

    def fetch(
        self,
        url: Annotated[
            str | None,
            typer.Argument(help="URL returning a JSON document."),
        ] = None,
    ) -> None:
        """Fetch a JSON document and print it."""
        target = url or get_fetch_settings().default_url
        self.logger.info("Fetching data", url=target)

        try:
            data = asyncio.run(fetch_data(target))
        except httpx.HTTPError as exc:
            self.logger.error("Fetch failed", url=target, error=str(exc))
            self._fail("Request failed", exc)
            return
        except json.JSONDecodeError as exc:
            self.logger.error("Response was not JSON", url=target, error=str(exc))
            self._fail("Invalid JSON response", exc)
            return

        console.print_json(data=data)
        console.file.flush()

    def run(self) -> None:
        """Run the CLI interface."""
        self.app()
