"""Input/output models rendered by the interfaces."""

from typing import Any

from pydantic import BaseModel, Field


class WelcomeMessage(BaseModel):
    """Greeting shown when the CLI starts without a command."""

    message: str = Field(
        default="Welcome to CI Demo Utils!",
        description="Welcome message displayed to the user",
    )
    hint: str = Field(
        default="Type --help for more information",
        description="Hint for getting help",
    )


class OperationResult(BaseModel):
    """Machine-readable result of a single utility call."""

    operation: str = Field(description="Name of the operation that ran")
    result: Any = Field(default=None, description="Value returned by the operation")
