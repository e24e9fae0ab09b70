"""Commands: write-side use-cases."""

from cookmeet.application.commands.cuisine import (
    AddCuisineCommand,
    DeleteCuisineCommand,
    SetCuisineCommand,
)
from cookmeet.application.commands.user import UpdateUserCommand

__all__ = [
    "AddCuisineCommand",
    "DeleteCuisineCommand",
    "SetCuisineCommand",
    "UpdateUserCommand",
]
