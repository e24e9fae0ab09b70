"""Cuisine commands."""

from cookmeet.application.commands.cuisine.add_cuisine_command import AddCuisineCommand
from cookmeet.application.commands.cuisine.delete_cuisine_command import (
    DeleteCuisineCommand,
)
from cookmeet.application.commands.cuisine.set_cuisine_command import SetCuisineCommand

__all__ = [
    "AddCuisineCommand",
    "DeleteCuisineCommand",
    "SetCuisineCommand",
]
