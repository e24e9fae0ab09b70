"""User commands."""

from cookmeet.application.commands.user.update_user_command import UpdateUserCommand

__all__ = ["UpdateUserCommand"]
