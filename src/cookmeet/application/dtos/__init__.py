"""Data transfer objects passed into use-cases."""

from cookmeet.application.dtos.icon_upload import IconUpload

__all__ = ["IconUpload"]
