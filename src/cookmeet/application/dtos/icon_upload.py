"""Uploaded icon image as received from the HTTP layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IconUpload:
    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)
