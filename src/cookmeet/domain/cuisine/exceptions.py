"""Cuisine domain exceptions."""

from cookmeet.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
)


class CuisineNotFoundError(EntityNotFoundError):
    """No cuisine with this id exists for the requesting user."""

    def __init__(self, cuisine_id: int) -> None:
        self.cuisine_id = cuisine_id
        super().__init__(
            "cuisine not found",
            code=ErrorCode.CUISINE_NOT_FOUND,
            details={"cuisine_id": cuisine_id},
        )


class CuisineAccessDeniedError(ForbiddenError):
    """The cuisine exists but belongs to someone else."""

    def __init__(self, cuisine_id: int, user_id: int) -> None:
        self.cuisine_id = cuisine_id
        self.user_id = user_id
        super().__init__(
            "unauthorized to delete this cuisine",
            details={"cuisine_id": cuisine_id, "user_id": user_id},
        )


class CuisineDeletionError(DomainException):
    """The row disappeared or the delete failed after the ownership check."""

    def __init__(self, cuisine_id: int) -> None:
        self.cuisine_id = cuisine_id
        super().__init__(
            "failed to delete cuisine",
            code=ErrorCode.INTERNAL_ERROR,
            details={"cuisine_id": cuisine_id},
        )
