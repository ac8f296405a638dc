"""Reusable base model for the byte type."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class FrozenBaseModel(BaseModel):
    """
    An immutable pydantic base model that forbids unknown fields.

    Attribute assignment is rejected; subclasses that expose in-place
    mutation must go through their own validated setters.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        validate_default=True,
    )

    def copy(self: Self, **kwargs: Any) -> Self:  # type: ignore[override]
        """Create a copy of the model with the updated fields that are validated."""
        return self.__class__(**(self.model_dump(exclude_unset=True) | kwargs))
