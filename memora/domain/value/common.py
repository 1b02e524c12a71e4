"""Value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable value compared field by field, like ``WeightedTag``."""

    model_config = ConfigDict(frozen=True)


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, like ``TagName``.

    Hashable, so it can key a weight mapping. ``.root`` holds the value.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
