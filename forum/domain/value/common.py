"""Immutable building blocks for the forum's value objects."""

from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, field_validator

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable record compared field by field."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, read through ``.root``.

    ``model_dump()`` yields the bare primitive, so wrappers serialize
    transparently inside API responses.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


class BoundedText(RootValueObject[str]):
    """Text trimmed of surrounding whitespace and held to a length range.

    Subclasses set ``max_length`` (and optionally ``min_length`` and the
    ``label`` used in the error message).
    """

    min_length: ClassVar[int] = 1
    max_length: ClassVar[int] = 255
    label: ClassVar[str] = "Value"

    @field_validator("root")
    @classmethod
    def trim_and_bound(cls, v: str) -> str:
        v = v.strip()
        if not cls.min_length <= len(v) <= cls.max_length:
            raise ValueError(
                f"{cls.label} must be {cls.min_length}-{cls.max_length} characters"
            )
        return v
