"""
Shared Pydantic configuration for request/response schemas.

Wire format is camelCase (``aiUsable``, ``repliedAt``); Python attributes
stay snake_case and both spellings are accepted on input.
"""
from typing import ClassVar, FrozenSet

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class SchemaBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        validate_default=True,
    )


class PatchSchema(SchemaBase):
    """Partial update payload.

    Every field is optional, but fields listed in ``non_nullable`` may not be
    explicitly set to null since the underlying column requires a value.
    """

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_nulls_for_required_columns(self):
        offending = sorted(
            name for name in self.model_fields_set
            if name in self.non_nullable and getattr(self, name) is None
        )
        if offending:
            raise ValueError(f"fields may not be null: {', '.join(offending)}")
        return self

    def changes(self) -> dict:
        """Return only the fields supplied by the caller."""
        return self.model_dump(exclude_unset=True)
