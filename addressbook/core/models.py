"""Address book record models shared by the codecs and the REST layer."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class MaritalStatus(str, Enum):
    MARRIED = "MARRIED"
    SINGLE = "SINGLE"
    WIDOWED = "WIDOWED"
    DIVORCED = "DIVORCED"
    OTHER = "OTHER"


class _Record(BaseModel):
    """Immutable value aggregate; JSON names are camelCase."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Person(_Record):
    """Personal details of an address book entry."""

    first_name: str | None = None
    last_name: str | None = None
    age: int | None = None
    gender: Gender | None = None
    marital_status: MaritalStatus | None = None


class Address(_Record):
    """Postal and contact details of an address book entry."""

    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    email: str | None = None
    phone: str | None = None


class Entry(_Record):
    """A complete address book entry."""

    entry_id: int = Field(description="Unique within a record set by convention")
    person: Person
    address: Address
    notes: str | None = None

    def to_document(self) -> dict:
        """Return a plain nested dict keyed by wire names, enums as their names."""

        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_document(cls, document: dict) -> "Entry":
        return cls.model_validate(document)


# Parses and serializes a JSON array of entries using wire names.
ENTRY_LIST = TypeAdapter(list[Entry])
