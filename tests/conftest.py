"""Shared fixtures for codec and API tests."""

import pytest

from addressbook.codecs import load_entry_schema
from addressbook.core import Address, Entry, Gender, MaritalStatus, Person
from addressbook.services.generate_data import EntryGenerator


@pytest.fixture(scope="session")
def entry_schema():
    return load_entry_schema()


@pytest.fixture
def sample_entry():
    return Entry(
        entry_id=1,
        person=Person(
            first_name="Jo",
            last_name="Lee",
            age=40,
            gender=Gender.MALE,
            marital_status=MaritalStatus.SINGLE,
        ),
        address=Address(
            street="1 Elm",
            city="Ada",
            state="OH",
            zip="45810",
            email="jo@x.com",
            phone="5551234",
        ),
        notes="hi",
    )


@pytest.fixture
def sparse_entry():
    """Entry with every optional string and enum unset."""
    return Entry(entry_id=2, person=Person(age=33), address=Address())


@pytest.fixture
def unicode_entry():
    return Entry(
        entry_id=3,
        person=Person(
            first_name="Zoë",
            last_name="Ångström",
            age=71,
            gender=Gender.OTHER,
            marital_status=MaritalStatus.WIDOWED,
        ),
        address=Address(street="7 Rue d'Été", city="Köln", phone="+49 221 ?=0"),
        notes="línea 1\nline 2 ✓",
    )


@pytest.fixture(scope="session")
def generated_entries():
    return EntryGenerator(seed=7).create_entries(200)
