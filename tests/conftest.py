"""Shared pytest fixtures for bloodline tests."""

from pathlib import Path

import pytest

from config import Config
from database import create_database, store_data
from models import Person, Relation


def make_person(id: int, name: str, surname: str, image: bytes | None = None) -> Person:
    return Person(id=id, name=name, surname=surname, middlename=None, image=image)


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config with the store, output file and portraits under a temp directory."""
    return Config.from_root(tmp_path)


@pytest.fixture
def family() -> tuple[list[Person], list[Relation]]:
    persons = [
        make_person(0, "Herr", "Mustermann"),
        make_person(1, "Frau", "Mustermann"),
        make_person(2, "Kind", "Mustermann"),
    ]
    return persons, [Relation(person=2, father=0, mother=1)]


@pytest.fixture
def family_db(config: Config, family) -> Path:
    """Initialized store holding the three-person family."""
    create_database(config.db_path)
    store_data(config.db_path, *family)
    return config.db_path
