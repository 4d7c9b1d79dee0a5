"""SQLite storage for persons and parent/child relations."""

from collections.abc import Iterator
from contextlib import closing
from pathlib import Path
import sqlite3

from errors import IoError, RowDecodeError, StoreError
from models import Person, Relation


def _connect(db_path: Path, read_only: bool = False) -> sqlite3.Connection:
    """Open the store, wrapping driver failures in StoreError."""
    try:
        if read_only:
            # mode=ro refuses to create a missing database file
            uri = Path(db_path).resolve().as_uri() + "?mode=ro"
            return sqlite3.connect(uri, uri=True)
        return sqlite3.connect(db_path)
    except sqlite3.Error as exc:
        raise StoreError(f"cannot open store {db_path}: {exc}") from exc


def create_database(db_path: Path) -> None:
    """Create the person and relations tables if they do not exist yet."""
    with closing(_connect(db_path)) as conn:
        try:
            with conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS person (
                        id INTEGER PRIMARY KEY,
                        name TEXT NOT NULL,
                        surname TEXT NOT NULL,
                        middlename TEXT,
                        image BLOB
                    )
                """)

                conn.execute("""
                    CREATE TABLE IF NOT EXISTS relations (
                        person INTEGER PRIMARY KEY,
                        father INTEGER,
                        mother INTEGER
                    )
                """)
        except sqlite3.Error as exc:
            raise StoreError(f"cannot create schema in {db_path}: {exc}") from exc


def _require_id(value, column: str) -> int:
    # bool is an int subclass but never a valid identifier
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise RowDecodeError(f"column {column!r}: expected non-negative integer, got {value!r}")
    return value


def _require_text(value, column: str, nullable: bool = False) -> str | None:
    if value is None and nullable:
        return None
    if not isinstance(value, str):
        raise RowDecodeError(f"column {column!r}: expected text, got {value!r}")
    return value


def decode_person(row: tuple) -> Person:
    """Convert a ``person`` row into a Person, checking column types."""
    if len(row) != 5:
        raise RowDecodeError(f"person row: expected 5 columns, got {len(row)}")
    id_, name, surname, middlename, image = row
    if image is not None and not isinstance(image, bytes):
        raise RowDecodeError(f"column 'image': expected blob, got {type(image).__name__}")
    return Person(
        id=_require_id(id_, "id"),
        name=_require_text(name, "name"),
        surname=_require_text(surname, "surname"),
        middlename=_require_text(middlename, "middlename", nullable=True),
        image=image,
    )


def decode_relation(row: tuple) -> Relation:
    """Convert a ``relations`` row into a Relation, checking column types."""
    if len(row) != 3:
        raise RowDecodeError(f"relations row: expected 3 columns, got {len(row)}")
    person, father, mother = row
    return Relation(
        person=_require_id(person, "person"),
        father=_require_id(father, "father"),
        mother=_require_id(mother, "mother"),
    )


def _query(db_path: Path, sql: str, decode) -> Iterator:
    with closing(_connect(db_path, read_only=True)) as conn:
        try:
            cursor = conn.execute(sql)
        except sqlite3.Error as exc:
            raise StoreError(f"query failed ({sql}): {exc}") from exc

        while True:
            try:
                row = cursor.fetchone()
            except sqlite3.Error as exc:
                raise StoreError(f"query failed ({sql}): {exc}") from exc
            if row is None:
                break
            yield decode(row)


def read_persons(db_path: Path) -> Iterator[Person]:
    """Lazily yield every person in storage order."""
    return _query(db_path, "SELECT * FROM person", decode_person)


def read_relations(db_path: Path) -> Iterator[Relation]:
    """Lazily yield every relation in storage order."""
    return _query(db_path, "SELECT * FROM relations", decode_relation)


def count_persons(db_path: Path) -> int:
    with closing(_connect(db_path)) as conn:
        try:
            (count,) = conn.execute("SELECT COUNT(*) FROM person").fetchone()
        except sqlite3.Error as exc:
            raise StoreError(f"cannot count persons in {db_path}: {exc}") from exc
    return count


def store_data(db_path: Path, persons: list[Person], relations: list[Relation]):
    """Insert persons and relations into the store in a single transaction.

    Duplicate primary keys abort the whole insert with StoreError.
    """
    with closing(_connect(db_path)) as conn:
        try:
            with conn:
                # Insert persons
                conn.executemany(
                    """
                    INSERT INTO person (id, name, surname, middlename, image)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    [(p.id, p.name, p.surname, p.middlename, p.image) for p in persons],
                )

                # Insert relations
                conn.executemany(
                    "INSERT INTO relations (person, father, mother) VALUES (?, ?, ?)",
                    [(r.person, r.father, r.mother) for r in relations],
                )
        except sqlite3.Error as exc:
            raise StoreError(f"cannot insert rows into {db_path}: {exc}") from exc


def seed_demo_data(db_path: Path, sample_image: Path | None = None):
    """
    Insert the demo family: two parents, their child, and one person with a portrait.

    Args:
        db_path: The store to seed; the schema must already exist
        sample_image: Portrait stored on person 3. Skipped when None.
    """
    image = None
    if sample_image is not None:
        try:
            image = Path(sample_image).read_bytes()
        except OSError as exc:
            raise IoError(f"cannot read sample image {sample_image}: {exc}") from exc

    persons = [
        Person(id=0, name="Herr", surname="Mustermann", middlename=None, image=None),
        Person(id=1, name="Frau", surname="Mustermann", middlename=None, image=None),
        Person(id=2, name="Kind", surname="Mustermann", middlename=None, image=None),
        Person(id=3, name="Me", surname="Rancic", middlename=None, image=image),
    ]
    relations = [Relation(person=2, father=0, mother=1)]

    store_data(db_path, persons, relations)
