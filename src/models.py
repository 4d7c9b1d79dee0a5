"""Data classes for family tree entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    id: int
    name: str
    surname: str
    middlename: str | None  # stored but not rendered
    image: bytes | None  # raw portrait bytes, usually JPEG

    @property
    def label(self) -> str:
        return f"{self.name} {self.surname}"


@dataclass(frozen=True)
class Relation:
    person: int  # the child
    father: int
    mother: int
