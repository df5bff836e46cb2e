"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Address:
    """Structured postal address embedded in a user record."""

    city: str
    house: str

    @classmethod
    def unknown(cls) -> "Address":
        """Sentinel substituted when a stored address cannot be decoded."""
        return cls(city=UNKNOWN, house=UNKNOWN)

    def to_dict(self) -> dict[str, str]:
        return {"city": self.city, "house": self.house}


@dataclass
class User:
    """Core domain entity representing a user record."""

    name: str
    email: str
    age: int
    address: Address
    id: int | None = None
