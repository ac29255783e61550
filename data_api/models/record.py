"""Record model."""

from dataclasses import dataclass

# Required fields, in schema order
RECORD_FIELDS = ("ID", "Message")


@dataclass(frozen=True)
class Record:
    """A stored record keyed by ID.

    Records are immutable values; updates replace the stored record wholesale.
    """

    id: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Serialize using the external field names."""
        return {"ID": self.id, "Message": self.message}
