"""Ontology term identifiers."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class TermId:
    """Identifier of an ontology term, such as `HP:0000118`.

    Attributes:
        prefix: Ontology namespace (e.g. `HP`)
        id: Local identifier within the namespace (e.g. `0000118`)

    Notes:
        - Hashable and totally ordered on (prefix, id), so it can be used
          as a dict/set key and sorted deterministically
        - Local ids are compared as strings, which matches numeric order
          for zero-padded ids
    """
    prefix: str
    id: str

    def __post_init__(self):
        if not self.prefix or not self.id:
            raise ValueError(f"Term id needs a prefix and an id, got {self.prefix!r}:{self.id!r}")

    @classmethod
    def from_curie(cls, curie: str) -> "TermId":
        """Parse a CURIE such as `HP:0000118`.

        Also accepts OBO PURLs (`http://purl.obolibrary.org/obo/HP_0000118`),
        which is how obographs files spell term ids.

        Raises:
            ValueError: If the value cannot be split into prefix and id
        """
        value = curie.strip()
        if value.startswith("http") and "/obo/" in value:
            value = value.rsplit("/", 1)[-1].replace("_", ":", 1)

        prefix, sep, local_id = value.partition(":")
        if not sep:
            raise ValueError(f"Invalid CURIE {curie!r}: missing ':' separator")
        return cls(prefix=prefix, id=local_id)

    @property
    def value(self) -> str:
        """CURIE representation of the term id."""
        return f"{self.prefix}:{self.id}"

    def __str__(self) -> str:
        return self.value


# Root of the HPO "Phenotypic abnormality" sub-ontology.
PHENOTYPIC_ABNORMALITY = TermId("HP", "0000118")
