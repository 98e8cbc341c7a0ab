"""Read-only containers of per-term information content."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

import polars as pl

from infojenn.model.term import TermId


@dataclass(frozen=True)
class TermIC:
    """Information content of observing a term present and excluded.

    Attributes:
        present: IC of the term being observed present (may be +inf)
        excluded: IC of the term being observed excluded (may be +inf)
    """
    present: float
    excluded: float


class IcContainer:
    """Immutable mapping of term id -> `TermIC`.

    Iteration follows the insertion order of the backing dict, which carries
    no meaning. Use `OrderedIcContainer` where deterministic order matters.
    """

    def __init__(self, term_ics: Mapping[TermId, TermIC]):
        self._term_ics = MappingProxyType(dict(term_ics))

    def get(self, term_id: TermId) -> TermIC | None:
        return self._term_ics.get(term_id)

    def get_present_ic(self, term_id: TermId) -> float | None:
        term_ic = self._term_ics.get(term_id)
        return None if term_ic is None else term_ic.present

    def get_excluded_ic(self, term_id: TermId) -> float | None:
        term_ic = self._term_ics.get(term_id)
        return None if term_ic is None else term_ic.excluded

    def iter_term_ids(self) -> Iterator[TermId]:
        return iter(self._term_ics)

    def items(self):
        return self._term_ics.items()

    def is_empty(self) -> bool:
        return not self._term_ics

    def __len__(self) -> int:
        return len(self._term_ics)

    def __contains__(self, term_id: object) -> bool:
        return term_id in self._term_ics

    def __iter__(self) -> Iterator[TermId]:
        return self.iter_term_ids()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IcContainer):
            return NotImplemented
        return dict(self._term_ics) == dict(other._term_ics)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(terms={len(self)})"

    def to_frame(self) -> pl.DataFrame:
        """
        Tabulate the container for reporting.

        Returns:
            DataFrame with columns term_id (str), present_ic (f64),
            excluded_ic (f64), sorted by term_id
        """
        term_ids = sorted(self._term_ics)
        return pl.DataFrame(
            {
                "term_id": [t.value for t in term_ids],
                "present_ic": [self._term_ics[t].present for t in term_ids],
                "excluded_ic": [self._term_ics[t].excluded for t in term_ids],
            },
            schema={"term_id": pl.Utf8, "present_ic": pl.Float64, "excluded_ic": pl.Float64},
        )


class OrderedIcContainer(IcContainer):
    """`IcContainer` iterating term ids in sorted order."""

    def __init__(self, term_ics: Mapping[TermId, TermIC]):
        super().__init__({t: term_ics[t] for t in sorted(term_ics)})
