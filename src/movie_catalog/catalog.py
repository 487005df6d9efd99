"""The persisted movie catalog and reconciliation by slug."""

import json
import re
import unicodedata
from enum import Enum
from pathlib import Path

from attrs import define, field
from loguru import logger

from .models.catalog import MovieRecord
from .services.tags import is_featured, merge_tags


class CatalogLoadError(RuntimeError):
    """The existing catalog file could not be parsed."""


class CatalogWriteError(RuntimeError):
    """The catalog file could not be written."""


SLUG_SYMBOLS = {
    "&": "and",
    "$": "dollar",
    "%": "percent",
    "<": "less",
    ">": "greater",
    "|": "or",
    "ß": "ss",
    "€": "euro",
    "£": "pound",
}


class ReconcileOutcome(str, Enum):
    ADDED = "added"
    UPDATED = "updated"


def slugify(title: str) -> str:
    """Lower-case, ASCII-only, hyphen-separated identity key for a title.

    Symbols are spelled out the same way existing catalog slugs were built.
    """
    for symbol, word in SLUG_SYMBOLS.items():
        title = title.replace(symbol, word)
    normalized = unicodedata.normalize("NFKD", title)
    ascii_value = normalized.encode("ascii", "ignore").decode("ascii").lower()
    ascii_value = ascii_value.replace("'", "")
    cleaned = re.sub(r"[^a-z0-9]+", "-", ascii_value).strip("-")
    return cleaned or "untitled"


@define
class Catalog:
    """Records keyed by slug plus the counter used to mint new ids.

    Insertion order is preserved and is the order records are written in.
    """

    _records: dict[str, MovieRecord] = field(factory=dict)
    _last_id: int = 0

    def __attrs_post_init__(self) -> None:
        self._last_id = max([self._last_id, *(r.id for r in self._records.values())])

    @classmethod
    def from_records(cls, records: list[MovieRecord]) -> "Catalog":
        """Index records by slug; a later duplicate slug replaces an earlier one."""
        by_slug: dict[str, MovieRecord] = {}
        for record in records:
            if record.slug in by_slug:
                logger.warning("Duplicate slug {!r} in catalog, keeping the later entry", record.slug)
            by_slug[record.slug] = record
        return cls(records=by_slug)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, slug: str) -> bool:
        return slug in self._records

    def get(self, slug: str) -> MovieRecord | None:
        return self._records.get(slug)

    @property
    def records(self) -> list[MovieRecord]:
        return list(self._records.values())

    @property
    def last_id(self) -> int:
        return self._last_id

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def reconcile(self, candidate: MovieRecord) -> tuple[MovieRecord, ReconcileOutcome]:
        """Merge a freshly built record into the catalog.

        An existing slug keeps its id and gains the union of old and new tags;
        everything else is overwritten. A new slug gets the next id.
        """
        existing = self._records.get(candidate.slug)
        if existing is not None:
            candidate.id = existing.id
            candidate.tags = merge_tags(existing.tags, candidate.tags)
            candidate.featured = is_featured(candidate.tags)
            self._records[candidate.slug] = candidate
            return candidate, ReconcileOutcome.UPDATED

        candidate.id = self._next_id()
        candidate.featured = is_featured(candidate.tags)
        self._records[candidate.slug] = candidate
        return candidate, ReconcileOutcome.ADDED

    def to_json(self) -> str:
        payload = [record.to_dict() for record in self._records.values()]
        return json.dumps(payload, indent=2, ensure_ascii=False)


def load_catalog(path: Path) -> Catalog:
    """Read the catalog file; a missing file is an empty catalog."""
    if not path.exists():
        logger.info("No catalog at {}, starting empty", path)
        return Catalog()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError("catalog root must be a list")
        records = [MovieRecord.from_dict(entry) for entry in data]
    except (ValueError, KeyError, TypeError) as e:
        raise CatalogLoadError(f"Cannot read catalog {path}: {e}") from e
    catalog = Catalog.from_records(records)
    logger.info("Loaded {} records from {}", len(catalog), path)
    return catalog


def save_catalog(catalog: Catalog, path: Path) -> None:
    """Write the whole catalog in one replace so readers never see a partial file."""
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(catalog.to_json() + "\n", encoding="utf-8")
        tmp_path.replace(path)
    except OSError as e:
        raise CatalogWriteError(f"Cannot write catalog {path}: {e}") from e
    logger.info("Wrote {} records to {}", len(catalog), path)
