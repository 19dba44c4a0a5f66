"""
Date-keyed archive of generated pages, persisted as a JSON array of
{"date", "title", "path"} records, newest first.
"""

import datetime as dt
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

FIELDS = ("date", "title", "path")


class ArchiveError(ValueError):
    """The persisted archive exists but cannot be read as a list of entries."""


def check_date(value: str) -> str:
    try:
        dt.datetime.strptime(value, "%Y-%m-%d")
    except (TypeError, ValueError):
        raise ValueError(f"Archive date must be YYYY-MM-DD, got {value!r}") from None
    if len(value) != 10:
        raise ValueError(f"Archive date must be YYYY-MM-DD, got {value!r}")
    return value


@dataclass(frozen=True)
class ArchiveEntry:
    date: str
    title: str
    path: str

    @classmethod
    def for_page(cls, date: str, title: str) -> "ArchiveEntry":
        return cls(date=date, title=title, path=f"daily/{date}.html")

    @classmethod
    def from_dict(cls, record: Any) -> "ArchiveEntry":
        if not isinstance(record, dict):
            raise ArchiveError(f"Archive record must be an object, got {type(record).__name__}")
        values = {}
        for name in FIELDS:
            value = record.get(name)
            if not isinstance(value, str):
                raise ArchiveError(f"Archive record is missing a string {name!r}: {record!r}")
            values[name] = value
        try:
            check_date(values["date"])
        except ValueError as exc:
            raise ArchiveError(str(exc)) from None
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def upsert_entry(entries: list[ArchiveEntry], entry: ArchiveEntry) -> list[ArchiveEntry]:
    """
    Returns a new list with `entry` in it. An existing entry for the same date
    is replaced where it stands; otherwise the entry goes to the front.
    """
    check_date(entry.date)
    if any(existing.date == entry.date for existing in entries):
        return [entry if existing.date == entry.date else existing for existing in entries]
    return [entry, *entries]


class ArchiveStore:
    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> list[ArchiveEntry]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ArchiveError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise ArchiveError(f"{self.path} must contain a JSON array of records")
        return [ArchiveEntry.from_dict(record) for record in data]

    def save(self, entries: list[ArchiveEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump([e.to_dict() for e in entries], handle, ensure_ascii=False, indent=2)
            handle.write("\n")

    def upsert(self, entry: ArchiveEntry, current: list[ArchiveEntry] | None = None) -> list[ArchiveEntry]:
        # Pass `current` when the caller has already loaded the archive.
        entries = upsert_entry(self.load() if current is None else current, entry)
        self.save(entries)
        log.info("Archive now holds %d entries (%s)", len(entries), entry.date)
        return entries
