from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from logger import logger

MAX_ENTRIES = 200
MAX_LINE_LEN = 1023
MAX_KEY_LEN = 127
MAX_RESPONSES = 20
MAX_RESP_LEN = 255


@dataclass(frozen=True)
class Entry:
    """One keyword and the replies it can trigger."""

    keyword: str
    responses: tuple[str, ...]


class KnowledgeBase:
    """Ordered, read-only collection of entries in file order."""

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"KnowledgeBase({len(self._entries)} entries)"

    def match(self, utterance: str) -> Entry | None:
        """Return the first entry whose keyword occurs in ``utterance``."""
        lowered = utterance.lower()
        for entry in self._entries:
            if entry.keyword in lowered:
                return entry
        return None


def parse_line(line: str) -> Entry | None:
    """Parse ``keyword:resp1;resp2`` into an entry.

    Blank lines, ``#`` comments and malformed lines give ``None``.
    """
    text = line[:MAX_LINE_LEN].rstrip("\r\n").strip()
    if not text or text.startswith("#"):
        return None

    keyword, sep, resp_list = text.partition(":")
    if not sep:
        return None

    keyword = keyword.strip()[:MAX_KEY_LEN].lower()
    responses = [r.strip() for r in resp_list.split(";")]
    responses = [r[:MAX_RESP_LEN] for r in responses if r][:MAX_RESPONSES]
    if not keyword or not responses:
        return None
    return Entry(keyword, tuple(responses))


def load(path: str | Path) -> KnowledgeBase:
    """Read a knowledge file. A file that cannot be opened gives an empty base."""
    entries: list[Entry] = []
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            for line in f:
                if len(entries) >= MAX_ENTRIES:
                    break
                entry = parse_line(line)
                if entry is not None:
                    entries.append(entry)
    except OSError:
        logger.warning("could not open knowledge file '%s'", path)
        return KnowledgeBase()

    logger.info("loaded %d entries from %s", len(entries), path)
    return KnowledgeBase(entries)
