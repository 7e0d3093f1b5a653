"""Placeholder upload sources used by EntityStore.create_file."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Protocol, Sequence

from filedeck.errors import InvalidArgumentError
from filedeck.models import EntityKind


@dataclass(slots=True, frozen=True)
class UploadCandidate:
    """A name/kind pair (plus display size) for a simulated upload."""

    name: str
    kind: EntityKind
    size_label: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise InvalidArgumentError("UploadCandidate.name must be a non-empty string")
        object.__setattr__(self, "kind", EntityKind.parse(self.kind))
        if self.kind is EntityKind.FOLDER:
            raise InvalidArgumentError("UploadCandidate.kind must not be a folder")


DEFAULT_UPLOAD_CANDIDATES: tuple[UploadCandidate, ...] = (
    UploadCandidate("Untitled Image.png", EntityKind.IMAGE, "3.1 MB"),
    UploadCandidate("New Document.docx", EntityKind.DOCUMENT, "24 KB"),
    UploadCandidate("Scanned Contract.pdf", EntityKind.PDF, "1.8 MB"),
    UploadCandidate("Screen Recording.mov", EntityKind.VIDEO, "86 MB"),
    UploadCandidate("Archive.zip", EntityKind.GENERIC, "12 MB"),
)


class UploadSource(Protocol):
    def next_upload(self) -> UploadCandidate:
        ...


class RandomUploadSource:
    """Picks uniformly from a fixed candidate set."""

    def __init__(
        self,
        candidates: Sequence[UploadCandidate] = DEFAULT_UPLOAD_CANDIDATES,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not candidates:
            raise InvalidArgumentError("At least one upload candidate is required")
        self._candidates = tuple(candidates)
        self._rng = rng or random.Random()

    @property
    def candidates(self) -> tuple[UploadCandidate, ...]:
        return self._candidates

    def next_upload(self) -> UploadCandidate:
        return self._rng.choice(self._candidates)


class FixedUploadSource:
    """Deterministic source: yields the given candidates in order, cycling."""

    def __init__(self, candidates: Iterable[UploadCandidate]) -> None:
        items = tuple(candidates)
        if not items:
            raise InvalidArgumentError("At least one upload candidate is required")
        self._cycle: Iterator[UploadCandidate] = itertools.cycle(items)

    def next_upload(self) -> UploadCandidate:
        return next(self._cycle)
