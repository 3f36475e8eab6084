"""Data classes for the Leitner scheduler domain model."""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class AnswerDifficulty(IntEnum):
    """How well a card was recalled. Ordered: WRONG < HARD < EASY."""

    WRONG = 0
    HARD = 1
    EASY = 2


@dataclass(frozen=True, eq=False)
class Flashcard:
    # eq=False: cards hash and compare by identity, never by content.
    front: str
    back: str
    hint: str = ""
    tags: frozenset = field(default_factory=frozenset)

    def __post_init__(self):
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))


# bucket number -> cards in that bucket
BucketMap = dict[int, set[Flashcard]]

# index = bucket number, gaps are empty sets
BucketSets = list[set[Flashcard]]


@dataclass(frozen=True)
class HistoryEntry:
    card: Flashcard
    difficulty: AnswerDifficulty

    @property
    def successful(self) -> bool:
        return self.difficulty >= AnswerDifficulty.HARD


@dataclass(frozen=True)
class BucketRange:
    min_bucket: int
    max_bucket: int


@dataclass
class UpdateResult:
    """Outcome of moving one card after a practice trial."""

    buckets: BucketMap
    found: bool
    from_bucket: Optional[int] = None
    to_bucket: Optional[int] = None

    @property
    def moved(self) -> bool:
        return self.found and self.from_bucket != self.to_bucket
