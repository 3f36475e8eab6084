"""Apply practice history to a bucket map and check map invariants."""
import logging
from typing import Iterable

from leitner.algorithm import update_card
from leitner.config import Settings
from leitner.errors import InvalidBucketsError
from leitner.models import BucketMap, Flashcard, HistoryEntry

logger = logging.getLogger(__name__)


def new_bucket_map(cards: Iterable[Flashcard]) -> BucketMap:
    """Start a deck: every new card goes in bucket 0."""
    return {0: set(cards)}


def validate_buckets(buckets: BucketMap) -> None:
    """Raise InvalidBucketsError if bucket numbers or membership are malformed."""
    seen: dict[Flashcard, int] = {}
    for number, cards in buckets.items():
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise InvalidBucketsError(f"Bucket number must be a non-negative integer, got {number!r}")
        for card in cards:
            if card in seen:
                raise InvalidBucketsError(
                    f"Flashcard {card.front!r} is in buckets {seen[card]} and {number}"
                )
            seen[card] = number


def apply_history(
    buckets: BucketMap,
    history: Iterable[HistoryEntry],
    *,
    strict: bool = False,
    validate: bool = False,
) -> BucketMap:
    """Replay practice trials in order and return the resulting bucket map.

    Unknown cards are skipped with a warning unless `strict` is set, in which
    case the first one raises CardNotFoundError.
    """
    if validate:
        validate_buckets(buckets)
    applied = skipped = 0
    for entry in history:
        result = update_card(buckets, entry.card, entry.difficulty, strict=strict)
        if result.found:
            applied += 1
        else:
            skipped += 1
        buckets = result.buckets
    logger.info("Applied %d practice trials, skipped %d", applied, skipped)
    return buckets


def replay(buckets: BucketMap, history: Iterable[HistoryEntry], settings: Settings) -> BucketMap:
    """apply_history using the strictness and validation from `settings`."""
    return apply_history(
        buckets, history,
        strict=settings.strict_updates,
        validate=settings.validate_on_apply,
    )
