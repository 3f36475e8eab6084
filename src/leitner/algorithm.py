"""Leitner bucket scheduling: conversion, selection and transitions."""
import logging
from typing import Iterable, Optional

from leitner.errors import CardNotFoundError
from leitner.models import (
    AnswerDifficulty, BucketMap, BucketRange, BucketSets, Flashcard,
    HistoryEntry, UpdateResult,
)

logger = logging.getLogger(__name__)


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """Convert a bucket map into a list indexed by bucket number.

    Args:
        buckets: Map of bucket number to the set of cards in it.

    Returns:
        List of length max(bucket number) + 1, or empty for an empty map.
        Bucket numbers missing from the map get an empty set. Sets from the
        map are reused as-is, so callers must not mutate them.
    """
    if not buckets:
        return []
    result: BucketSets = [set() for _ in range(max(buckets) + 1)]
    for number, cards in buckets.items():
        result[number] = cards
    return result


def get_bucket_range(bucket_sets: BucketSets) -> Optional[BucketRange]:
    """Lowest and highest non-empty bucket, or None if every bucket is empty."""
    min_bucket = None
    max_bucket = None
    for index, cards in enumerate(bucket_sets):
        if cards:
            if min_bucket is None:
                min_bucket = index
            max_bucket = index
    if min_bucket is None:
        return None
    return BucketRange(min_bucket=min_bucket, max_bucket=max_bucket)


def practice(bucket_sets: BucketSets, day: int) -> set[Flashcard]:
    """Cards due on `day`: every card in buckets 0..day-1.

    Days past the last bucket select everything; day 0 or less selects nothing.
    """
    due: set[Flashcard] = set()
    for cards in bucket_sets[:max(day, 0)]:
        due.update(cards)
    return due


def _find_bucket(buckets: BucketMap, card: Flashcard) -> Optional[int]:
    for number, cards in buckets.items():
        if card in cards:
            return number
    return None


def next_bucket(current: int, difficulty: AnswerDifficulty) -> int:
    if difficulty == AnswerDifficulty.WRONG:
        return max(0, current - 1)
    if difficulty == AnswerDifficulty.EASY:
        return current + 1
    return current


def update_card(
    buckets: BucketMap,
    card: Flashcard,
    difficulty: AnswerDifficulty,
    *,
    strict: bool = False,
) -> UpdateResult:
    """Move a card after a practice trial.

    Args:
        buckets: Current bucket map. Never modified.
        card: The exact card instance that was practised.
        difficulty: WRONG drops one bucket (not below 0), HARD stays,
            EASY climbs one bucket.
        strict: Raise CardNotFoundError instead of logging when the card
            is in no bucket.

    Returns:
        UpdateResult with a new bucket map. When the card is missing the
        original map is returned and found is False.
    """
    current = _find_bucket(buckets, card)
    if current is None:
        if strict:
            raise CardNotFoundError(card)
        logger.warning("Flashcard not found in any bucket: %r", card.front)
        return UpdateResult(buckets=buckets, found=False)

    target = next_bucket(current, difficulty)
    updated = dict(buckets)
    # Only the two touched buckets get new sets.
    updated[current] = buckets[current] - {card}
    updated[target] = set(updated.get(target, ()))
    updated[target].add(card)
    logger.debug("Moved %r from bucket %d to %d (%s)", card.front, current, target, difficulty.name)
    return UpdateResult(buckets=updated, found=True, from_bucket=current, to_bucket=target)


def update(buckets: BucketMap, card: Flashcard, difficulty: AnswerDifficulty) -> BucketMap:
    """Return the bucket map after practising `card` with `difficulty`."""
    return update_card(buckets, card, difficulty).buckets


def get_hint(card: Flashcard) -> str:
    return card.hint


def compute_progress(buckets: BucketMap, history: Iterable[HistoryEntry]) -> dict:
    """Successful trials as a percentage of cards in the buckets.

    Successful means HARD or better. The numerator counts history entries,
    not distinct cards, so repeated successes can push this above 100.
    """
    total = sum(len(cards) for cards in buckets.values())
    successful = sum(1 for entry in history if entry.difficulty >= AnswerDifficulty.HARD)
    if total == 0:
        return {"progress_percentage": 0.0}
    return {"progress_percentage": (successful / total) * 100}
