"""Merge a day's bookings into contiguous busy blocks."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from availability.models.booking import Booking
from availability.models.interval import Block, Interval
from availability.naive_time import TimePoint

log = logging.getLogger("availability.blocks")

Span = Union[Booking, Interval]


def merge_blocks(bookings: Iterable[Span]) -> list[Block]:
    """Fold bookings into maximal blocks of touching spans.

    A booking joins the running block when it starts exactly where the
    block ends.  Overlapping bookings should have been rejected upstream;
    if one slips through it is absorbed into the running block so the
    returned blocks never overlap.  Output is sorted by start.
    """
    spans = sorted((b.start, b.end) for b in bookings)

    blocks: list[Block] = []
    start: Optional[TimePoint] = None
    end: Optional[TimePoint] = None
    size = 0

    for b_start, b_end in spans:
        if end is not None and b_start <= end:
            if b_start < end:
                log.warning(
                    "Booking %s-%s overlaps block ending %s; merged",
                    b_start, b_end, end,
                )
            end = max(end, b_end)
            size += 1
            continue
        if start is not None and end is not None:
            blocks.append(Block(start, end, size))
        start, end, size = b_start, b_end, 1

    if start is not None and end is not None:
        blocks.append(Block(start, end, size))

    log.debug("Merged %d bookings into %d blocks", len(spans), len(blocks))
    return blocks


def block_at(t: TimePoint, bookings: Iterable[Span]) -> Optional[Block]:
    """Return the block that occupies ``t``, or None if the room is free."""
    for block in merge_blocks(bookings):
        if block.contains(t):
            return block
        if block.start > t:
            break
    return None


def block_of(booking: Span, bookings: Iterable[Span]) -> Block:
    """Return the block containing ``booking``.

    ``booking`` need not be part of ``bookings``; it is merged in either way.
    """
    spans = list(bookings)
    if not any((s.start, s.end) == (booking.start, booking.end) for s in spans):
        spans.append(booking)
    for block in merge_blocks(spans):
        if block.start <= booking.start < block.end:
            return block
    # merge_blocks covers every input span, so this is unreachable
    raise AssertionError(f"No block contains {booking.start}-{booking.end}")
