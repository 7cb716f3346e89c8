from __future__ import annotations

from typing import Iterable, Sequence

from ..core.errors import TooManyIdsError


MAX_IDS = 200


def join_ids(ids: Sequence[int]) -> str:
    """Comma-join ids for an ``?ids=`` query, enforcing the per-request cap."""

    if len(ids) > MAX_IDS:
        raise TooManyIdsError(len(ids), MAX_IDS)
    return ",".join(str(i) for i in ids)


def chunked(ids: Sequence[int], size: int = MAX_IDS) -> Iterable[Sequence[int]]:
    for start in range(0, len(ids), size):
        yield ids[start : start + size]
