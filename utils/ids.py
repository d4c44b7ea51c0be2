from typing import Iterable

from domain.constants import CORREL_WIDTH


def next_sequential_id(existing: Iterable[int]) -> int:
    # max + 1, starting at 1 for an empty roster
    return max(existing, default=0) + 1


def make_correl(record_id: int, width: int = CORREL_WIDTH) -> str:
    return str(record_id).zfill(width)
