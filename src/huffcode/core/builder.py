"""Greedy Huffman tree construction.

D.A. Huffman, "A Method for the Construction of Minimum-Redundancy Codes",
Proceedings of the I.R.E., September 1952, pp 1098-1102.

Tie-break rule
--------------
Every tree in the forest has an insertion sequence number: leaves get
0..N-1 in forest order, each merged node gets the next free number.
Selection order is ``(weight, seq)`` for ``fifo`` (older tree first on equal
weight) and ``(weight, -seq)`` for ``lifo``. The first selected tree becomes
the left child (bit '0'), the second the right child (bit '1').

Both strategies (``heap`` and ``scan``) select with the same key, so they
build the same tree.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from huffcode.core.tree import Internal, Node, merge
from huffcode.errors import EmptyInput, UsageError

TIE_BREAK_FIFO = "fifo"
TIE_BREAK_LIFO = "lifo"
TIE_BREAKS: tuple[str, ...] = (TIE_BREAK_FIFO, TIE_BREAK_LIFO)

STRATEGY_HEAP = "heap"
STRATEGY_SCAN = "scan"
STRATEGIES: tuple[str, ...] = (STRATEGY_HEAP, STRATEGY_SCAN)


@dataclass(frozen=True)
class MergeStep:
    left: Node
    right: Node
    parent: Internal
    forest_size: int  # alberi rimasti dopo il merge
    forest_weight: int  # somma dei pesi della foresta dopo il merge


MergeObserver = Callable[[MergeStep], None]


def _tie_key(seq: int, tie_break: str) -> int:
    return seq if tie_break == TIE_BREAK_FIFO else -seq


def _check_options(tie_break: str, strategy: str) -> None:
    if tie_break not in TIE_BREAKS:
        raise UsageError(f"unknown tie-break {tie_break!r} (expected one of {', '.join(TIE_BREAKS)})")
    if strategy not in STRATEGIES:
        raise UsageError(f"unknown strategy {strategy!r} (expected one of {', '.join(STRATEGIES)})")


def _build_heap(
    forest: Sequence[Node], tie_break: str, on_merge: MergeObserver | None
) -> Node:
    counter = itertools.count()
    heap: list[tuple[int, int, Node]] = []
    for node in forest:
        heapq.heappush(heap, (node.weight, _tie_key(next(counter), tie_break), node))

    while len(heap) > 1:
        _, _, n1 = heapq.heappop(heap)
        _, _, n2 = heapq.heappop(heap)
        parent = merge(n1, n2)
        heapq.heappush(heap, (parent.weight, _tie_key(next(counter), tie_break), parent))
        if on_merge is not None:
            on_merge(
                MergeStep(
                    left=n1,
                    right=n2,
                    parent=parent,
                    forest_size=len(heap),
                    forest_weight=sum(entry[0] for entry in heap),
                )
            )

    return heap[0][2]


def _argmin(entries: list[tuple[int, int, Node]], skip: int = -1) -> int:
    best = -1
    for i, entry in enumerate(entries):
        if i == skip:
            continue
        if best < 0 or entry[:2] < entries[best][:2]:
            best = i
    return best


def _build_scan(
    forest: Sequence[Node], tie_break: str, on_merge: MergeObserver | None
) -> Node:
    counter = itertools.count()
    ts: list[tuple[int, int, Node]] = [
        (node.weight, _tie_key(next(counter), tie_break), node) for node in forest
    ]

    while len(ts) > 1:
        i = _argmin(ts)
        j = _argmin(ts, skip=i)
        parent = merge(ts[i][2], ts[j][2])
        # merge in place: il padre prende il posto di i, j esce dalla lista
        ts[i] = (parent.weight, _tie_key(next(counter), tie_break), parent)
        ts[j] = ts[-1]
        ts.pop()
        if on_merge is not None:
            on_merge(
                MergeStep(
                    left=parent.left,
                    right=parent.right,
                    parent=parent,
                    forest_size=len(ts),
                    forest_weight=sum(entry[0] for entry in ts),
                )
            )

    return ts[0][2]


def build_huffman_tree(
    forest: Sequence[Node],
    *,
    tie_break: str = TIE_BREAK_FIFO,
    strategy: str = STRATEGY_HEAP,
    on_merge: MergeObserver | None = None,
) -> Node:
    """Merge the two lightest trees until one remains and return its root.

    A single-tree forest is returned unchanged. Raises ``EmptyInput`` on an
    empty forest. The caller's sequence is never mutated.
    """
    _check_options(tie_break, strategy)
    if not forest:
        raise EmptyInput("cannot build a Huffman tree from an empty forest")
    if len(forest) == 1:
        return forest[0]
    if strategy == STRATEGY_SCAN:
        return _build_scan(forest, tie_break, on_merge)
    return _build_heap(forest, tie_break, on_merge)
