"""Skyline bottom-left rectangle packing into a fixed-size target."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

MAX_VAL = 0x7FFFFFFF
"""Coordinate given to rectangles that could not be packed."""

_SENTINEL_Y = 1 << 30


class Heuristic(IntEnum):
    """How a position on the skyline is chosen."""

    BOTTOM_LEFT = 0
    BEST_FIT = 1


@dataclass
class Rect:
    """A rectangle to pack; ``x``, ``y`` and ``was_packed`` are filled in."""

    w: int
    h: int
    id: int = 0
    x: int = 0
    y: int = 0
    was_packed: bool = False


class RectPacker:
    """Packs rectangles into a ``width`` x ``height`` target.

    ``num_nodes`` bounds the number of skyline segments that can exist at
    once; unless out-of-memory is allowed, widths are quantized so that the
    bound is never reached.
    """

    def __init__(self, width: int, height: int, num_nodes: int) -> None:
        if num_nodes < 1:
            raise ValueError("num_nodes must be at least 1")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.BOTTOM_LEFT
        self._free = num_nodes
        # Each node is [x, y]; the last one is the sentinel at the right edge.
        self._skyline: list[list[int]] = [[0, 0], [width, _SENTINEL_Y]]
        self.align = 1
        self.set_allow_out_of_mem(False)

    def set_allow_out_of_mem(self, allow: bool) -> None:
        """Choose between exact widths (may run out of nodes) and quantized ones."""
        if allow:
            self.align = 1
        else:
            self.align = math.ceil(self.width / self.num_nodes) if self.width > 0 else 1
            self.align = max(self.align, 1)

    def set_heuristic(self, heuristic: Heuristic | int) -> None:
        """Select the packing heuristic; raises ValueError for unknown values."""
        self.heuristic = Heuristic(heuristic)

    def _find_min_y(self, first: int, x0: int, width: int) -> tuple[int, int]:
        nodes = self._skyline
        x1 = x0 + width
        min_y = 0
        waste = 0
        visited = 0
        i = first
        while nodes[i][0] < x1:
            x, y = nodes[i]
            next_x = nodes[i + 1][0]
            if y > min_y:
                waste += visited * (y - min_y)
                min_y = y
                visited += next_x - x0 if x < x0 else next_x - x
            else:
                under = next_x - x
                if under + visited > width:
                    under = width - visited
                waste += under * (min_y - y)
                visited += under
            i += 1
        return min_y, waste

    def _find_best_pos(self, width: int, height: int) -> tuple[int | None, int, int]:
        width = width + self.align - 1
        width -= width % self.align
        if width > self.width or height > self.height:
            return None, 0, 0

        nodes = self._skyline
        best: int | None = None
        best_y = _SENTINEL_Y
        best_waste = _SENTINEL_Y
        i = 0
        while nodes[i][0] + width <= self.width:
            y, waste = self._find_min_y(i, nodes[i][0], width)
            if self.heuristic == Heuristic.BOTTOM_LEFT:
                if y < best_y:
                    best_y = y
                    best = i
            elif y + height <= self.height:
                if y < best_y or (y == best_y and waste < best_waste):
                    best_y = y
                    best_waste = waste
                    best = i
            i += 1

        best_x = 0 if best is None else nodes[best][0]

        if self.heuristic == Heuristic.BEST_FIT:
            tail = 0
            node = 0
            while nodes[tail][0] < width:
                tail += 1
            while tail < len(nodes):
                xpos = nodes[tail][0] - width
                while nodes[node + 1][0] <= xpos:
                    node += 1
                y, waste = self._find_min_y(node, xpos, width)
                if y + height <= self.height and y <= best_y:
                    if (
                        y < best_y
                        or waste < best_waste
                        or (waste == best_waste and xpos < best_x)
                    ):
                        best_x = xpos
                        best_y = y
                        best_waste = waste
                        best = node
                tail += 1

        return best, best_x, best_y

    def _pack_one(self, width: int, height: int) -> tuple[int, int] | None:
        best, x, y = self._find_best_pos(width, height)
        if best is None or y + height > self.height or self._free == 0:
            return None

        nodes = self._skyline
        self._free -= 1
        insert_at = best + 1 if nodes[best][0] < x else best
        nodes.insert(insert_at, [x, y + height])
        cur = insert_at + 1
        right = x + width
        while cur + 1 < len(nodes) and nodes[cur + 1][0] <= right:
            del nodes[cur]
            self._free += 1
        if nodes[cur][0] < right:
            nodes[cur][0] = right
        return x, y

    def pack(self, rects: Iterable[Rect]) -> bool:
        """Place the rectangles, filling in their positions.

        Rectangles that do not fit get ``was_packed`` False and both
        coordinates set to ``MAX_VAL``. Returns whether all were packed.
        """
        rects = list(rects)
        for rect in sorted(rects, key=lambda r: (-r.h, -r.w)):
            if rect.w == 0 or rect.h == 0:
                rect.x = rect.y = 0
                continue
            placed = self._pack_one(rect.w, rect.h)
            if placed is None:
                rect.x = rect.y = MAX_VAL
            else:
                rect.x, rect.y = placed
        for rect in rects:
            rect.was_packed = not (rect.x == MAX_VAL and rect.y == MAX_VAL)
        return all(rect.was_packed for rect in rects)