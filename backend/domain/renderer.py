"""
Text rendering of a GameState.

Every visible element is queued by the inverted raster index of its cell and
the board is scanned once in row-major order, popping the queue whenever the
next element falls on the current cell. No dense grid buffer is built.
"""

import heapq
from itertools import count
from typing import List, Tuple

from .game_state import GameState
from .geometry import Vector2D
from .tiles import QueuedTile, Tile


def horizontal_wall(size: int) -> str:
    return "+" + "-" * size + "+"


def render_heap(state: GameState) -> List[Tuple[int, int, QueuedTile]]:
    """
    Build the max-priority queue of tiles for a snapshot.

    heapq is a min-heap, so entries are keyed by the negated weight. The
    insertion counter decides ties: the head was queued first, then the tail,
    the ghost trail and finally the cherry, and the earliest entry wins a cell.
    """
    bounds = state.dimensions
    order = count()
    heap: List[Tuple[int, int, QueuedTile]] = []

    def push(tile: Tile, position: Vector2D) -> None:
        queued = QueuedTile.new_within(tile, position, bounds)
        heapq.heappush(heap, (-queued.weight, next(order), queued))

    push(Tile.SNAKE_HEAD, state.position)
    for node in state.tail:
        push(Tile.SNAKE_TAIL, node)
    for node in state.ghost:
        push(Tile.SNAKE_TAIL_GHOST, node)
    if state.cherry is not None:
        push(Tile.CHERRY, state.cherry)

    return heap


def render_frame(state: GameState) -> str:
    bounds = state.dimensions
    queue = render_heap(state)

    lines = [f"pos: {state.position}", "", "", horizontal_wall(state.width)]

    for y in range(state.height):
        row = ["|"]
        for x in range(state.width):
            weight = QueuedTile.weight_of(Vector2D(x, y), bounds)
            character = Tile.SPACE

            if queue and queue[0][2].weight == weight:
                character = heapq.heappop(queue)[2].tile
                # Anything else stacked on this cell is hidden
                while queue and queue[0][2].weight == weight:
                    heapq.heappop(queue)

            row.append(character.draw())
        row.append("|")
        lines.append("".join(row))

    lines.append(horizontal_wall(state.width))
    return "\n".join(lines)
