"""Enemy movement system.

Every enemy takes one step per tick relative to the player's position at the
start of the tick:

* **Near** (same row band or column band, ``|dr| <= 1 or |dc| <= 1``): step
  diagonally or straight toward the player on both axes with probability
  ``near_toward_chance`` (1.0 by default, so always), else away.
* **Far**: step away with probability ``far_away_chance``, else toward. The
  step is taken on the axis with the larger distance (column axis on ties),
  and a second draw above ``drift_chance`` adds a perpendicular step in the
  same sense.

A step that would leave the grid is cancelled and the enemy stays put.
Enemies ignore walls and other entities; only the bounds are checked.

The number and order of RNG draws is part of the contract: one draw for the
toward/away decision and, for distant enemies, one more for the drift.
"""

import random
from dataclasses import replace

from pyrsistent import pvector

from grid_board.components import Entity, Position
from grid_board.config import EditorConfig
from grid_board.state import Board
from grid_board.types import EntityType
from grid_board.utils.grid import is_in_bounds, sign


def enemy_next_position(
    board: Board,
    enemy: Position,
    player: Position,
    config: EditorConfig,
    rng: random.Random,
) -> Position:
    """Compute where a single enemy at ``enemy`` moves this tick."""
    dr = player.r - enemy.r
    dc = player.c - enemy.c

    if abs(dr) <= 1 or abs(dc) <= 1:
        direction = 1 if rng.random() < config.near_toward_chance else -1
        move_r = sign(dr) * direction
        move_c = sign(dc) * direction
    else:
        direction = -1 if rng.random() < config.far_away_chance else 1
        drift = rng.random() > config.drift_chance
        if abs(dr) > abs(dc):
            move_r = sign(dr) * direction
            move_c = sign(dc) * direction if drift else 0
        else:
            move_c = sign(dc) * direction
            move_r = sign(dr) * direction if drift else 0

    target = Position(enemy.r + move_r, enemy.c + move_c)
    if not is_in_bounds(board, target):
        return enemy
    return target


def enemy_system(
    board: Board, player: Entity, config: EditorConfig, rng: random.Random
) -> Board:
    """Move every enemy one step; other entities keep their place and order."""
    entities = []
    for entity in board.entities:
        if entity.type == EntityType.ENEMY:
            target = enemy_next_position(
                board, entity.position, player.position, config, rng
            )
            entity = entity.at(target)
        entities.append(entity)
    return replace(board, entities=pvector(entities))
