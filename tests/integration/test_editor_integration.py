import json
from dataclasses import replace

import pytest

from grid_board.actions import Action
from grid_board.board import toggle_entity
from grid_board.brush import BRUSHES_BY_LABEL
from grid_board.components import Entity, Position
from grid_board.config import EditorConfig
from grid_board.editor import Editor
from grid_board.errors import InvalidBoardFormat
from grid_board.renderer import render_image, render_text
from grid_board.stats import stat_value
from grid_board.types import EntityType, StatKey, TileType
from tests.test_utils import make_board, player_cell, positions_of


def make_editor(**config_kwargs) -> Editor:
    return Editor(EditorConfig(**config_kwargs), make_board(player=(4, 4)))


def test_new_editor_defaults() -> None:
    editor = Editor()
    assert (editor.board.rows, editor.board.cols) == (9, 9)
    assert len(editor.board.entities) == 0
    assert len(editor.portals.connections) == 0
    assert all(stat.value == 5 for stat in editor.stats.ordered())
    assert editor.turn == 0


def test_move_budget_blocks_after_points_run_out() -> None:
    editor = make_editor()
    for _ in range(5):
        assert editor.move(Action.UP)
    assert player_cell(editor.board) == (0, 4)
    assert stat_value(editor.stats, StatKey.MOVES) == 0

    board_before = editor.board
    assert not editor.move(Action.DOWN)
    assert editor.board is board_before
    assert editor.turn == 5


def test_blocked_move_still_spends_a_point() -> None:
    editor = Editor(EditorConfig(), make_board(player=(0, 0)))
    assert editor.move(Action.UP)
    assert player_cell(editor.board) == (0, 0)
    assert stat_value(editor.stats, StatKey.MOVES) == 4


def test_move_budget_can_be_disabled() -> None:
    editor = make_editor(enforce_move_budget=False, stat_default=1)
    for _ in range(4):
        assert editor.move(Action.LEFT)
    assert player_cell(editor.board) == (4, 0)
    assert stat_value(editor.stats, StatKey.MOVES) == 0


def test_raising_moves_stat_unblocks_movement() -> None:
    editor = make_editor(stat_default=0)
    assert not editor.move(Action.RIGHT)
    editor.adjust_stat(StatKey.MOVES, 2)
    assert editor.move(Action.RIGHT)
    assert player_cell(editor.board) == (4, 5)


def test_move_rejects_unknown_action() -> None:
    with pytest.raises(ValueError):
        make_editor().move("jump")  # type: ignore[arg-type]


def test_paint_and_erase() -> None:
    editor = Editor()
    editor.paint(Position(1, 1), BRUSHES_BY_LABEL["Wall"])
    editor.paint(Position(1, 1), BRUSHES_BY_LABEL["Enemy"])
    assert editor.board.tiles[1][1] == TileType.WALL
    assert positions_of(editor.board, EntityType.ENEMY) == [(1, 1)]

    editor.erase(Position(1, 1))
    assert editor.board.tiles[1][1] == TileType.EMPTY
    assert len(editor.board.entities) == 0


def test_painting_entity_twice_removes_it() -> None:
    editor = Editor()
    brush = BRUSHES_BY_LABEL["Small Dot"]
    editor.paint(Position(3, 3), brush)
    editor.paint(Position(3, 3), brush)
    assert len(editor.board.entities) == 0


def test_link_portal_requires_portal_tile() -> None:
    editor = Editor()
    assert not editor.link_portal(Position(2, 2), Position(5, 5))
    assert len(editor.portals.connections) == 0

    editor.paint(Position(2, 2), BRUSHES_BY_LABEL["Portal"])
    assert editor.link_portal(Position(2, 2), Position(5, 5))
    assert editor.portals.connections[Position(2, 2)] == Position(5, 5)

    editor.unlink_portal(Position(2, 2))
    assert len(editor.portals.connections) == 0


def test_portal_round_trip_through_editor() -> None:
    editor = Editor(EditorConfig(), make_board(player=(2, 1), portals=[(2, 2), (6, 6)]))
    editor.link_portal(Position(2, 2), Position(6, 5))
    editor.link_portal(Position(6, 6), Position(2, 3))
    assert editor.move(Action.RIGHT)
    assert player_cell(editor.board) == (6, 5)
    assert editor.move(Action.RIGHT)
    assert player_cell(editor.board) == (2, 3)

    editor.clear_portals()
    assert len(editor.portals.connections) == 0


def test_failed_import_keeps_board() -> None:
    editor = make_editor()
    before = editor.board
    with pytest.raises(InvalidBoardFormat, match="Invalid board JSON."):
        editor.import_snapshot({"rows": "x"})
    with pytest.raises(InvalidBoardFormat, match="Failed to parse JSON."):
        editor.import_json("{not json")
    assert editor.board is before


def test_export_import_round_trip() -> None:
    editor = Editor(
        EditorConfig(),
        make_board(rows=4, cols=6, walls=[(0, 0)], spawn=(3, 5), player=(1, 1), enemies=[(2, 2)]),
    )
    text = editor.export_json()
    other = Editor()
    other.import_json(text)
    assert other.board == editor.board
    assert other.export_snapshot() == json.loads(text)


def test_import_leaves_portals_and_stats_alone() -> None:
    editor = Editor(EditorConfig(), make_board(portals=[(0, 0)]))
    editor.link_portal(Position(0, 0), Position(1, 1))
    editor.adjust_stat(StatKey.MAGIC, 3)
    editor.import_snapshot({"rows": 2, "cols": 2, "tiles": [["empty", "empty"]] * 2, "entities": []})
    assert editor.portals.connections[Position(0, 0)] == Position(1, 1)
    assert stat_value(editor.stats, StatKey.MAGIC) == 8


def test_resize_and_reset_board() -> None:
    editor = make_editor()
    editor.resize(3, 12)
    assert (editor.board.rows, editor.board.cols) == (3, 12)
    assert len(editor.board.entities) == 0

    editor.paint(Position(0, 11), BRUSHES_BY_LABEL["Wall"])
    editor.reset_board()
    assert (editor.board.rows, editor.board.cols) == (9, 9)
    assert all(tile == TileType.EMPTY for row in editor.board.tiles for tile in row)

    editor.reset_board(2, 3)
    assert (editor.board.rows, editor.board.cols) == (2, 3)


def test_reset_stats_uses_configured_default() -> None:
    editor = make_editor(stat_default=3)
    editor.adjust_stat(StatKey.ATTACK, 10)
    editor.adjust_stat(StatKey.DEFENSE, -10)
    editor.reset_stats()
    assert [stat.value for stat in editor.stats.ordered()] == [3, 3, 3, 3]


def test_same_seed_replays_identically() -> None:
    board = make_board(player=(4, 4), enemies=[(0, 0), (8, 8), (0, 8), (6, 2)])
    config = EditorConfig(seed=11, enforce_move_budget=False)
    moves = [Action.UP, Action.LEFT, Action.LEFT, Action.DOWN, Action.RIGHT, Action.UP]

    first, second = Editor(config, board), Editor(config, board)
    for action in moves:
        first.move(action)
        second.move(action)
    assert first.board == second.board


def test_configure_keeps_state() -> None:
    editor = make_editor()
    editor.move(Action.UP)
    editor.configure(replace(editor.config, stat_default=9, seed=5))
    assert player_cell(editor.board) == (3, 4)
    assert stat_value(editor.stats, StatKey.MOVES) == 4
    assert editor.config.seed == 5


def test_player_goes_to_end_of_entity_list_after_moving() -> None:
    board = toggle_entity(make_board(player=(4, 4)), Position(0, 0), EntityType.SMALL_DOT)
    assert board.entities[0].type == EntityType.PLAYER
    editor = Editor(EditorConfig(), board)
    editor.move(Action.UP)
    assert editor.board.entities[-1] == Entity(EntityType.PLAYER, 3, 4)


@pytest.mark.parametrize(
    "snapshot",
    [
        {"rows": 3, "cols": 3, "tiles": [], "entities": []},
        {"rows": 3, "cols": 3, "tiles": [["empty"]], "entities": [{"type": "player", "r": 0, "c": 0}]},
        {"rows": 3, "cols": 3, "tiles": [["empty"] * 3] * 3, "entities": [{"type": "player"}]},
        {"rows": 2, "cols": 2, "tiles": [[["nested"], {"k": 1}]], "entities": [{"type": ["x"], "r": 0, "c": 0}]},
    ],
)
def test_ragged_import_keeps_editor_usable(snapshot: dict) -> None:
    editor = Editor(EditorConfig(enforce_move_budget=False, seed=1))
    editor.import_snapshot(snapshot)
    rows, cols = editor.board.rows, editor.board.cols

    editor.paint(Position(0, 0), BRUSHES_BY_LABEL["Wall"])
    editor.paint(Position(rows - 1, cols - 1), BRUSHES_BY_LABEL["Player"])
    for action in [Action.RIGHT, Action.DOWN, Action.LEFT, Action.UP]:
        editor.move(action)
    render_text(editor.board)
    image = render_image(editor.board, editor.portals)
    assert image.size == (cols * 44, rows * 44)
    json.loads(editor.export_json())


@pytest.mark.parametrize("replace_board", ["reset", "import"])
def test_replacing_board_restarts_seeded_replay(replace_board: str) -> None:
    board = make_board(player=(4, 4), enemies=[(0, 0), (8, 8), (0, 8), (6, 2)])
    config = EditorConfig(seed=3, enforce_move_budget=False)
    moves = [Action.UP, Action.UP, Action.LEFT, Action.DOWN]

    fresh = Editor(config, board)
    for action in moves:
        fresh.move(action)

    reused = Editor(config, board)
    for action in moves:
        reused.move(action)
    assert reused.turn == len(moves)
    if replace_board == "reset":
        reused.reset_board()
        reused.board = board
    else:
        reused.import_json(Editor(config, board).export_json())
    assert reused.turn == 0
    for action in moves:
        reused.move(action)
    assert reused.board == fresh.board
