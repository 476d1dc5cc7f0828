import logging
from collections import Counter
from dataclasses import replace
from typing import List, Optional

import streamlit as st
from st_keyup import st_keyup  # type: ignore

from grid_board.actions import Action, action_from_key
from grid_board.brush import BRUSHES_BY_LABEL, PALETTE, Brush
from grid_board.components import Position
from grid_board.config import EditorConfig
from grid_board.editor import Editor
from grid_board.errors import InvalidBoardFormat
from grid_board.renderer import render_image, render_text

st.set_page_config(layout="wide", page_title="Grid Board")


def set_default_state() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = EditorConfig()
    if "editor" not in st.session_state:
        st.session_state["editor"] = Editor(st.session_state["config"])
    logging.basicConfig(level=st.session_state["config"].log_level)


def get_config_from_widgets(config: EditorConfig) -> EditorConfig:
    st.subheader("New board")
    rows: int = st.slider("Rows", 1, 30, config.rows, key="cfg_rows")
    cols: int = st.slider("Columns", 1, 30, config.cols, key="cfg_cols")

    st.subheader("Stats")
    stat_default: int = st.slider(
        "Starting points per stat", 0, 20, config.stat_default, key="cfg_stat_default"
    )
    enforce_move_budget: bool = st.checkbox(
        "Block movement when out of movement points",
        value=config.enforce_move_budget,
        key="cfg_enforce_budget",
    )

    st.subheader("Enemies")
    near_toward_chance: float = st.slider(
        "Chance a nearby enemy closes in",
        0.0,
        1.0,
        config.near_toward_chance,
        step=0.05,
        key="cfg_near_toward",
    )
    far_away_chance: float = st.slider(
        "Chance a distant enemy backs off",
        0.0,
        1.0,
        config.far_away_chance,
        step=0.05,
        key="cfg_far_away",
    )
    drift_chance: float = st.slider(
        "Drift threshold", 0.0, 1.0, config.drift_chance, step=0.05, key="cfg_drift"
    )

    st.subheader("Random seed")
    use_seed: bool = st.checkbox("Fixed seed", value=config.seed is not None, key="cfg_use_seed")
    seed: Optional[int] = None
    if use_seed:
        seed = int(st.number_input("Seed", min_value=0, value=config.seed or 0, key="cfg_seed"))

    return replace(
        config,
        rows=rows,
        cols=cols,
        stat_default=stat_default,
        enforce_move_budget=enforce_move_budget,
        near_toward_chance=near_toward_chance,
        far_away_chance=far_away_chance,
        drift_chance=drift_chance,
        seed=seed,
    )


def get_keyboard_action() -> Optional[Action]:
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="board_key_input",
            placeholder="Type: WASD to move",
        )
        or ""
    )
    prev_value: str = st.session_state.get("board_key_input_prev", "")
    st.session_state["board_key_input_prev"] = value
    if value != prev_value:
        new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
        if not new_values:
            return None
        return action_from_key(new_values[-1])
    return None


def do_move(editor: Editor, action: Action) -> None:
    if not editor.move(action):
        st.toast("No movement points left", icon="🛑")


def brush_section() -> Brush:
    st.subheader("Brush")
    labels = [brush.label for brush in PALETTE]
    label: str = st.radio("Brush", labels, index=0, key="brush", label_visibility="collapsed")
    return BRUSHES_BY_LABEL[label]


def resize_section(editor: Editor) -> None:
    st.subheader("Grid size")
    rows_col, cols_col = st.columns(2)
    with rows_col:
        rows = int(st.number_input("Rows", min_value=1, value=editor.board.rows, key="resize_rows"))
    with cols_col:
        cols = int(st.number_input("Cols", min_value=1, value=editor.board.cols, key="resize_cols"))
    if st.button("Resize", key="resize_btn", use_container_width=True):
        editor.resize(rows, cols)
    if st.button("Clear board", key="reset_board_btn", use_container_width=True):
        editor.reset_board()


def file_section(editor: Editor) -> None:
    st.subheader("Save / Import")
    st.download_button(
        "Save",
        data=editor.export_json(),
        file_name="board.json",
        mime="application/json",
        use_container_width=True,
    )
    uploaded = st.file_uploader("Import", type=["json"], key="import_file")
    if uploaded is not None and uploaded.file_id != st.session_state.get("imported_file_id"):
        st.session_state["imported_file_id"] = uploaded.file_id
        try:
            editor.import_json(uploaded.getvalue())
        except InvalidBoardFormat as e:
            st.error(str(e))


def portal_section(editor: Editor) -> None:
    st.subheader("Portals")
    src_r, src_c, dst_r, dst_c = st.columns(4)
    with src_r:
        sr = int(st.number_input("From r", min_value=0, value=0, key="portal_src_r"))
    with src_c:
        sc = int(st.number_input("From c", min_value=0, value=0, key="portal_src_c"))
    with dst_r:
        dr = int(st.number_input("To r", min_value=0, value=0, key="portal_dst_r"))
    with dst_c:
        dc = int(st.number_input("To c", min_value=0, value=0, key="portal_dst_c"))
    link_col, unlink_col, clear_col = st.columns(3)
    with link_col:
        if st.button("Link", key="link_btn", use_container_width=True):
            if not editor.link_portal(Position(sr, sc), Position(dr, dc)):
                st.warning(f"({sr}, {sc}) is not a portal tile")
    with unlink_col:
        if st.button("Unlink", key="unlink_btn", use_container_width=True):
            editor.unlink_portal(Position(sr, sc))
    with clear_col:
        if st.button("Clear", key="clear_portals_btn", use_container_width=True):
            editor.clear_portals()
    for src, dst in sorted(editor.portals.connections.items(), key=lambda kv: (kv[0].r, kv[0].c)):
        st.caption(f"({src.r}, {src.c}) → ({dst.r}, {dst.c})")


def paint_grid(editor: Editor, brush: Brush) -> None:
    glyph_rows = render_text(editor.board).split("\n")
    for r, glyphs in enumerate(glyph_rows):
        cells = st.columns(editor.board.cols, gap="small")
        for c, (cell, glyph) in enumerate(zip(cells, glyphs)):
            with cell:
                if st.button(glyph, key=f"cell_{r}_{c}", use_container_width=True):
                    editor.paint(Position(r, c), brush)
                    st.rerun()


def movement_section(editor: Editor) -> None:
    st.subheader("Move")
    action = get_keyboard_action()
    if action is not None:
        do_move(editor, action)

    _, up_col, _ = st.columns([1, 1, 1])
    with up_col:
        if st.button("⬆️", key="up_btn", use_container_width=True):
            do_move(editor, Action.UP)
    left_btn, down_btn, right_btn = st.columns([1, 1, 1])
    with left_btn:
        if st.button("⬅️", key="left_btn", use_container_width=True):
            do_move(editor, Action.LEFT)
    with down_btn:
        if st.button("⬇️", key="down_btn", use_container_width=True):
            do_move(editor, Action.DOWN)
    with right_btn:
        if st.button("➡️", key="right_btn", use_container_width=True):
            do_move(editor, Action.RIGHT)


def stats_section(editor: Editor) -> None:
    st.subheader("Stats")
    for stat in editor.stats.ordered():
        label_col, minus_col, plus_col = st.columns([0.6, 0.2, 0.2])
        with label_col:
            st.markdown(
                f"<span style='color:{stat.color}'>**{stat.label}**</span>: {stat.value}",
                unsafe_allow_html=True,
            )
        with minus_col:
            if st.button("−", key=f"stat_minus_{stat.id}", use_container_width=True):
                editor.adjust_stat(stat.id, -1)
                st.rerun()
        with plus_col:
            if st.button("+", key=f"stat_plus_{stat.id}", use_container_width=True):
                editor.adjust_stat(stat.id, 1)
                st.rerun()
    if st.button("Reset stats", key="reset_stats_btn", use_container_width=True):
        editor.reset_stats()
        st.rerun()


set_default_state()

tab_board, tab_config, tab_state = st.tabs(["Board", "Config", "State"])

with tab_config:
    config = get_config_from_widgets(st.session_state["config"])
    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        st.session_state["editor"].configure(config)

editor: Editor = st.session_state["editor"]

with tab_board:
    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with left_col:
        brush = brush_section()
        resize_section(editor)
        file_section(editor)

    with right_col:
        movement_section(editor)
        st.divider()
        stats_section(editor)
        st.divider()
        portal_section(editor)

    with middle_col:
        st.image(
            render_image(editor.board, editor.portals, editor.config.cell_size),
            use_container_width=True,
        )
        with st.expander("Paint", expanded=True):
            paint_grid(editor, brush)

with tab_state:
    st.json(editor.export_snapshot(), expanded=1)
