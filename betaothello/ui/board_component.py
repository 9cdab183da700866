"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from typing import Iterable, Optional

from betaothello.game.board import BoardState
from betaothello.game.types import ALL_POSITIONS, BOARD_SIZE, COL_LABELS, Cell, Position, format_position

# Layout constants
CELL_SIZE = 60
MARGIN = 36
BOARD_PX = MARGIN * 2 + CELL_SIZE * BOARD_SIZE
DISK_RADIUS = 25
HINT_RADIUS = 8

# Colors
BG_COLOR = "#2E7D32"
FRAME_COLOR = "#1B4D1F"
LINE_COLOR = "#103512"
LABEL_COLOR = "#E8F5E9"
BLACK_DISK = "#1A1A1A"
WHITE_DISK = "#F5F5F5"
WHITE_STROKE = "#888"
LAST_MOVE_COLOR = "#E74C3C"
HINT_COLOR = "rgba(0, 0, 0, 0.25)"

BANNER_COLORS = {
    "win": "#4ADE80",
    "loss": "#F87171",
    "neutral": "#FFFFFF",
}


def _center(pos: Position) -> tuple[int, int]:
    """Pixel center of a cell; y = 0 is the top row."""
    x = MARGIN + pos.x * CELL_SIZE + CELL_SIZE // 2
    y = MARGIN + pos.y * CELL_SIZE + CELL_SIZE // 2
    return x, y


def _banner(message: str, outcome: str) -> list[str]:
    color = BANNER_COLORS.get(outcome, BANNER_COLORS["neutral"])
    mid = BOARD_PX // 2
    return [
        f'<rect x="{MARGIN}" y="{mid - 30}" width="{BOARD_PX - 2 * MARGIN}" height="60" '
        f'fill="rgba(0, 0, 0, 0.7)" rx="8"/>',
        f'<text x="{mid}" y="{mid + 10}" text-anchor="middle" font-size="28" '
        f'font-family="sans-serif" font-weight="bold" fill="{color}">{message}</text>',
    ]


def render_board_svg(
    state: BoardState,
    clickable_moves: Iterable[Position] = (),
    last_move: Optional[Position] = None,
    game_over_message: str = "",
    game_over_outcome: str = "neutral",
) -> str:
    """Render the board as an SVG string.

    `clickable_moves` get a small hint dot that the click handler picks up.
    `game_over_outcome` ("win", "loss" or "neutral") colours the banner text.
    """
    parts: list[str] = []

    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{BOARD_PX}" height="{BOARD_PX}" '
        f'viewBox="0 0 {BOARD_PX} {BOARD_PX}" '
        f'id="othello-board">'
    )

    # Frame and playing surface
    parts.append(f'<rect width="{BOARD_PX}" height="{BOARD_PX}" fill="{FRAME_COLOR}" rx="6"/>')
    inner = CELL_SIZE * BOARD_SIZE
    parts.append(
        f'<rect x="{MARGIN}" y="{MARGIN}" width="{inner}" height="{inner}" fill="{BG_COLOR}"/>'
    )

    # Grid lines
    for i in range(BOARD_SIZE + 1):
        offset = MARGIN + i * CELL_SIZE
        parts.append(
            f'<line x1="{offset}" y1="{MARGIN}" x2="{offset}" y2="{MARGIN + inner}" '
            f'stroke="{LINE_COLOR}" stroke-width="2"/>'
        )
        parts.append(
            f'<line x1="{MARGIN}" y1="{offset}" x2="{MARGIN + inner}" y2="{offset}" '
            f'stroke="{LINE_COLOR}" stroke-width="2"/>'
        )

    # Column labels (top) and row labels (left)
    for i in range(BOARD_SIZE):
        center = MARGIN + i * CELL_SIZE + CELL_SIZE // 2
        parts.append(
            f'<text x="{center}" y="{MARGIN - 12}" text-anchor="middle" '
            f'font-size="14" font-family="monospace" fill="{LABEL_COLOR}">'
            f'{COL_LABELS[i]}</text>'
        )
        parts.append(
            f'<text x="{MARGIN - 18}" y="{center + 5}" text-anchor="middle" '
            f'font-size="14" font-family="monospace" fill="{LABEL_COLOR}">'
            f'{i + 1}</text>'
        )

    # Disks
    for pos in ALL_POSITIONS:
        cell = state.cell_at(pos)
        if cell is Cell.EMPTY:
            continue
        x, y = _center(pos)
        fill = BLACK_DISK if cell is Cell.BLACK else WHITE_DISK
        stroke = "none" if cell is Cell.BLACK else WHITE_STROKE
        parts.append(
            f'<circle cx="{x}" cy="{y}" r="{DISK_RADIUS}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="1.5"/>'
        )
        if pos == last_move:
            parts.append(f'<circle cx="{x}" cy="{y}" r="5" fill="{LAST_MOVE_COLOR}"/>')

    # Clickable legal-move hints
    for pos in sorted(clickable_moves):
        x, y = _center(pos)
        coord = format_position(pos)
        parts.append(
            f'<circle cx="{x}" cy="{y}" r="{HINT_RADIUS}" fill="{HINT_COLOR}"/>'
        )
        parts.append(
            f'<rect x="{x - CELL_SIZE // 2}" y="{y - CELL_SIZE // 2}" '
            f'width="{CELL_SIZE}" height="{CELL_SIZE}" '
            f'fill="transparent" class="board-click" '
            f'data-coord="{coord}" style="cursor:pointer">'
            f'<title>{coord}</title></rect>'
        )

    if game_over_message:
        parts.extend(_banner(game_over_message, game_over_outcome))

    parts.append("</svg>")
    return "\n".join(parts)


# JavaScript that handles clicks on the SVG and writes the coordinate to
# a hidden Gradio Textbox, then triggers the submit button.
CLICK_JS = """
() => {
    if (window._othelloClickBound) return;
    window._othelloClickBound = true;

    document.addEventListener('click', function(e) {
        const target = e.target.closest('.board-click');
        if (!target) return;
        const coord = target.getAttribute('data-coord');
        if (!coord) return;

        const container = document.querySelector('#coord-input textarea, #coord-input input');
        if (!container) return;
        const nativeSetter = Object.getOwnPropertyDescriptor(
            window.HTMLInputElement.prototype, 'value'
        )?.set || Object.getOwnPropertyDescriptor(
            window.HTMLTextAreaElement.prototype, 'value'
        )?.set;
        if (nativeSetter) {
            nativeSetter.call(container, coord);
        } else {
            container.value = coord;
        }
        container.dispatchEvent(new Event('input', { bubbles: true }));
        const btn = document.querySelector('#coord-submit');
        if (btn) btn.click();
    });
}
"""
