"""
Text rendering of game snapshots.

``render_lines`` produces plain text, used by the replay command and the
tests. ``draw`` paints the same frame centred in a curses window.
"""
import curses
from typing import List

from game import GameSnapshot
from game.cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE

HELP_TEXT = "Arrows move  r reveal/chord  f flag  q quit"


def cell_symbol(code: int) -> str:
    """Single character shown for a visible-state code."""
    if code == HIDDEN_CODE:
        return "#"
    if code == FLAGGED_CODE:
        return "F"
    if code == MINE_CODE:
        return "*"
    return str(code)


def render_row(snapshot: GameSnapshot, row: int) -> str:
    """One grid row, three characters per cell; the cursor cell is bracketed."""
    slots = []
    for col in range(snapshot.side):
        symbol = cell_symbol(int(snapshot.cells[row, col]))
        if snapshot.selected_cell == (row, col):
            slots.append(f"[{symbol}]")
        else:
            slots.append(f" {symbol} ")
    return "".join(slots)


def status_lines(snapshot: GameSnapshot) -> List[str]:
    lines = []
    if snapshot.is_over:
        lines.append("Game Over!")
    if snapshot.is_won:
        lines.append("You won!")
    return lines


def render_lines(snapshot: GameSnapshot) -> List[str]:
    """
    Whole frame as text lines.

    Layout:
        Flags: <remaining>
        <blank>
        <side grid rows>
        <blank>
        Game Over! / You won!   (only when set)
    """
    lines = [f"Flags: {snapshot.flags_remaining}", ""]
    lines.extend(render_row(snapshot, row) for row in range(snapshot.side))
    lines.append("")
    lines.extend(status_lines(snapshot))
    return lines


def render_text(snapshot: GameSnapshot) -> str:
    return "\n".join(render_lines(snapshot)).rstrip("\n")


def draw(stdscr: "curses.window", snapshot: GameSnapshot) -> None:
    """Paint one frame, centred, with the help line at the bottom."""
    stdscr.erase()
    height, width = stdscr.getmaxyx()
    lines = render_lines(snapshot)

    top = max(0, (height - len(lines) - 2) // 2)
    for offset, line in enumerate(lines):
        attr = curses.A_BOLD if offset == 0 or offset > snapshot.side + 1 else curses.A_NORMAL
        _put(stdscr, top + offset, max(0, (width - len(line)) // 2), line, attr)

    _put(stdscr, height - 1, 0, HELP_TEXT[: max(0, width - 1)], curses.A_DIM)
    stdscr.refresh()


def _put(stdscr: "curses.window", y: int, x: int, text: str, attr: int) -> None:
    # Writing past the window edge raises; a terminal too small for the
    # frame just gets a clipped picture.
    try:
        stdscr.addstr(y, x, text, attr)
    except curses.error:
        pass
