"""Cell grid that panels draw into before a frame is serialized.

Each cell holds one character and the SGR style it is drawn with. Wide
characters occupy their lead cell plus ``""`` continuation cells, so
overlapping panels (the popup) can overwrite any region cleanly.
"""

from __future__ import annotations

from ..ansi import char_display_width
from ..runtime.layout import Rect

RESET = "\033[0m"
_CONTINUATION = ""


class Canvas:
    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.cells: list[list[tuple[str, str]]] = [
            [(" ", "")] * self.width for _ in range(self.height)
        ]

    def _set(self, col: int, row: int, ch: str, style: str) -> None:
        cells = self.cells[row]
        # Break any wide character this write would split.
        if cells[col][0] == _CONTINUATION and col > 0:
            lead = col - 1
            while lead > 0 and cells[lead][0] == _CONTINUATION:
                lead -= 1
            cells[lead] = (" ", cells[lead][1])
        cells[col] = (ch, style)
        follow = col + 1
        while follow < self.width and cells[follow][0] == _CONTINUATION:
            cells[follow] = (" ", cells[follow][1])
            follow += 1

    def put(self, col: int, row: int, text: str, style: str = "", max_cols: int | None = None) -> int:
        """Draw ``text`` starting at ``(col, row)``; return columns consumed.

        Output is clipped to ``max_cols`` columns and to the canvas edge.
        """
        if not 0 <= row < self.height or col < 0:
            return 0
        limit = self.width if max_cols is None else min(self.width, col + max(0, max_cols))
        cursor = col
        last_lead: int | None = None
        for ch in text:
            width = char_display_width(ch, cursor - col)
            if width == 0:
                if last_lead is not None:
                    lead_ch, lead_style = self.cells[row][last_lead]
                    self.cells[row][last_lead] = (lead_ch + ch, lead_style)
                continue
            if cursor + width > limit:
                break
            self._set(cursor, row, ch, style)
            for extra in range(1, width):
                self.cells[row][cursor + extra] = (_CONTINUATION, style)
            last_lead = cursor
            cursor += width
        return cursor - col

    def fill(self, rect: Rect, style: str = "", ch: str = " ") -> None:
        for row in range(rect.row, min(self.height, rect.row + rect.height)):
            for col in range(rect.col, min(self.width, rect.col + rect.width)):
                self._set(col, row, ch, style)

    def draw_box(self, rect: Rect, title: str, border_style: str) -> None:
        """Draw a single-line border with ``title`` on the top edge."""
        if rect.width < 2 or rect.height < 2:
            return
        right = rect.col + rect.width - 1
        bottom = rect.row + rect.height - 1
        horizontal = "─" * (rect.width - 2)
        self.put(rect.col, rect.row, f"┌{horizontal}┐", border_style)
        for row in range(rect.row + 1, bottom):
            self.put(rect.col, row, "│", border_style)
            self.put(right, row, "│", border_style)
        self.put(rect.col, bottom, f"└{horizontal}┘", border_style)
        if title:
            self.put(rect.col + 1, rect.row, title, border_style, max_cols=rect.width - 2)

    def to_lines(self, trim_last_cell: bool = False) -> list[str]:
        """Serialize each row to text with minimal style switches.

        ``trim_last_cell`` leaves the bottom-right cell unwritten; printing
        there makes many terminals scroll the whole screen by one line.
        """
        lines: list[str] = []
        last_row = len(self.cells) - 1
        for row_idx, cells in enumerate(self.cells):
            if trim_last_cell and row_idx == last_row:
                cells = cells[:-1]
            out: list[str] = []
            active = ""
            for ch, style in cells:
                if ch == _CONTINUATION:
                    continue
                if style != active:
                    out.append(RESET)
                    out.append(style)
                    active = style
                out.append(ch)
            if active:
                out.append(RESET)
            lines.append("".join(out))
        return lines

    def plain_lines(self) -> list[str]:
        """Row text without styling, for tests and debugging."""
        return ["".join(ch for ch, _style in cells) for cells in self.cells]
