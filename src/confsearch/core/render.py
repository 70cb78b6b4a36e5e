"""Fixed-width result table with terminal hyperlinks.

Everything here returns plain strings so layout can be checked without a
terminal. Widths are measured in terminal cells on the visible text only;
hyperlink escape sequences are added after truncation and padding is
computed from the undecorated title.
"""

from datetime import datetime

from rich.cells import cell_len

from confsearch.models.result import NormalizedResult


TITLE_WIDTH = 50
SPACE_WIDTH = 10
AUTHOR_WIDTH = 20
DATE_WIDTH = 12

COLUMNS = (
    ("Title", TITLE_WIDTH),
    ("Space", SPACE_WIDTH),
    ("Updated by", AUTHOR_WIDTH),
    ("Date", DATE_WIDTH),
)
# "│ " + " │ " * 3 + " │"
BORDER_WIDTH = 13
TABLE_WIDTH = sum(width for _, width in COLUMNS) + BORDER_WIDTH

ELLIPSIS = "..."
PREVIEW_LENGTH = 200
NO_RESULTS_MESSAGE = "No documents found matching your search. Try different keywords."

OSC = "\x1b]8;;"
ST = "\x1b\\"


def hyperlink(text: str, url: str) -> str:
    """Wrap text in an OSC 8 hyperlink escape sequence."""
    return f"{OSC}{url}{ST}{text}{OSC}{ST}"


def truncate(text: str, width: int) -> str:
    """Shorten text to fit a column of the given width.

    Text longer than ``width - 4`` characters is cut to ``width - 7``
    characters plus an ellipsis.
    """
    limit = width - 4
    if len(text) <= limit:
        return text
    return text[: max(0, limit - len(ELLIPSIS))] + ELLIPSIS


def fit_cells(text: str, width: int) -> str:
    """Cut text with an ellipsis until it occupies at most width cells."""
    if cell_len(text) <= width:
        return text
    text = text[: max(0, width - len(ELLIPSIS))] + ELLIPSIS
    while cell_len(text) > width and len(text) > len(ELLIPSIS):
        text = text[: -len(ELLIPSIS) - 1] + ELLIPSIS
    return text


def pad(text: str, width: int) -> str:
    """Left-align text in a cell, cutting it if it does not fit."""
    text = fit_cells(text, width)
    return text + " " * max(0, width - cell_len(text))


def center_offset(width: int, text: str) -> int:
    """Left padding that centers text in width, never less than one space."""
    return max(1, width // 2 - len(text) // 2)


def banner_line(text: str, now: datetime, width: int = TABLE_WIDTH) -> str:
    """Centered summary text with the time right-aligned on the same line."""
    clock = now.strftime("%H:%M:%S")
    line = " " * center_offset(width, text) + text
    gap = max(1, width - cell_len(line) - len(clock))
    return line + " " * gap + clock


def summary_text(count: int, phrase: str) -> str:
    noun = "result" if count == 1 else "results"
    return f'Found {count} {noun} for "{phrase}"'


def _rule(left: str, mid: str, right: str) -> str:
    return left + mid.join("─" * (width + 2) for _, width in COLUMNS) + right


def _row(cells: list[str]) -> str:
    return "│ " + " │ ".join(cells) + " │"


def format_row(result: NormalizedResult) -> str:
    # Wide characters can still overflow after the character-count cut
    title = fit_cells(truncate(result.title, TITLE_WIDTH), TITLE_WIDTH - 4)
    title_cell = hyperlink(title, result.url) + " " * max(0, TITLE_WIDTH - cell_len(title))
    return _row(
        [
            title_cell,
            pad(result.space_key, SPACE_WIDTH),
            pad(result.updated_by, AUTHOR_WIDTH),
            pad(result.updated_date, DATE_WIDTH),
        ]
    )


def render_table(results: list[NormalizedResult]) -> list[str]:
    """Render the results table, one string per line."""
    lines = [
        _rule("┌", "┬", "┐"),
        _row([pad(name, width) for name, width in COLUMNS]),
        _rule("├", "┼", "┤"),
    ]
    lines.extend(format_row(result) for result in results)
    lines.append(_rule("└", "┴", "┘"))
    return lines


def render_previews(results: list[NormalizedResult]) -> list[str]:
    lines = []
    for index, result in enumerate(results, start=1):
        excerpt = result.excerpt
        if len(excerpt) > PREVIEW_LENGTH:
            excerpt = excerpt[:PREVIEW_LENGTH] + ELLIPSIS
        lines.append(f"[{index}] {truncate(result.title, TITLE_WIDTH)}")
        lines.append(f"    {excerpt}")
    return lines


def render_results(
    results: list[NormalizedResult],
    phrase: str,
    now: datetime,
    preview: bool = False,
) -> list[str]:
    """Full output for a search: banner and table, or the empty message."""
    if not results:
        return [NO_RESULTS_MESSAGE]

    lines = [banner_line(summary_text(len(results), phrase), now)]
    lines.extend(render_table(results))
    if preview:
        lines.append("")
        lines.extend(render_previews(results))
    return lines
