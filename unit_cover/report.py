"""HTML coverage summary rendering."""

from collections.abc import Sequence
from html import escape
from pathlib import Path

from unit_cover.models.coverage import CoverageStat, percentage

INDEX_FILE = "index.html"
DETAIL_SUFFIX = ".COVER.html"


def detail_file(output_dir: Path, module: str) -> Path:
    return output_dir / f"{module}{DETAIL_SUFFIX}"


def total_percentage(stats: Sequence[CoverageStat]) -> int:
    """Coverage percentage over the summed counts of all modules."""
    covered = sum(stat.covered for stat in stats)
    uncovered = sum(stat.uncovered for stat in stats)
    return percentage(covered, uncovered)


def render_index(stats: Sequence[CoverageStat]) -> str:
    """Render the summary page; rows appear in the order given."""
    parts = [
        "<html><head><title>Coverage Summary</title></head>\n"
        "<body><h1>Coverage Summary</h1>\n",
        f"<h3>Total: {total_percentage(stats)}%</h3>\n",
        "<table><tr><th>Module</th><th>Coverage %</th></tr>\n",
    ]
    for stat in stats:
        module = escape(stat.module)
        parts.append(
            f"<tr><td><a href='{module}{DETAIL_SUFFIX}'>{module}</a></td>"
            f"<td>{stat.percentage}%</td></tr>\n"
        )
    parts.append("</table></body></html>")
    return "".join(parts)


def write_index(output_dir: Path, stats: Sequence[CoverageStat]) -> Path:
    """Write index.html into the output directory and return its path."""
    index = output_dir / INDEX_FILE
    index.write_text(render_index(stats), encoding="utf-8")
    return index
