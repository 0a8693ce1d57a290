"""Tests for the HTML coverage summary."""

from pathlib import Path

from unit_cover.models.coverage import CoverageStat, percentage
from unit_cover.report import (
    detail_file,
    render_index,
    total_percentage,
    write_index,
)
from unit_cover.testing.factories import CoverageStatFactory


def test_total_uses_summed_counts() -> None:
    """Total is computed from summed counts, not averaged percentages."""
    stats = [
        CoverageStat(module="a", covered=8, uncovered=2),
        CoverageStat(module="b", covered=0, uncovered=0),
    ]

    assert total_percentage(stats) == 80


def test_total_matches_percentage_of_sums() -> None:
    """Total equals the percentage of all covered and uncovered lines."""
    stats = CoverageStatFactory.batch(10)

    assert total_percentage(stats) == percentage(
        sum(s.covered for s in stats), sum(s.uncovered for s in stats)
    )


def test_total_of_no_stats_is_zero() -> None:
    """Does not fail when nothing was measured."""
    assert total_percentage([]) == 0
    assert "<h3>Total: 0%</h3>" in render_index([])


def test_render_index_rows() -> None:
    """Renders a linked row per module, with zero-count modules at 0%."""
    stats = [
        CoverageStat(module="a", covered=8, uncovered=2),
        CoverageStat(module="b", covered=0, uncovered=0),
    ]

    html = render_index(stats)

    assert "<h1>Coverage Summary</h1>" in html
    assert "<h3>Total: 80%</h3>" in html
    assert "<tr><td><a href='a.COVER.html'>a</a></td><td>80%</td></tr>" in html
    assert "<tr><td><a href='b.COVER.html'>b</a></td><td>0%</td></tr>" in html
    assert html.index("a.COVER.html") < html.index("b.COVER.html")


def test_render_index_escapes_module_names() -> None:
    """Escapes markup in module names."""
    html = render_index([CoverageStat(module="<x>", covered=1, uncovered=0)])

    assert "&lt;x&gt;" in html
    assert "<x>" not in html


def test_write_index(tmp_path: Path) -> None:
    """Writes index.html into the output directory."""
    index = write_index(tmp_path, [CoverageStat(module="a", covered=1, uncovered=1)])

    assert index == tmp_path / "index.html"
    assert "Total: 50%" in index.read_text()


def test_detail_file(tmp_path: Path) -> None:
    """Names detail pages after the module."""
    assert detail_file(tmp_path, "alpha") == tmp_path / "alpha.COVER.html"
