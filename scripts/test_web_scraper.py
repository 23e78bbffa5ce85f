#!/usr/bin/env python3
"""
Test Web Scraper
HTML parsing of the grades table and term selector
"""

import sys
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from notas_ecampus.resources import parse_grades_table, parse_term_options, GradesTableNotFound, TermOption
from notas_ecampus.resources.web_scraper import cell_text, collapse_whitespace, filter_columns
from notas_ecampus.resources.selectors import GRADES_COLUMNS


def _row(tag, values):
    return "<tr>" + "".join(f"<{tag}>{v}</{tag}>" for v in values) + "</tr>"


HEADER = [f"H{i}" for i in range(27)]
ROW_1 = [f"a{i}" for i in range(27)]
ROW_2 = [f"b{i}" for i in range(27)]

# Realistic example, with the link cell and messy whitespace
TEST_HTML = f'''
<html><body>
<div id="notas">
    <table class="tabelas grid-notas">
        {_row("th", HEADER)}
        {_row("td", ROW_1)}
        {_row("td", ROW_2)}
    </table>
</div>
</body></html>
'''


def _cell(markup):
    return BeautifulSoup(f"<table><tr><td>{markup}</td></tr></table>", "lxml").td


def test_collapse_whitespace():
    assert collapse_whitespace("  CÁLCULO \n\t I  ") == "CÁLCULO I"
    assert collapse_whitespace("") == ""
    assert collapse_whitespace(None) == ""


def test_collapse_whitespace_idempotent():
    once = collapse_whitespace(" \n Notas   e\tFrequência \n")
    assert collapse_whitespace(once) == once


def test_cell_text_collapses():
    assert cell_text(_cell("\n  8,5 \n ")) == "8,5"
    assert cell_text(_cell("<span>MA</span>\n<b>1</b>")) == "MA 1"


def test_cell_text_effective_grades_placeholder():
    cell = _cell('<a href="#" title="Notas Efetivadas"><img src="ok.png"></a>')
    assert cell_text(cell) == "#"
    # Same markup again gives the same placeholder
    assert cell_text(cell) == cell_text(cell) == "#"


def test_filter_columns_keeps_allowlist():
    row = [str(i) for i in range(40)]
    filtered = filter_columns(row)
    assert filtered == ["0", "2", "4", "6", "8", "10", "21", "22", "23", "24", "25", "26"]
    assert len(filtered) == len(GRADES_COLUMNS) == 12


def test_filter_columns_pads_short_rows():
    filtered = filter_columns(["x", "y", "z"])
    assert len(filtered) == 12
    assert filtered[:2] == ["x", "z"]
    assert filtered[2:] == [""] * 10


def test_parse_grades_table():
    rows = parse_grades_table(TEST_HTML)

    assert len(rows) == 3
    assert rows[0] == filter_columns(HEADER)
    assert rows[1] == filter_columns(ROW_1)
    assert rows[2] == filter_columns(ROW_2)
    assert all(len(r) == len(rows[0]) for r in rows)


def test_parse_grades_table_custom_extract():
    rows = parse_grades_table(TEST_HTML, extract=lambda el: el.get_text().upper(), columns=(0, 1))
    assert rows == [["H0", "H1"], ["A0", "A1"], ["B0", "B1"]]


def test_parse_grades_table_missing():
    html = '<html><body><table class="tabelas"><tr><th>x</th></tr></table></body></html>'
    with pytest.raises(GradesTableNotFound):
        parse_grades_table(html)


def test_parse_grades_table_never_reads_rows_when_missing():
    calls = []

    def extract(el):
        calls.append(el)
        return ""

    with pytest.raises(GradesTableNotFound):
        parse_grades_table("<html><body></body></html>", extract=extract)
    assert calls == []


def test_parse_term_options():
    html = '''
    <form>
        <input id="ano" value="2023">
        <select id="periodo">
            <option value="1"> 1º Período </option>
            <option value="2">2º Período</option>
        </select>
    </form>
    '''
    options = parse_term_options(html)
    assert options == [TermOption("1º Período", "1"), TermOption("2º Período", "2")]


if __name__ == '__main__':
    print("=== Web Scraper Test ===\n")
    sys.exit(pytest.main([__file__, "-v"]))
