from dok.output import Output
from dok.table import ELLIPSIS, NO_RESULTS, Column, fit, print_table, print_title, render_table


def test_empty_rows_render_single_placeholder() -> None:
    assert render_table([], [Column("ID", "ID", 12)]) == [NO_RESULTS]


def test_overlong_value_is_truncated_with_ellipsis() -> None:
    lines = render_table([{"NAME": "a-very-long-container-name"}], [Column("NAME", "NAME", 10)])
    cell = lines[2]
    assert cell == "a-very-lo" + ELLIPSIS
    assert len(cell) == 10


def test_fit_pads_short_values() -> None:
    assert fit("web", 6) == "web   "
    assert fit("exactly", 7) == "exactly"


def test_auto_width_uses_longest_value_header_and_floor() -> None:
    rows = [{"ID": "abc", "NAME": "web-frontend-1"}]
    lines = render_table(rows, [Column("ID", "ID"), Column("NAME", "NAME")])
    assert lines == [
        "ID      NAME          ",
        "------  --------------",
        "abc     web-frontend-1",
    ]


def test_missing_keys_render_as_blank_cells() -> None:
    lines = render_table([{"ID": "abc"}], [Column("ID", "ID", 6), Column("PORTS", "PORTS", 6)])
    assert lines[2] == "abc     " + " " * 6


def test_print_table_and_title_go_through_output(output: Output) -> None:
    print_title(output, "Containers")
    print_table(output, [], [Column("ID", "ID", 12)])
    assert output.console.file.getvalue() == "\n=== Containers ===\n(no results)\n"
