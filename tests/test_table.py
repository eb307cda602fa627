import pytest

from gridtext import (
    Alignment,
    ColumnCountMismatch,
    ColumnNotFound,
    IndexOutOfRange,
    Table,
    TableError,
    TableStyle,
)


def test_add_row_enforces_field_count():
    table = Table(["A", "B"])
    table.add_row([1, 2])
    with pytest.raises(ColumnCountMismatch) as excinfo:
        table.add_row([1, 2, 3])
    assert excinfo.value.actual == 3
    assert excinfo.value.expected == 2
    assert table.row_count == 1


def test_add_row_without_fields_accepts_any_length():
    table = Table()
    table.add_row([1])
    table.add_row([1, 2, 3])
    table.add_row([])
    assert table.rows == [[1], [1, 2, 3], []]
    assert not table.schema_established


def test_add_row_copies_values():
    values = ["x", 1]
    table = Table(["A", "B"])
    table.add_row(values)
    values.append("late")
    assert table.rows == [["x", 1]]


def test_add_column_on_empty_table_creates_rows():
    table = Table()
    table.add_column("A", [1, 2, 3])
    assert table.field_names == ["A"]
    assert table.rows == [[1], [2], [3]]
    assert table.schema_established


def test_add_column_appends_to_existing_rows():
    table = Table()
    table.add_column("A", [1, 2])
    table.add_column("B", ["x", "y"])
    assert table.field_names == ["A", "B"]
    assert table.rows == [[1, "x"], [2, "y"]]


def test_add_column_with_fields_but_no_rows_fills_earlier_cells():
    table = Table(["A"])
    table.add_column("B", [1, 2])
    assert table.rows == [[None, 1], [None, 2]]
    table.add_row(["a", "b"])


def test_add_column_length_mismatch():
    table = Table()
    table.add_column("A", [1, 2, 3])
    with pytest.raises(ColumnCountMismatch):
        table.add_column("B", [4, 5])
    assert table.field_names == ["A"]


def test_del_row_out_of_range():
    table = Table(["A"])
    for value in (1, 2, 3):
        table.add_row([value])
    with pytest.raises(IndexOutOfRange) as excinfo:
        table.del_row(10)
    assert excinfo.value.row_count == 3
    with pytest.raises(IndexOutOfRange):
        table.del_row(-1)
    assert isinstance(excinfo.value, IndexError)


def test_del_row_keeps_order():
    table = Table(["A"])
    for value in (1, 2, 3):
        table.add_row([value])
    table.del_row(1)
    assert table.rows == [[1], [3]]


def test_del_column_removes_field_and_cells():
    table = Table(["A", "B", "C"])
    table.add_row([1, 2, 3])
    table.del_column("B")
    assert table.field_names == ["A", "C"]
    assert table.rows == [[1, 3]]


def test_del_column_first_match_wins():
    table = Table(["A", "B", "A"])
    table.add_row([1, 2, 3])
    table.del_column("A")
    assert table.field_names == ["B", "A"]
    assert table.rows == [[2, 3]]


def test_del_column_missing():
    table = Table(["A"])
    with pytest.raises(ColumnNotFound) as excinfo:
        table.del_column("Z")
    assert excinfo.value.name == "Z"
    assert isinstance(excinfo.value, TableError)


def test_del_column_skips_short_rows():
    table = Table()
    table.add_row([1])
    table.add_row([1, 2])
    table.set_field_names(["A", "B"])
    table.del_column("B")
    assert table.rows == [[1], [1]]


def test_deleting_last_column_releases_schema():
    table = Table(["A"])
    table.del_column("A")
    assert not table.schema_established
    table.add_row([1, 2])


def test_clear_rows_and_clear():
    table = Table(["A"])
    table.add_row([1])
    table.clear_rows()
    assert table.field_names == ["A"]
    assert len(table) == 0
    table.add_row([2])
    table.clear()
    assert table.field_names == []
    assert table.rows == []
    table.add_row([1, 2, 3])


def test_set_field_names_does_not_validate_rows():
    table = Table()
    table.add_row([1, 2, 3])
    table.field_names = ["A"]
    assert table.field_names == ["A"]
    assert table.rows == [[1, 2, 3]]


def test_field_names_returns_copy():
    table = Table(["A"])
    table.field_names.append("B")
    assert table.field_names == ["A"]


def test_alignment_is_keyed_by_name():
    table = Table(["A", "B"])
    table.set_align("A", "r")
    table.set_align("B", Alignment.CENTER)
    assert table.alignments == {"A": Alignment.RIGHT, "B": Alignment.CENTER}
    table.field_names = ["X", "B"]
    assert "X" not in table.alignments


def test_set_align_all():
    table = Table(["A", "B"])
    table.set_align_all("center")
    assert table.alignments == {"A": Alignment.CENTER, "B": Alignment.CENTER}


def test_invalid_alignment():
    table = Table(["A"])
    with pytest.raises(ValueError):
        table.set_align("A", "diagonal")


def test_style_is_stored_but_not_rendered(sample_table):
    before = sample_table.render_ascii()
    sample_table.set_style({"border": False, "hrules": "all", "junction_char": "*"})
    assert sample_table.style.hrules == "ALL"
    assert sample_table.style.junction_char == "*"
    assert sample_table.render_ascii() == before


def test_style_validation():
    with pytest.raises(ValueError):
        TableStyle(hrules="SOMETIMES")
    with pytest.raises(ValueError):
        TableStyle(padding_width=-1)


def test_working_rows_do_not_reorder_table(sort_table):
    sort_table.set_sort_by("B")
    sort_table.set_row_filter(lambda row: row[1] > 1)
    assert sort_table.working_rows() == [["foo", 2], ["baz", 3]]
    assert sort_table.rows == [["foo", 2], ["bar", 1], ["baz", 3]]


def test_str_renders_ascii(sample_table):
    assert str(sample_table) == sample_table.render_ascii()
    assert sample_table.render_text() == sample_table.render_ascii()


def test_repr(sample_table):
    assert repr(sample_table) == "Table(field_names=['A', 'B'], rows=2)"
