import pytest

from labviewer.maze import CELL_COLS, CELL_ROWS, MAP_COLS, MAP_ROWS, LabMap


def test_empty_map_has_cell_derived_dimensions():
    rows = LabMap().rows
    assert len(rows) == CELL_ROWS * 2 - 1
    assert all(len(row) == CELL_COLS * 2 - 1 for row in rows)


def test_empty_map_renders_blank_lines():
    text = LabMap().render()
    lines = text.split("\n")
    assert lines[-1] == ""
    assert lines[:-1] == [" " * MAP_COLS] * MAP_ROWS


def test_empty_lab_document():
    lab_map = LabMap.parse("<Lab/>")
    assert lab_map.rows == LabMap().rows


def test_vertical_wall_between_first_cells():
    lab_map = LabMap.parse('<Lab><Row Pos="0" Pattern="  |"/></Lab>')
    assert lab_map.rows[0][1] == "|"
    assert lab_map.rows[0].count("|") == 1
    assert lab_map.render().split("\n")[MAP_ROWS - 1].startswith(" |")


def test_horizontal_wall_above_first_cell():
    lab_map = LabMap.parse('<Lab><Row Pos="1" Pattern="--"/></Lab>')
    assert lab_map.has_wall_above(0, 0) is True
    assert lab_map.has_wall_above(0, 1) is False


def test_horizontal_walls_only_at_cell_starts():
    lab_map = LabMap.parse('<Lab><Row Pos="1" Pattern=" - "/></Lab>')
    assert all(not lab_map.has_wall_above(0, col) for col in range(CELL_COLS))


def test_vertical_marks_ignored_on_odd_rows():
    lab_map = LabMap.parse('<Lab><Row Pos="3" Pattern="  |  |"/></Lab>')
    assert "|" not in lab_map.rows[3]


def test_render_puts_top_row_first():
    lab_map = LabMap.parse(f'<Lab><Row Pos="{MAP_ROWS - 2}" Pattern="--"/></Lab>')
    first_line = lab_map.render().split("\n")[0]
    second_line = lab_map.render().split("\n")[1]
    assert first_line.strip() == ""
    assert second_line.startswith("-")


def test_full_horizontal_row_marks_every_cell():
    pattern = "---" * CELL_COLS
    lab_map = LabMap.parse(f'<Lab><Row Pos="5" Pattern="{pattern}"/></Lab>')
    assert all(lab_map.has_wall_above(2, col) for col in range(CELL_COLS))
    assert all(not lab_map.has_wall_above(1, col) for col in range(CELL_COLS))


def test_out_of_range_row_is_ignored():
    lab_map = LabMap.parse('<Lab><Row Pos="40" Pattern="--"/></Lab>')
    assert lab_map.rows == LabMap().rows


@pytest.mark.parametrize("row,col", [(-1, 0), (CELL_ROWS - 1, 0), (0, CELL_COLS)])
def test_has_wall_above_range(row, col):
    with pytest.raises(IndexError):
        LabMap().has_wall_above(row, col)


def test_malformed_document():
    with pytest.raises(ValueError):
        LabMap.parse("<Lab><Row")


def test_load_from_file(tmp_path):
    path = tmp_path / "lab.xml"
    path.write_text('<Lab><Row Pos="1" Pattern="--"/></Lab>')
    assert LabMap.load(path).has_wall_above(0, 0) is True


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        LabMap.load(tmp_path / "absent.xml")