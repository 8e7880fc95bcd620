"""
tests/test_layout
~~~~~~~~~~~~~~~~~
"""

import pytest

from heatgrid.core.layout import Box, CellGrid, compute_cell_size, compute_cells, compute_layout


@pytest.mark.unit
def test_box_width_and_height():
    """
    Ensures Box derives width and height from its edges.
    """
    box = Box(top=10, left=20, right=70, bottom=40)
    assert box.width == 50
    assert box.height == 30


@pytest.mark.api
def test_compute_layout_default_bands():
    """
    Ensures the canvas splits into 300-unit label bands and the remaining cells box.
    """
    layout = compute_layout(1000, 800)

    assert layout.outer_box == Box(top=0, left=0, right=1000, bottom=800)
    assert layout.row_label_box == Box(top=0, left=0, right=300, bottom=800)
    assert layout.column_label_box == Box(top=0, left=300, right=1000, bottom=300)
    assert layout.cells_box == Box(top=300, left=300, right=1000, bottom=800)


@pytest.mark.api
def test_compute_layout_custom_bands():
    """
    Ensures band sizes are configurable.
    """
    layout = compute_layout(400, 400, row_label_width=50, col_label_height=80)

    assert layout.row_label_box == Box(top=0, left=0, right=50, bottom=400)
    assert layout.column_label_box == Box(top=0, left=50, right=400, bottom=80)
    assert layout.cells_box == Box(top=80, left=50, right=400, bottom=400)


@pytest.mark.api
def test_compute_cells_column_major_order():
    """
    Ensures cells follow grid[col][row] iteration with the expected rectangles.
    """
    cells_box = compute_layout(600, 600).cells_box
    cells = list(compute_cells([[1.0, 2.0], [3.0, 4.0]], cells_box))

    assert [(c.col, c.row, c.value) for c in cells] == [
        (0, 0, 1.0),
        (0, 1, 2.0),
        (1, 0, 3.0),
        (1, 1, 4.0),
    ]
    assert cells[0].box == Box(top=300, left=300, right=450, bottom=450)
    assert cells[1].box == Box(top=450, left=300, right=450, bottom=600)
    assert cells[2].box == Box(top=300, left=450, right=600, bottom=450)
    assert cells[3].box == Box(top=450, left=450, right=600, bottom=600)


@pytest.mark.unit
def test_compute_cell_size_truncates():
    """
    Ensures cell sizes use truncating division.
    """
    assert compute_cell_size(Box(top=0, left=0, right=400, bottom=100), 3, 7) == (133, 14)


@pytest.mark.api
def test_compute_cells_partition_without_gaps():
    """
    Ensures adjacent cells share edges and only the far edges keep truncation slack.
    """
    cells_box = Box(top=300, left=300, right=700, bottom=500)
    grid = [[float(c * 7 + r) for r in range(7)] for c in range(3)]
    cells = compute_cells(grid, cells_box)

    for col in range(3):
        for row in range(7):
            cell = cells.cell_at(col, row)
            if col + 1 < 3:
                assert cell.box.right == cells.cell_at(col + 1, row).box.left
            if row + 1 < 7:
                assert cell.box.bottom == cells.cell_at(col, row + 1).box.top

    last = cells.cell_at(2, 6)
    # 400 / 3 and 200 / 7 leave 1 and 4 pixels unpainted
    assert cells_box.right - last.box.right == 1
    assert cells_box.bottom - last.box.bottom == 4


@pytest.mark.api
def test_cell_grid_accessors():
    """
    Ensures typed accessors resolve the first cell of each column and row.
    """
    grid = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    cells = compute_cells(grid, Box(top=0, left=0, right=200, bottom=300))

    assert len(cells) == 6
    assert cells.first_cell_of_column(1).value == 4.0
    assert cells.first_cell_of_row(2).value == 3.0
    assert cells.cell_at(1, 2).value == 6.0
    assert cells.first_cell_of_row(2).box.left == 0
    assert cells.first_cell_of_column(1).box.top == 0


@pytest.mark.unit
def test_cell_grid_rejects_out_of_range():
    """
    Ensures out-of-range indices raise IndexError instead of wrapping.
    """
    cells = compute_cells([[1.0, 2.0]], Box(top=0, left=0, right=10, bottom=10))
    with pytest.raises(IndexError):
        cells.cell_at(1, 0)
    with pytest.raises(IndexError):
        cells.first_cell_of_row(-1)


@pytest.mark.unit
def test_cell_grid_rejects_wrong_cell_count():
    """
    Ensures CellGrid checks the cell count against the grid shape.
    """
    with pytest.raises(ValueError):
        CellGrid([], 1, 1)
