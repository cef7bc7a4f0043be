import pytest

from bakery_pos.rendering import format_rupiah, render_selectable, window_bounds


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (0, "Rp 0"),
        (500, "Rp 500"),
        (12500, "Rp 12.500"),
        (1234567, "Rp 1.234.567"),
        (1500.5, "Rp 1.500,50"),
    ],
)
def test_format_rupiah(amount, expected):
    assert format_rupiah(amount) == expected


def test_window_bounds_keeps_selection_visible():
    assert window_bounds(0, 5, None) == (0, 0)
    assert window_bounds(3, 5, 2) == (0, 3)
    assert window_bounds(20, 5, None) == (0, 5)
    assert window_bounds(20, 5, 10) == (8, 13)
    assert window_bounds(20, 5, 19) == (15, 20)


def test_render_selectable_marks_selection_and_overflow():
    text = render_selectable([f"row {n}" for n in range(10)], 9, 3).plain

    assert text.startswith("⋮")
    assert "➤ row 9" in text
    assert "row 0" not in text
