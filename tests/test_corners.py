import pytest

from squirclepath import Corner, CornerRadii, distribute_and_normalize
from squirclepath.corners import ADJACENTS_BY_CORNER, Side


def _assert_sides_not_overbooked(corners, width: float, height: float) -> None:
    for corner in Corner:
        for adjacent_corner, side in ADJACENTS_BY_CORNER[corner]:
            side_length = width if side.is_horizontal else height
            total = (
                corners[corner].rounding_and_smoothing_budget
                + corners[adjacent_corner].rounding_and_smoothing_budget
            )
            assert total <= side_length + 1e-9


def test_adjacency_is_symmetric() -> None:
    for corner in Corner:
        for adjacent_corner, side in ADJACENTS_BY_CORNER[corner]:
            assert (corner, side) in ADJACENTS_BY_CORNER[adjacent_corner]
    assert Side.TOP.is_horizontal and Side.BOTTOM.is_horizontal
    assert not Side.LEFT.is_horizontal and not Side.RIGHT.is_horizontal


def test_largest_corner_claims_proportional_share() -> None:
    corners = distribute_and_normalize(CornerRadii(50, 10, 10, 10), 100, 100)

    assert corners.top_left.rounding_and_smoothing_budget == pytest.approx(250 / 3)
    assert corners.top_left.radius == 50
    assert corners.top_right.rounding_and_smoothing_budget == pytest.approx(50 / 3)
    assert corners.bottom_left.rounding_and_smoothing_budget == pytest.approx(50 / 3)
    assert corners.bottom_right.rounding_and_smoothing_budget == pytest.approx(250 / 3)
    assert [corner.radius for corner in corners[1:]] == [10, 10, 10]
    _assert_sides_not_overbooked(corners, 100, 100)


def test_equal_radii_split_the_shorter_side() -> None:
    square = distribute_and_normalize(CornerRadii(20, 20, 20, 20), 100, 100)
    assert [corner.rounding_and_smoothing_budget for corner in square] == [50, 50, 50, 50]

    wide = distribute_and_normalize(CornerRadii(10, 10, 10, 10), 100, 50)
    assert [corner.rounding_and_smoothing_budget for corner in wide] == [25, 25, 25, 25]
    assert [corner.radius for corner in wide] == [10, 10, 10, 10]


def test_radius_is_clamped_to_budget() -> None:
    corners = distribute_and_normalize(CornerRadii(80, 80, 0, 0), 100, 100)

    assert corners.top_left.rounding_and_smoothing_budget == pytest.approx(50)
    assert corners.top_left.radius == pytest.approx(50)
    assert corners.top_right.radius == pytest.approx(50)
    _assert_sides_not_overbooked(corners, 100, 100)


def test_all_zero_radii_give_zero_budgets() -> None:
    corners = distribute_and_normalize(CornerRadii(0, 0, 0, 0), 100, 60)

    for corner in corners:
        assert corner.radius == 0
        assert corner.rounding_and_smoothing_budget == 0


def test_zero_corner_squeezed_by_neighbour() -> None:
    corners = distribute_and_normalize(CornerRadii(0, 20, 0, 0), 100, 100)

    assert corners[Corner.TOP_RIGHT].rounding_and_smoothing_budget == 100
    assert corners[Corner.TOP_LEFT].rounding_and_smoothing_budget == 0
    assert corners[Corner.BOTTOM_LEFT].rounding_and_smoothing_budget == 0
    assert corners[Corner.BOTTOM_RIGHT].rounding_and_smoothing_budget == 0


@pytest.mark.parametrize(
    "radii, width, height",
    [
        ((30, 70, 5, 0), 120, 80),
        ((40, 40, 40, 10), 60, 200),
        ((100, 1, 100, 1), 50, 50),
        ((12.5, 0, 0, 33), 10, 300),
    ],
)
def test_budgets_never_overbook_a_side(radii, width: float, height: float) -> None:
    corners = distribute_and_normalize(radii, width, height)

    _assert_sides_not_overbooked(corners, width, height)
    for corner in corners:
        assert corner.rounding_and_smoothing_budget >= 0
        assert corner.radius <= corner.rounding_and_smoothing_budget


def test_rejects_wrong_number_of_radii() -> None:
    with pytest.raises(ValueError):
        distribute_and_normalize((10, 10, 10), 100, 100)


def test_equal_radii_are_processed_in_corner_order() -> None:
    # Top-left goes first and is held back by its left side, so top-right gets the rest of the top.
    # 左上角先处理且受左侧边限制，因此右上角获得上边剩余部分。
    corners = distribute_and_normalize(CornerRadii(30, 30, 25, 0), 100, 60)

    assert corners.top_left.rounding_and_smoothing_budget == pytest.approx(360 / 11)
    assert corners.top_left.radius == 30
    assert corners.top_right.rounding_and_smoothing_budget == pytest.approx(60)
    assert corners.top_right.radius == 30
    assert corners.bottom_left.rounding_and_smoothing_budget == pytest.approx(300 / 11)
    assert corners.bottom_left.radius == 25
    assert corners.bottom_right.rounding_and_smoothing_budget == pytest.approx(0)
    assert corners.bottom_right.radius == pytest.approx(0)
    _assert_sides_not_overbooked(corners, 100, 60)


def test_negative_radius_does_not_raise() -> None:
    corners = distribute_and_normalize(CornerRadii(-10, 10, 10, 10), 100, 100)

    # Top-right's share of the top side is infinite, so its right side decides. / 右上角在上边的份额为无穷大，由右侧边决定预算。
    assert [corner.rounding_and_smoothing_budget for corner in corners] == [50, 50, 50, 50]
    assert corners.top_left.radius == -10
    assert [corner.radius for corner in corners[1:]] == [10, 10, 10]
