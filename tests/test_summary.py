import pytest

from rated.cli.renderers import circle_bar
from rated.services.summary import circle_fill


@pytest.mark.parametrize(
    ("average", "expected"),
    [
        (0.0, [0.0, 0.0, 0.0, 0.0, 0.0]),
        (3.5, [1.0, 1.0, 1.0, 0.5, 0.0]),
        (5.0, [1.0, 1.0, 1.0, 1.0, 1.0]),
        (7.0, [1.0, 1.0, 1.0, 1.0, 1.0]),
    ],
)
def test_circle_fill(average: float, expected: list[float]) -> None:
    assert circle_fill(average) == pytest.approx(expected)


def test_circle_bar_marks_partial_circle() -> None:
    assert circle_bar(0) == "○○○○○"
    assert circle_bar(4) == "●●●●○"
    assert circle_bar(2.25) == "●●◐○○"
