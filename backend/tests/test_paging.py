import pytest

from app.api.deps import clamp_paging


@pytest.mark.parametrize(
    ("page", "size", "expected"),
    [
        (1, 10, (1, 10)),
        (3, 25, (3, 25)),
        (0, 10, (1, 10)),
        (-4, 10, (1, 10)),
        (2, 0, (2, 10)),
        (2, -1, (2, 10)),
        (2, 100, (2, 100)),
        (2, 101, (2, 10)),
    ],
)
def test_clamp_paging(page, size, expected) -> None:
    paging = clamp_paging(page, size)

    assert (paging.page, paging.page_size) == expected
