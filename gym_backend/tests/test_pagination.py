import pytest

from gym_backend.domain.pagination import clamp_pagination, pagination_block, total_pages


@pytest.mark.parametrize("page,limit,expected", [
    (1, 10, (1, 10)),
    (0, 10, (1, 10)),
    (-3, 5, (1, 5)),
    (2, 0, (2, 10)),
    (2, -1, (2, 10)),
    (1, 101, (1, 100)),
    (1, 100, (1, 100)),
    (None, None, (1, 10)),
])
def test_clamp_pagination(page, limit, expected):
    assert clamp_pagination(page, limit) == expected


def test_total_pages_is_ceiling():
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2


def test_pagination_block_shape():
    assert pagination_block(25, 2, 10) == {"total": 25, "page": 2, "limit": 10, "totalPages": 3}
