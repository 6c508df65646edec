# File: tests/splitting/test_request.py
"""Unit tests for split request validation."""

import pytest

from wall_level_splitter.splitting.errors import InvalidSplitRequest
from wall_level_splitter.splitting.request import SplitRequest, parse_split_request


class TestParseSplitRequest:
    """Tests for parse_split_request."""

    def test_valid(self):
        request = parse_split_request((1, 2), [3])

        assert isinstance(request, SplitRequest)
        assert request.wall_ids == [1, 2]
        assert request.level_ids == [3]

    def test_duplicates_kept(self):
        request = parse_split_request([1], [3, 3, 3])

        assert request.level_ids == [3, 3, 3]

    @pytest.mark.parametrize("wall_ids, level_ids, field", [
        ([], [1], "wall_ids"),
        ([1], [], "level_ids"),
        ([0], [1], "wall_ids"),
        ([1], [-4], "level_ids"),
    ])
    def test_invalid(self, wall_ids, level_ids, field):
        with pytest.raises(InvalidSplitRequest) as exc_info:
            parse_split_request(wall_ids, level_ids)

        error = exc_info.value
        assert error.internal_code == "invalid_request"
        assert error.extra == {"field": field}
        assert field in error.detail

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_split_request([], [])
