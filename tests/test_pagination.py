"""Tests for pagination arguments, cache keys and page shaping"""

from datetime import datetime

import pytest

from schedule_service.domain.pagination import (
    build_args_key,
    build_page_key,
    page_offset,
    paginate,
    total_pages,
    validate_page_args,
)
from schedule_service.domain.schedules.schemas import SchedulesArgs
from schedule_service.errors import ValidationError


class TestPageArgs:
    def test_defaults(self):
        assert validate_page_args() == (1, 10)
        assert validate_page_args(None, None) == (1, 10)

    @pytest.mark.parametrize("page,limit", [(0, 10), (-1, 10), (1, 0), (1, -5)])
    def test_values_below_one_are_rejected(self, page, limit):
        with pytest.raises(ValidationError):
            validate_page_args(page, limit)

    def test_offset(self):
        assert page_offset(1, 10) == 0
        assert page_offset(3, 10) == 20


class TestPageShape:
    def test_total_pages_rounds_up(self):
        assert total_pages(25, 10) == 3
        assert total_pages(20, 10) == 2
        assert total_pages(0, 10) == 0

    def test_paginate_reports_count_total(self):
        page = paginate(["a", "b"], total=25, page=3, limit=10)

        assert page == {"items": ["a", "b"], "total": 25, "page": 3, "limit": 10, "totalPages": 3}


class TestCacheKeys:
    def test_page_key(self):
        assert build_page_key("customers", 2, 20) == "customers:page:2:limit:20"

    def test_args_key_is_compact_json_of_present_fields(self):
        args = SchedulesArgs(page=1, limit=10)

        assert build_args_key("schedules", args.model_dump(mode="json")) == (
            'schedules:{"page":1,"limit":10}'
        )

    def test_args_key_changes_with_filters(self):
        doctor_id = "3f1c6a3e-9a51-4c0e-8d1e-1f5d2b7c9a10"
        plain = build_args_key("schedules", SchedulesArgs().model_dump(mode="json"))
        filtered = build_args_key(
            "schedules", SchedulesArgs(doctorId=doctor_id).model_dump(mode="json")
        )

        assert plain != filtered
        assert f'"doctorId":"{doctor_id}"' in filtered

    def test_identical_args_share_a_key(self):
        start = datetime(2031, 5, 1, 9, 0)
        first = SchedulesArgs(page=2, startDate=start).model_dump(mode="json")
        second = SchedulesArgs(startDate=start, page=2).model_dump(mode="json")

        assert build_args_key("schedules", first) == build_args_key("schedules", second)
