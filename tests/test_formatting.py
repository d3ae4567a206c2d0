"""Tests for formatting utilities."""

from datetime import timedelta

import pytest

from rate_log.formatting import format_duration, format_notice, render
from rate_log.models import Emit, Notice, Silent


@pytest.mark.parametrize(
    "millis, expected",
    [
        (0, "0ms"),
        (999, "999ms"),
        (1000, "1s"),
        (59_999, "59s"),
        (60_000, "1m"),
        (3_599_999, "59m"),
        (3_600_000, "1h"),
        (90_000_000, "25h"),
    ],
)
def test_format_duration_units(millis, expected):
    assert format_duration(timedelta(milliseconds=millis)) == expected


def test_format_duration_sub_millisecond():
    assert format_duration(timedelta(microseconds=999)) == "0ms"


def test_format_duration_uses_total_not_remainder():
    # 1h 5m is still shown in hours only
    assert format_duration(timedelta(hours=1, minutes=5)) == "1h"


def test_format_notice():
    notice = Notice("Error occurred", 3, timedelta(milliseconds=15))
    assert format_notice(notice) == 'Message: "Error occurred" repeat for 3 times in the past 15ms'


def test_render_emit_is_verbatim():
    assert render(Emit('say "hi" 100%')) == 'say "hi" 100%'


def test_render_silent():
    assert render(Silent()) is None


def test_render_notice():
    text = render(Notice("message2", 2, timedelta(milliseconds=60)))
    assert text == 'Message: "message2" repeat for 2 times in the past 60ms'
