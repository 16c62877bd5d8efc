"""Tests for display helpers."""

from datetime import datetime, timezone

from contribfinder.presentation import format_ist, label_style, repo_info_from_url


def test_repo_info_from_api_url():
    info = repo_info_from_url("https://api.github.com/repos/octo/demo")

    assert info.owner == "octo"
    assert info.name == "demo"
    assert info.full_name == "octo/demo"


def test_repo_info_from_missing_url():
    info = repo_info_from_url(None)

    assert info.owner == ""
    assert info.name == ""
    assert info.full_name == "/"


def test_label_style_uses_alpha_suffixes():
    style = label_style("d73a4a")

    assert style.background_color == "#d73a4a20"
    assert style.color == "#d73a4a"
    assert style.border == "1px solid #d73a4a40"


def test_label_style_default_colour():
    assert label_style(None).color == "#6b7280"
    assert label_style("").color == "#6b7280"


def test_format_ist_afternoon():
    value = datetime(2024, 1, 5, 9, 34, tzinfo=timezone.utc)
    assert format_ist(value) == "5 Jan 2024, 3:04 pm IST"


def test_format_ist_rolls_over_to_next_day():
    value = datetime(2024, 1, 4, 18, 30, tzinfo=timezone.utc)
    assert format_ist(value) == "5 Jan 2024, 12:00 am IST"


def test_format_ist_treats_naive_as_utc():
    assert format_ist(datetime(2024, 7, 1, 0, 0)) == "1 Jul 2024, 5:30 am IST"


def test_format_ist_none():
    assert format_ist(None) is None
