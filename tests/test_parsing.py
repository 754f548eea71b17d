"""Tests for request parsing helpers."""

from datetime import datetime

from app.models.job import JobStatus
from app.services.parsing import (
    clamp_limit,
    days_ago_start,
    parse_bool,
    parse_enum,
    parse_urgency,
    urgency_level_to_score,
)


def test_parse_enum_exact_values_only():
    assert parse_enum(JobStatus, "PENDING") is JobStatus.PENDING
    assert parse_enum(JobStatus, "pending") is None
    assert parse_enum(JobStatus, "BOGUS") is None
    assert parse_enum(JobStatus, None) is None


def test_clamp_limit():
    assert clamp_limit(None) == 50
    assert clamp_limit("10") == 10
    assert clamp_limit("5000") == 200
    assert clamp_limit("-3") == 50
    assert clamp_limit("ten") == 50
    assert clamp_limit(None, default=None) is None


def test_parse_urgency():
    assert parse_urgency("3") == 3
    assert parse_urgency(" 9 urgent") == 9
    assert parse_urgency(7.8) == 7
    assert parse_urgency("42") == 10
    assert parse_urgency("-2") == 1
    assert parse_urgency("abc") is None
    assert parse_urgency(True) is None
    assert parse_urgency(None) is None
    assert parse_urgency(float("inf")) is None
    assert parse_urgency(float("-inf")) is None
    assert parse_urgency(float("nan")) is None


def test_urgency_level_to_score():
    assert urgency_level_to_score("emergency") == 10
    assert urgency_level_to_score("LOW") == 2
    assert urgency_level_to_score("") == 5
    assert urgency_level_to_score("soon") == 5


def test_parse_bool():
    assert parse_bool("true") is True
    assert parse_bool("0") is False
    assert parse_bool("maybe") is None
    assert parse_bool(None) is None


def test_days_ago_start():
    assert days_ago_start(30, datetime(2026, 3, 31, 23, 59)) == datetime(2026, 3, 1)
