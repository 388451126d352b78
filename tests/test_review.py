import dataclasses
from datetime import datetime, timezone

import pytest

from gplay_reviews.decoding.review import EPOCH, PLATFORM_NAME, parse_criteria, parse_review


def test_parse_full_record(raw_review):
    review = parse_review(raw_review(criteria=[["Speed", None, [5]]]))

    assert review.review_id == "r1"
    assert review.reviewer == "Alice"
    assert review.avatar == "AV"
    assert review.score == 5
    assert review.text == "Great app"
    assert review.timestamp == datetime(2023, 7, 22, 4, 26, 40, tzinfo=timezone.utc)
    assert review.useful == 3
    assert review.version == "1.2.3"
    assert review.criteria == {"Speed": 5}
    assert review.reply == ""
    assert review.respondent == ""
    assert review.reply_timestamp == EPOCH
    assert not review.has_reply


def test_parse_reply(raw_review):
    review = parse_review(raw_review(reply=("Dev Team", "Thanks!", 1690086400)))

    assert review.respondent == "Dev Team"
    assert review.reply == "Thanks!"
    assert review.reply_timestamp == datetime(2023, 7, 23, 4, 26, 40, tzinfo=timezone.utc)
    assert review.has_reply


def test_empty_text_yields_none(raw_review):
    assert parse_review(raw_review(text="")) is None
    assert parse_review(raw_review(text=None)) is None


def test_short_record_without_text_yields_none():
    assert parse_review(["r1", ["Alice"], 5]) is None
    assert parse_review([]) is None
    assert parse_review(None) is None
    assert parse_review("padding") is None


def test_missing_fields_decode_to_zero_values():
    review = parse_review([None, None, "five", None, "Only text"])

    assert review.text == "Only text"
    assert review.review_id == ""
    assert review.reviewer == ""
    assert review.avatar == ""
    assert review.score == 0
    assert review.useful == 0
    assert review.version == ""
    assert review.criteria == {}
    assert review.timestamp == EPOCH


def test_decoding_is_pure(raw_review):
    raw = raw_review(criteria=[["Speed", None, [5]]], reply=("Dev", "Hi", 1690000100))
    assert parse_review(raw) == parse_review(raw)


def test_criteria_without_rating_default_to_zero(raw_review):
    raw = raw_review(criteria=[["Design", None], ["Speed", None, [4, "x"]]])
    assert parse_criteria(raw) == {"Design": 0, "Speed": 4}


def test_duplicate_criterion_keeps_last_rating(raw_review):
    raw = raw_review(criteria=[["Speed", None, [2]], ["UI", None, [3]], ["Speed", None, [5]]])
    assert parse_review(raw).criteria == {"Speed": 5, "UI": 3}


def test_malformed_criteria_entries_are_tolerated(raw_review):
    raw = raw_review(criteria=["Speed", ["UI", None, None], ["Sound", None, ["n/a"]]])
    assert parse_criteria(raw) == {"UI": 0, "Sound": 0}


def test_url(raw_review):
    review = parse_review(raw_review())
    assert review.url("com.example") == (
        "https://play.google.com/store/apps/details?id=com.example&reviewId=r1")
    assert parse_review(raw_review(review_id=None)).url("com.example") == ""


def test_to_dict_uses_standard_keys(raw_review):
    row = parse_review(raw_review(criteria=[["Speed", None, [5]]])).to_dict()

    assert row['userName'] == "Alice"
    assert row['content'] == "Great app"
    assert row['score'] == 5
    assert row['platform'] == PLATFORM_NAME
    assert row['version'] == "1.2.3"
    assert row['criteria'] == {"Speed": 5}
    assert row['replyAt'] is None


def test_review_is_immutable(raw_review):
    review = parse_review(raw_review(criteria=[["Speed", None, [5]]]))

    with pytest.raises(TypeError):
        review.criteria["Speed"] = 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        review.score = 1

    assert review.criteria == {"Speed": 5}
    assert hash(review) == hash(parse_review(raw_review(criteria=[["Speed", None, [5]]])))
