"""Tests for feed item domain models."""

import pytest
from pydantic import ValidationError

from feedfilter.domain import FeedItem, MatchInput


class TestFeedItem:
    """Tests for FeedItem validation."""

    def test_valid_item(self):
        item = FeedItem(title="  Flood warning  ", summary="Rivers rising", url="https://example.com/1")

        assert item.title == "Flood warning"
        assert item.summary == "Rivers rising"
        assert item.url == "https://example.com/1"

    def test_summary_defaults_to_empty(self):
        assert FeedItem(title="Flood warning").summary == ""

    def test_none_summary_is_coerced(self):
        assert FeedItem(title="Flood warning", summary=None).summary == ""

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            FeedItem(title="   ")

    def test_missing_title_rejected(self):
        with pytest.raises(ValidationError):
            FeedItem.model_validate({"summary": "No title here"})

    def test_to_match_input(self):
        item = FeedItem(title="Flood warning", summary="Rivers rising")
        assert item.to_match_input() == MatchInput(title="Flood warning", summary="Rivers rising")


class TestMatchInput:
    """Tests for MatchInput."""

    def test_is_immutable(self):
        match_input = MatchInput("Title", "Summary")
        with pytest.raises(AttributeError):
            match_input.title = "Other"
