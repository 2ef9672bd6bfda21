"""
Tests for comma-separated email-list parsing.
"""

from connectors.addresses import build_email_address


class TestBuildEmailAddress:
    def test_drops_empty_segments(self):
        assert build_email_address("a@x.com,,b@y.com") == [
            {"email": "a@x.com"},
            {"email": "b@y.com"},
        ]

    def test_strips_whitespace(self):
        assert build_email_address(" a@x.com , b@y.com ") == [
            {"email": "a@x.com"},
            {"email": "b@y.com"},
        ]

    def test_single_address(self):
        assert build_email_address("a@x.com") == [{"email": "a@x.com"}]

    def test_empty_input_is_absent(self):
        assert build_email_address("") is None
        assert build_email_address(None) is None

    def test_only_separators_gives_empty_list(self):
        assert build_email_address(",,") == []

    def test_whitespace_only_segments_dropped(self):
        assert build_email_address("a@x.com,  ,b@y.com") == [
            {"email": "a@x.com"},
            {"email": "b@y.com"},
        ]
