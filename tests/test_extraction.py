"""Tests for portfolio data extraction from the caller's system message."""

from vuesense.extraction import extract_portfolio_data, find_system_message
from vuesense.schemas import ChatMessage


def _msgs(*pairs):
    return [ChatMessage(role=role, content=content) for role, content in pairs]


class TestExtractPortfolioData:
    def test_extracts_trimmed_block(self):
        messages = _msgs(("system", "You are helpful.\nCURRENT PORTFOLIO DATA:\nTEAM_X=ok"))
        assert extract_portfolio_data(messages) == "TEAM_X=ok"

    def test_strips_surrounding_whitespace(self):
        messages = _msgs(("system", "CURRENT PORTFOLIO DATA:   \n\n {\"a\": 1}\n\n  "))
        assert extract_portfolio_data(messages) == '{"a": 1}'

    def test_multiline_block_kept_verbatim(self):
        block = '{\n  "boardData": {\n    "initiatives": []\n  }\n}'
        messages = _msgs(("system", f"CURRENT PORTFOLIO DATA:\n{block}"))
        assert extract_portfolio_data(messages) == block

    def test_no_system_message(self):
        messages = _msgs(("user", "CURRENT PORTFOLIO DATA: ignored"), ("assistant", "hi"))
        assert extract_portfolio_data(messages) == ""

    def test_empty_messages(self):
        assert extract_portfolio_data([]) == ""

    def test_system_message_without_marker(self):
        messages = _msgs(("system", "Portfolio data follows: TEAM_X=ok"))
        assert extract_portfolio_data(messages) == ""

    def test_marker_is_case_sensitive(self):
        messages = _msgs(("system", "current portfolio data: TEAM_X=ok"))
        assert extract_portfolio_data(messages) == ""

    def test_marker_with_nothing_after(self):
        messages = _msgs(("system", "Intro\nCURRENT PORTFOLIO DATA:"))
        assert extract_portfolio_data(messages) == ""

    def test_repeated_marker_keeps_everything_after_first(self):
        messages = _msgs(("system", "CURRENT PORTFOLIO DATA: A\nCURRENT PORTFOLIO DATA: B"))
        assert extract_portfolio_data(messages) == "A\nCURRENT PORTFOLIO DATA: B"

    def test_only_first_system_message_consulted(self):
        messages = _msgs(
            ("system", "No data here"),
            ("user", "hello"),
            ("system", "CURRENT PORTFOLIO DATA: TEAM_Y=late"),
        )
        assert extract_portfolio_data(messages) == ""

    def test_system_message_need_not_be_first(self):
        messages = _msgs(
            ("user", "hello"),
            ("system", "CURRENT PORTFOLIO DATA: TEAM_Y=late"),
        )
        assert extract_portfolio_data(messages) == "TEAM_Y=late"


def test_find_system_message_returns_first():
    messages = _msgs(("user", "u"), ("system", "s1"), ("system", "s2"))
    assert find_system_message(messages).content == "s1"
    assert find_system_message(_msgs(("user", "u"))) is None
