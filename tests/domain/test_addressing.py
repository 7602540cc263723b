"""Tests for domain/addressing.py — addressed-pattern construction."""

import re

import pytest

from nestorbot.domain.addressing import respond_pattern

BOT_ID = "UNESTORBOT1"


class TestAddressedForms:
    def test_matches_bot_id_prefix(self):
        pattern = respond_pattern(re.compile(r"(.*)"), BOT_ID)
        match = pattern.search(f"{BOT_ID} message123")
        assert match is not None
        assert match.group(1) == "message123"

    def test_matches_slack_mention(self):
        pattern = respond_pattern(re.compile(r"(.*)"), BOT_ID)
        match = pattern.search(f"<@{BOT_ID}|nestorbot>: message123")
        assert match is not None
        assert match.group(1) == "message123"

    def test_matches_mention_without_display_name(self):
        pattern = respond_pattern(r"(.*)", BOT_ID)
        match = pattern.search(f"<@{BOT_ID}>: message123")
        assert match.group(1) == "message123"

    @pytest.mark.parametrize("prefix", [f"{BOT_ID}:", f"{BOT_ID},", f"@{BOT_ID}", f"  {BOT_ID}"])
    def test_separators(self, prefix):
        pattern = respond_pattern(r"(.*)", BOT_ID)
        assert pattern.search(f"{prefix} hello").group(1) == "hello"

    def test_does_not_match_unaddressed(self):
        pattern = respond_pattern(re.compile(r"(.*)"), BOT_ID)
        assert pattern.search("message123") is None

    def test_does_not_match_bot_id_later_in_text(self):
        pattern = respond_pattern(r"(.*)", BOT_ID)
        assert pattern.search(f"hey {BOT_ID} message123") is None

    def test_mention_of_other_user_not_matched(self):
        pattern = respond_pattern(r"(.*)", BOT_ID)
        assert pattern.search("<@USOMEONE|bob>: message123") is None


class TestPatternPreservation:
    def test_group_positions_preserved(self):
        pattern = respond_pattern(r"deploy (\w+) to (\w+)", BOT_ID)
        match = pattern.search(f"{BOT_ID} deploy api to prod")
        assert match.group(1) == "api"
        assert match.group(2) == "prod"

    def test_flags_preserved(self):
        pattern = respond_pattern(re.compile(r"hello", re.IGNORECASE), BOT_ID)
        assert pattern.search(f"{BOT_ID} HELLO") is not None

    def test_leading_anchor_dropped(self):
        pattern = respond_pattern(r"^ping$", BOT_ID)
        assert pattern.search(f"{BOT_ID}: ping") is not None

    def test_bot_id_is_escaped(self):
        pattern = respond_pattern(r"(.*)", "bot.+")
        assert pattern.search("bot.+ hi").group(1) == "hi"
        assert pattern.search("botxx hi") is None

    def test_braces_in_content(self):
        pattern = respond_pattern(r"code (\d{3})", BOT_ID)
        assert pattern.search(f"{BOT_ID} code 404").group(1) == "404"


class TestInlineFlags:
    def test_leading_ignorecase_flag(self):
        pattern = respond_pattern(r"(?i)ping", BOT_ID)
        assert pattern.flags & re.IGNORECASE
        assert pattern.search(f"{BOT_ID} PING") is not None

    def test_combined_and_repeated_flags(self):
        pattern = respond_pattern(r"(?i)(?s)echo (.*)", BOT_ID)
        match = pattern.search(f"{BOT_ID}: ECHO one\ntwo")
        assert match.group(1) == "one\ntwo"

    def test_flags_then_anchor(self):
        pattern = respond_pattern(r"(?im)^status$", BOT_ID)
        assert pattern.search(f"<@{BOT_ID}|nestorbot>: STATUS") is not None

    def test_compiled_pattern_with_inline_flags(self):
        pattern = respond_pattern(re.compile(r"(?i)ping"), BOT_ID)
        assert pattern.search(f"{BOT_ID} Ping") is not None
        assert pattern.search("ping") is None

    def test_scoped_inline_group_untouched(self):
        pattern = respond_pattern(r"(?i:ping) (\w+)", BOT_ID)
        assert pattern.search(f"{BOT_ID} PING pong").group(1) == "pong"
