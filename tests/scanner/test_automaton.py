"""Tests for the single-candidate URL automaton."""

import pytest

from urltally.scanner.automaton import (
    PREFIX_TRANSITIONS,
    State,
    TerminalStateError,
    URLAutomaton,
    is_domain_char,
    is_path_char,
)
from urltally.scanner.counts import UrlMatch


def run(text: str) -> URLAutomaton:
    """Feed characters until the automaton reaches a terminal state."""
    fsm = URLAutomaton()
    for ch in text:
        fsm.consume(ch)
        if fsm.state.is_terminal():
            break
    return fsm


class TestPrefix:
    def test_states_along_http_prefix(self):
        fsm = URLAutomaton()
        assert fsm.state is State.INIT
        expected = [
            State.PREFIX_H, State.PREFIX_T1, State.PREFIX_T2, State.PREFIX_P,
            State.PREFIX_COLON, State.PREFIX_SLASH1, State.PREFIX_SLASH2,
        ]
        for ch, state in zip("http://", expected):
            assert fsm.consume(ch) is state

    def test_https_passes_through_prefix_s(self):
        fsm = URLAutomaton()
        for ch in "https":
            fsm.consume(ch)
        assert fsm.state is State.PREFIX_S
        fsm.consume(":")
        assert fsm.state is State.PREFIX_COLON

    @pytest.mark.parametrize("text", [
        "x", "htto", "http;", "https/", "httpss", "http:x", "http:/x",
        "http:///", "http:// ", "HTTP://a.com", "Http://a.com",
    ])
    def test_prefix_mismatch_is_error(self, text):
        fsm = run(text)
        assert fsm.is_error()
        assert not fsm.is_success()

    def test_first_domain_char_must_be_ascii(self):
        assert run("http://éx.com ").is_error()

    def test_prefix_table_is_linear(self):
        # PREFIX_P branches and is handled outside the table
        assert State.PREFIX_P not in PREFIX_TRANSITIONS
        assert PREFIX_TRANSITIONS[State.INIT] == ("h", State.PREFIX_H)


class TestDomain:
    def test_domain_only_gets_root_path(self):
        fsm = run("http://example.com ")
        assert fsm.is_success()
        assert fsm.take_domain() == "example.com"
        assert fsm.take_path() == "/"

    def test_domain_is_folded(self):
        fsm = run("https://WWW.Example.COM\n")
        assert fsm.take_domain() == "www.example.com"

    def test_domain_allows_digits_dots_and_dashes(self):
        fsm = run("http://a-1.b--2..c ")
        assert fsm.take_domain() == "a-1.b--2..c"

    def test_non_ascii_letter_ends_domain(self):
        fsm = run("http://a.comé")
        assert fsm.is_success()
        assert fsm.take_match() == UrlMatch(domain="a.com", path="/")

    def test_colon_ends_domain(self):
        fsm = run("http://a.com:8080/x")
        assert fsm.take_match() == UrlMatch(domain="a.com", path="/")

    def test_slash_enters_path(self):
        fsm = URLAutomaton()
        for ch in "http://a.com/":
            fsm.consume(ch)
        assert fsm.state is State.PATH_SLASH


class TestPath:
    def test_path_is_verbatim(self):
        fsm = run("http://Example.COM/Path_1 ")
        assert fsm.take_match() == UrlMatch(domain="example.com", path="/Path_1")

    def test_bare_trailing_slash(self):
        fsm = run("http://a.com/ ")
        assert fsm.take_match() == UrlMatch(domain="a.com", path="/")

    def test_all_path_characters(self):
        fsm = run("http://a.com/a,b+c_d.e/F9//x?q=1")
        assert fsm.take_path() == "/a,b+c_d.e/F9//x"

    def test_dash_ends_path(self):
        # "-" is a domain character but not a path character
        fsm = run("http://a.com/x-y")
        assert fsm.take_path() == "/x"

    @pytest.mark.parametrize("terminator", [" ", "\n", "?", "#", ":", "-", "é", ")"])
    def test_terminators(self, terminator):
        fsm = run(f"http://a.com/p{terminator}")
        assert fsm.is_success()
        assert fsm.take_path() == "/p"


class TestContract:
    def test_consume_after_success_raises(self):
        fsm = run("http://a.com ")
        with pytest.raises(TerminalStateError, match="SUCCESS"):
            fsm.consume("x")

    def test_consume_after_error_raises(self):
        fsm = run("x")
        with pytest.raises(TerminalStateError, match="ERROR"):
            fsm.consume("h")

    def test_take_before_success_raises(self):
        fsm = URLAutomaton()
        for ch in "http://a.com":
            fsm.consume(ch)
        assert fsm.state is State.DOMAIN_CONTENT
        with pytest.raises(TerminalStateError, match="DOMAIN_CONTENT"):
            fsm.take_domain()
        with pytest.raises(TerminalStateError):
            fsm.take_path()

    def test_take_from_error_raises(self):
        with pytest.raises(TerminalStateError):
            run("q").take_match()

    def test_take_moves_buffers_out(self):
        fsm = run("http://a.com/x ")
        assert fsm.take_domain() == "a.com"
        assert fsm.take_path() == "/x"
        assert fsm.take_domain() == ""
        assert fsm.take_path() == ""

    def test_consume_rejects_multiple_characters(self):
        with pytest.raises(ValueError, match="single character"):
            URLAutomaton().consume("ht")

    def test_consume_rejects_empty_string(self):
        with pytest.raises(ValueError):
            URLAutomaton().consume("")

    def test_repr_shows_state_and_buffers(self):
        fsm = URLAutomaton()
        for ch in "http://Ab":
            fsm.consume(ch)
        assert repr(fsm) == "URLAutomaton(state=DOMAIN_CONTENT, domain='ab', path='')"


class TestStateQueries:
    def test_terminal_states(self):
        terminal = {s for s in State if s.is_terminal()}
        assert terminal == {State.ERROR, State.SUCCESS}

    def test_acceptable_states(self):
        acceptable = {s for s in State if s.is_acceptable()}
        assert acceptable == {State.DOMAIN_CONTENT, State.PATH_SLASH, State.PATH_CONTENT}

    def test_state_count(self):
        assert len(State) == 14


class TestCharacterClasses:
    @pytest.mark.parametrize("ch", ["a", "Z", "0", "9", ".", "-"])
    def test_domain_chars(self, ch):
        assert is_domain_char(ch)

    @pytest.mark.parametrize("ch", ["/", "_", ",", "+", ":", " ", "é", "٢"])
    def test_not_domain_chars(self, ch):
        assert not is_domain_char(ch)

    @pytest.mark.parametrize("ch", ["a", "Z", "5", ".", ",", "/", "+", "_"])
    def test_path_chars(self, ch):
        assert is_path_char(ch)

    @pytest.mark.parametrize("ch", ["-", ":", "?", "#", "%", " ", "é"])
    def test_not_path_chars(self, ch):
        assert not is_path_char(ch)
