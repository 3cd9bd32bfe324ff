"""Deterministic automaton recognizing one URL candidate.

An automaton instance tracks a single possible URL that starts at a
fixed offset of the input stream. It is fed one character at a time
and walks through three groups of states:

    1. Prefix states: "http", an optional "s", then "://".
    2. Domain state: ASCII letters, digits, "." and "-", folded to
       lowercase as they arrive.
    3. Path states: a "/" followed by ASCII letters, digits and
       ". , / + _".

Any character that cannot extend the candidate either finishes it
(SUCCESS, once a domain has been read) or kills it (ERROR, while
still inside the prefix). There is no lookahead and no backtracking:
the character that terminates a URL is consumed by the automaton and
not part of the match.

Grammar (case-sensitive, domain folded):

    INIT -h-> PREFIX_H -t-> PREFIX_T1 -t-> PREFIX_T2 -p-> PREFIX_P
    PREFIX_P -s-> PREFIX_S -:-> PREFIX_COLON
    PREFIX_P -:-> PREFIX_COLON -/-> PREFIX_SLASH1 -/-> PREFIX_SLASH2
    PREFIX_SLASH2 -domain char-> DOMAIN_CONTENT
    DOMAIN_CONTENT -domain char-> DOMAIN_CONTENT
    DOMAIN_CONTENT -/-> PATH_SLASH
    DOMAIN_CONTENT -other-> SUCCESS (path "/")
    PATH_SLASH, PATH_CONTENT -path char-> PATH_CONTENT
    PATH_SLASH, PATH_CONTENT -other-> SUCCESS
"""
from __future__ import annotations

import string
from enum import Enum, auto

from urltally.scanner.counts import UrlMatch
from urltally.scanner.types import DomainName, UrlPath

_ALNUM = frozenset(string.ascii_letters + string.digits)
_DOMAIN_CHARS = _ALNUM | frozenset(".-")
_PATH_CHARS = _ALNUM | frozenset(".,/+_")
_UPPER_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def is_domain_char(ch: str) -> bool:
    """ASCII letter, digit, "." or "-"."""
    return ch in _DOMAIN_CHARS


def is_path_char(ch: str) -> bool:
    """ASCII letter, digit, or one of ". , / + _"."""
    return ch in _PATH_CHARS


class State(Enum):
    INIT = auto()
    PREFIX_H = auto()
    PREFIX_T1 = auto()
    PREFIX_T2 = auto()
    PREFIX_P = auto()
    PREFIX_S = auto()
    PREFIX_COLON = auto()
    PREFIX_SLASH1 = auto()
    PREFIX_SLASH2 = auto()
    DOMAIN_CONTENT = auto()
    PATH_SLASH = auto()
    PATH_CONTENT = auto()

    ERROR = auto()
    SUCCESS = auto()

    def is_terminal(self) -> bool:
        return self is State.ERROR or self is State.SUCCESS

    def is_acceptable(self) -> bool:
        """True for states that a non-URL character resolves to SUCCESS."""
        return self in _ACCEPTABLE


_ACCEPTABLE = frozenset({State.DOMAIN_CONTENT, State.PATH_SLASH, State.PATH_CONTENT})

# Fixed single-character steps of the scheme prefix. PREFIX_P is the
# only branching prefix state and is handled separately.
PREFIX_TRANSITIONS: dict[State, tuple[str, State]] = {
    State.INIT: ("h", State.PREFIX_H),
    State.PREFIX_H: ("t", State.PREFIX_T1),
    State.PREFIX_T1: ("t", State.PREFIX_T2),
    State.PREFIX_T2: ("p", State.PREFIX_P),
    State.PREFIX_S: (":", State.PREFIX_COLON),
    State.PREFIX_COLON: ("/", State.PREFIX_SLASH1),
    State.PREFIX_SLASH1: ("/", State.PREFIX_SLASH2),
}


class TerminalStateError(Exception):
    """Raised when a finished automaton is used as if it were live.

    Feeding a character to an automaton in ERROR or SUCCESS, or taking
    the match out of one that did not succeed, is a bug in the caller
    and never a property of the input.
    """


class URLAutomaton:
    """Single URL candidate, advanced one character at a time.

    Usage:
        fsm = URLAutomaton()
        for ch in "http://Example.com/a b":
            fsm.consume(ch)
            if fsm.state.is_terminal():
                break
        fsm.is_success()   # True
        fsm.take_domain()  # "example.com"
        fsm.take_path()    # "/a"

    The domain and path are buffered as lists of characters and joined
    once, when the match is taken out.
    """

    __slots__ = ("_state", "_domain", "_path")

    def __init__(self) -> None:
        self._state = State.INIT
        self._domain: list[str] = []
        self._path: list[str] = []

    @property
    def state(self) -> State:
        return self._state

    def is_success(self) -> bool:
        return self._state is State.SUCCESS

    def is_error(self) -> bool:
        return self._state is State.ERROR

    def consume(self, ch: str) -> State:
        """Advance one step on `ch` and return the new state.

        Raises TerminalStateError if the automaton already finished.
        """
        state = self._state
        if state.is_terminal():
            raise TerminalStateError(f"Automaton already in {state.name} state")
        if len(ch) != 1:
            raise ValueError(f"consume() expects a single character, got {ch!r}")

        step = PREFIX_TRANSITIONS.get(state)
        if step is not None:
            expected, target = step
            self._state = target if ch == expected else State.ERROR
        elif state is State.PREFIX_P:
            if ch == "s":
                self._state = State.PREFIX_S
            elif ch == ":":
                self._state = State.PREFIX_COLON
            else:
                self._state = State.ERROR
        elif state is State.PREFIX_SLASH2:
            if ch in _DOMAIN_CHARS:
                self._domain.append(ch.translate(_UPPER_TO_LOWER))
                self._state = State.DOMAIN_CONTENT
            else:
                self._state = State.ERROR
        elif state is State.DOMAIN_CONTENT:
            if ch in _DOMAIN_CHARS:
                self._domain.append(ch.translate(_UPPER_TO_LOWER))
            elif ch == "/":
                self._path.append(ch)
                self._state = State.PATH_SLASH
            else:
                # No explicit path: report the root.
                self._path.append("/")
                self._state = State.SUCCESS
        else:
            # PATH_SLASH or PATH_CONTENT
            if ch in _PATH_CHARS:
                self._path.append(ch)
                self._state = State.PATH_CONTENT
            else:
                self._state = State.SUCCESS
        return self._state

    def take_domain(self) -> DomainName:
        """Move the folded domain out. The buffer is empty afterwards."""
        self._require_success()
        domain = "".join(self._domain)
        self._domain = []
        return domain

    def take_path(self) -> UrlPath:
        """Move the path out. The buffer is empty afterwards."""
        self._require_success()
        path = "".join(self._path)
        self._path = []
        return path

    def take_match(self) -> UrlMatch:
        return UrlMatch(domain=self.take_domain(), path=self.take_path())

    def _require_success(self) -> None:
        if self._state is not State.SUCCESS:
            raise TerminalStateError(
                f"Cannot take a match from automaton in {self._state.name} state"
            )

    def __repr__(self) -> str:
        return (
            f"URLAutomaton(state={self._state.name}, "
            f"domain={''.join(self._domain)!r}, path={''.join(self._path)!r})"
        )
