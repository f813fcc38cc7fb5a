"""Per-buffer installation guard and the highlighter it installs.

Each open buffer owns one SessionState. The highlighter is installed at most
once per session; a closed and reopened buffer gets a fresh session.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from px2syntax.classifier import classify, classify_tokens
from px2syntax.rules import DEFAULT_TABLE, Category, CategoryTable
from px2syntax.styles import DEFAULT_BINDING, StyleBinding, style_for
from px2syntax.tokens import Token


@dataclass(slots=True)
class SessionState:
    """Initialization flag for one editing buffer."""

    initialized: bool = False


def should_initialize(session: SessionState) -> bool:
    """Return True if the highlighter has not been installed for *session*.

    Only reads the flag; marking the session initialized is the caller's job.
    """
    return not session.initialized


@dataclass(frozen=True, slots=True)
class Highlight:
    """A classified token and the role-name it should be shown with."""

    token: Token
    category: Category
    role: str | None


@dataclass(frozen=True, slots=True)
class Highlighter:
    """A CategoryTable and StyleBinding wired together."""

    table: CategoryTable = DEFAULT_TABLE
    binding: StyleBinding = DEFAULT_BINDING

    def role(self, token_text: str) -> str | None:
        return style_for(classify(token_text, self.table), self.binding)

    def highlight(self, tokens: Iterable[Token]) -> list[Highlight]:
        result: list[Highlight] = []
        for tok, category in classify_tokens(tokens, self.table):
            result.append(Highlight(tok, category, style_for(category, self.binding)))
        return result


def install(
    session: SessionState,
    table: CategoryTable = DEFAULT_TABLE,
    binding: StyleBinding = DEFAULT_BINDING,
) -> Highlighter | None:
    """Install a highlighter for *session*, or do nothing if one already is.

    Returns the new Highlighter, or None when the session was initialized.
    """
    if not should_initialize(session):
        return None
    highlighter = Highlighter(table, binding)
    session.initialized = True
    return highlighter


class BufferSessions:
    """Sessions and installed highlighters, keyed by buffer identifier."""

    def __init__(
        self,
        table: CategoryTable = DEFAULT_TABLE,
        binding: StyleBinding = DEFAULT_BINDING,
    ) -> None:
        self.table = table
        self.binding = binding
        self._sessions: dict[str, SessionState] = {}
        self._highlighters: dict[str, Highlighter] = {}

    def __contains__(self, buffer_id: str) -> bool:
        return buffer_id in self._sessions

    def open(self, buffer_id: str) -> SessionState:
        """Start a fresh, uninitialized session for *buffer_id*."""
        self._highlighters.pop(buffer_id, None)
        session = self._sessions[buffer_id] = SessionState()
        return session

    def close(self, buffer_id: str) -> None:
        """End the session for *buffer_id*; unknown buffers are ignored."""
        self._sessions.pop(buffer_id, None)
        self._highlighters.pop(buffer_id, None)

    def session(self, buffer_id: str) -> SessionState | None:
        return self._sessions.get(buffer_id)

    def highlighter(self, buffer_id: str) -> Highlighter | None:
        """Return the buffer's highlighter, installing it on first use.

        A buffer that was never opened is opened implicitly. Returns None if
        the session was marked initialized without installing through here.
        """
        session = self._sessions.get(buffer_id)
        if session is None:
            session = self.open(buffer_id)
        installed = install(session, self.table, self.binding)
        if installed is not None:
            self._highlighters[buffer_id] = installed
        return self._highlighters.get(buffer_id)
