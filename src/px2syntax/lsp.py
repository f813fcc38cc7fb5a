"""Minimal LSP server for px2 — semantic token highlighting only."""

from __future__ import annotations

import sys
from pathlib import Path

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from px2syntax.errors import ConfigError
from px2syntax.lexer import tokenize
from px2syntax.session import BufferSessions, Highlight

# Role-name -> semantic token type reported to the client
ROLE_TOKEN_TYPES = {
    "Keyword": "keyword",
    "Boolean": "boolean",
    "Number": "number",
}

LEGEND = SemanticTokensLegend(token_types=list(ROLE_TOKEN_TYPES.values()), token_modifiers=[])

server = LanguageServer("px2syntax-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)
sessions = BufferSessions()


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def encode_semantic_tokens(source: str, highlights: list[Highlight]) -> list[int]:
    """Encode highlights as LSP relative (line, start, length, type, mods) runs.

    Unclassified tokens and roles without a token type are skipped. Columns
    and lengths are counted in UTF-16 code units from the last line break the
    scanner counted (LF, CRLF or a lone CR).
    """
    data: list[int] = []
    prev_line = 0
    prev_char = 0
    for h in highlights:
        if h.role is None or h.role not in ROLE_TOKEN_TYPES:
            continue
        start = h.token.span.start
        line = start.line - 1
        line_start = 1 + max(
            source.rfind("\n", 0, start.offset), source.rfind("\r", 0, start.offset)
        )
        char = _utf16_len(source[line_start : start.offset])
        token_type = LEGEND.token_types.index(ROLE_TOKEN_TYPES[h.role])

        delta_line = line - prev_line
        delta_char = char - prev_char if delta_line == 0 else char
        data.extend([delta_line, delta_char, _utf16_len(h.token.text), token_type, 0])
        prev_line, prev_char = line, char
    return data


def _semantic_tokens(ls: LanguageServer, uri: str, buffers: BufferSessions) -> SemanticTokens:
    """Classify the current text of *uri* with its installed highlighter."""
    highlighter = buffers.highlighter(uri)
    if highlighter is None:
        return SemanticTokens(data=[])
    source = ls.workspace.get_text_document(uri).source
    highlights = highlighter.highlight(tokenize(source))
    return SemanticTokens(data=encode_semantic_tokens(source, highlights))


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    sessions.open(params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: LanguageServer, params: DidCloseTextDocumentParams) -> None:
    sessions.close(params.text_document.uri)


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL, LEGEND)
def semantic_tokens_full(ls: LanguageServer, params: SemanticTokensParams) -> SemanticTokens:
    return _semantic_tokens(ls, params.text_document.uri, sessions)


def configure(config_dir: Path) -> None:
    """Load px2syntax.toml from *config_dir* into the server's sessions.

    Raises ConfigError and leaves the sessions untouched if the file is invalid.
    """
    from px2syntax.config import (
        CONFIG_FILENAME,
        binding_from_config,
        load_config,
        table_from_config,
    )

    config = load_config(None, config_dir)
    path = config_dir / CONFIG_FILENAME
    table = table_from_config(config, path)
    binding = binding_from_config(config, path)
    sessions.table = table
    sessions.binding = binding


def main() -> None:
    try:
        configure(Path.cwd())
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        print("using built-in rules", file=sys.stderr)
    server.start_io()
