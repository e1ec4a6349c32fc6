"""Minimal LSP server for posscan — diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import TextDocument

from posscan import __version__
from posscan.errors import TokenError
from posscan.lines import split_lines
from posscan.scanner import scan

server = LanguageServer("posscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _to_diagnostic(err: TokenError, doc: TextDocument) -> Diagnostic:
    # Scanner columns count code points; the client counts in its own units
    line = err.position.line
    col = err.position.column
    rng = Range(
        start=Position(line=line, character=col),
        end=Position(line=line, character=col + 1),
    )
    return Diagnostic(
        range=doc.position_codec.range_to_client_units(doc.lines, rng),
        message=err.message,
        severity=DiagnosticSeverity.Error,
        source="posscan",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per scan error."""
    doc = ls.workspace.get_text_document(uri)
    result = scan(split_lines(doc.source))
    diagnostics = [_to_diagnostic(err, doc) for err in result.errors]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
