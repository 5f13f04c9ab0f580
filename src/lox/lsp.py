"""Minimal LSP server for Lox: scanner diagnostics only."""

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

from lox import __version__
from lox.errors import DiagnosticCollector
from lox.scanner import scan

server = LanguageServer("lox-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per reported error."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    lines = source.splitlines()

    collector = DiagnosticCollector()
    scan(source, collector)

    diagnostics: list[Diagnostic] = []
    for diag in collector.diagnostics:
        # Errors carry a line only, so the whole line is flagged
        line = diag.line - 1
        width = len(lines[line]) if 0 <= line < len(lines) else 0
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=0),
                    end=Position(line=line, character=width),
                ),
                message=diag.message,
                severity=DiagnosticSeverity.Error,
                source="lox",
            )
        )

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
