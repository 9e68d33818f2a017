from __future__ import annotations

"""
A minimal pygls-based Language Server for mal.

Features:
- Text synchronization and document store
- Diagnostics: read errors, one expression per line
- Completion: builtins, special forms and names bound by top-level def!

Note: We avoid evaluating the buffer. We build a static index per document.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    Range,
)

from mal.builtin.env_builtin import BUILTINS
from mal.evaluation.special_forms import SpecialForm
from mal_lsp.indexer import DocumentIndex, build_index, completion_names

logger = logging.getLogger(__name__)

SOURCE = "mal-ls"
WORD_BREAKS = " \t()[]{},'\"`~^@;"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class MalLanguageServer(LanguageServer):
    CMD_NAME = "mal-ls"
    VERSION = "0.1.0"

    def __init__(self):
        super().__init__(self.CMD_NAME, self.VERSION)
        self.documents: Dict[str, DocumentState] = {}


ls = MalLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    logger.debug("indexed %s: %d definitions, %d errors", uri, len(idx.symbols), len(idx.errors))
    ls.publish_diagnostics(uri, diagnostics_for(idx))


# --- Diagnostics ---
def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=Range(
                start=Position(line=err.line, character=err.col),
                end=Position(line=err.line, character=err.col + 1),
            ),
            message=err.message,
            severity=DiagnosticSeverity.Error,
            source=SOURCE,
        )
        for err in idx.errors
    ]


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["(", "["]))
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return CompletionList(is_incomplete=False, items=[])
    prefix = _word_before(state.text, params.position)
    return CompletionList(is_incomplete=False, items=completion_items(state.index, prefix))


def completion_items(idx: DocumentIndex, prefix: str = "") -> List[CompletionItem]:
    special = set(SpecialForm.names())
    items: List[CompletionItem] = []
    for name in completion_names(idx, prefix):
        if name in special:
            kind = CompletionItemKind.Keyword
        elif name in BUILTINS:
            kind = CompletionItemKind.Function
        elif idx.symbols.get(name) and idx.symbols[name].kind == "function":
            kind = CompletionItemKind.Function
        else:
            kind = CompletionItemKind.Variable
        items.append(CompletionItem(label=name, kind=kind))
    return items


# --- Helpers ---
def _word_before(text: str, pos: Position) -> str:
    lines = text.splitlines()
    if pos.line >= len(lines):
        return ""
    line = lines[pos.line][: pos.character]
    start = len(line)
    while start > 0 and line[start - 1] not in WORD_BREAKS:
        start -= 1
    return line[start:]


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    # Run the language server over stdio
    ls.start_io()
    return 0


if __name__ == "__main__":
    main()
