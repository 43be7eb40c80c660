"""Pipeline nodes for the per-document import graph.

Nodes:
    - ingest: fetch blocks from the document source
    - render: flatten blocks into markdown text
    - parse: extract flashcards from the text
    - emit: submit flashcards to the sink
"""

from notion2anki_core.graph.nodes import emit, ingest, parse, render

__all__ = ["emit", "ingest", "parse", "render"]
