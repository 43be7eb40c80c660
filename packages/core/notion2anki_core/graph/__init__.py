"""LangGraph pipeline components.

- build_import_graph: ingest -> render -> parse -> emit for one document
- run_import: run the graph over every ready document of a source
"""

from notion2anki_core.graph.build_import_graph import (
    ImportPipelineState,
    build_import_graph,
)
from notion2anki_core.graph.config import ImportConfig
from notion2anki_core.graph.run import run_import

__all__ = [
    "ImportConfig",
    "ImportPipelineState",
    "build_import_graph",
    "run_import",
]
