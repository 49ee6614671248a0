"""Graph compilation module turning ecosystem data into DOT and Mermaid text."""

from ecomap.graph.compiler import GraphCompiler
from ecomap.graph.layout import LayoutThresholds
from ecomap.graph.mermaid import generate_mermaid_chart

__all__ = [
    "GraphCompiler",
    "LayoutThresholds",
    "generate_mermaid_chart",
]
