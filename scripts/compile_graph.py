"""CLI for compiling a local ecosystem store into Graphviz DOT or Mermaid text"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from ecomap.config import settings
from ecomap.graph import GraphCompiler, LayoutThresholds, generate_mermaid_chart
from ecomap.relationship_sets import select_active_set, visible_subset
from ecomap.stores.local import LocalEcosystemStore


def main(
    store_path: str,
    set_id: int | None,
    output_format: str,
    outfile: str | None,
) -> str:
    store = LocalEcosystemStore(filepath=Path(store_path))
    snapshot = store.get_snapshot()
    active_set = select_active_set(store.get_relationship_sets(), set_id)
    snapshot.relationships = visible_subset(snapshot.relationships, active_set)

    if output_format == "mermaid":
        text = generate_mermaid_chart(snapshot.relationships, snapshot.entities)
    else:
        compiler = GraphCompiler(thresholds=LayoutThresholds.from_settings())
        text = compiler.compile_snapshot(snapshot)

    if outfile:
        Path(outfile).write_text(text)
        logger.info(f"Wrote {output_format} graph to {outfile}")
    else:
        sys.stdout.write(text)

    return text


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--store",
        type=str,
        required=False,
        help="Local ecosystem store file",
        default=settings.ecosystem_store_path,
    )
    parser.add_argument(
        "--set-id", type=int, required=False, help="Relationship set to filter by", default=None
    )
    parser.add_argument(
        "--format", type=str, choices=["dot", "mermaid"], required=False, default="dot"
    )
    parser.add_argument("--outfile", type=str, required=False, help="Output file", default=None)

    args = parser.parse_args()

    main(
        store_path=args.store,
        set_id=args.set_id,
        output_format=args.format,
        outfile=args.outfile,
    )
