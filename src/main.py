"""
1) Create the `person` and `relations` tables in SQLite.
2) Seed the demo family, unless the store already holds persons.
3) Read the store and build a networkx graph of parent -> child edges,
   writing stored portraits to disk along the way.
4) Serialize the graph to a DOT file.
5) Annotate node declarations whose portrait file exists on disk.
6) Optionally render the graph through Graphviz.
"""

from pathlib import Path
import sys

import networkx as nx

from config import Config
from database import count_persons, create_database, read_persons, read_relations, seed_demo_data
from errors import BloodlineError
from graph import build_graph, person_ids, summarize_graph
from labels import annotate_images
from plotting import render_graph, write_dot


def run_pipeline(config: Config) -> nx.MultiDiGraph:
    """Build, serialize and annotate the family graph stored at ``config.db_path``."""
    print("Building NetworkX graph...")
    G = build_graph(read_persons(config.db_path), read_relations(config.db_path), config)
    nodes, edges = summarize_graph(G)
    print(f"  Graph has {nodes} nodes and {edges} edges")

    print(f"Writing DOT file: {config.output_path}")
    write_dot(G, config.output_path)

    annotated = annotate_images(config.output_path, config, person_ids(G))
    print(f"  Annotated {annotated} nodes with portraits")

    if config.render_format:
        image_path = Path(config.output_path).with_suffix(f".{config.render_format}")
        print(f"Rendering graph to: {image_path}")
        render_graph(G, image_path, config.render_format)

    return G


def main():
    # Paths
    project_root = Path.cwd()
    sample_image = project_root / "pic.jpg"
    config = Config.from_root(
        project_root,
        sample_image=sample_image if sample_image.exists() else None,
    )

    try:
        print(f"Initializing SQLite store: {config.db_path}")
        create_database(config.db_path)

        if count_persons(config.db_path) == 0:
            print("Seeding demo data...")
            if config.sample_image is None:
                print(f"  No sample image at {sample_image}, seeding without portrait")
            seed_demo_data(config.db_path, config.sample_image)
        else:
            print("  Store already populated, skipping seed")

        run_pipeline(config)
    except BloodlineError as exc:
        print(f"Error: {type(exc).__name__}: {exc}", file=sys.stderr)
        sys.exit(1)

    print("Done!")


if __name__ == "__main__":
    main()
