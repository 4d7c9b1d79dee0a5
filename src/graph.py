"""NetworkX graph building from person and relation records."""

from collections.abc import Iterable

import networkx as nx

from config import Config
from errors import IoError, OutOfBoundsError
from models import Person, Relation


def write_image(person: Person, config: Config) -> str:
    """Write a person's portrait bytes to disk and return the filename used."""
    path = config.image_path(person.id)
    try:
        path.write_bytes(person.image)
    except OSError as exc:
        raise IoError(f"cannot write image for person {person.id} to {path}: {exc}") from exc
    return config.image_filename(person.id)


def _resolve(index_of: dict[int, int], person_id: int, role: str, relation: Relation) -> int:
    try:
        return index_of[person_id]
    except KeyError:
        raise OutOfBoundsError(
            f"{role} {person_id} of relation {relation} is not a known person "
            f"({len(index_of)} nodes allocated)"
        ) from None


def build_graph(
    persons: Iterable[Person], relations: Iterable[Relation], config: Config
) -> nx.MultiDiGraph:
    """
    Build a directed family graph with one node per person and parent -> child edges.

    Nodes are keyed by allocation order (the Nth person read becomes node N-1).
    Relation endpoints are resolved through the stored-id -> node mapping kept in
    ``G.graph["index_of"]``, so identifiers need not be dense.

    Persons carrying image bytes get them written to ``config.image_path(id)``,
    and the filename is recorded on the node as ``image``.

    Args:
        persons: Person records, consumed fully before any relation
        relations: Relation records, two edges are added for each
        config: Supplies the image directory and naming pattern

    Returns:
        A MultiDiGraph, so a father == mother relation still yields two edges
    """
    G = nx.MultiDiGraph()
    index_of: dict[int, int] = {}
    G.graph["index_of"] = index_of

    # Add nodes (persons)
    for person in persons:
        index = G.number_of_nodes()
        G.add_node(index, label=person.label, person_id=person.id)
        index_of[person.id] = index

        if person.image is not None:
            G.nodes[index]["image"] = write_image(person, config)

    # Add edges (relations); unknown endpoints must not create nodes
    for relation in relations:
        child = _resolve(index_of, relation.person, "child", relation)
        father = _resolve(index_of, relation.father, "father", relation)
        mother = _resolve(index_of, relation.mother, "mother", relation)

        G.add_edge(father, child, weight=0)
        G.add_edge(mother, child, weight=0)

    return G


def summarize_graph(G: nx.MultiDiGraph) -> tuple[int, int]:
    return G.number_of_nodes(), G.number_of_edges()


def person_ids(G: nx.MultiDiGraph) -> dict[int, int]:
    """Map each node index back to the stored person id it was built from."""
    return {node: data["person_id"] for node, data in G.nodes(data=True)}
