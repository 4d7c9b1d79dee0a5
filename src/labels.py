"""Post-processing of written DOT files: attach portraits found on disk to nodes."""

from collections.abc import Mapping
from pathlib import Path
import re

from config import Config
from errors import IoError

# "<id> [" at the start of a statement; edge lines ("0 -> 2") never match
NODE_DECLARATION = re.compile(r'^\s*"?(\d+)"?\s*\[')
# an image attribute opening an attribute list or following another attribute
IMAGE_ATTRIBUTE = re.compile(r"[\[,]\s*image\s*=")


def annotate_line(line: str, config: Config, person_ids: Mapping[int, int] | None = None) -> str:
    """
    Append an image attribute list to a node declaration whose portrait exists.

    The node identifier is read back from the text. With ``person_ids`` it is
    a node index translated to the stored person id before the portrait is
    looked up, and nodes missing from the mapping are left alone. Without it
    the identifier is taken to be the person id itself.

    Lines that already declare an image (the builder puts one inline when the
    store holds the portrait), lines without a portrait file and all non-node
    lines come back unchanged.
    """
    match = NODE_DECLARATION.match(line)
    if match is None or IMAGE_ATTRIBUTE.search(line):
        return line

    node = int(match.group(1))
    if person_ids is None:
        person_id = node
    elif node in person_ids:
        person_id = person_ids[node]
    else:
        return line

    if not config.image_path(person_id).exists():
        return line

    clause = f' [ image = "{config.image_filename(person_id)}" ]'
    body = line.rstrip()
    trailing = line[len(body):]
    if body.endswith(";"):
        return body[:-1] + clause + ";" + trailing
    return body + clause + trailing


def annotate_images(path: Path, config: Config, person_ids: Mapping[int, int] | None = None) -> int:
    """
    Rewrite a DOT file in place, annotating node lines with existing portraits.

    Args:
        path: The DOT file written by the serializer
        config: Supplies the image directory and naming pattern
        person_ids: Node index -> stored person id, as returned by
            ``graph.person_ids``. Needed whenever ids have gaps.

    Returns:
        The number of lines that gained an image attribute
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise IoError(f"cannot read DOT file {path}: {exc}") from exc

    annotated = 0
    lines = []
    for line in content.split("\n"):
        new_line = annotate_line(line, config, person_ids)
        if new_line != line:
            annotated += 1
        lines.append(new_line)

    try:
        path.write_text("\n".join(lines), encoding="utf-8")
    except OSError as exc:
        raise IoError(f"cannot rewrite DOT file {path}: {exc}") from exc

    return annotated
