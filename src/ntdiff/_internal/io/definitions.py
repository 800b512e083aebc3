"""Node type definition I/O helpers (internal)."""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from pydantic import ValidationError

from ntdiff.kernel.model import NodeTypeDefinition


logger = logging.getLogger(__name__)


class DefinitionLoadError(ValueError):
    """Raised when a node type definition document cannot be read or validated."""


def parse_definitions(data: Any, source: str = "<data>") -> List[NodeTypeDefinition]:
    """Parse node type definitions from decoded JSON.

    Accepts a single definition object, a list of definition objects, or an
    object with a "node_types" list.
    """
    if isinstance(data, dict) and "node_types" in data:
        data = data["node_types"]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise DefinitionLoadError(f"{source}: expected a node type object or a list of them")

    definitions = []
    for i, entry in enumerate(data):
        try:
            definitions.append(NodeTypeDefinition.model_validate(entry))
        except ValidationError as e:
            raise DefinitionLoadError(f"{source}: invalid node type definition at index {i}: {e}") from e
    return definitions


def load_definitions_from_path(path: Union[str, Path]) -> List[NodeTypeDefinition]:
    """Load all node type definitions from a JSON file."""
    definitions_path = Path(path)
    with open(definitions_path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DefinitionLoadError(f"{definitions_path}: malformed JSON: {e}") from e
    definitions = parse_definitions(data, source=str(definitions_path))
    logger.debug("Loaded %d node type definition(s) from %s", len(definitions), definitions_path)
    return definitions


def load_definition_from_path(path: Union[str, Path]) -> NodeTypeDefinition:
    """Load exactly one node type definition from a JSON file."""
    definitions = load_definitions_from_path(path)
    if len(definitions) != 1:
        raise DefinitionLoadError(
            f"{path}: expected exactly one node type definition, found {len(definitions)}"
        )
    return definitions[0]
