# src/containerservice/core/parser.py
"""
Converts container service payloads to and from ClusterResource models.

Parsing propagates DecodeError for unknown orchestrator types and pydantic's
ValidationError for any other schema violation; nothing is defaulted silently.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..models.container_service import ClusterResource
from .config import config

logger = logging.getLogger(__name__)

Payload = Union[str, bytes, Mapping[str, Any]]


def parse_cluster_resource(payload: Payload) -> ClusterResource:
    """Builds a ClusterResource from JSON text or an already decoded mapping."""
    if isinstance(payload, (str, bytes)):
        resource = ClusterResource.model_validate_json(payload)
    else:
        resource = ClusterResource.model_validate(dict(payload))
    logger.debug(
        "Parsed cluster resource '%s' with %d agent pool(s)",
        resource.name,
        len(resource.properties.agent_pool_profiles or []),
    )
    return resource


def load_cluster_resource(path: Union[str, Path]) -> ClusterResource:
    """Reads a cluster definition from a JSON file."""
    path = Path(path)
    logger.debug(f"Loading cluster definition from {path}")
    return parse_cluster_resource(path.read_text(encoding="utf-8"))


def to_payload(resource: ClusterResource) -> Dict[str, Any]:
    """Returns the wire form of a resource: camelCase keys, unset optionals omitted."""
    return resource.model_dump(mode="json", by_alias=True)


def to_json(resource: ClusterResource, indent: Optional[int] = None) -> str:
    if indent is None:
        indent = config.JSON_INDENT
    return json.dumps(to_payload(resource), ensure_ascii=False, indent=indent or None)
