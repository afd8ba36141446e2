"""
Batch generation: one component per requested root node.

Each root is converted independently. A node id that is missing from the
Figma response is skipped; a root that fails to convert is replaced with an
error-marker result so the remaining roots are unaffected.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from codegen.base import GeneratedArtifact, Platform, generate_component_name
from codegen.file_writer import write_artifact
from codegen.nodes import DesignNode, parse_node
from codegen.react_generator import figma_to_jsx
from codegen.react_native_generator import generate_react_native_code
from codegen.wechat_generator import generate_wechat_bundle

logger = logging.getLogger(__name__)


class ComponentResult(BaseModel):
    """Outcome of converting one requested root node."""
    node_id: str = Field(..., description="Requested Figma node id")
    name: str = Field(..., description="Component name, or 'Error'")
    filename: str = Field(..., description="Base filename of the generated component")
    code: str = Field(..., description="Generated source (JSON of all files for wechat)")
    error: Optional[str] = Field(default=None, description="Failure message when conversion failed")


async def generate_artifact(
    node: Union[DesignNode, Dict[str, Any]],
    component_name: str,
    platform: Platform,
) -> GeneratedArtifact:
    """Lower one root node for the given platform."""
    node = parse_node(node)
    platform = Platform(platform)

    if platform == Platform.PC:
        code = await figma_to_jsx(node, component_name)
        payloads = {f"{component_name}.tsx": code}
    elif platform == Platform.MOBILE:
        code = generate_react_native_code(node, component_name)
        payloads = {f"{component_name}.tsx": code}
    else:
        payloads = generate_wechat_bundle(node, component_name).files()

    return GeneratedArtifact(platform=platform, component_name=component_name, payloads=payloads)


def artifact_code(artifact: GeneratedArtifact) -> str:
    """Single text view of an artifact: the source file, or a JSON map of the bundle files."""
    if artifact.platform == Platform.WECHAT:
        return json.dumps(artifact.payloads, ensure_ascii=False, indent=2)
    return artifact.code


def _error_result(node_id: str, error: Exception) -> ComponentResult:
    message = str(error) or type(error).__name__
    return ComponentResult(
        node_id=node_id,
        name="Error",
        filename="error",
        code=f"// Error processing node {node_id}: {message}",
        error=message,
    )


async def generate_components(
    nodes_response: Dict[str, Any],
    node_ids: List[str],
    platform: Platform,
    write_files: bool = True,
    output_root: Optional[str] = None,
) -> List[ComponentResult]:
    """Convert every requested node of a GET /files/:key/nodes response.

    Args:
        nodes_response: Figma nodes response ({"nodes": {id: {"document": {...}}}})
        node_ids: Requested ids, processed in this order
        platform: Target platform
        write_files: Persist generated files under the output root
        output_root: Override for CODEGEN_OUTPUT_DIR

    Returns:
        One ComponentResult per id that was present in the response
    """
    platform = Platform(platform)
    nodes_map = nodes_response.get('nodes') or {}
    components: List[ComponentResult] = []

    for node_id in node_ids:
        node_data = nodes_map.get(node_id)
        if not node_data or not node_data.get('document'):
            logger.warning(f"Node {node_id} not found, skipping")
            continue

        try:
            node = parse_node(node_data['document'])
            component_name = generate_component_name(node.name, node_id)
            artifact = await generate_artifact(node, component_name, platform)
            if write_files:
                write_artifact(artifact, root=output_root)

            components.append(ComponentResult(
                node_id=node_id,
                name=component_name,
                filename=component_name,
                code=artifact_code(artifact),
            ))
            logger.info(f"Generated {platform.value} component {component_name} from node {node_id}")
        except Exception as e:
            logger.exception(f"Error processing node {node_id}")
            components.append(_error_result(node_id, e))

    return components
