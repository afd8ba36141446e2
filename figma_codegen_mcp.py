#!/usr/bin/env python3
"""
Figma Codegen MCP Server - Model Context Protocol server that turns Figma
frames into front-end components.

This server provides tools to:
- Generate React + Tailwind (pc), React Native (mobile) and WeChat
  mini-program (wechat) components from Figma nodes
- Convert a pasted Figma node document offline, without API access
"""

import json
import logging
import os
import re
import sys
from enum import Enum
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator
from mcp.server.fastmcp import FastMCP

from codegen import config
from codegen.base import Platform, generate_component_name
from codegen.nodes import parse_node
from codegen.pipeline import ComponentResult, artifact_code, generate_artifact, generate_components

logger = logging.getLogger(__name__)

# ============================================================================
# Constants
# ============================================================================

FIGMA_API_BASE = "https://api.figma.com/v1"
CHARACTER_LIMIT = 25000
DEFAULT_TIMEOUT = 30.0
COMPONENT_NAME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9]*$')

# ============================================================================
# Initialize MCP Server
# ============================================================================

mcp = FastMCP("figma_codegen_mcp")

# ============================================================================
# Enums and Types
# ============================================================================

class ResponseFormat(str, Enum):
    """Output format for tool responses."""
    MARKDOWN = "markdown"
    JSON = "json"


CODE_FENCE_LANGUAGE = {
    Platform.PC: "tsx",
    Platform.MOBILE: "tsx",
    Platform.WECHAT: "json",
}

# ============================================================================
# Pydantic Input Models
# ============================================================================

class FigmaGenerateInput(BaseModel):
    """Input model for component generation."""
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    file_key: str = Field(
        ...,
        description="Figma file key (from URL: figma.com/design/FILE_KEY/...)",
        min_length=10,
        max_length=50
    )
    node_ids: List[str] = Field(
        ...,
        description="Root node IDs to convert (e.g., ['1:2', '3:4'] or '1:2,3:4')",
        min_length=1,
        max_length=20
    )
    platform: Platform = Field(
        default=Platform.PC,
        description="Target platform: 'pc' (React + Tailwind), 'mobile' (React Native), 'wechat' (mini-program)"
    )
    write_files: bool = Field(
        default=True,
        description="Write generated files under CODEGEN_OUTPUT_DIR"
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' or 'json'"
    )

    @field_validator('file_key', mode='before')
    @classmethod
    def validate_file_key(cls, v: Any) -> Any:
        # Extract file key from URL if full URL provided; runs before the length check
        if isinstance(v, str) and 'figma.com' in v:
            match = re.search(r'figma\.com/(?:design|file)/([a-zA-Z0-9]+)', v)
            if match:
                return match.group(1)
            raise ValueError("Could not extract file key from Figma URL")
        return v

    @field_validator('node_ids', mode='before')
    @classmethod
    def split_node_ids(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            v = v.split(',')
        return [nid.strip() for nid in v if nid and nid.strip()]

    @field_validator('node_ids')
    @classmethod
    def normalize_node_ids(cls, v: List[str]) -> List[str]:
        # Convert 1-2 format to 1:2
        return [nid.replace('-', ':') for nid in v]


class FigmaConvertJsonInput(BaseModel):
    """Input model for offline conversion of a node document."""
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    node_json: str = Field(
        ...,
        description="Figma node document as JSON (the 'document' of a nodes response)",
        min_length=2
    )
    platform: Platform = Field(
        default=Platform.PC,
        description="Target platform: 'pc', 'mobile' or 'wechat'"
    )
    component_name: Optional[str] = Field(
        default=None,
        description="Component name (auto-generated from node name if not provided)"
    )

    @field_validator('node_json')
    @classmethod
    def validate_node_json(cls, v: str) -> str:
        try:
            data = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"node_json is not valid JSON: {e.msg}")
        if not isinstance(data, dict):
            raise ValueError("node_json must be a JSON object")
        return v

    @field_validator('component_name')
    @classmethod
    def sanitize_component_name(cls, v: Optional[str]) -> Optional[str]:
        # Used as a JS identifier and a WXSS selector prefix
        if not v:
            return None
        if COMPONENT_NAME_RE.match(v):
            return v
        return generate_component_name(v, "")


# ============================================================================
# Helper Functions
# ============================================================================

def _get_figma_token() -> str:
    """Get Figma API token from environment."""
    token = os.environ.get("FIGMA_ACCESS_TOKEN") or os.environ.get("FIGMA_TOKEN")
    if not token:
        raise ValueError(
            "Figma API token not found. Set FIGMA_ACCESS_TOKEN or FIGMA_TOKEN environment variable. "
            "Get your token from: https://www.figma.com/developers/api#access-tokens"
        )
    return token


async def _make_figma_request(
    endpoint: str,
    method: str = "GET",
    params: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Make authenticated request to Figma API."""
    token = _get_figma_token()

    async with httpx.AsyncClient() as client:
        response = await client.request(
            method=method,
            url=f"{FIGMA_API_BASE}/{endpoint}",
            headers={"X-Figma-Token": token},
            params=params,
            timeout=DEFAULT_TIMEOUT
        )
        response.raise_for_status()
        return response.json()


def _handle_api_error(e: Exception) -> str:
    """Format API errors for user-friendly messages."""
    if isinstance(e, httpx.HTTPStatusError):
        status = e.response.status_code
        if status == 401:
            return "Error: Invalid Figma API token. Check your FIGMA_ACCESS_TOKEN environment variable."
        elif status == 403:
            return "Error: Access denied. You don't have permission to view this file."
        elif status == 404:
            return "Error: File or node not found. Check the file key and node ID."
        elif status == 429:
            return "Error: Rate limit exceeded. Please wait before making more requests."
        return f"Error: Figma API returned status {status}"
    elif isinstance(e, httpx.TimeoutException):
        return "Error: Request timed out. The file might be too large."
    elif isinstance(e, ValueError):
        return f"Error: {str(e)}"
    return f"Error: {type(e).__name__}: {str(e)}"


def _truncate(text: str) -> str:
    if len(text) <= CHARACTER_LIMIT:
        return text
    return text[:CHARACTER_LIMIT] + "\n\n... (truncated)"


def _format_components_markdown(
    components: List[ComponentResult],
    platform: Platform,
    requested: int,
) -> str:
    generated = [c for c in components if c.error is None]
    failed = [c for c in components if c.error is not None]

    lines = [
        f"# Generated {platform.value} components",
        f"**Requested:** {requested} | **Generated:** {len(generated)} | "
        f"**Failed:** {len(failed)} | **Skipped:** {requested - len(components)}",
        "",
    ]
    language = CODE_FENCE_LANGUAGE[platform]
    for component in components:
        if component.error is not None:
            lines.append(f"## Node `{component.node_id}` failed")
            lines.append(f"`{component.error}`")
            lines.append("")
            continue
        lines.append(f"## {component.name} (`{component.node_id}`)")
        lines.append(f"```{language}")
        lines.append(component.code.rstrip("\n"))
        lines.append("```")
        lines.append("")

    return _truncate("\n".join(lines))


# ============================================================================
# Tools
# ============================================================================

@mcp.tool(
    name="figma_generate_components",
    annotations={
        "title": "Generate Components from Figma Nodes",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True
    }
)
async def figma_generate_components(params: FigmaGenerateInput) -> str:
    """
    Generate front-end components from Figma frames.

    Fetches the requested nodes and converts each root into one component for
    the target platform. Missing nodes are skipped; a node that fails to
    convert is reported without affecting the others.

    Args:
        params: FigmaGenerateInput containing:
            - file_key (str): Figma file key or full URL
            - node_ids (List[str]): Root node IDs
            - platform: 'pc', 'mobile' or 'wechat'
            - write_files (bool): Write files under CODEGEN_OUTPUT_DIR
            - response_format: 'markdown' or 'json'

    Returns:
        str: Generated components in requested format

    Examples:
        - "Make a React component from frame 1:2" -> node_ids=["1:2"], platform="pc"
        - "Mini-program for 3-4" -> node_ids="3-4", platform="wechat"
    """
    try:
        data = await _make_figma_request(
            f"files/{params.file_key}/nodes",
            params={"ids": ",".join(params.node_ids)}
        )
    except Exception as e:
        return _handle_api_error(e)

    components = await generate_components(
        data,
        params.node_ids,
        params.platform,
        write_files=params.write_files,
    )

    if params.response_format == ResponseFormat.JSON:
        return _truncate(json.dumps({
            "file_key": params.file_key,
            "platform": params.platform.value,
            "output_dir": config.CODEGEN_OUTPUT_DIR if params.write_files else None,
            "components": [c.model_dump() for c in components],
        }, indent=2, ensure_ascii=False))

    return _format_components_markdown(components, params.platform, len(params.node_ids))


@mcp.tool(
    name="figma_convert_node_json",
    annotations={
        "title": "Convert Figma Node JSON",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False
    }
)
async def figma_convert_node_json(params: FigmaConvertJsonInput) -> str:
    """
    Convert a Figma node document to a component without calling the Figma API.

    Args:
        params: FigmaConvertJsonInput containing:
            - node_json (str): Node document as JSON
            - platform: 'pc', 'mobile' or 'wechat'
            - component_name (Optional[str]): Override for the component name

    Returns:
        str: Generated source (for wechat, a JSON map of the four files)
    """
    try:
        node = parse_node(json.loads(params.node_json))
        component_name = params.component_name or generate_component_name(node.name, node.id or "")
        artifact = await generate_artifact(node, component_name, params.platform)
        return _truncate(artifact_code(artifact))
    except Exception as e:
        logger.exception("Offline conversion failed")
        return _handle_api_error(e)


# ============================================================================
# Entry Point
# ============================================================================

def main() -> None:
    # stdout carries the MCP stdio protocol
    logging.basicConfig(
        level=config.LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    main()
