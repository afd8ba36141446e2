"""Persist generated components under a per-platform output root."""

import logging
import os
from typing import Dict, List, Optional

from codegen import config
from codegen.base import GeneratedArtifact, Platform
from codegen.wechat_generator import WechatBundle

logger = logging.getLogger(__name__)

OUTPUT_PATHS = {
    Platform.PC: os.path.join("generated", "pc", "components"),
    Platform.MOBILE: os.path.join("generated", "mobile", "components"),
    Platform.WECHAT: os.path.join("generated", "wechat", "components"),
}


def _write_text(path: str, content: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def write_component_file(
    platform: Platform,
    filename: str,
    content: str,
    root: Optional[str] = None,
) -> str:
    """Write one generated file and return its path."""
    path = os.path.join(root or config.CODEGEN_OUTPUT_DIR, OUTPUT_PATHS[Platform(platform)], filename)
    _write_text(path, content)
    logger.info(f"Wrote {path}")
    return path


def _write_wechat_files(component_name: str, files: Dict[str, str], root: Optional[str]) -> str:
    base_path = os.path.join(
        root or config.CODEGEN_OUTPUT_DIR,
        OUTPUT_PATHS[Platform.WECHAT],
        component_name.lower(),
    )
    for filename, content in files.items():
        _write_text(os.path.join(base_path, filename), content)
    logger.info(f"Wrote mini-program component {base_path}")
    return base_path


def write_wechat_component(
    component_name: str,
    bundle: WechatBundle,
    root: Optional[str] = None,
) -> str:
    """Write index.{wxml,wxss,js,json} into <root>/.../<component name lowercased>/ and return that directory."""
    return _write_wechat_files(component_name, bundle.files(), root)


def write_artifact(artifact: GeneratedArtifact, root: Optional[str] = None) -> List[str]:
    """Write every payload of an artifact; returns the written paths."""
    if artifact.platform == Platform.WECHAT:
        base_path = _write_wechat_files(artifact.component_name, artifact.payloads, root)
        return [os.path.join(base_path, filename) for filename in artifact.payloads]
    return [
        write_component_file(artifact.platform, filename, content, root)
        for filename, content in artifact.payloads.items()
    ]
