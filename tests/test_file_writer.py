"""Tests for writing generated components to disk."""
import os

from codegen import config
from codegen.base import GeneratedArtifact, Platform
from codegen.file_writer import write_artifact, write_component_file, write_wechat_component
from codegen.nodes import parse_node
from codegen.wechat_generator import generate_wechat_bundle


class TestWriteComponentFile:

    def test_writes_under_platform_directory(self, tmp_path):
        path = write_component_file(Platform.MOBILE, 'Card.tsx', 'export default 1;\n', root=str(tmp_path))

        assert path == os.path.join(str(tmp_path), 'generated', 'mobile', 'components', 'Card.tsx')
        with open(path, encoding='utf-8') as f:
            assert f.read() == 'export default 1;\n'

    def test_defaults_to_configured_root(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, 'CODEGEN_OUTPUT_DIR', str(tmp_path))
        path = write_component_file(Platform.PC, 'Card.tsx', 'x')
        assert path.startswith(str(tmp_path))
        assert os.path.exists(path)

    def test_overwrites_existing_file(self, tmp_path):
        write_component_file(Platform.PC, 'Card.tsx', 'old', root=str(tmp_path))
        path = write_component_file(Platform.PC, 'Card.tsx', 'new', root=str(tmp_path))
        with open(path, encoding='utf-8') as f:
            assert f.read() == 'new'


class TestWriteWechatComponent:

    def test_writes_four_files(self, tmp_path, hi_frame):
        bundle = generate_wechat_bundle(parse_node(hi_frame), 'Card')
        directory = write_wechat_component('Card', bundle, root=str(tmp_path))

        assert directory == os.path.join(str(tmp_path), 'generated', 'wechat', 'components', 'card')
        assert sorted(os.listdir(directory)) == ['index.js', 'index.json', 'index.wxml', 'index.wxss']
        with open(os.path.join(directory, 'index.wxml'), encoding='utf-8') as f:
            assert f.read() == bundle.markup


class TestWriteArtifact:

    def test_single_file_platform(self, tmp_path):
        artifact = GeneratedArtifact(Platform.PC, 'Card', {'Card.tsx': 'code'})
        paths = write_artifact(artifact, root=str(tmp_path))
        assert paths == [os.path.join(str(tmp_path), 'generated', 'pc', 'components', 'Card.tsx')]

    def test_wechat_artifact(self, tmp_path):
        artifact = GeneratedArtifact(Platform.WECHAT, 'Card', {'index.wxml': '<view />', 'index.wxss': ''})
        paths = write_artifact(artifact, root=str(tmp_path))
        assert [os.path.basename(p) for p in paths] == ['index.wxml', 'index.wxss']
        assert all(os.path.exists(p) for p in paths)
