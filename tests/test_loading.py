# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for loading configuration trees from XML sources."""

import logging
import xml.etree.ElementTree as ET

import pytest

from genro_configtree import (
    ConfigLoadError,
    ConfigNode,
    load_from_document,
    load_from_file,
    load_from_string,
    parse_file,
    parse_string,
)


@pytest.fixture
def config_file(tmp_path, app_xml):
    path = tmp_path / 'appserver.xml'
    path.write_text(app_xml, encoding='utf-8')
    return path


class TestLoadFromFile:
    """Tests for file entry points."""

    def test_load_from_file(self, config_file):
        """Test a tree is built from a file path."""
        root = load_from_file(config_file)
        assert root.name == 'app'
        assert root.get_child('/app/db').get_value() == 'main'

    def test_load_from_str_path(self, config_file):
        """Test string paths are accepted."""
        assert load_from_file(str(config_file)).name == 'app'

    def test_init_from_file(self, config_file):
        """Test ConfigNode.init_from_file fills the node in place."""
        node = ConfigNode()
        assert node.init_from_file(config_file) is node
        assert [c.name for c in node.children] == ['db', 'cache', 'logger']

    def test_missing_file(self, tmp_path):
        """Test unreadable files raise ConfigLoadError from OSError."""
        missing = tmp_path / 'missing.xml'
        with pytest.raises(ConfigLoadError, match='missing.xml') as exc_info:
            load_from_file(missing)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.source == str(missing)

    def test_malformed_file(self, tmp_path):
        """Test malformed files raise ConfigLoadError from ParseError."""
        path = tmp_path / 'broken.xml'
        path.write_text('<app><db></app>', encoding='utf-8')
        with pytest.raises(ConfigLoadError) as exc_info:
            load_from_file(path)
        assert isinstance(exc_info.value.__cause__, ET.ParseError)

    def test_parse_file_returns_element(self, config_file):
        """Test parse_file returns the root element."""
        assert parse_file(config_file).tag == 'app'


class TestLoadFromString:
    """Tests for in-memory entry points."""

    def test_load_from_string(self, app_xml):
        """Test a tree is built from text."""
        assert load_from_string(app_xml).get_attribute('name') == 'demo'

    def test_load_from_bytes(self):
        """Test bytes input is accepted."""
        root = load_from_string('<app>café</app>'.encode('utf-8'))
        assert root.value == 'café'

    def test_init_from_string(self):
        """Test ConfigNode.init_from_string."""
        node = ConfigNode().init_from_string('<app><db/></app>')
        assert node.get_child('/app/db').name == 'db'

    def test_malformed_string(self):
        """Test malformed markup raises ConfigLoadError."""
        with pytest.raises(ConfigLoadError, match='<string>') as exc_info:
            load_from_string('<app>')
        assert isinstance(exc_info.value.__cause__, ET.ParseError)

    def test_parse_string_returns_element(self):
        """Test parse_string returns the root element."""
        assert parse_string('<app/>').tag == 'app'


class TestLoadFromDocument:
    """Tests for already parsed documents."""

    def test_element_tree(self):
        """Test an ElementTree document is accepted."""
        document = ET.ElementTree(ET.fromstring('<app><db/></app>'))
        root = load_from_document(document)
        assert root.name == 'app'
        assert root.children[0].name == 'db'

    def test_element(self):
        """Test a root element is accepted."""
        assert load_from_document(ET.fromstring('<app/>')).name == 'app'


class TestLoadingLogging:
    """Tests for debug logging."""

    def test_logs_parse_and_build(self, config_file, caplog):
        """Test parsing and tree size are logged at debug level."""
        caplog.set_level(logging.DEBUG, logger='genro_configtree.loading')
        load_from_file(config_file)
        assert 'Parsing configuration file' in caplog.text
        assert "Built configuration tree 'app' with 4 nodes" in caplog.text

    def test_silent_above_debug(self, app_xml, caplog):
        """Test nothing is logged at info level."""
        caplog.set_level(logging.INFO, logger='genro_configtree.loading')
        load_from_string(app_xml)
        assert caplog.records == []
