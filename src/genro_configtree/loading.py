# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading functions for building a ConfigNode tree from XML sources.

Parsing is delegated to xml.etree.ElementTree; this module only turns
its failures into ConfigLoadError and hands the parsed root to
ConfigNode.init().

Example:
    >>> from genro_configtree import load_from_file
    >>> root = load_from_file('etc/appserver.xml')
    >>> root.get_child('/appserver/containers')
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import ConfigLoadError
from .node import ConfigNode

if TYPE_CHECKING:
    from .protocols import MarkupElement

logger = logging.getLogger(__name__)


def parse_file(path: str | Path) -> ET.Element:
    """Parse the XML file at path and return its root element.

    Raises:
        ConfigLoadError: If the file cannot be read or is not well formed.
    """
    source = str(path)
    logger.debug("Parsing configuration file %s", source)
    try:
        return ET.parse(source).getroot()
    except OSError as exc:
        raise ConfigLoadError(source, exc.strerror or str(exc)) from exc
    except ET.ParseError as exc:
        raise ConfigLoadError(source, str(exc)) from exc


def parse_string(text: str | bytes) -> ET.Element:
    """Parse an in-memory XML document and return its root element.

    Raises:
        ConfigLoadError: If the markup is not well formed.
    """
    logger.debug("Parsing configuration string (%d chars)", len(text))
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise ConfigLoadError('<string>', str(exc)) from exc


def _count_nodes(root: ConfigNode) -> int:
    return sum(1 for _ in root.walk())


def load_from_document(
    document: MarkupElement | ET.ElementTree,
    strip_namespaces: bool = True,
    node_factory: type[ConfigNode] = ConfigNode,
) -> ConfigNode:
    """Build a tree from an already parsed document.

    Args:
        document: An ElementTree document or an element (its root).
        strip_namespaces: Remove '{uri}' prefixes from tags and attribute keys.
        node_factory: ConfigNode subclass used for every node of the tree.

    Returns:
        The root ConfigNode.
    """
    root = node_factory().init_from_markup_root(
        document, strip_namespaces=strip_namespaces
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Built configuration tree '%s' with %d nodes",
            root.name, _count_nodes(root),
        )
    return root


def load_from_file(
    path: str | Path,
    strip_namespaces: bool = True,
    node_factory: type[ConfigNode] = ConfigNode,
) -> ConfigNode:
    """Build a tree from the XML file at path.

    Args:
        path: Relative or absolute path of the configuration file.
        strip_namespaces: See load_from_document().
        node_factory: See load_from_document().

    Returns:
        The root ConfigNode.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
    """
    return load_from_document(
        parse_file(path),
        strip_namespaces=strip_namespaces,
        node_factory=node_factory,
    )


def load_from_string(
    text: str | bytes,
    strip_namespaces: bool = True,
    node_factory: type[ConfigNode] = ConfigNode,
) -> ConfigNode:
    """Build a tree from an in-memory XML document.

    Raises:
        ConfigLoadError: If the markup cannot be parsed.
    """
    return load_from_document(
        parse_string(text),
        strip_namespaces=strip_namespaces,
        node_factory=node_factory,
    )
