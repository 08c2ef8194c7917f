# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-ConfigTree - Schema-less configuration trees built from XML.

A lightweight, zero-dependency library turning XML configuration files
into trees of homogeneous nodes with path lookup and name-based field
access, for the Genro ecosystem (Genro Kyō).
"""

__version__ = "0.1.0"

from .exceptions import (
    ConfigLoadError,
    ConfigTreeError,
    UnsupportedOperationError,
)
from .loading import (
    load_from_document,
    load_from_file,
    load_from_string,
    parse_file,
    parse_string,
)
from .node import ConfigNode
from .protocols import ContainerConfiguration, MarkupElement

__all__ = [
    # Core classes
    "ConfigNode",
    # Loading
    "load_from_document",
    "load_from_file",
    "load_from_string",
    "parse_file",
    "parse_string",
    # Protocols
    "ContainerConfiguration",
    "MarkupElement",
    # Exceptions
    "ConfigTreeError",
    "ConfigLoadError",
    "UnsupportedOperationError",
]
