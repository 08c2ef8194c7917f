# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Structural interfaces used by ConfigNode.

MarkupElement is what ``ConfigNode.init`` consumes. ElementTree elements
satisfy it, and so do lxml elements. ContainerConfiguration is the query
surface that consumers of a configuration tree rely on.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Protocol, runtime_checkable


class MarkupElement(Protocol):
    """A parsed markup element: tag, text, attributes and ordered children."""

    tag: Any
    text: str | None
    tail: str | None
    attrib: Mapping[str, str]

    def __iter__(self) -> Iterator[MarkupElement]: ...


@runtime_checkable
class ContainerConfiguration(Protocol):
    """Read/write interface of a configuration node.

    Note:
        Only static type checking is meaningful. isinstance() checks
        members with hasattr(), so any object with a catch-all
        __getattr__ (ConfigNode answers every get_*/set_* name) passes
        whether or not it defines the methods.
    """

    def identity_equals(self, other: object) -> bool: ...

    def get_node_name(self) -> str | None: ...

    def get_value(self) -> str | None: ...

    def get_child(self, path: str) -> Any: ...

    def get_children(self, path: str) -> Any: ...

    def get_attribute(self, key: str, default: Any = None) -> Any: ...

    def set_attribute(self, key: str, value: Any) -> None: ...

    def get_all_attributes(self) -> dict[str, Any]: ...
