# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfigNode - A schema-less configuration tree node.

This module provides the ConfigNode class, the only building block of a
configuration tree. Every element of an XML configuration becomes a node
carrying a name, an optional text value, a mapping of attributes and an
ordered list of child nodes.

Key Features:
    - **Recursive construction**: ``init()`` walks a parsed markup element
      and builds the whole subtree in document order
    - **Path lookup**: Slash-delimited paths matched on node names only
    - **Field protocol**: Attributes and single-named children can be read
      and written by name, without any predefined schema

Path Syntax:
    Paths are rooted at the node they are called on: the first segment
    must be the node's own name.

    - '/app' matches the node named 'app' itself
    - '/app/db' matches the children of 'app' named 'db'
    - '/app/db/host' descends one more level

Example:
    Basic usage::

        root = load_from_string(
            '<app name="demo"><db host="localhost">main</db></app>'
        )
        db = root.get_child('/app/db')
        print(db.get_attribute('host'))   # 'localhost'
        print(db.get_value())             # 'main'

    Field protocol::

        root.resolve_field('name')        # 'demo' (attribute)
        root.resolve_field('db')          # the <db> child node
        root.getDb()                      # same as above
        root.setOwner('ops')              # sets attribute 'owner'
"""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterator

from .exceptions import UnsupportedOperationError
from .helper import (
    element_text,
    iter_child_elements,
    join_path,
    local_name,
    parse_accessor_name,
    split_first_segment,
)

if TYPE_CHECKING:
    from xml.etree.ElementTree import ElementTree

    from .protocols import MarkupElement


class ConfigNode:
    """A node in a configuration tree.

    Each node has:
    - name: The markup element's tag name
    - value: Trimmed text content, or None when the element has no text
    - attributes: Dictionary of string attributes
    - children: Ordered list of owned child nodes (document order)

    Equality is identity: two separately built trees are never equal,
    even when they have the same content. Use structurally_equals() for
    deep comparison.

    Example:
        >>> node = ConfigNode('db')
        >>> node.set_attribute('host', 'localhost')
        >>> node.add_child_with_name_and_value('user', 'admin')
        ConfigNode('user', value='admin', children=0)
        >>> node.get_child('/db/user').get_value()
        'admin'
    """

    __slots__ = ('name', 'value', 'attributes', 'children')

    # Class used for children created by init(); None means type(self)
    node_factory: type[ConfigNode] | None = None

    def __init__(self, name: str | None = None) -> None:
        """Initialize a ConfigNode.

        Args:
            name: The node name. May be None and filled in later by init().
        """
        self.name = name
        self.value: str | None = None
        self.attributes: dict[str, Any] = {}
        self.children: list[ConfigNode] = []

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.name!r}, value={self.value!r}, "
            f"children={len(self.children)})"
        )

    def __str__(self) -> str:
        """Return the node value; an absent value gives 'None', not ''.

        Check get_value() for None before relying on the text.
        """
        return str(self.value)

    def __getattr__(self, name: str) -> Any:
        """Resolve undeclared get*/set* accessors through invoke().

        Only called for names that are not defined on the class, so
        explicit methods (get_value, get_attribute, ...) always win.

        Args:
            name: Attribute name, e.g. 'getHost', 'get_host', 'setPort'.

        Returns:
            Callable that forwards its arguments to invoke().

        Raises:
            AttributeError: For private and dunder names.
            UnsupportedOperationError: If the name is not accessor shaped.
        """
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        if parse_accessor_name(name) is None:
            raise UnsupportedOperationError(type(self).__name__, name)
        return partial(self.invoke, name)

    # ==================== Construction ====================

    def init(
        self, element: MarkupElement, strip_namespaces: bool = True
    ) -> ConfigNode:
        """Recursively initialize this node from a parsed markup element.

        Sets the name from the element tag, stores the trimmed text as
        value (only if non-empty), copies all attributes and appends one
        new child node per child element, in document order. Elements
        without text are kept; their value stays None.

        Note:
            Recursion depth equals the document nesting depth, so
            documents nested deeper than the interpreter recursion limit
            (about 1000 levels by default) raise RecursionError.

        Args:
            element: Parsed element (e.g. xml.etree.ElementTree.Element).
            strip_namespaces: If True, '{uri}' prefixes are removed from
                tags and attribute keys.

        Returns:
            The node itself, for chaining.
        """
        tag = element.tag
        self.name = local_name(tag) if strip_namespaces else tag

        text = element_text(element)
        if text is not None:
            self.value = text

        for key, value in element.attrib.items():
            if strip_namespaces:
                key = local_name(key)
            self.set_attribute(key, str(value))

        factory = self.node_factory or type(self)
        for child_element in iter_child_elements(element):
            child = factory()
            child.init(child_element, strip_namespaces=strip_namespaces)
            self.add_child(child)

        return self

    def init_from_markup_root(
        self,
        root: MarkupElement | ElementTree,
        strip_namespaces: bool = True,
    ) -> ConfigNode:
        """Initialize the whole tree from a parsed document or its root.

        Args:
            root: An ElementTree document or its root element.
            strip_namespaces: See init().

        Returns:
            The node itself.
        """
        getroot = getattr(root, 'getroot', None)
        if getroot is not None:
            root = getroot()
        return self.init(root, strip_namespaces=strip_namespaces)

    def init_from_file(
        self, path: str | Path, strip_namespaces: bool = True
    ) -> ConfigNode:
        """Initialize from the XML file at path.

        Raises:
            ConfigLoadError: If the file cannot be read or parsed.
        """
        from .loading import parse_file
        return self.init(parse_file(path), strip_namespaces=strip_namespaces)

    def init_from_string(
        self, text: str | bytes, strip_namespaces: bool = True
    ) -> ConfigNode:
        """Initialize from an in-memory XML document.

        Raises:
            ConfigLoadError: If the markup cannot be parsed.
        """
        from .loading import parse_string
        return self.init(parse_string(text), strip_namespaces=strip_namespaces)

    def add_child(self, node: ConfigNode) -> ConfigNode:
        """Append a child node.

        No de-duplication and no ordering by name.

        Args:
            node: The child to append.

        Returns:
            This node, for chaining.

        Raises:
            TypeError: If node is not a ConfigNode.
        """
        if not isinstance(node, ConfigNode):
            raise TypeError(
                f"child must be a ConfigNode, not {type(node).__name__}"
            )
        self.children.append(node)
        return self

    def add_child_with_name_and_value(
        self, name: str, value: str | None
    ) -> ConfigNode:
        """Create a leaf child with name and value and append it.

        Returns:
            The new child node.
        """
        node = (self.node_factory or type(self))(name)
        node.set_value(value)
        self.add_child(node)
        return node

    # ==================== Name and Value ====================

    def get_node_name(self) -> str | None:
        return self.name

    def set_node_name(self, name: str | None) -> None:
        """Rename the node.

        Lookups are driven by names: renaming a node changes which paths
        reach it.
        """
        self.name = name

    def get_value(self) -> str | None:
        return self.value

    def set_value(self, value: str | None) -> None:
        self.value = value

    # ==================== Path Lookup ====================

    def _match(
        self, path: str, union: bool
    ) -> ConfigNode | list[ConfigNode] | None:
        token, rest = split_first_segment(path)
        if self.name is None or self.name != token:
            return None
        if not rest:
            return self

        matches: list[ConfigNode] = []
        for child in self.children:
            result = child._match(rest, union)
            if isinstance(result, list):
                if union:
                    matches.extend(result)
                else:
                    matches = result
            elif result is not None:
                matches.append(result)
        return matches

    def get_children(self, path: str) -> ConfigNode | list[ConfigNode] | None:
        """Return the nodes matching a slash-delimited path.

        The first segment is compared with this node's own name:

        - no match: returns None
        - match and nothing left: returns this node (not a list)
        - match and more segments: recurses into every child and returns
          the collected list, which may be empty

        Note:
            While collecting, a list returned by a child replaces what
            was collected so far. Single nodes are appended. So when a
            path goes two or more levels below this node, only the results
            under the last matching child are returned. get_children_union()
            returns all of them.

        Args:
            path: Path such as '/app/db'.

        Returns:
            A ConfigNode, a list of ConfigNode, or None.

        Example:
            >>> root.get_children('/app')      # root itself
            >>> root.get_children('/app/db')   # [<db>, <db>]
            >>> root.get_children('/other')    # None
        """
        return self._match(path, union=False)

    def get_children_union(
        self, path: str
    ) -> ConfigNode | list[ConfigNode] | None:
        """Like get_children(), but merge the results of all matching branches.

        Example:
            >>> # <app><db><host/></db><db><host/></db></app>
            >>> len(root.get_children('/app/db/host'))
            1
            >>> len(root.get_children_union('/app/db/host'))
            2
        """
        return self._match(path, union=True)

    def get_child(self, path: str) -> ConfigNode | None:
        """Return the first node matching path, or None.

        Args:
            path: Path such as '/app/db'.

        Returns:
            The first match below this node. A path that names only this
            node gives None; use get_children() for that case.
        """
        result = self.get_children(path)
        if isinstance(result, list):
            return result[0] if result else None
        return None

    def remove_children(self, path: str) -> ConfigNode:
        """Clear all children of this node if path descends below it.

        When the first segment matches this node's name and more segments
        follow, the whole children list is cleared, whatever the
        remaining segments are. Otherwise nothing changes.

        Args:
            path: Path such as '/app/db'.

        Returns:
            This node.

        Example:
            >>> root.remove_children('/app/db')   # root has no children now
        """
        token, rest = split_first_segment(path)
        if self.name is not None and self.name == token and rest:
            self.children.clear()
        return self

    def has_children(self) -> bool:
        """True if this node has at least one child."""
        return bool(self.children)

    def walk(self) -> Iterator[tuple[str, ConfigNode]]:
        """Walk the subtree depth-first in document order.

        Yields:
            Tuples of (path, node), starting with this node. Paths are
            valid arguments for get_children() called on this node.

        Example:
            >>> for path, node in root.walk():
            ...     print(path, node.get_value())
        """
        def _walk_gen(
            node: ConfigNode, names: list[str]
        ) -> Iterator[tuple[str, ConfigNode]]:
            names = names + [node.name or '']
            yield join_path(names), node
            for child in node.children:
                yield from _walk_gen(child, names)

        return _walk_gen(self, [])

    # ==================== Attributes ====================

    def set_attribute(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def get_attribute(self, key: str, default: Any = None) -> Any:
        """Get an attribute value.

        Args:
            key: Attribute name.
            default: Value returned if the attribute is not set.
        """
        return self.attributes.get(key, default)

    def get_all_attributes(self) -> dict[str, Any]:
        """Return the attribute mapping itself (not a copy)."""
        return self.attributes

    # ==================== Field Protocol ====================

    def resolve_field(self, field: str) -> ConfigNode | Any | None:
        """Resolve a field name to a child node or an attribute value.

        The child reached by '/<name>/<field>' takes precedence; when no
        such child exists the attribute named field is returned.

        Args:
            field: Field name, e.g. 'host'.

        Returns:
            The first matching child node, the attribute value, or None.

        Example:
            >>> root = load_from_string('<app name="demo"/>')
            >>> root.resolve_field('name')
            'demo'
        """
        child = self.get_child(join_path([self.name or '', field]))
        if child is not None:
            return child
        return self.get_attribute(field)

    def assign_field(self, field: str, value: Any = None) -> None:
        """Store value as the attribute named field."""
        self.set_attribute(field, value)

    def invoke(self, method: str, *args: Any) -> Any:
        """Dispatch an accessor-shaped call by name.

        ``get<Field>`` / ``get_<field>`` resolves the field (see
        resolve_field()). ``set<Field>`` / ``set_<field>`` stores the first
        argument, or None if there is none, as an attribute.

        Args:
            method: Method name, e.g. 'getHost' or 'set_port'.
            *args: Call arguments.

        Returns:
            The resolved field for getters, None for setters.

        Raises:
            UnsupportedOperationError: If method is neither getter nor
                setter shaped.
        """
        accessor = parse_accessor_name(method)
        if accessor is None:
            raise UnsupportedOperationError(type(self).__name__, method, args)
        prefix, field = accessor
        if prefix == 'get':
            return self.resolve_field(field)
        self.assign_field(field, args[0] if args else None)
        return None

    # ==================== Comparison ====================

    def identity_equals(self, other: object) -> bool:
        """True only if other is this very node."""
        return self is other

    def structurally_equals(self, other: object) -> bool:
        """True if other has the same name, value, attributes and children.

        Children are compared recursively and in order.
        """
        if not isinstance(other, ConfigNode):
            return False
        if (
            self.name != other.name
            or self.value != other.value
            or self.attributes != other.attributes
            or len(self.children) != len(other.children)
        ):
            return False
        return all(
            mine.structurally_equals(theirs)
            for mine, theirs in zip(self.children, other.children)
        )
