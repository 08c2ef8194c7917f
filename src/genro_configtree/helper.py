# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Internal helpers for ConfigNode.

Path tokenizing, accessor-name parsing and access to parsed markup elements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .protocols import MarkupElement

PATH_SEPARATOR = '/'
ACCESSOR_PREFIXES = ('get', 'set')


def split_first_segment(path: str) -> tuple[str, str]:
    """Split a path into its first segment and the remainder.

    Leading separators are skipped to find the segment. The remainder is
    whatever follows ``'/' + segment`` counted from the start of the path,
    so ``'/app/db/host'`` gives ``('app', '/db/host')`` and ``'/app'``
    gives ``('app', '')``.

    Args:
        path: Slash-delimited path.

    Returns:
        Tuple of (segment, remainder). Segment is '' for an empty path.

    Example:
        >>> split_first_segment('/app/db')
        ('app', '/db')
    """
    token = path.lstrip(PATH_SEPARATOR).split(PATH_SEPARATOR, 1)[0]
    return token, path[len(token) + 1:]


def join_path(names: list[str]) -> str:
    """Join node names into an absolute path with a leading separator."""
    return PATH_SEPARATOR + PATH_SEPARATOR.join(names)


def parse_accessor_name(method: str) -> tuple[str, str] | None:
    """Split an accessor-shaped method name into (prefix, field).

    Both ``getDataSource`` and ``get_data_source`` are accepted. The first
    letter of the field is lower-cased, so the results are ``dataSource``
    and ``data_source``. After the prefix the name must continue with an
    uppercase letter or an underscore, so names like ``settings`` are
    not setters.

    Args:
        method: The method name.

    Returns:
        ('get' | 'set', field) or None if the name is not accessor shaped.
    """
    prefix, remainder = method[:3], method[3:]
    if prefix not in ACCESSOR_PREFIXES or not remainder:
        return None
    if remainder[0] == '_':
        remainder = remainder[1:]
    elif not remainder[0].isupper():
        return None
    if not remainder:
        return None
    return prefix, remainder[0].lower() + remainder[1:]


def local_name(name: str) -> str:
    """Strip a Clark-notation namespace (``{uri}local``) from a name."""
    if name.startswith('{'):
        return name.rsplit('}', 1)[-1]
    return name


def element_text(element: MarkupElement) -> str | None:
    """Return the trimmed direct text of an element, or None if empty.

    Direct text is the element's own text plus the tail of each child;
    text nested inside children is not included.
    """
    parts = [element.text or '']
    parts.extend(child.tail or '' for child in element)
    text = ''.join(parts).strip()
    return text or None


def iter_child_elements(element: MarkupElement) -> Iterator[MarkupElement]:
    """Yield child elements in document order, skipping comments and PIs.

    ElementTree represents comments and processing instructions as
    children whose tag is a factory function, not a string.
    """
    for child in element:
        if isinstance(child.tag, str):
            yield child
