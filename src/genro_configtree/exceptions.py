# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfigTree exceptions."""

from __future__ import annotations

from typing import Any


class ConfigTreeError(Exception):
    """Base exception for ConfigTree errors."""

    pass


class UnsupportedOperationError(ConfigTreeError, AttributeError):
    """Raised when an accessor call is neither getter nor setter shaped.

    Subclasses AttributeError so that ``hasattr()`` and ``getattr()`` with
    a default keep working on nodes.

    Attributes:
        owner: Name of the class the call was made on.
        call_name: The offending method name.
        call_args: Positional arguments of the call (empty when the name
            was rejected on attribute lookup, before any call happened).
    """

    def __init__(
        self, owner: str, call_name: str, call_args: tuple[Any, ...] = ()
    ) -> None:
        self.owner = owner
        self.call_name = call_name
        self.call_args = tuple(call_args)
        super().__init__(
            f"Invalid method {owner}::{call_name}({self.call_args!r})"
        )


class ConfigLoadError(ConfigTreeError):
    """Raised when a configuration source cannot be read or parsed.

    The underlying OSError or ParseError is chained as ``__cause__``.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Cannot load configuration from {source}: {reason}")
