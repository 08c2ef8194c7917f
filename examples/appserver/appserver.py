# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Appserver - Example of reading a container configuration.

A didactic example showing path lookup, the field protocol and the
last-branch behaviour of get_children().

Usage:
    python examples/appserver/appserver.py [config.xml]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from genro_configtree import ConfigNode, load_from_file

DEFAULT_CONFIG = Path(__file__).parent / 'appserver.xml'


def receiver_params(container: ConfigNode) -> dict[str, str | None]:
    """Collect <param name="...">value</param> pairs of a container."""
    params = container.get_children('/container/receiver/params/param') or []
    return {param.get_attribute('name'): param.get_value() for param in params}


def main(source: str | None = None) -> None:
    root = load_from_file(source or DEFAULT_CONFIG)

    print(f"Base directory: {root.getBaseDirectory()}")

    for container in root.get_children('/appserver/containers/container'):
        print(f"\n{container.getName()} ({container.getType()})")
        print(f"  host: {container.getHost().get_attribute('name')}")
        for name, value in receiver_params(container).items():
            print(f"  {name} = {value}")

    # Deeper paths keep only the last container's matches
    last_only = root.get_children('/appserver/containers/container/host')
    every_host = root.get_children_union('/appserver/containers/container/host')
    print(f"\nhosts via get_children: {len(last_only)}")
    print(f"hosts via get_children_union: {len(every_host)}")


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    main(sys.argv[1] if len(sys.argv) > 1 else None)
