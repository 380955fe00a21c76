# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Lookup of native libraries packaged alongside the Python sources."""
from __future__ import annotations

import importlib.resources
import os
from typing import BinaryIO

from .. import config


class Resources:
    """Read-only view over a tree of packaged resources."""

    def open(self, path: str) -> BinaryIO | None:
        """Return a binary stream for *path*, or None if it is absent."""
        raise NotImplementedError


class PackageResources(Resources):
    """Resources shipped inside an installed package."""

    def __init__(self, anchor: str = 'tfbind'):
        self.anchor = anchor

    def open(self, path: str) -> BinaryIO | None:
        try:
            node = importlib.resources.files(self.anchor)
        except ModuleNotFoundError:
            return None
        for part in path.split('/'):
            node = node.joinpath(part)
        if not node.is_file():
            return None
        return node.open('rb')

    def __repr__(self) -> str:
        return f'PackageResources({self.anchor!r})'


class DirectoryResources(Resources):
    """Resources laid out under a plain directory."""

    def __init__(self, root: str | os.PathLike):
        self.root = os.fspath(root)

    def open(self, path: str) -> BinaryIO | None:
        full = os.path.join(self.root, *path.split('/'))
        if not os.path.isfile(full):
            return None
        return open(full, 'rb')

    def __repr__(self) -> str:
        return f'DirectoryResources({self.root!r})'


def default_resources() -> Resources:
    """``TFBIND_RESOURCE_DIR`` when set, the installed package otherwise."""
    root = config.resource_dir()
    if root is not None:
        return DirectoryResources(root)
    return PackageResources('tfbind')
