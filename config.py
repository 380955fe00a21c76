# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Runtime configuration read from the environment.

    TFBIND_RESOURCE_DIR     — directory holding the native libraries, laid out
                              like the packaged artifact (bare core libraries
                              at the root, ``native/{os}-{arch}/`` for the
                              bridge and op libraries).  Overrides the
                              resources shipped inside the package.
    TFBIND_TMPDIR           — parent directory for extracted libraries
                              (default: the system temp dir)
    TFBIND_KEEP_EXTRACTED   — set to 1 to keep extracted files at exit

Values are read on every call so tests can patch ``os.environ``.
"""
from __future__ import annotations

import os


def resource_dir() -> str | None:
    """Return the resource root override, or None."""
    p = os.environ.get('TFBIND_RESOURCE_DIR')
    return p or None


def temp_root() -> str | None:
    """Return the parent directory for extraction, or None."""
    p = os.environ.get('TFBIND_TMPDIR')
    return p or None


def keep_extracted() -> bool:
    return os.environ.get('TFBIND_KEEP_EXTRACTED', '0') == '1'
