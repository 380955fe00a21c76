# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
tfbind.native — resolution and loading of the TensorFlow native libraries.

Every public entry point that reaches into native code goes through
:func:`ensure_loaded`, which returns the process-wide engine after making
sure the libraries are linked in.
"""
from __future__ import annotations

import threading

from .engine import CtypesEngine, NativeEngine
from .library import (
    JNI_LIB_NAME, LIB_FRAMEWORK_NAME, LIB_NAME, LIBRARY_LOAD_ORDER,
    OPS_LIB_NAME, make_resource_names, map_library_name,
)
from .loader import Extraction, LoadState, NativeLoader
from .platform import Platform, current_platform, normalize_arch, normalize_os
from .resources import (
    DirectoryResources, PackageResources, Resources, default_resources,
)

_loader: NativeLoader | None = None
_loader_lock = threading.Lock()


def get_loader() -> NativeLoader:
    """Return the process-wide loader, creating it on first use."""
    global _loader
    with _loader_lock:
        if _loader is None:
            _loader = NativeLoader(CtypesEngine(), default_resources())
        return _loader


def set_loader(loader: NativeLoader | None) -> NativeLoader | None:
    """Replace the process-wide loader and return the previous one."""
    global _loader
    with _loader_lock:
        previous, _loader = _loader, loader
    return previous


def ensure_loaded() -> NativeEngine:
    """Load the native libraries if needed and return the engine."""
    return get_loader().ensure_loaded()


def is_loaded() -> bool:
    with _loader_lock:
        return _loader is not None and _loader.is_loaded()


__all__ = [
    'NativeEngine', 'CtypesEngine',
    'NativeLoader', 'LoadState', 'Extraction',
    'Platform', 'current_platform', 'normalize_os', 'normalize_arch',
    'Resources', 'PackageResources', 'DirectoryResources', 'default_resources',
    'LIB_NAME', 'LIB_FRAMEWORK_NAME', 'JNI_LIB_NAME', 'OPS_LIB_NAME',
    'LIBRARY_LOAD_ORDER', 'map_library_name', 'make_resource_names',
    'get_loader', 'set_loader', 'ensure_loaded', 'is_loaded',
]
