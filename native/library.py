# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Logical native library names and their packaged file names."""
from __future__ import annotations

from .platform import Platform

#: TensorFlow native library.
LIB_NAME = 'tensorflow'
#: TensorFlow native framework library.
LIB_FRAMEWORK_NAME = 'tensorflow_framework'
#: Bridge library exporting the binding entry points.
JNI_LIB_NAME = 'tensorflow_jni'
#: Custom op library, registered through ``load_op_library``.
OPS_LIB_NAME = 'tensorflow_ops'

# Dependency order: each library may only link against those before it.
LIBRARY_LOAD_ORDER = (LIB_FRAMEWORK_NAME, LIB_NAME, JNI_LIB_NAME, OPS_LIB_NAME)

_CORE_LIBS = frozenset({LIB_NAME, LIB_FRAMEWORK_NAME})
_PLATFORM_LIBS = frozenset({JNI_LIB_NAME, OPS_LIB_NAME})


def is_core_library(lib: str) -> bool:
    return lib in _CORE_LIBS


def map_library_name(lib: str) -> list[str]:
    """Map a logical library name to its candidate file names.

    Like the platform's own library-name mapping, but covering both the
    ``so`` and ``dylib`` extensions along with the TensorFlow 2.x version
    suffixes.  The bridge and op libraries are built by us and only ever
    ship as ``lib{name}.so``.
    """
    if lib in _PLATFORM_LIBS:
        return [f'lib{lib}.so']
    return [
        f'lib{lib}.so',
        f'lib{lib}.so.2',
        f'lib{lib}.dylib',
        f'lib{lib}.2.dylib',
    ]


def make_resource_names(lib: str, platform: Platform) -> list[tuple[str, str]]:
    """Return ``(filename, resource_path)`` pairs for *lib* on *platform*."""
    if is_core_library(lib):
        return [(name, name) for name in map_library_name(lib)]
    return [(name, f'native/{platform.tag}/{name}')
            for name in map_library_name(lib)]
