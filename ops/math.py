# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Eager math ops.

Arguments and results are native handles: ``context`` is an eager
context, ``x``/``y`` and the return value are tensor handles.
"""
from __future__ import annotations

from .. import native
from ..dtype import as_c_value, dtype


def cast(context: int, x: int, dst_type: dtype | int) -> int:
    return native.ensure_loaded().cast(context, x, as_c_value(dst_type))


def add(context: int, x: int, y: int) -> int:
    return native.ensure_loaded().add(context, x, y)


def sub(context: int, x: int, y: int) -> int:
    return native.ensure_loaded().sub(context, x, y)


__all__ = ['cast', 'add', 'sub']
