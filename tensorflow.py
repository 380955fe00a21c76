# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
tfbind.tensorflow — process-level TensorFlow entry points.

Each function loads the native libraries on first use.  Graph and
operation arguments are the opaque integer handles returned by the native
side.
"""
from __future__ import annotations

import threading

from . import native
from .device import device as _device
from .dtype import as_c_value, dtype

_process_pointer: int | None = None
_process_pointer_lock = threading.Lock()


def version() -> str:
    """Return the version string of the loaded TensorFlow runtime."""
    return native.ensure_loaded().version()


def data_type_size(data_type: dtype | int) -> int:
    """Size in bytes of one element of *data_type* (0 for variable size)."""
    return native.ensure_loaded().data_type_size(as_c_value(data_type))


def load_op_library(library_path: str) -> bytes:
    """Load a custom op library and return its serialized ``OpList``."""
    return native.ensure_loaded().load_op_library(library_path)


def process_pointer() -> int:
    """Pointer to the bridge's process-global state, cached after first use."""
    global _process_pointer
    with _process_pointer_lock:
        if _process_pointer is None:
            _process_pointer = native.ensure_loaded().process_pointer()
        return _process_pointer


def enable_xla() -> None:
    native.ensure_loaded().enable_xla()


# ── Internal API ──

def update_input(graph: int, input_op: int, input_index: int,
                 output_op: int, output_index: int) -> None:
    """Rewire input ``input_index`` of ``input_op`` to ``output_op:output_index``."""
    native.ensure_loaded().update_input(
        graph, input_op, input_index, output_op, output_index)


def add_control_input(graph: int, op: int, input_op: int) -> int:
    return native.ensure_loaded().add_control_input(graph, op, input_op)


def clear_control_inputs(graph: int, op: int) -> int:
    return native.ensure_loaded().clear_control_inputs(graph, op)


def set_requested_device(graph: int, op: int, device: _device | str) -> int:
    """Request placement of *op*.

    Strings starting with ``/`` are passed through untouched, anything
    else is parsed as a :class:`tfbind.device`.
    """
    if isinstance(device, str) and (device == '' or device.startswith('/')):
        spec = device
    else:
        spec = _device(device).to_tf()
    return native.ensure_loaded().set_requested_device(graph, op, spec)


def set_attribute_proto(graph: int, op: int, attribute_name: str,
                        attribute_value: bytes) -> None:
    """Set attribute *attribute_name* from a serialized ``AttrValue`` proto."""
    native.ensure_loaded().set_attribute_proto(
        graph, op, attribute_name, bytes(attribute_value))


def _reset_process_pointer() -> None:
    global _process_pointer
    with _process_pointer_lock:
        _process_pointer = None


__all__ = [
    'version', 'data_type_size', 'load_op_library', 'process_pointer',
    'enable_xla', 'update_input', 'add_control_input', 'clear_control_inputs',
    'set_requested_device', 'set_attribute_proto',
]
