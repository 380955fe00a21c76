# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
tfbind.native.engine — the native entry points.

:class:`NativeEngine` lists every foreign call tfbind makes into the
TensorFlow runtime.  :class:`CtypesEngine` binds them with ``ctypes``:
entry points that exist in the public TensorFlow C API
(``TF_DataTypeSize``, ``TF_LoadLibrary``, ``TF_UpdateEdge``) are called
directly, the rest are exported by the bridge library under a ``TFB_``
prefix.  The load check reads ``TFB_Version``, so a TensorFlow that is
already in the process without the bridge does not count as loaded.

Symbols are searched in every library loaded through
:meth:`CtypesEngine.load_library` (most recent first) and then in the
global namespace of the process, so a TensorFlow that was linked in
statically or loaded by the host application is picked up as well.
"""
from __future__ import annotations

import ctypes
import logging
import sys
import threading
from contextlib import contextmanager
from typing import Any

from ..errors import LinkError, NativeError

logger = logging.getLogger(__name__)


class NativeEngine:
    """Capability interface over the native TensorFlow runtime.

    Handles (graphs, operations, eager contexts, tensors) are opaque
    integers owned by the native side.
    """

    def load_library(self, path: str) -> None:
        """Load the shared library at *path* into the process."""
        raise NotImplementedError

    def version(self) -> str:
        """Return the TensorFlow version.

        Doubles as the load check: raises :class:`LinkError` when the
        bridge library is not present in the process.
        """
        raise NotImplementedError

    def data_type_size(self, c_value: int) -> int:
        raise NotImplementedError

    def load_op_library(self, path: str) -> bytes:
        """Register the ops in *path* and return the serialized ``OpList``."""
        raise NotImplementedError

    def process_pointer(self) -> int:
        raise NotImplementedError

    def enable_xla(self) -> None:
        raise NotImplementedError

    # ── Graph mutation ──

    def update_input(self, graph: int, input_op: int, input_index: int,
                     output_op: int, output_index: int) -> None:
        raise NotImplementedError

    def add_control_input(self, graph: int, op: int, input_op: int) -> int:
        raise NotImplementedError

    def clear_control_inputs(self, graph: int, op: int) -> int:
        raise NotImplementedError

    def set_requested_device(self, graph: int, op: int, device: str) -> int:
        raise NotImplementedError

    def set_attribute_proto(self, graph: int, op: int, name: str,
                            value: bytes) -> None:
        raise NotImplementedError

    # ── Eager math ──

    def cast(self, context: int, x: int, dst_type: int) -> int:
        raise NotImplementedError

    def add(self, context: int, x: int, y: int) -> int:
        raise NotImplementedError

    def sub(self, context: int, x: int, y: int) -> int:
        raise NotImplementedError


# ──────────────────────────────────────────────────────────────────────
#  C API structures
# ──────────────────────────────────────────────────────────────────────

class _TFBuffer(ctypes.Structure):
    _fields_ = [
        ('data', ctypes.c_void_p),
        ('length', ctypes.c_size_t),
        ('data_deallocator', ctypes.c_void_p),
    ]


class _TFPort(ctypes.Structure):
    """Layout shared by ``TF_Output`` and ``TF_Input``."""
    _fields_ = [
        ('oper', ctypes.c_void_p),
        ('index', ctypes.c_int),
    ]


_vp = ctypes.c_void_p
_SIGNATURES: dict[str, tuple[Any, list]] = {
    # TensorFlow C API
    'TF_DataTypeSize': (ctypes.c_size_t, [ctypes.c_int]),
    'TF_NewStatus': (_vp, []),
    'TF_DeleteStatus': (None, [_vp]),
    'TF_GetCode': (ctypes.c_int, [_vp]),
    'TF_Message': (ctypes.c_char_p, [_vp]),
    'TF_LoadLibrary': (_vp, [ctypes.c_char_p, _vp]),
    'TF_GetOpList': (_TFBuffer, [_vp]),
    'TF_DeleteLibraryHandle': (None, [_vp]),
    'TF_UpdateEdge': (None, [_vp, _TFPort, _TFPort, _vp]),
    # Bridge library
    'TFB_Version': (ctypes.c_char_p, []),
    'TFB_ProcessPointer': (_vp, []),
    'TFB_EnableXLA': (None, []),
    'TFB_AddControlInput': (ctypes.c_int, [_vp, _vp, _vp]),
    'TFB_ClearControlInputs': (ctypes.c_int, [_vp, _vp]),
    'TFB_SetRequestedDevice': (ctypes.c_int, [_vp, _vp, ctypes.c_char_p]),
    'TFB_SetAttributeProto': (None, [_vp, _vp, ctypes.c_char_p,
                                     ctypes.c_char_p, ctypes.c_size_t, _vp]),
    'TFB_Cast': (_vp, [_vp, _vp, ctypes.c_int, _vp]),
    'TFB_Add': (_vp, [_vp, _vp, _vp, _vp]),
    'TFB_Sub': (_vp, [_vp, _vp, _vp, _vp]),
}


def _open_library(path: str) -> ctypes.CDLL:
    # RTLD_GLOBAL so that libraries loaded later resolve against this one.
    return ctypes.CDLL(path, mode=ctypes.RTLD_GLOBAL)


def _process_namespace():
    """The global symbol namespace of the running process, if reachable."""
    if sys.platform == 'win32':
        return None
    try:
        return ctypes.CDLL(None)
    except OSError:
        return None


class CtypesEngine(NativeEngine):
    """:class:`NativeEngine` backed by ``ctypes``."""

    def __init__(self):
        self._handles: list[ctypes.CDLL] = []
        self._functions: dict[str, Any] = {}
        self._lock = threading.Lock()

    @property
    def handles(self) -> list[ctypes.CDLL]:
        return list(self._handles)

    def load_library(self, path: str) -> None:
        handle = _open_library(path)
        with self._lock:
            self._handles.append(handle)
            # Symbols that were missing before may resolve now.
            self._functions.clear()
        logger.debug("Loaded native library %s.", path)

    def _fn(self, name: str):
        with self._lock:
            fn = self._functions.get(name)
            if fn is not None:
                return fn
            candidates = list(reversed(self._handles))
        ns = _process_namespace()
        if ns is not None:
            candidates.append(ns)
        for lib in candidates:
            try:
                fn = getattr(lib, name)
            except AttributeError:
                continue
            restype, argtypes = _SIGNATURES[name]
            fn.restype = restype
            fn.argtypes = argtypes
            with self._lock:
                self._functions[name] = fn
            return fn
        raise LinkError(f"Native symbol '{name}' is not available in the "
                        f"loaded TensorFlow libraries.")

    @contextmanager
    def _status(self):
        status = self._fn('TF_NewStatus')()
        try:
            yield status
            code = self._fn('TF_GetCode')(status)
            if code != 0:
                msg = self._fn('TF_Message')(status) or b''
                raise NativeError(code, msg.decode('utf-8', 'replace'))
        finally:
            self._fn('TF_DeleteStatus')(status)

    # ── NativeEngine ──

    def version(self) -> str:
        return self._fn('TFB_Version')().decode('utf-8')

    def data_type_size(self, c_value: int) -> int:
        return int(self._fn('TF_DataTypeSize')(c_value))

    def load_op_library(self, path: str) -> bytes:
        with self._status() as status:
            lib = self._fn('TF_LoadLibrary')(path.encode('utf-8'), status)
        buf = self._fn('TF_GetOpList')(lib)
        data = ctypes.string_at(buf.data, buf.length) if buf.length else b''
        # Frees the handle only; the ops stay registered.
        self._fn('TF_DeleteLibraryHandle')(lib)
        return data

    def process_pointer(self) -> int:
        return self._fn('TFB_ProcessPointer')() or 0

    def enable_xla(self) -> None:
        self._fn('TFB_EnableXLA')()

    def update_input(self, graph, input_op, input_index, output_op,
                     output_index):
        with self._status() as status:
            self._fn('TF_UpdateEdge')(
                graph,
                _TFPort(output_op, output_index),
                _TFPort(input_op, input_index),
                status)

    def add_control_input(self, graph, op, input_op):
        return self._fn('TFB_AddControlInput')(graph, op, input_op)

    def clear_control_inputs(self, graph, op):
        return self._fn('TFB_ClearControlInputs')(graph, op)

    def set_requested_device(self, graph, op, device):
        return self._fn('TFB_SetRequestedDevice')(
            graph, op, device.encode('utf-8'))

    def set_attribute_proto(self, graph, op, name, value):
        with self._status() as status:
            self._fn('TFB_SetAttributeProto')(
                graph, op, name.encode('utf-8'), value, len(value), status)

    def cast(self, context, x, dst_type):
        with self._status() as status:
            out = self._fn('TFB_Cast')(context, x, dst_type, status)
        return out or 0

    def add(self, context, x, y):
        with self._status() as status:
            out = self._fn('TFB_Add')(context, x, y, status)
        return out or 0

    def sub(self, context, x, y):
        with self._status() as status:
            out = self._fn('TFB_Sub')(context, x, y, status)
        return out or 0
