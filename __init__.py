# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
tfbind — Python bindings for the TensorFlow native library.

The native libraries (TensorFlow itself, the ``tensorflow_jni`` bridge and
the optional ``tensorflow_ops`` custom op library) are shipped inside the
package and linked into the process on first use.  Nothing is loaded at
import time.

Usage::

    import tfbind
    import tfbind.nn as nn

    tfbind.version()                       # loads the native libraries
    tfbind.data_type_size(tfbind.float32)  # 4

    mlp = nn.MLP('mlp', hidden_layers=[64, 64], output_size=10)
"""
from __future__ import annotations

import logging

__version__ = "0.1.0"
__author__ = "Pictofeed, LLC"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# ── Errors ──
from .errors import TFBindError, LinkError, ExtractionError, NativeError

# ── Dtype constants ──
from .dtype import (
    dtype,
    float16, float32, float64,
    bfloat16, half,
    int8, int16, int32, int64, long,
    uint8, string,
)
from .dtype import bool as bool

# ── Device ──
from .device import device

# ── Native entry points ──
from .tensorflow import (
    version,
    data_type_size,
    load_op_library,
    process_pointer,
    enable_xla,
)
from .native import ensure_loaded

# ── Sub-packages ──
from . import native
from . import nn
from . import ops

__all__ = [
    "__version__",
    "__author__",

    # Errors
    'TFBindError', 'LinkError', 'ExtractionError', 'NativeError',
    # Dtypes
    'dtype', 'float16', 'float32', 'float64', 'bfloat16', 'half',
    'int8', 'int16', 'int32', 'int64', 'long', 'uint8', 'string', 'bool',
    # Device
    'device',
    # Native
    'version', 'data_type_size', 'load_op_library', 'process_pointer',
    'enable_xla', 'ensure_loaded',
    # Sub-packages
    'native', 'nn', 'ops',
]
