# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""TensorFlow data types and their ``TF_DataType`` C values."""
from __future__ import annotations

import enum
import numpy as np


class dtype(enum.Enum):
    """TensorFlow data types; the value is the ``TF_DataType`` C enum."""
    float32 = 1
    float64 = 2
    int32 = 3
    uint8 = 4
    int16 = 5
    int8 = 6
    string = 7
    int64 = 9
    bool = 10
    bfloat16 = 14
    float16 = 19

    @property
    def c_value(self) -> int:
        return self.value

    @staticmethod
    def from_c_value(value: int) -> 'dtype':
        try:
            return dtype(value)
        except ValueError:
            raise ValueError(
                f"Unsupported TF_DataType C value: {value}") from None

    def to_numpy(self) -> np.dtype:
        """Convert to numpy dtype."""
        _map = {
            dtype.float16: np.float16,
            dtype.float32: np.float32,
            dtype.float64: np.float64,
            dtype.bfloat16: np.float32,  # numpy has no bfloat16; use float32
            dtype.int8: np.int8,
            dtype.int16: np.int16,
            dtype.int32: np.int32,
            dtype.int64: np.int64,
            dtype.uint8: np.uint8,
            dtype.bool: np.bool_,
            dtype.string: np.object_,
        }
        return np.dtype(_map[self])

    @staticmethod
    def from_numpy(np_dtype: np.dtype) -> 'dtype':
        """Convert numpy dtype to tfbind dtype."""
        _map = {
            np.dtype(np.float16): dtype.float16,
            np.dtype(np.float32): dtype.float32,
            np.dtype(np.float64): dtype.float64,
            np.dtype(np.int8): dtype.int8,
            np.dtype(np.int16): dtype.int16,
            np.dtype(np.int32): dtype.int32,
            np.dtype(np.int64): dtype.int64,
            np.dtype(np.uint8): dtype.uint8,
            np.dtype(np.bool_): dtype.bool,
        }
        try:
            return _map[np.dtype(np_dtype)]
        except KeyError:
            raise ValueError(
                f"Unsupported numpy dtype: {np.dtype(np_dtype)}") from None

    def __repr__(self) -> str:
        return f"tfbind.{self.name}"


def as_c_value(value: dtype | int) -> int:
    """Accept either a :class:`dtype` or a raw ``TF_DataType`` value."""
    if isinstance(value, dtype):
        return value.c_value
    return int(value)


float16 = dtype.float16
float32 = dtype.float32
float64 = dtype.float64
bfloat16 = dtype.bfloat16
half = dtype.float16
int8 = dtype.int8
int16 = dtype.int16
int32 = dtype.int32
int64 = dtype.int64
long = dtype.int64
uint8 = dtype.uint8
string = dtype.string
bool = dtype.bool
