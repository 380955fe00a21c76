# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Device specifications rendered as TensorFlow placement strings."""
from __future__ import annotations

# cuda is accepted as an alias so torch-style strings work.
_TF_TYPES = {'cpu': 'CPU', 'gpu': 'GPU', 'cuda': 'GPU', 'tpu': 'TPU'}


class device:
    """Represents a compute device (cpu, gpu, tpu)."""

    __slots__ = ('_type', '_index')

    def __init__(self, type_or_str: str = 'cpu', index: int | None = None):
        if isinstance(type_or_str, device):
            self._type = type_or_str._type
            self._index = type_or_str._index
            return
        s = str(type_or_str).lower()
        if ':' in s:
            parts = s.split(':')
            self._type = parts[0]
            self._index = int(parts[1])
        else:
            self._type = s
            self._index = index
        if self._type not in _TF_TYPES:
            raise ValueError(f"Unknown device type: '{self._type}'")

    @property
    def type(self) -> str:
        return self._type

    @property
    def index(self) -> int | None:
        return self._index

    def to_tf(self) -> str:
        """Placement string understood by TensorFlow, e.g. ``/device:GPU:1``."""
        return f"/device:{_TF_TYPES[self._type]}:{self._index or 0}"

    def __eq__(self, other) -> bool:
        if isinstance(other, str):
            other = device(other)
        if not isinstance(other, device):
            return NotImplemented
        return (_TF_TYPES[self._type] == _TF_TYPES[other._type]
                and (self._index or 0) == (other._index or 0))

    def __hash__(self) -> int:
        return hash((_TF_TYPES[self._type], self._index or 0))

    def __repr__(self) -> str:
        if self._index is not None:
            return f"device(type='{self._type}', index={self._index})"
        return f"device(type='{self._type}')"

    def __str__(self) -> str:
        if self._index is not None:
            return f"{self._type}:{self._index}"
        return self._type
