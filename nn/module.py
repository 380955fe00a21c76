# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""nn.Layer — base class for all layers and the ``>>`` combinator."""
from __future__ import annotations

from collections import OrderedDict
from typing import Iterator

import numpy as np


class Layer:
    """Base class for all layers.

    A layer is a named callable from arrays to arrays.  Layers compose
    left to right with ``>>``::

        net = Linear('a', 16) >> ReLU('a/act') >> Linear('b', 1)
    """

    def __init__(self, name: str):
        self.name = name
        self._parameters: OrderedDict[str, np.ndarray] = OrderedDict()

    def forward(self, x: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def __call__(self, x) -> np.ndarray:
        return self.forward(np.asarray(x))

    def __rshift__(self, other: 'Layer') -> 'Compose':
        if not isinstance(other, Layer):
            return NotImplemented
        return Compose(self, other)

    # ---- Parameter access ----

    def register_parameter(self, name: str, value: np.ndarray) -> np.ndarray:
        self._parameters[name] = value
        return value

    def parameters(self) -> Iterator[tuple[str, np.ndarray]]:
        """Yield ``(scoped_name, array)`` pairs, e.g. ``mlp/Linear/weights``."""
        for name, p in self._parameters.items():
            yield f"{self.name}/{name}", p

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Compose(Layer):
    """Applies its layers in sequence.  Nested compositions are flattened."""

    def __init__(self, *layers: Layer):
        flat: list[Layer] = []
        for layer in layers:
            if isinstance(layer, Compose):
                flat.extend(layer.layers)
            else:
                flat.append(layer)
        if not flat:
            raise ValueError("Compose needs at least one layer.")
        super().__init__(' >> '.join(l.name for l in flat))
        self.layers: list[Layer] = flat

    def forward(self, x):
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self):
        for layer in self.layers:
            yield from layer.parameters()

    def __len__(self) -> int:
        return len(self.layers)

    def __getitem__(self, idx):
        return self.layers[idx]

    def __iter__(self):
        return iter(self.layers)

    def __repr__(self) -> str:
        return ' >> '.join(repr(l) for l in self.layers)
