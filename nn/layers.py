# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""nn.layers — core layers."""
from __future__ import annotations

import math
import numpy as np

from .module import Layer


# ──────────────────────── Linear ──────────────────────────────────────

class Linear(Layer):
    """Applies a linear transformation: y = xW + b.

    The input size is taken from the last dimension of the first input,
    so only the number of output units is needed up front.
    """

    def __init__(self, name: str, units: int, use_bias: bool = True,
                 seed: int | None = None):
        super().__init__(name)
        if units <= 0:
            raise ValueError(f"Linear '{name}' needs a positive number of "
                             f"units, got {units}.")
        self.units = units
        self.use_bias = use_bias
        self._rng = np.random.default_rng(seed)
        self.weights: np.ndarray | None = None
        self.bias: np.ndarray | None = None

    def _build(self, in_features: int) -> None:
        k = 1.0 / math.sqrt(in_features)
        self.weights = self.register_parameter(
            'weights',
            self._rng.uniform(-k, k, (in_features, self.units)).astype(np.float32))
        if self.use_bias:
            self.bias = self.register_parameter(
                'bias',
                self._rng.uniform(-k, k, (self.units,)).astype(np.float32))

    def forward(self, x: np.ndarray) -> np.ndarray:
        if self.weights is None:
            self._build(x.shape[-1])
        elif x.shape[-1] != self.weights.shape[0]:
            raise ValueError(
                f"Linear '{self.name}' was built for inputs of size "
                f"{self.weights.shape[0]}, got {x.shape[-1]}.")
        out = x @ self.weights
        if self.bias is not None:
            out = out + self.bias
        return out

    def __repr__(self) -> str:
        return (f"Linear({self.name!r}, units={self.units}, "
                f"use_bias={self.use_bias})")


# ──────────────────────── Activations ─────────────────────────────────

class ReLU(Layer):
    """ReLU activation; leaky with slope ``alpha`` for negative inputs."""

    def __init__(self, name: str, alpha: float = 0.0):
        super().__init__(name)
        self.alpha = alpha

    def forward(self, x):
        if self.alpha == 0.0:
            return np.maximum(x, 0)
        return np.where(x > 0, x, self.alpha * x)

    def __repr__(self) -> str:
        return f"ReLU({self.name!r}, alpha={self.alpha})"
