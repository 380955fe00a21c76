# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""nn.core — architectures built from the core layers."""
from __future__ import annotations

from typing import Callable, Sequence

from .layers import Linear, ReLU
from .module import Layer


def _leaky_relu(name: str) -> Layer:
    return ReLU(name, 0.1)


def MLP(name: str, hidden_layers: Sequence[int], output_size: int,
        activation: Callable[[str], Layer] = _leaky_relu) -> Layer:
    """Multilayer perceptron.

    Hidden layer ``i`` is ``{name}/Layer{i}/Linear`` followed by
    ``activation("{name}/Layer{i}/Activation")``; the output projection is
    ``{name}/OutputLayer/Linear``.  With no hidden layers the result is a
    single ``{name}/Linear``.
    """
    if not hidden_layers:
        return Linear(f"{name}/Linear", output_size)
    layer: Layer | None = None
    for i, size in enumerate(hidden_layers):
        block = (Linear(f"{name}/Layer{i}/Linear", size)
                 >> activation(f"{name}/Layer{i}/Activation"))
        layer = block if layer is None else layer >> block
    return layer >> Linear(f"{name}/OutputLayer/Linear", output_size)
