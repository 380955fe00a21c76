# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""tfbind.nn — composable layer API."""
from __future__ import annotations

# Layer base class & combinator
from .module import Layer, Compose

# Layers
from .layers import Linear, ReLU

# Architectures
from .core import MLP

__all__ = ['Layer', 'Compose', 'Linear', 'ReLU', 'MLP']
