# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Host platform detection used to pick the packaged native libraries."""
from __future__ import annotations

import platform as _platform
import re
from dataclasses import dataclass

_WHITESPACE = re.compile(r'\s')


def normalize_os(name: str) -> str:
    """Map an OS name to the tag used in the resource layout.

    ``"Windows 10"`` → ``windows``, ``"Mac OS X"`` → ``darwin``.  Unknown
    names are lower-cased with all whitespace removed.
    """
    name = name.lower()
    if 'linux' in name:
        return 'linux'
    if 'os x' in name or 'darwin' in name:
        return 'darwin'
    if 'windows' in name:
        return 'windows'
    return _WHITESPACE.sub('', name)


def normalize_arch(arch: str) -> str:
    arch = arch.lower()
    if arch == 'amd64':
        return 'x86_64'
    return arch


@dataclass(frozen=True)
class Platform:
    """Normalized (os, arch) pair."""
    os: str
    arch: str

    @classmethod
    def from_names(cls, os_name: str, arch: str) -> 'Platform':
        return cls(normalize_os(os_name), normalize_arch(arch))

    @classmethod
    def detect(cls) -> 'Platform':
        return cls.from_names(_platform.system(), _platform.machine())

    @property
    def tag(self) -> str:
        return f'{self.os}-{self.arch}'

    def __str__(self) -> str:
        return self.tag


_current: Platform | None = None


def current_platform() -> Platform:
    """Return the host platform (detected once per process)."""
    global _current
    if _current is None:
        _current = Platform.detect()
    return _current
