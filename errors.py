# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Exception hierarchy for tfbind."""
from __future__ import annotations


class TFBindError(Exception):
    """Base class for all tfbind errors."""


class LinkError(TFBindError, OSError):
    """The native libraries could not be located or linked into the process.

    Mirrors the JVM's ``UnsatisfiedLinkError``: it is not recoverable, the
    process has to be restarted with a correctly packaged library.
    """


class ExtractionError(LinkError):
    """A packaged native library could not be copied to the temp directory."""

    def __init__(self, filename: str, cause: BaseException):
        super().__init__(
            f"Error while extracting the '{filename}' native library: {cause}")
        # Not ``filename``: OSError renders its message from that attribute.
        self.library_file = filename
        self.cause = cause


class NativeError(TFBindError, RuntimeError):
    """A native entry point returned a non-OK ``TF_Status``."""

    def __init__(self, code: int, message: str):
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message
