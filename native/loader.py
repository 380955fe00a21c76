# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
tfbind.native.loader — one-time loading of the TensorFlow native libraries.

Load sequence
-------------
1.  Ask the engine for its version (``TFB_Version``).  If it answers, the
    bridge is already part of the process (statically linked, or loaded by
    the host application) and there is nothing else to do.
2.  Create a fresh temporary directory and register its removal at exit.
3.  Extract and load, in order:

    * ``tensorflow_framework`` and ``tensorflow`` (optional, they may
      already be on the system library path),
    * ``tensorflow_jni``, the bridge (required),
    * ``tensorflow_ops``, registered through ``load_op_library``.

The loader is a small state machine::

    UNINITIALIZED ──► LOADING ──► LOADED
                          └─────► FAILED

``LOADED`` and ``FAILED`` are terminal: later calls return immediately or
re-raise the original error (a :class:`LinkError` when the load was
interrupted).
"""
from __future__ import annotations

import atexit
import enum
import logging
import os
import shutil
import tempfile
import threading
from dataclasses import dataclass
from typing import BinaryIO, Callable

from .. import config
from ..errors import ExtractionError, LinkError, NativeError
from .engine import NativeEngine
from .library import (
    JNI_LIB_NAME, LIB_FRAMEWORK_NAME, LIB_NAME, OPS_LIB_NAME,
    make_resource_names,
)
from .platform import Platform, current_platform
from .resources import Resources

logger = logging.getLogger(__name__)

_README_URL = 'https://github.com/pictofeed/tfbind/tree/master/README.md'
_TEMP_PREFIX = 'tfbind_native_libraries'


class LoadState(enum.Enum):
    UNINITIALIZED = 'uninitialized'
    LOADING = 'loading'
    LOADED = 'loaded'
    FAILED = 'failed'


@dataclass(frozen=True)
class Extraction:
    """A packaged library copied to disk."""
    library: str
    filename: str
    path: str


def remove_tree(directory: str) -> None:
    """Delete *directory*, children before parents, ignoring failures."""
    paths = [directory]
    for root, dirs, files in os.walk(directory):
        paths.extend(os.path.join(root, d) for d in dirs)
        paths.extend(os.path.join(root, f) for f in files)
    for path in sorted(paths, reverse=True):
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                os.rmdir(path)
            else:
                os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.debug("Could not delete %s: %s", path, exc)


class NativeLoader:
    """Loads the native libraries into the process exactly once.

    Args:
        engine: the native entry points.  ``load_library`` and
            ``load_op_library`` are used to link extracted files,
            ``version`` tells whether they are already present.
        resources: where the packaged libraries are read from.
        platform: target platform, the host platform by default.
        temp_root: parent of the extraction directory.
        register_cleanup: called once with the cleanup callable
            (``atexit.register`` by default).
    """

    def __init__(self, engine: NativeEngine, resources: Resources,
                 platform: Platform | None = None,
                 temp_root: str | None = None,
                 register_cleanup: Callable[[Callable[[], None]], object] | None = None):
        self.engine = engine
        self.resources = resources
        self.platform = platform or current_platform()
        self.temp_root = temp_root
        self._register_cleanup = register_cleanup or atexit.register
        self._lock = threading.Lock()
        self._state = LoadState.UNINITIALIZED
        self._error: BaseException | None = None
        self._directory: str | None = None
        self._extracted: list[Extraction] = []

    # ── Introspection ──

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def directory(self) -> str | None:
        """Temporary extraction directory, if one was created."""
        return self._directory

    @property
    def extracted(self) -> list[Extraction]:
        return list(self._extracted)

    def is_loaded(self) -> bool:
        return self._state is LoadState.LOADED

    # ── Loading ──

    def ensure_loaded(self) -> NativeEngine:
        """Load the native libraries unless that already happened.

        Returns the engine.  Raises :class:`LinkError` if the bridge
        library is missing or cannot be linked; every later call raises
        the same error.
        """
        with self._lock:
            if self._state is LoadState.LOADED:
                return self.engine
            if self._state is LoadState.FAILED:
                self._raise_failure()
            self._state = LoadState.LOADING
            try:
                self._load()
            except BaseException as exc:
                # Terminal even when interrupted: libraries may be linked.
                self._state = LoadState.FAILED
                self._error = exc
                raise
            self._state = LoadState.LOADED
            return self.engine

    def _raise_failure(self) -> None:
        exc = self._error
        if isinstance(exc, Exception):
            raise exc.with_traceback(None)
        raise LinkError(
            f"Loading the TensorFlow native libraries for {self.platform} "
            f"was interrupted; restart the process to retry.") from exc

    def _already_loaded(self) -> bool:
        try:
            version = self.engine.version()
        except LinkError:
            return False
        logger.info("TensorFlow %s is already loaded.", version)
        return True

    def _platform_context(self) -> str:
        return f"OS: {self.platform.os}, and architecture: {self.platform.arch}"

    def _load(self) -> None:
        if self._already_loaded():
            return

        # Not present in the process; look for packaged copies.
        self._directory = self._make_directory()

        for lib in (LIB_FRAMEWORK_NAME, LIB_NAME):
            paths = self._extract_library(lib)
            # The other names stay on disk as aliases for the dynamic linker.
            path = self._core_candidate(paths)
            if path is not None:
                self._link_core(path, lib)

        jni_paths = self._extract_library(JNI_LIB_NAME)
        if not jni_paths:
            raise LinkError(
                f"Cannot find the TensorFlow JNI bindings for "
                f"{self._platform_context()}. "
                f"See {_README_URL} for possible solutions (such as building "
                f"the library from source).")
        for path in jni_paths:
            self._link(path, JNI_LIB_NAME)

        for path in self._extract_library(OPS_LIB_NAME):
            try:
                self.engine.load_op_library(os.path.abspath(path))
            except (OSError, NativeError) as exc:
                raise LinkError(
                    f"Unable to register the ops in the '{OPS_LIB_NAME}' "
                    f"native library for {self._platform_context()}. "
                    f"Error: {exc}.") from exc
            logger.debug("Registered the ops in %s.", path)

        logger.info("Loaded the TensorFlow native libraries for %s.",
                    self.platform)

    def _core_candidate(self, paths: list[str]) -> str | None:
        """Pick the extracted core library matching the platform's format."""
        want_dylib = self.platform.os == 'darwin'
        for path in paths:
            if path.endswith('.dylib') == want_dylib:
                return path
        return None

    def _make_directory(self) -> str:
        parent = self.temp_root or config.temp_root()
        if parent is not None:
            os.makedirs(parent, exist_ok=True)
        directory = tempfile.mkdtemp(prefix=_TEMP_PREFIX, dir=parent)
        if config.keep_extracted():
            logger.info("Keeping extracted native libraries in %s.", directory)
        else:
            self._register_cleanup(self.cleanup)
        return directory

    def _link_core(self, path: str, lib: str) -> None:
        # Optional: a system copy may still satisfy the bridge.
        try:
            self.engine.load_library(os.path.abspath(path))
        except OSError as exc:
            logger.debug("Could not load the '%s' native library from %s: %s",
                         lib, path, exc)

    def _link(self, path: str, lib: str) -> None:
        try:
            self.engine.load_library(os.path.abspath(path))
        except OSError as exc:
            raise LinkError(
                f"Unable to load the '{lib}' native library from the "
                f"extracted file for {self._platform_context()}. This could "
                f"be due to the TensorFlow native library not being "
                f"available. Error: {exc}.") from exc

    def _extract_library(self, lib: str) -> list[str]:
        paths = []
        for filename, resource_path in make_resource_names(lib, self.platform):
            stream = self.resources.open(resource_path)
            if stream is None:
                continue
            with stream:
                path = self.extract_resource(filename, stream)
            self._extracted.append(Extraction(lib, filename, path))
            paths.append(path)
        return paths

    def extract_resource(self, filename: str, stream: BinaryIO) -> str:
        """Copy *stream* to ``filename`` in the extraction directory."""
        if self._directory is None:
            raise RuntimeError(
                "No extraction directory; call ensure_loaded() first.")
        path = os.path.join(self._directory, filename)
        logger.debug("Extracting the '%s' native library to %s.",
                     filename, path)
        try:
            with open(path, 'wb') as out:
                shutil.copyfileobj(stream, out)
                num_bytes = out.tell()
        except OSError as exc:
            raise ExtractionError(filename, exc) from exc
        logger.debug("Copied %d bytes to %s.", num_bytes, path)
        return path

    # ── Cleanup ──

    def cleanup(self) -> None:
        """Remove the extraction directory.  Safe to call more than once."""
        if self._directory is None:
            return
        logger.debug("Removing extracted native libraries in %s.",
                     self._directory)
        remove_tree(self._directory)
