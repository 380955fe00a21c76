"""Shared fixtures: a fake native engine and a packaged-library tree on disk."""
import os
import threading
import time

import pytest

import tfbind.native as native
import tfbind.tensorflow as tf_api
from tfbind.errors import LinkError
from tfbind.native import (
    DirectoryResources, NativeEngine, NativeLoader, Platform,
)

LINUX_X86 = Platform('linux', 'x86_64')

_DTYPE_SIZES = {1: 4, 2: 8, 3: 4, 4: 1, 5: 2, 6: 1, 7: 0, 9: 8, 10: 1,
                14: 2, 19: 2}


class FakeEngine(NativeEngine):
    """Records every native call instead of making it."""

    def __init__(self, preloaded=False, fail_on=(), load_delay=0.0,
                 interrupt_on=(), op_error=None):
        self.preloaded = preloaded
        self.fail_on = set(fail_on)
        self.interrupt_on = set(interrupt_on)
        self.op_error = op_error
        self.load_delay = load_delay
        self.events = []
        self.calls = []
        self.version_calls = 0
        self._lock = threading.Lock()

    @property
    def loaded(self):
        return [name for kind, name in self.events if kind == 'load']

    def load_library(self, path):
        name = os.path.basename(path)
        assert os.path.isfile(path), path
        if self.load_delay:
            time.sleep(self.load_delay)
        if name in self.fail_on:
            raise OSError(f"{path}: invalid ELF header")
        if name in self.interrupt_on:
            raise KeyboardInterrupt
        with self._lock:
            self.events.append(('load', name))

    def load_op_library(self, path):
        if self.op_error is not None:
            raise self.op_error
        with self._lock:
            self.events.append(('op', os.path.basename(path)))
        return b'\n\x0b\n\tCustomOp'

    def version(self):
        with self._lock:
            self.version_calls += 1
        if self.preloaded or 'libtensorflow_jni.so' in self.loaded:
            return '2.15.0'
        raise LinkError("Native symbol 'TFB_Version' is not available.")

    def data_type_size(self, c_value):
        return _DTYPE_SIZES[c_value]

    def process_pointer(self):
        self.calls.append(('process_pointer',))
        return 0x7f00dead

    def enable_xla(self):
        self.calls.append(('enable_xla',))

    def update_input(self, graph, input_op, input_index, output_op,
                     output_index):
        self.calls.append(('update_input', graph, input_op, input_index,
                           output_op, output_index))

    def add_control_input(self, graph, op, input_op):
        self.calls.append(('add_control_input', graph, op, input_op))
        return 0

    def clear_control_inputs(self, graph, op):
        self.calls.append(('clear_control_inputs', graph, op))
        return 0

    def set_requested_device(self, graph, op, device):
        self.calls.append(('set_requested_device', graph, op, device))
        return 0

    def set_attribute_proto(self, graph, op, name, value):
        self.calls.append(('set_attribute_proto', graph, op, name, value))

    def cast(self, context, x, dst_type):
        self.calls.append(('cast', context, x, dst_type))
        return 100

    def add(self, context, x, y):
        self.calls.append(('add', context, x, y))
        return 101

    def sub(self, context, x, y):
        self.calls.append(('sub', context, x, y))
        return 102


CORE_SO = ('libtensorflow_framework.so.2', 'libtensorflow.so.2')
CORE_DYLIB = ('libtensorflow_framework.2.dylib', 'libtensorflow.2.dylib')


def write_native_tree(root, platform=LINUX_X86, core=True, jni=True, ops=True,
                      core_names=CORE_SO):
    """Lay out fake native libraries the way the wheel ships them."""
    os.makedirs(root, exist_ok=True)
    if core:
        for name in core_names:
            with open(os.path.join(root, name), 'wb') as f:
                f.write(b'\x7fELF core ' + name.encode())
    platform_dir = os.path.join(root, 'native', platform.tag)
    os.makedirs(platform_dir, exist_ok=True)
    if jni:
        with open(os.path.join(platform_dir, 'libtensorflow_jni.so'), 'wb') as f:
            f.write(b'\x7fELF bridge' * 64)
    if ops:
        with open(os.path.join(platform_dir, 'libtensorflow_ops.so'), 'wb') as f:
            f.write(b'\x7fELF ops')
    return root


@pytest.fixture
def cleanups():
    """Stands in for ``atexit.register``; holds the registered callables."""
    return []


@pytest.fixture
def make_loader(tmp_path, cleanups):
    def _make(engine=None, platform=LINUX_X86, resources=None, **tree):
        if resources is None:
            resources = DirectoryResources(
                write_native_tree(str(tmp_path / 'pkg'), platform, **tree))
        return NativeLoader(
            engine if engine is not None else FakeEngine(),
            resources,
            platform=platform,
            temp_root=str(tmp_path / 'tmp'),
            register_cleanup=cleanups.append,
        )
    return _make


@pytest.fixture
def fake_native(make_loader):
    """Install a loader backed by :class:`FakeEngine` as the process loader."""
    loader = make_loader()
    previous = native.set_loader(loader)
    tf_api._reset_process_pointer()
    yield loader
    native.set_loader(previous)
    tf_api._reset_process_pointer()
    loader.cleanup()
