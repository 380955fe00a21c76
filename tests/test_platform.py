"""Tests for tfbind.native.platform and tfbind.native.library."""
import pytest

from tfbind.native import (
    JNI_LIB_NAME, LIB_FRAMEWORK_NAME, LIB_NAME, LIBRARY_LOAD_ORDER,
    OPS_LIB_NAME, Platform, make_resource_names, map_library_name,
    normalize_arch, normalize_os,
)
from tfbind.native import platform as platform_mod


@pytest.mark.parametrize('name, expected', [
    ('Linux', 'linux'),
    ('Windows 10', 'windows'),
    ('Windows Server 2019', 'windows'),
    ('Mac OS X', 'darwin'),
    ('Darwin', 'darwin'),
    ('Free BSD', 'freebsd'),
    ('SunOS', 'sunos'),
])
def test_normalize_os(name, expected):
    assert normalize_os(name) == expected


@pytest.mark.parametrize('arch, expected', [
    ('amd64', 'x86_64'),
    ('AMD64', 'x86_64'),
    ('x86_64', 'x86_64'),
    ('aarch64', 'aarch64'),
    ('arm64', 'arm64'),
])
def test_normalize_arch(arch, expected):
    assert normalize_arch(arch) == expected


def test_platform_tag():
    p = Platform.from_names('Windows 10', 'amd64')
    assert p == Platform('windows', 'x86_64')
    assert p.tag == 'windows-x86_64'
    assert str(p) == 'windows-x86_64'


def test_platform_is_immutable():
    p = Platform('linux', 'x86_64')
    with pytest.raises(AttributeError):
        p.os = 'darwin'


def test_detect_uses_host(monkeypatch):
    monkeypatch.setattr(platform_mod._platform, 'system', lambda: 'Darwin')
    monkeypatch.setattr(platform_mod._platform, 'machine', lambda: 'arm64')
    assert Platform.detect() == Platform('darwin', 'arm64')


def test_current_platform_is_cached(monkeypatch):
    monkeypatch.setattr(platform_mod, '_current', None)
    first = platform_mod.current_platform()
    monkeypatch.setattr(platform_mod._platform, 'system', lambda: 'Plan 9')
    assert platform_mod.current_platform() is first


# ── Library names ──

@pytest.mark.parametrize('lib', [LIB_NAME, LIB_FRAMEWORK_NAME])
def test_map_library_name_core(lib):
    assert map_library_name(lib) == [
        f'lib{lib}.so', f'lib{lib}.so.2', f'lib{lib}.dylib',
        f'lib{lib}.2.dylib',
    ]


@pytest.mark.parametrize('lib', [JNI_LIB_NAME, OPS_LIB_NAME])
def test_map_library_name_bridge_and_ops(lib):
    assert map_library_name(lib) == [f'lib{lib}.so']


@pytest.mark.parametrize('os_name, arch', [
    ('Linux', 'amd64'), ('Mac OS X', 'x86_64'), ('Darwin', 'arm64'),
    ('Windows 10', 'amd64'),
])
def test_candidate_counts_on_every_platform(os_name, arch):
    p = Platform.from_names(os_name, arch)
    assert len(make_resource_names(LIB_NAME, p)) == 4
    assert len(make_resource_names(LIB_FRAMEWORK_NAME, p)) == 4
    assert len(make_resource_names(JNI_LIB_NAME, p)) == 1
    assert len(make_resource_names(OPS_LIB_NAME, p)) == 1


def test_core_resources_use_bare_names():
    names = make_resource_names(LIB_NAME, Platform('linux', 'x86_64'))
    assert names[0] == ('libtensorflow.so', 'libtensorflow.so')
    assert all(name == path for name, path in names)


def test_bridge_resources_are_platform_namespaced():
    p = Platform('darwin', 'x86_64')
    assert make_resource_names(JNI_LIB_NAME, p) == [
        ('libtensorflow_jni.so', 'native/darwin-x86_64/libtensorflow_jni.so'),
    ]
    assert make_resource_names(OPS_LIB_NAME, p) == [
        ('libtensorflow_ops.so', 'native/darwin-x86_64/libtensorflow_ops.so'),
    ]


def test_load_order():
    assert LIBRARY_LOAD_ORDER == (
        'tensorflow_framework', 'tensorflow', 'tensorflow_jni',
        'tensorflow_ops')
