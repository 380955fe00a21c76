"""Tests for tfbind.native.resources."""
from tfbind.native import (
    DirectoryResources, PackageResources, default_resources,
)


def test_directory_resources(tmp_path):
    (tmp_path / 'native' / 'linux-x86_64').mkdir(parents=True)
    (tmp_path / 'native' / 'linux-x86_64' / 'libtensorflow_jni.so').write_bytes(b'abc')
    res = DirectoryResources(tmp_path)
    with res.open('native/linux-x86_64/libtensorflow_jni.so') as f:
        assert f.read() == b'abc'
    assert res.open('native/linux-x86_64/libtensorflow_ops.so') is None
    # Directories are not resources.
    assert res.open('native') is None


def test_package_resources_missing_file():
    assert PackageResources('tfbind').open('native/plan9-mips/libnothing.so') is None


def test_package_resources_missing_package():
    assert PackageResources('tfbind_no_such_package').open('libtensorflow.so') is None


def test_package_resources_reads_shipped_file():
    # Any file of the installed package will do.
    with PackageResources('tfbind.native').open('library.py') as f:
        assert b'map_library_name' in f.read()


def test_default_resources_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv('TFBIND_RESOURCE_DIR', str(tmp_path))
    res = default_resources()
    assert isinstance(res, DirectoryResources)
    assert res.root == str(tmp_path)


def test_default_resources_is_the_package(monkeypatch):
    monkeypatch.delenv('TFBIND_RESOURCE_DIR', raising=False)
    res = default_resources()
    assert isinstance(res, PackageResources)
    assert res.anchor == 'tfbind'
