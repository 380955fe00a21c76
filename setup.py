# ╔══════════════════════════════════════════════════════════════════════╗
# ║  tfbind — TensorFlow Native Bindings                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
tfbind build configuration.

The package ships prebuilt native libraries next to the Python sources:

  1. ``libtensorflow*.so`` / ``*.dylib``           — TensorFlow itself
     (optional; the system copy is used when absent)
  2. ``native/{os}-{arch}/libtensorflow_jni.so``   — the bridge library
  3. ``native/{os}-{arch}/libtensorflow_ops.so``   — custom op library

None of them are compiled here; drop the files in place before building
a wheel.

Build
-----
    pip install -e .                          # editable install
    python setup.py bdist_wheel               # wheel

Environment variables honoured at runtime (see ``config.py``):
    TFBIND_RESOURCE_DIR     — load native libraries from this directory
    TFBIND_TMPDIR           — where libraries are extracted
    TFBIND_KEEP_EXTRACTED   — set to 1 to keep extracted files at exit
"""
import os

from setuptools import setup

# ── Native library globs, relative to the package root ──
NATIVE_PACKAGE_DATA: list[str] = [
    'libtensorflow*.so',
    'libtensorflow*.so.2',
    'libtensorflow*.dylib',
    'native/*/*.so',
]

# ── Package metadata ──
_readme = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')
try:
    with open(_readme, 'r', encoding='utf-8') as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = ''

setup(
    name='tfbind',
    version='0.1.0',
    author='Pictofeed, LLC',
    author_email='engineering@pictofeed.io',
    description=(
        'Python bindings for the TensorFlow native library, with a '
        'composable layer API'
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',
    url='https://github.com/pictofeed/tfbind',
    license='Proprietary',

    package_dir={
        'tfbind': '.',
        'tfbind.native': 'native',
        'tfbind.nn': 'nn',
        'tfbind.ops': 'ops',
    },
    packages=[
        'tfbind',
        'tfbind.native',
        'tfbind.nn',
        'tfbind.ops',
    ],
    package_data={'tfbind': NATIVE_PACKAGE_DATA},

    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.24',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: Other/Proprietary License',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Artificial Intelligence',
    ],
    zip_safe=False,
)
