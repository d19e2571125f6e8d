"""
Setup script for PalindromeFinder.

Optional Cython compilation of the chunk kernel for a further speedup of
the per-pair comparison loop:
- Scanner/window_kernel.py

Usage:
    pip install -e .[test]
    python setup.py build_ext --inplace

If Cython is not available, the package uses the pure Python module.
"""

from setuptools import setup, Extension, find_packages
from setuptools.command.build_ext import build_ext
import sys

# Try to import Cython
try:
    from Cython.Build import cythonize
    USE_CYTHON = True
except ImportError:
    USE_CYTHON = False


class BuildExtWithFallback(build_ext):
    """Custom build_ext that gracefully handles Cython compilation failures."""

    def run(self):
        try:
            super().run()
        except Exception as e:
            print(f"Warning: Cython compilation failed: {e}")
            print("Falling back to pure Python implementation")

    def build_extension(self, ext):
        try:
            super().build_extension(ext)
        except Exception as e:
            print(f"Warning: Failed to build extension {ext.name}: {e}")
            print("Pure Python module will be used")


def get_extensions():
    """Get list of extensions to compile with Cython."""
    if not USE_CYTHON:
        return []

    return [
        Extension(
            "Scanner.window_kernel",
            ["Scanner/window_kernel.py"],
            include_dirs=[],
            language="c"
        ),
    ]


# Only run Cython compilation if requested
if USE_CYTHON and 'build_ext' in sys.argv:
    extensions = cythonize(
        get_extensions(),
        compiler_directives={
            'language_level': "3",
            'embedsignature': True,
            'boundscheck': False,
            'wraparound': False,
            'nonecheck': False,
        }
    )
else:
    extensions = []

setup(
    name='PalindromeFinder',
    version='2025.1',
    description='Parallel reverse-complement palindrome scanner for genomic sequences',
    author='Dr. Venkata Rajesh Yella',
    license='MIT',
    python_requires='>=3.8',
    packages=find_packages(include=['Scanner', 'Scanner.*', 'Utilities', 'Utilities.*']),
    py_modules=['app', 'benchmark_parallel_scan'],
    install_requires=[
        'numpy>=1.21',
        'pandas>=1.3',
        'psutil>=5.8',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
        'cython': ['cython>=0.29'],
    },
    entry_points={
        'console_scripts': [
            'palindrome-finder=app:main',
        ],
    },
    ext_modules=extensions,
    cmdclass={'build_ext': BuildExtWithFallback},
    zip_safe=False,
)
