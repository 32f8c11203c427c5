"""
Bundled benchmark workloads.
"""

from .python_ops import register_python_benchmarks
from .tensor_ops import register_tensor_benchmarks

__all__ = [
    "register_python_benchmarks",
    "register_tensor_benchmarks",
]
