"""
PyTorch tensor workloads, run on the first CUDA device when one is available.
"""

from typing import Callable

import torch


def _device() -> torch.device:
    return torch.device("cuda:0" if torch.cuda.is_available() else "cpu")


def _synchronized(
    fn: Callable[[], torch.Tensor], device: torch.device
) -> Callable[[], torch.Tensor]:
    """Wait for queued kernels so the host clock sees the whole operation."""
    if device.type != "cuda":
        return fn

    def run() -> torch.Tensor:
        out = fn()
        torch.cuda.synchronize(device)
        return out

    return run


# =============================================================================
# Workload factories
# =============================================================================


def vector_add_factory(size: int) -> Callable[[], torch.Tensor]:
    """Add two ``size``-element float32 vectors."""
    device = _device()
    a = torch.randn(size, device=device, dtype=torch.float32)
    b = torch.randn(size, device=device, dtype=torch.float32)
    return _synchronized(lambda: a + b, device)


def matmul_factory(size: int) -> Callable[[], torch.Tensor]:
    """Multiply two square matrices holding roughly ``size`` elements each."""
    device = _device()
    n = max(1, int(size**0.5))
    a = torch.randn(n, n, device=device, dtype=torch.float32)
    b = torch.randn(n, n, device=device, dtype=torch.float32)
    return _synchronized(lambda: torch.matmul(a, b), device)


def reduce_sum_factory(size: int) -> Callable[[], torch.Tensor]:
    """Sum a ``size``-element vector."""
    device = _device()
    x = torch.randn(size, device=device, dtype=torch.float32)
    return _synchronized(lambda: torch.sum(x), device)


# =============================================================================
# Benchmark Registration
# =============================================================================


def register_tensor_benchmarks(suite):
    """Register all tensor benchmarks with the suite."""

    suite.register_benchmark(
        "tensor", "vector-add", vector_add_factory, variant="pytorch"
    )
    suite.register_benchmark("tensor", "matmul", matmul_factory, variant="pytorch")
    suite.register_benchmark(
        "tensor", "reduce-sum", reduce_sum_factory, variant="pytorch"
    )
