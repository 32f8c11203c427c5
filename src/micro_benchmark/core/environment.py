"""
Information about the interpreter and hardware a benchmark ran on.
"""

import gc
import platform
import time
from typing import Any, Dict, List, Optional

import numpy as np
import torch


class EnvironmentInfo:
    """Collect and provide runtime environment information."""

    def __init__(self):
        self._cuda_available = torch.cuda.is_available()

    @property
    def cuda_available(self) -> bool:
        """Check if CUDA is available."""
        return self._cuda_available

    @property
    def device_count(self) -> int:
        """Get number of available GPUs."""
        if not self._cuda_available:
            return 0
        return torch.cuda.device_count()

    def get_cuda_version(self) -> Optional[str]:
        """Get CUDA version."""
        if not self._cuda_available:
            return None
        return torch.version.cuda

    def get_device_names(self) -> List[str]:
        """Names of all visible CUDA devices."""
        return [torch.cuda.get_device_name(i) for i in range(self.device_count)]

    def get_clock_info(self) -> Dict[str, Any]:
        """Describe the timer used for measurements."""
        info = time.get_clock_info("perf_counter")
        return {
            "implementation": info.implementation,
            "monotonic": info.monotonic,
            "resolution_ns": info.resolution * 1e9,
        }

    def get_system_info(self) -> Dict[str, Any]:
        """Get system information."""
        info = {
            "platform": platform.platform(),
            "machine": platform.machine(),
            "processor": platform.processor(),
            "python_implementation": platform.python_implementation(),
            "python_version": platform.python_version(),
            "gc_enabled": gc.isenabled(),
            "numpy_version": np.__version__,
            "pytorch_version": torch.__version__,
            "cuda_available": self._cuda_available,
            "clock": self.get_clock_info(),
        }

        if self._cuda_available:
            info["cuda_version"] = self.get_cuda_version()
            info["devices"] = self.get_device_names()

        return info
