from .registry import PROCESS_REGISTRY
from .runner import ComparisonConfig, make_process, run_comparison, summarise

__all__ = [
    "PROCESS_REGISTRY",
    "ComparisonConfig",
    "make_process",
    "run_comparison",
    "summarise",
]
