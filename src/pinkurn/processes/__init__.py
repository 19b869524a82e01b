from .iid import IIDBernoulli
from .protocols import Process, Sample
from .urn_process import UrnProcess

__all__ = [
    "Process",
    "Sample",
    "IIDBernoulli",
    "UrnProcess",
]
