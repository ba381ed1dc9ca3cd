from .pipeline import Traversal
from .steps import ExpandIn, ExpandOut, HasProperty, SeedAll, SeedOne, Step, apply_step

__all__ = [
    "Traversal",
    "Step",
    "SeedAll",
    "SeedOne",
    "HasProperty",
    "ExpandOut",
    "ExpandIn",
    "apply_step",
]
