"""
Whole-program metrics over a parsed JavaScript tree.

Every submodule is imported on package import, so functions decorated with
@metric register themselves in `registry` under their display name.
"""

import importlib
import pathlib
import pkgutil
from typing import Callable, Dict

from tree_sitter import Node

registry: Dict[str, Callable[[Node], float]] = {}


def metric(name: str):
    def register(fn: Callable[[Node], float]):
        if name in registry:
            raise ValueError(f"Metric already registered: {name}")
        registry[name] = fn
        return fn

    return register


def compute_all(root: Node) -> Dict[str, float]:
    return {name: fn(root) for name, fn in registry.items()}


for _module in pkgutil.iter_modules([str(pathlib.Path(__file__).parent)]):
    importlib.import_module(f"{__name__}.{_module.name}")
