"""
devs-scaffold

Scaffolds DeviceScript project trees from declarative file sets, merging
structured documents into existing files instead of overwriting them.
"""

__version__ = "0.1.0"

from devs_scaffold.core.materializer import MaterializeOptions, materialize
from devs_scaffold.core.patch_merger import merge

__all__ = [
    "MaterializeOptions",
    "materialize",
    "merge",
]
