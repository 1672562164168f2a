"""
Data Generation Module
======================

Executes Generation Plans and holds the resulting dataset.

Public Interface:
-----------------
- execute_plan(plan, registry) -> GeneratedDataset   (async)
- generate_dataset(columns, row_counts, registry) -> GeneratedDataset   (async)
"""

from .dataset import (
    GeneratedDataset,
    TableData,
)

from .executor import (
    execute_plan,
    generate_dataset,
)

__all__ = [
    # Primary API
    "execute_plan",
    "generate_dataset",

    # Data structures
    "GeneratedDataset",
    "TableData",
]
