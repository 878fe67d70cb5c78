"""
Shared compute infrastructure for PyDescriptive.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/.

Submodules:
    timing: Execution timing utilities
"""

from pydescriptive.core.compute.timing import Timer

__all__ = [
    "Timer",
]
