"""
Descriptive statistics backends.

Available backends:
    CPUDescriptiveBackend: CPU reference implementation
"""

from pydescriptive.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = [
    "CPUDescriptiveBackend",
]
