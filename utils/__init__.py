"""工具模块"""
from .metrics import (
    reference_integral, absolute_error, relative_error, sample_table, convergence_table
)

__all__ = ['reference_integral', 'absolute_error', 'relative_error', 'sample_table', 'convergence_table']
