"""Sparse LDL^T factorisation of quasidefinite matrices and conic problem data types."""

__version__ = "0.1.0"