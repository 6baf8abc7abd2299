"""
BAI2 Kernel - shared infrastructure for statement ingestion.

- Typed exceptions with machine-readable codes
- Structured JSON logging with parse-scoped context
"""

__version__ = "0.1.0"
