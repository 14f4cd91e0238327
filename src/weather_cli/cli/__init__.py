"""CLI layer — option resolution, status spinner, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra``, and ``utils``, but no other layer may import
from ``cli``.
"""
