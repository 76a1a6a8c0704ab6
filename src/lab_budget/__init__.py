"""
lab-budget: cost estimator for cloud-hosted training labs.

This package provides tools to estimate the daily cost of a lab deployment
and convert it into a required budget or an affordable number of days.
"""

from lab_budget.version import __version__

__all__ = ["__version__"]
