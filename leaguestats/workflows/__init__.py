"""
Workflows package.
"""

from .league.compute_report_wf import compute_report_workflow
from .league.load_snapshot_wf import load_snapshot_workflow

__all__ = [
    "compute_report_workflow",
    "load_snapshot_workflow",
]
