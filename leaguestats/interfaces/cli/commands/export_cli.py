"""
Export command: write the complete league report as JSON.

The layout is the same as GET /api/league/report.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from leaguestats.interfaces.api.types.report_types import LeagueReportResponse
from leaguestats.interfaces.cli.ui import print_error, print_success
from leaguestats.interfaces.cli.utils import league_service_from_args

logger = logging.getLogger(__name__)


def cmd_export(args: argparse.Namespace) -> int:
    """Compute the report and write it to --output."""
    service = league_service_from_args(args)
    report = LeagueReportResponse.from_dto(service.get_report())

    output = Path(args.output)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        print_error(f"Could not write {output}: {e}")
        return 1

    logger.info("Exported league report to %s", output)
    print_success(f"Report written to {output}")
    return 0
