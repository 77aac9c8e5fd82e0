"""Standard output report delivery mechanism."""

import json
import sys
from typing import IO, Any, Optional

import structlog

from ..config.defaults import OutputParams
from ..engine import SessionReport

logger = structlog.get_logger(__name__)


class StdoutReportDelivery:
    """Standard output report delivery implementation."""

    def __init__(self, config: Optional[OutputParams] = None):
        self.config = config or OutputParams()
        self.logger = logger

    def deliver(self, report: SessionReport, stream: Optional[IO[str]] = None) -> None:
        """Write the report to the stream, standard output by default."""
        if stream is None:
            stream = sys.stdout

        stream.write(self.format_report(report))
        stream.flush()

        self.logger.info(
            "Report delivered",
            format=self.config.format,
            session_days=len(report.days),
        )

    def format_report(self, report: SessionReport) -> str:
        """Render the report in the configured format."""
        if self.config.format == "json":
            return json.dumps(self._report_to_dict(report)) + "\n"
        return self._format_text(report)

    def _format_text(self, report: SessionReport) -> str:
        """One line per session date, then the summary block."""
        lines = [day.date.display() for day in report.days]
        lines.append("")
        lines.append("Resum")
        lines.append(f"Sessions totals: {report.sessions_total}")
        lines.append(f"Nombre de setmanes: {report.week_count}")
        lines.append("")
        return "\n".join(lines) + "\n"

    def _report_to_dict(self, report: SessionReport) -> dict[str, Any]:
        return {
            "start_date": report.start_date.display(),
            "end_date": report.end_date.display(),
            "dates": [day.date.display() for day in report.days],
            "sessions_total": report.sessions_total,
            "week_count": report.week_count,
        }
