"""Input loading and report export."""

from vrm_dryrun.exporters.report import (
    ReportIOError,
    RunConfig,
    load_input,
    print_report_summary,
    run_dry_run,
    run_plan,
    sample_input,
    save_report,
    to_json,
)

__all__ = [
    "ReportIOError",
    "RunConfig",
    "load_input",
    "print_report_summary",
    "run_dry_run",
    "run_plan",
    "sample_input",
    "save_report",
    "to_json",
]
