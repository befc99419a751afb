"JSON input loading, report saving, and the dry-run pipeline."

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path

from vrm_dryrun.analyzers import analyze, build_merge_plan
from vrm_dryrun.models import (
    AnalysisInput,
    AnalysisReport,
    InputValidationError,
    MergePlan,
)
from vrm_dryrun.utils.constants import (
    REPORT_ENCODING,
    REPORT_INDENT,
    SAMPLE_INPUT_RECORD,
)
from vrm_dryrun.utils.logging import (
    StepTimer,
    bold,
    bright_cyan,
    bright_green,
    cyan,
    dim,
    format_count,
    format_duration,
    log_detail,
    log_info,
    log_ok,
    print_header,
    print_section,
    print_warning_box,
    timed,
    yellow,
)


class ReportIOError(RuntimeError):
    """Reading the input record or writing the report failed."""


@dataclass
class RunConfig:
    """Configuration for one dry-run invocation."""

    input_path: Path | None = None
    output_path: Path | None = None
    suffix: str | None = None
    duplicates_only: bool = False
    json_output: bool = False


def sample_input() -> AnalysisInput:
    """Built-in input used when no file is given."""
    return AnalysisInput.from_dict(SAMPLE_INPUT_RECORD)


def load_input(path: Path) -> AnalysisInput:
    """Load and validate an input record from a JSON file.

    Raises:
        ReportIOError: if the file can't be read, isn't valid JSON, or the
            record has the wrong shape.
    """
    try:
        text = path.read_text(encoding=REPORT_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise ReportIOError(f"Cannot read input file: {path} ({e})") from e

    try:
        record = json.loads(text)
    except json.JSONDecodeError as e:
        raise ReportIOError(f"Invalid input JSON in {path}: {e}") from e

    try:
        return AnalysisInput.from_dict(record)
    except InputValidationError as e:
        raise ReportIOError(f"Invalid input record in {path}: {e}") from e


def to_json(record: AnalysisReport | MergePlan) -> str:
    """Serialize a report or plan as pretty-printed JSON with a trailing newline."""
    return json.dumps(record.to_dict(), indent=REPORT_INDENT, ensure_ascii=False) + "\n"


def save_report(path: Path, report: AnalysisReport) -> None:
    """Write the report record, creating parent directories as needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(to_json(report), encoding=REPORT_ENCODING)
    except OSError as e:
        raise ReportIOError(f"Cannot write report file: {path} ({e})") from e


def _resolve_input(config: RunConfig) -> AnalysisInput:
    if config.input_path is None:
        log_info("No input file given; using built-in sample data")
        data = sample_input()
    else:
        data = load_input(config.input_path)
        log_detail(
            f"avatar_bones={len(data.avatar_bones)}, "
            f"clothing_bones={len(data.clothing_bones)}, "
            f"clothing_smrs={len(data.clothing_smrs)}"
        )
    if config.suffix is not None:
        data = replace(data, suffix=config.suffix)
    return data


def _print_duplicates(report: AnalysisReport) -> None:
    print_section("Duplicate bone names")
    for label, names in (
        ("avatar", report.duplicate_avatar_bone_names),
        ("clothing", report.duplicate_clothing_bone_names),
    ):
        if not names:
            log_ok(f"{label}: no duplicates")
            continue
        log_info(f"{label}: {yellow(format_count(len(names), 'duplicate name'))}")
        for name in names:
            log_detail(f"{dim('-')} {name}", indent=8)


def print_report_summary(report: AnalysisReport, duplicates_only: bool = False) -> None:
    """Render a report as a human-readable log."""
    _print_duplicates(report)

    if not duplicates_only:
        print_section("Merge estimate")
        referenced = str(report.referenced_clothing_bones)
        log_info(f"Referenced clothing bones: {bold(referenced)}")
        log_info(
            f"Moved bones/SMRs: {bright_cyan(str(report.estimated_moved_bones))}"
            f"/{bright_cyan(str(report.estimated_moved_smrs))}"
        )
        log_info(
            f"Renamed bones/SMRs: {bright_cyan(str(report.estimated_renamed_bones))}"
            f"/{bright_cyan(str(report.estimated_renamed_smrs))}"
        )

    if report.warnings:
        print_warning_box("MERGE WARNINGS", list(report.warnings))
    else:
        log_ok(bright_green("No warnings"))


def run_dry_run(config: RunConfig) -> AnalysisReport:
    """Load input, analyze, print the summary and optionally save the report.

    Raises:
        ReportIOError: if loading or saving fails.
    """
    print_header("VRM merge dry-run")
    step = StepTimer(total_steps=3)

    step.step("Loading input...")
    data = _resolve_input(config)

    if config.duplicates_only:
        step.step("Checking duplicate bone names...")
    else:
        step.step("Analyzing merge...")
    with timed("Analysis", print_on_exit=False) as t:
        report = analyze(data)
    log_detail(dim(f"done in {format_duration(t.elapsed)}"))

    if config.json_output:
        print(to_json(report), end="")
    else:
        print_report_summary(report, duplicates_only=config.duplicates_only)

    step.step("Saving report...")
    if config.output_path is None:
        log_detail(dim("No output path; report not saved"))
    else:
        save_report(config.output_path, report)
        log_ok(f"Report saved: {cyan(os.fspath(config.output_path))}")

    log_detail(dim(f"Total {format_duration(step.total_elapsed())}"))
    return report


def run_plan(config: RunConfig) -> MergePlan:
    """Load input and build the named merge plan."""
    return build_merge_plan(_resolve_input(config))
