"""Command-line interface for the VRM clothing merge dry-run."""

import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

try:
    __version__ = version("vrm-dryrun")
except PackageNotFoundError:
    __version__ = "unknown"

from vrm_dryrun.exporters import (
    ReportIOError,
    RunConfig,
    run_dry_run,
    run_plan,
    to_json,
)
from vrm_dryrun.models import MergePlan
from vrm_dryrun.utils.constants import DEFAULT_CONFIG
from vrm_dryrun.utils.logging import set_quiet

app = typer.Typer(
    name="vrm-dryrun",
    help="Estimate what merging a clothing skeleton onto an avatar would change",
    add_completion=False,
    rich_markup_mode="rich",
    suggest_commands=True,
    no_args_is_help=True,
)
console = Console()

COMMANDS = ("analyze", "duplicates", "plan")

InputArg = Annotated[
    Path | None,
    typer.Argument(
        help="Input JSON exported from Unity (omit to use built-in sample data)",
        metavar="INPUT",
    ),
]
OutputOpt = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Save the report JSON here (default: don't save)",
        rich_help_panel="Output",
    ),
]
SuffixOpt = Annotated[
    str | None,
    typer.Option(
        "--suffix",
        "-s",
        help="Naming suffix override (default: the input's [italic]suffix[/])",
        rich_help_panel="Analysis",
    ),
]
JsonOpt = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print the JSON record instead of the summary",
        rich_help_panel="Output",
    ),
]
QuietOpt = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Only show warnings and errors",
        rich_help_panel="Output",
    ),
]


def version_callback(value: bool) -> None:
    if value:
        print(f"vrm-dryrun {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """
    Dry-run a VRM clothing merge: duplicate bone names, moves, and renames.
    """


def _run(config: RunConfig, quiet: bool) -> None:
    set_quiet(quiet or config.json_output)
    try:
        run_dry_run(config)
    except ReportIOError as e:
        console.print(f"[bold red][ERROR][/] {escape(str(e))}")
        raise typer.Exit(code=1) from e


@app.command()
def analyze(
    input_path: InputArg = DEFAULT_CONFIG["input_path"],
    output: OutputOpt = DEFAULT_CONFIG["output_path"],
    suffix: SuffixOpt = DEFAULT_CONFIG["suffix"],
    json_output: JsonOpt = DEFAULT_CONFIG["json_output"],
    quiet: QuietOpt = DEFAULT_CONFIG["quiet"],
) -> None:
    """
    Build the merge dry-run report.
    """
    _run(
        RunConfig(
            input_path=input_path,
            output_path=output,
            suffix=suffix,
            json_output=json_output,
        ),
        quiet,
    )


@app.command()
def duplicates(
    input_path: InputArg = DEFAULT_CONFIG["input_path"],
    output: OutputOpt = DEFAULT_CONFIG["output_path"],
    json_output: JsonOpt = DEFAULT_CONFIG["json_output"],
    quiet: QuietOpt = DEFAULT_CONFIG["quiet"],
) -> None:
    """
    Check both skeletons for duplicate bone names.
    """
    _run(
        RunConfig(
            input_path=input_path,
            output_path=output,
            duplicates_only=True,
            json_output=json_output,
        ),
        quiet,
    )


def _render_plan(plan: MergePlan) -> None:
    suffix = escape(plan.suffix) if plan.suffix else "[dim](disabled)[/]"
    console.print(f"[bold]Merge plan[/]  suffix: [cyan]{suffix}[/]")

    table = Table(title="Renames", show_lines=False)
    table.add_column("Kind", style="dim")
    table.add_column("From")
    table.add_column("To", style="green")
    for old, new in plan.renamed_bones:
        table.add_row("bone", escape(old), escape(new))
    for old, new in plan.renamed_smrs:
        table.add_row("smr", escape(old), escape(new))
    if table.row_count:
        console.print(table)
    else:
        console.print("[dim]No renames[/]")

    if plan.moved_bones:
        console.print(
            "[bold]Bones merged onto avatar:[/] " + escape(", ".join(plan.moved_bones))
        )
    if plan.unresolved_references:
        console.print(
            "[yellow]References to missing clothing bones (ignored):[/] "
            + escape(", ".join(plan.unresolved_references))
        )


@app.command()
def plan(
    input_path: InputArg = DEFAULT_CONFIG["input_path"],
    suffix: SuffixOpt = DEFAULT_CONFIG["suffix"],
    json_output: JsonOpt = DEFAULT_CONFIG["json_output"],
    quiet: QuietOpt = DEFAULT_CONFIG["quiet"],
) -> None:
    """
    List the bones and meshes a merge would move or rename.
    """
    set_quiet(quiet or json_output)
    try:
        merge_plan = run_plan(RunConfig(input_path=input_path, suffix=suffix))
    except ReportIOError as e:
        console.print(f"[bold red][ERROR][/] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if json_output:
        print(to_json(merge_plan), end="")
    else:
        _render_plan(merge_plan)


def main() -> None:
    """Entry point. A bare input path runs the 'analyze' command."""
    args = sys.argv[1:]

    # Make 'analyze' the default command, so 'vrm-dryrun input.json' works
    if args and args[0] not in COMMANDS and not args[0].startswith("-"):
        args = ["analyze"] + args

    app(args=args, prog_name="vrm-dryrun")


if __name__ == "__main__":
    main()
