"""Constants, warning messages, and defaults for merge dry-run analysis."""

from pathlib import Path
from typing import TypedDict

# Report warnings, emitted in this order when their condition holds
WARN_AVATAR_DUPLICATES = (
    "Avatar has duplicate bone names; bone matching may be ambiguous."
)
WARN_CLOTHING_DUPLICATES = (
    "Clothing has duplicate bone names; move/rename results may be unstable."
)
WARN_NO_SKINNED_MESHES = (
    "Clothing has no skinned meshes; nothing to move in the merge."
)

# JSON report formatting
REPORT_INDENT = 2
REPORT_ENCODING = "utf-8"


class DryRunConfig(TypedDict):
    """Configuration for a dry-run invocation."""

    input_path: Path | None
    output_path: Path | None
    suffix: str | None
    json_output: bool
    quiet: bool


# Default configuration for the CLI
DEFAULT_CONFIG: DryRunConfig = {
    "input_path": None,  # None = built-in sample input
    "output_path": None,  # None = don't save the report
    "suffix": None,  # None = use the suffix from the input record
    "json_output": False,  # Print the record instead of the summary
    "quiet": False,  # Only warnings and errors
}

# Built-in sample used when no input file is given
SAMPLE_INPUT_RECORD: dict[str, object] = {
    "avatar_bones": [
        {"name": "Hips", "parent_name": None},
        {"name": "Spine", "parent_name": "Hips"},
    ],
    "clothing_bones": [
        {"name": "Spine", "parent_name": None},
        {"name": "Chest", "parent_name": "Spine"},
    ],
    "clothing_smrs": [
        {"name": "Jacket", "root_bone": "Spine", "bones": ["Spine", "Chest"]},
    ],
    "suffix": "_cloth",
}
