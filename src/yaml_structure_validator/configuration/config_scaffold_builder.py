"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "yaml-validator.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Validation configuration for yaml-structure-validator.
# Every requirement set is optional; remove the ones you do not need.
# Relative paths are resolved against the directory of this file.

# Glob patterns selecting the documents to validate.
documents:
  - "data/**/*.yml"

# Keys every document must hold at its top level.
keys:
  - "name"
  - "version"

# Nested shape every document must follow.
# Leaves are type names: string, number, boolean, null, date, binary, object, array.
# A one-element list applies its template to every list element.
# Alternatively give the path of a YAML/JSON file holding the template.
structure:
  name: "string"
  owner:
    email: "string"
  items:
    - id: "number"

# Flat key to type name requirements, checked as a single pass/fail.
# types:
#   name: "string"
#   version: "number"

# Write a JSON copy next to every document.
write_json: false

# Plain text copy of every reported message.
# log: "validation.log"

# Workbook with a summary and one row per document.
# report_workbook: "validation-report.xlsx"

# Number of documents validated concurrently.
workers: 1

yaml:
  # Report duplicated mapping keys as parser warnings unless set to true.
  allow_duplicate_keys: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML validation configuration scaffold with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
