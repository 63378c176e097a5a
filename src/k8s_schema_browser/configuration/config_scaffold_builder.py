"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "k8s-schema-browser.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for k8s-schema-browser.
# Replace every <REQUIRED> placeholder before browsing definitions.
# Relative paths are resolved against the directory of this file.

catalog:
  # Directory holding one <major>.<minor>/swagger.json per Kubernetes API version.
  directory: "<REQUIRED>"

resolution:
  # Maximum reference nesting expanded below each root property.
  max_depth: 10

preferences:
  # File remembering the API version picked with `use-version`.
  state_file: ".k8s-schema-browser-state.yaml"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

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
