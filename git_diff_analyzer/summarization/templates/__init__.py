"""Built-in output format templates for summaries."""

from pathlib import Path

DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "summary_template.md"
