"""
XML Exporter
============

Exports a GeneratedDataset as a single XML document:

    <?xml version="1.0" encoding="UTF-8"?>
    <data>
      <table name="customers">
        <row index="1">
          <id>1</id>
        </row>
      </table>
    </data>

Column names become element names; values are escaped text. A column
name that is not a valid XML name is written as `<column name="...">`.
"""

import re
from pathlib import Path
from typing import Any
from xml.sax.saxutils import escape, quoteattr

from src.data_generation import GeneratedDataset


# =============================================================================
# EXCEPTIONS
# =============================================================================

class XmlExportError(Exception):
    """Raised when XML export fails."""
    pass


# =============================================================================
# CONSTANTS
# =============================================================================

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
XML_FILE_NAME = "data_export.xml"
INDENT = "  "

# Letter or underscore first, then word characters, dots or hyphens
_XML_NAME_RE = re.compile(r"[^\W\d][\w.-]*")


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def render_xml(dataset: GeneratedDataset) -> str:
    """Render the dataset as an XML document string."""
    lines = [XML_DECLARATION, "<data>"]

    for table_name, table in dataset.tables.items():
        lines.append(f"{INDENT}<table name={quoteattr(table_name)}>")
        for index, row in enumerate(table.rows, start=1):
            lines.append(f'{INDENT * 2}<row index="{index}">')
            for column, value in zip(table.columns, row):
                lines.append(f"{INDENT * 3}{_element(column, value)}")
            lines.append(f"{INDENT * 2}</row>")
        lines.append(f"{INDENT}</table>")

    lines.append("</data>")
    return "\n".join(lines)


def export_to_xml(dataset: GeneratedDataset, output_dir: str | Path) -> list[str]:
    """
    Export a dataset to `data_export.xml`.

    Returns:
        List with the generated file path.

    Raises:
        XmlExportError: If export fails.
    """
    if not dataset.tables:
        raise XmlExportError("dataset is empty.")

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    file_path = output_path / XML_FILE_NAME
    try:
        file_path.write_text(render_xml(dataset), encoding="utf-8")
    except OSError as e:
        raise XmlExportError(f"Failed to write {file_path}: {e}") from e

    return [str(file_path)]


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return escape(str(value))


def _element(column: str, value: Any) -> str:
    if _XML_NAME_RE.fullmatch(column):
        return f"<{column}>{_text(value)}</{column}>"
    return f"<column name={quoteattr(column)}>{_text(value)}</column>"
