"""
Export Module
=============

Exports a GeneratedDataset to JSON, CSV, XML, plain text and SQL
INSERT scripts. Each format has a pure `render_*` function and an
`export_to_*` writer that returns the written file paths.

This is a deterministic formatting layer; it never changes values.
"""

from .json_exporter import (
    render_json,
    export_to_json,
    JsonExportError,
)

from .csv_exporter import (
    render_csv,
    render_combined_csv,
    export_to_csv,
    CsvExportError,
)

from .xml_exporter import (
    render_xml,
    export_to_xml,
    XmlExportError,
)

from .text_exporter import (
    render_text,
    render_table,
    export_to_text,
    TextExportError,
)

from .sql_exporter import (
    render_sql,
    render_inserts,
    format_sql_literal,
    export_to_sql,
    SqlExportError,
)

from .export_validators import (
    validate_json_export,
    validate_csv_export,
    validate_xml_export,
    validate_sql_export,
    ExportValidationError,
)

EXPORT_FORMATS = ("json", "csv", "xml", "txt", "sql")

__all__ = [
    "EXPORT_FORMATS",

    # JSON
    "render_json",
    "export_to_json",
    "JsonExportError",

    # CSV
    "render_csv",
    "render_combined_csv",
    "export_to_csv",
    "CsvExportError",

    # XML
    "render_xml",
    "export_to_xml",
    "XmlExportError",

    # Text
    "render_text",
    "render_table",
    "export_to_text",
    "TextExportError",

    # SQL
    "render_sql",
    "render_inserts",
    "format_sql_literal",
    "export_to_sql",
    "SqlExportError",

    # Validation
    "validate_json_export",
    "validate_csv_export",
    "validate_xml_export",
    "validate_sql_export",
    "ExportValidationError",
]
