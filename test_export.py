"""
Test script for the Export Module.
"""
import json

import pytest

from src.data_generation import GeneratedDataset, TableData
from src.export import (
    CsvExportError,
    ExportValidationError,
    JsonExportError,
    SqlExportError,
    export_to_csv,
    export_to_json,
    export_to_sql,
    export_to_text,
    export_to_xml,
    format_sql_literal,
    render_combined_csv,
    render_csv,
    render_json,
    render_sql,
    render_text,
    render_xml,
    validate_csv_export,
    validate_json_export,
    validate_sql_export,
    validate_xml_export,
)


def sample_dataset():
    return GeneratedDataset(tables={
        "customers": TableData(
            columns=["id", "name", "active", "score", "note"],
            rows=[
                ["1", "O'Brien", True, 1.5, None],
                ["2", "Ann, Lee", False, 2, "x<y"],
            ],
        ),
        "orders": TableData(columns=["customer_id"], rows=[["1"], ["2"], ["2"]]),
    })


def test_render_json():
    data = json.loads(render_json(sample_dataset()))

    assert list(data) == ["customers", "orders"]
    assert data["customers"]["columns"] == ["id", "name", "active", "score", "note"]
    assert data["customers"]["rows"][0] == ["1", "O'Brien", True, 1.5, None]


def test_render_csv():
    lines = render_csv(sample_dataset().tables["customers"]).splitlines()

    assert lines == [
        "id,name,active,score,note",
        "1,O'Brien,True,1.5,",
        '2,"Ann, Lee",False,2,x<y',
    ]


def test_render_combined_csv():
    content = render_combined_csv(sample_dataset())
    lines = content.splitlines()

    assert lines[0] == "Table: customers"
    assert lines[1] == '"id","name","active","score","note"'
    assert lines[2] == '"1","O\'Brien","True","1.5",""'
    assert "Table: orders" in lines
    assert content.endswith("\n\n")


def test_render_xml():
    xml = render_xml(sample_dataset())

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<data>')
    assert xml.endswith("</data>")
    assert '<table name="customers">' in xml
    assert '<row index="2">' in xml
    assert "<name>O'Brien</name>" in xml
    assert "<note>x&lt;y</note>" in xml
    assert "<active>true</active>" in xml
    assert "<note></note>" in xml


def test_render_text():
    lines = render_text(sample_dataset()).splitlines()

    assert lines[0] == "Table: customers"
    assert [cell.strip() for cell in lines[1].split(" | ")] == ["id", "name", "active", "score", "note"]
    assert set(lines[2]) <= {"-", "+"}
    assert lines[3] == "1  | O'Brien  | True   | 1.5   | NULL"
    assert "Table: orders" in lines


def test_render_sql():
    statements = [line for line in render_sql(sample_dataset()).splitlines() if line.startswith("INSERT")]

    assert statements[0] == (
        "INSERT INTO customers (id, name, active, score, note) "
        "VALUES ('1', 'O''Brien', TRUE, 1.5, NULL);"
    )
    assert statements[1].endswith("VALUES ('2', 'Ann, Lee', FALSE, 2, 'x<y');")
    assert len(statements) == 5


def test_format_sql_literal():
    assert format_sql_literal(None) == "NULL"
    assert format_sql_literal(True) == "TRUE"
    assert format_sql_literal(0) == "0"
    assert format_sql_literal("it's") == "'it''s'"

    with pytest.raises(SqlExportError):
        format_sql_literal(float("nan"))


def test_export_and_validate(tmp_path):
    """Every writer's output passes its validator."""
    dataset = sample_dataset()
    expected = {"customers": 2, "orders": 3}

    json_files = export_to_json(dataset, tmp_path)
    assert validate_json_export(json_files)
    assert validate_json_export(export_to_json(dataset, tmp_path / "split", single_file=False))

    csv_files = export_to_csv(dataset, tmp_path)
    assert sorted(p.rsplit("/", 1)[-1] for p in csv_files) == ["customers.csv", "orders.csv"]
    assert validate_csv_export(csv_files, expected)

    xml_files = export_to_xml(dataset, tmp_path)
    assert validate_xml_export(xml_files[0], expected)

    sql_files = export_to_sql(dataset, tmp_path)
    assert validate_sql_export(sql_files[0], expected)

    txt_files = export_to_text(dataset, tmp_path)
    assert open(txt_files[0], encoding="utf-8").read().startswith("Table: customers")


def test_xml_column_names_that_are_not_xml_names(tmp_path):
    dataset = GeneratedDataset(tables={
        "scores": TableData(columns=["1st_place", "runner_up"], rows=[[1, "b"], [2, "c"]]),
    })

    xml = render_xml(dataset)
    assert '<column name="1st_place">1</column>' in xml
    assert "<runner_up>b</runner_up>" in xml

    xml_files = export_to_xml(dataset, tmp_path)
    assert validate_xml_export(xml_files[0], {"scores": 2})


def test_table_files_stay_in_output_dir(tmp_path):
    dataset = GeneratedDataset(tables={
        "../../escaped": TableData(columns=["id"], rows=[["1"]]),
    })
    output_dir = tmp_path / "out"

    with pytest.raises(CsvExportError):
        export_to_csv(dataset, output_dir)
    with pytest.raises(JsonExportError):
        export_to_json(dataset, output_dir, single_file=False)

    assert not (tmp_path / "escaped.csv").exists()
    assert not (tmp_path.parent / "escaped.csv").exists()


def test_validators_reject_bad_files(tmp_path):
    broken_json = tmp_path / "broken.json"
    broken_json.write_text("{not json", encoding="utf-8")
    with pytest.raises(ExportValidationError):
        validate_json_export([str(broken_json)])

    csv_files = export_to_csv(sample_dataset(), tmp_path)
    with pytest.raises(ExportValidationError):
        validate_csv_export(csv_files, {"customers": 5})

    broken_sql = tmp_path / "broken.sql"
    broken_sql.write_text("INSERT INTO t (a, b) VALUES ('x');\n", encoding="utf-8")
    with pytest.raises(ExportValidationError):
        validate_sql_export(str(broken_sql))

    with pytest.raises(ExportValidationError):
        validate_xml_export(str(tmp_path / "missing.xml"))


def test_empty_dataset_is_rejected(tmp_path):
    with pytest.raises(JsonExportError):
        export_to_json(GeneratedDataset(), tmp_path)
    with pytest.raises(CsvExportError):
        export_to_csv(GeneratedDataset(), tmp_path)
