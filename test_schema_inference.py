"""
Test script for Schema Inference and SQL validation.
"""
from src.schema_inference import (
    ColumnDescriptor,
    detect_dialects,
    extract_schema,
    extract_schema_file,
    find_unassigned_columns,
    group_by_table,
    split_top_level,
    validate_sql,
)


POSTGRES_TENANTS = '''
CREATE SCHEMA "core";

CREATE TABLE "core"."tenants" (
  "tenant_id" UUID PRIMARY KEY DEFAULT (uuid_generate_v4()),
  "tenant_name" VARCHAR(100) UNIQUE NOT NULL,
  "tenant_domain" VARCHAR(255) UNIQUE NOT NULL,
  "is_active" BOOLEAN DEFAULT true,
  "created_at" TIMESTAMP DEFAULT (CURRENT_TIMESTAMP),
  "updated_at" TIMESTAMP DEFAULT (CURRENT_TIMESTAMP)
);
'''

TSQL_CUSTOMERS = '''
CREATE TABLE [dbo].[Customers] (
    [CustomerID] UNIQUEIDENTIFIER DEFAULT NEWID() ROWGUIDCOL,
    [AccountNumber] NVARCHAR(20) NOT NULL,
    [FirstName] NVARCHAR(50) NOT NULL,
    [Email] NVARCHAR(255),
    [CreatedDate] DATETIME2(7) DEFAULT SYSDATETIME(),
    [Status] TINYINT DEFAULT 1,
    CONSTRAINT [PK_Customers] PRIMARY KEY CLUSTERED ([CustomerID])
) ON [PRIMARY];
GO
'''


def keys(columns):
    return [c.key for c in columns]


def test_constraint_lines_are_skipped():
    columns = extract_schema("CREATE TABLE t (id INT, CONSTRAINT pk PRIMARY KEY (id));")

    assert keys(columns) == ["t.id"]
    assert columns[0].data_type == "INT"


def test_parenthesised_types_stay_whole():
    columns = extract_schema("CREATE TABLE t (price DECIMAL(10,2), name VARCHAR(50));")

    assert keys(columns) == ["t.price", "t.name"]
    assert [c.data_type for c in columns] == ["DECIMAL(10,2)", "VARCHAR(50)"]


def test_default_value():
    columns = extract_schema("CREATE TABLE t (active BOOLEAN DEFAULT true);")

    assert len(columns) == 1
    assert columns[0].default_value == "true"
    assert columns[0].data_type == "BOOLEAN"


def test_quoted_default_is_unquoted():
    columns = extract_schema("CREATE TABLE t (status VARCHAR(10) DEFAULT 'open');")
    assert columns[0].default_value == "open"


def test_postgres_quoted_identifiers():
    print('=== TEST: PostgreSQL sample ===')
    columns = extract_schema(POSTGRES_TENANTS)

    assert {c.table_name for c in columns} == {"tenants"}
    assert [c.column_name for c in columns] == [
        "tenant_id", "tenant_name", "tenant_domain",
        "is_active", "created_at", "updated_at",
    ]
    by_name = {c.column_name: c for c in columns}
    assert by_name["tenant_id"].data_type == "UUID"
    assert by_name["tenant_name"].data_type == "VARCHAR(100)"
    assert by_name["is_active"].default_value == "true"
    print('✓ Quoted identifiers stripped')


def test_tsql_bracketed_identifiers():
    columns = extract_schema(TSQL_CUSTOMERS)

    assert {c.table_name for c in columns} == {"Customers"}
    assert [c.column_name for c in columns] == [
        "CustomerID", "AccountNumber", "FirstName", "Email", "CreatedDate", "Status",
    ]
    by_name = {c.column_name: c for c in columns}
    assert by_name["CreatedDate"].data_type == "DATETIME2(7)"
    assert by_name["Status"].default_value == "1"
    assert by_name["CustomerID"].default_value == "NEWID()"


def test_multiple_tables_keep_source_order():
    sql = """
    create table customers (id INT, name VARCHAR(50));
    CREATE TABLE orders (id INT, customer_id INT, total DECIMAL(10,2));
    """
    columns = extract_schema(sql)

    assert keys(columns) == [
        "customers.id", "customers.name",
        "orders.id", "orders.customer_id", "orders.total",
    ]
    grouped = group_by_table(columns)
    assert list(grouped) == ["customers", "orders"]
    assert len(grouped["orders"]) == 3


def test_nothing_to_extract():
    assert extract_schema("") == []
    assert extract_schema("SELECT 1;") == []
    assert extract_schema("CREATE TABLE (") == []


def test_extracted_columns_have_no_generator():
    columns = extract_schema("CREATE TABLE t (id INT);")
    assert columns[0].generator is None
    assert columns[0].generator_options == {}
    assert columns[0].reference_key is None


def test_extract_schema_file(tmp_path):
    path = tmp_path / "schema.sql"
    path.write_text("CREATE TABLE t (id INT, name TEXT);", encoding="utf-8")

    assert keys(extract_schema_file(path)) == ["t.id", "t.name"]


def test_split_top_level():
    assert split_top_level("a INT, b DECIMAL(10,2), c TEXT") == [
        "a INT", " b DECIMAL(10,2)", " c TEXT"
    ]
    assert split_top_level("x)), y") == ["x))", " y"]


def test_validate_sql():
    result = validate_sql("CREATE TABLE t (id INT);")
    assert result.is_valid
    assert result.error is None
    assert result.primary_dialect == "ANSI SQL"

    for bad in ("", "hello world", "CREATE TABLE t (id INT;", "CREATE TABLE t (id INT);;"):
        result = validate_sql(bad)
        assert not result.is_valid, bad
        assert result.dialects == []
        assert result.error.startswith("Invalid SQL syntax")


def test_dialect_detection():
    dialects = detect_dialects(TSQL_CUSTOMERS)
    by_name = {d.name: d for d in dialects}

    assert dialects[0].name == "ANSI SQL"
    assert dialects[0].confidence == 100
    assert "T-SQL" in by_name
    assert "UNIQUEIDENTIFIER" in by_name["T-SQL"].features
    assert 0 < by_name["T-SQL"].confidence < 100
    confidences = [d.confidence for d in dialects]
    assert confidences == sorted(confidences, reverse=True)


def test_find_unassigned_columns():
    columns = [
        ColumnDescriptor(table_name="t", column_name="a", generator="UUID"),
        ColumnDescriptor(table_name="t", column_name="b"),
    ]
    assert [c.column_name for c in find_unassigned_columns(columns)] == ["b"]
