"""Tests for the DDL statement parser

Notes:
- Keywords are matched case-sensitively (`CREATE TABLE ` with a single space)
- Constraints after the column type are ignored
"""
from typing import Optional
import pytest

from ddl_schema._logger import Logger, LogLevel, ParseStage
from ddl_schema.config import ParserConfig
from ddl_schema.schema_toolkit import (
    DdlParser, FieldType, MalformedStatement, SchemaBuilder,
    TypeDescriptor, UnknownSqlType, UnsupportedPrimaryKey
)
from ddl_schema.schema_toolkit.sql_parser import get_statements, parse_sql, parse_sql_file



@pytest.fixture
def logger() -> Logger:
    return Logger()

@pytest.fixture
def parser(logger) -> DdlParser:
    return DdlParser(logger=logger)

def parse_types(parser: DdlParser, sql: str) -> list[TypeDescriptor]:
    """Parse the SQL and create the type descriptors"""
    return [b.create() for b in parser.parse(sql)]

def assert_fields(descriptor: TypeDescriptor, expected: list[tuple[str, FieldType]],
                  primary_key: Optional[str] = None) -> None:
    """Check the fields (in order) and the primary key of a type"""
    assert [(f.name, f.ftype) for f in descriptor.fields] == expected
    assert descriptor.primary_key == primary_key

#
# Splitting statements
#

@pytest.mark.parametrize("sql, expected", [
    ("CREATE TABLE a (x INT)", ["CREATE TABLE a (x INT)"]),
    ("CREATE TABLE a (x INT); CREATE TABLE b (y INT);",
     ["CREATE TABLE a (x INT)", "CREATE TABLE b (y INT)"]),
    ("  ;\n; \t;", []),
    ("", []),
])
def test_get_statements(sql, expected) -> None:
    assert get_statements(sql) == expected

#
# CREATE TABLE
#

def test_parse_basic(parser) -> None:
    """Basic CREATE TABLE statement

    Test contents:
    - One type named after the table
    - Fields in declaration order, VARCHAR(10) resolved to TEXT
    """
    types = parse_types(parser, "CREATE TABLE t (a INT, b VARCHAR(10))")
    assert len(types) == 1
    assert types[0].name == "t"
    assert_fields(types[0], [("a", FieldType.INTEGER), ("b", FieldType.TEXT)])

def test_parse_primary_key(parser) -> None:
    types = parse_types(parser, "CREATE TABLE t (a INT, PRIMARY KEY (a))")
    assert_fields(types[0], [("a", FieldType.INTEGER)], primary_key="a")

def test_parse_primary_key_without_parentheses(parser) -> None:
    types = parse_types(parser, "CREATE TABLE t (a INT, PRIMARY KEY a)")
    assert_fields(types[0], [("a", FieldType.INTEGER)], primary_key="a")

def test_parse_nested_parentheses(parser) -> None:
    """Commas inside type arguments are not column separators"""
    types = parse_types(parser, "CREATE TABLE nested (a DECIMAL(10,2), b VARCHAR(in, weird))")
    assert_fields(types[0], [("a", FieldType.DECIMAL), ("b", FieldType.TEXT)])

def test_parse_multiple_tables(parser) -> None:
    """Several CREATE TABLE statements

    Test contents:
    - The types are returned in statement order
    - Constraints and table options are ignored
    """
    sql = """
    CREATE TABLE departments (
        id BIGINT NOT NULL,
        name VARCHAR2(64) DEFAULT 'none',
        PRIMARY KEY (id)
    );

    CREATE TABLE employees (
        id INTEGER,
        department_id BIGINT,
        salary NUMERIC(12, 2) DEFAULT 0,
        hired DATE,
        last_login TIMESTAMP,
        active BOOLEAN,
        rating REAL
    ) TABLESPACE users;
    """
    types = parse_types(parser, sql)
    assert [t.name for t in types] == ["departments", "employees"]
    assert_fields(types[0], [("id", FieldType.LONG), ("name", FieldType.TEXT)],
                  primary_key="id")
    assert_fields(types[1], [
        ("id", FieldType.INTEGER),
        ("department_id", FieldType.LONG),
        ("salary", FieldType.DECIMAL),
        ("hired", FieldType.DATE),
        ("last_login", FieldType.TIMESTAMP),
        ("active", FieldType.BOOLEAN),
        ("rating", FieldType.FLOAT),
    ])

def test_parse_unknown_type(parser, logger) -> None:
    """Unknown type names resolve to TEXT without any diagnostic"""
    types = parse_types(parser, "CREATE TABLE t (a FOOBAR)")
    assert_fields(types[0], [("a", FieldType.TEXT)])
    assert all(r.level == LogLevel.INFO for r in logger.records)

def test_parse_unknown_type_strict(logger) -> None:
    parser = DdlParser(ParserConfig(strict_types=True), logger=logger)
    with pytest.raises(UnknownSqlType):
        parser.parse("CREATE TABLE t (a FOOBAR)")

def test_parse_column_without_type(parser) -> None:
    types = parse_types(parser, "CREATE TABLE t (a)")
    assert_fields(types[0], [("a", FieldType.TEXT)])

def test_parse_empty_body(parser) -> None:
    types = parse_types(parser, "CREATE TABLE t ()")
    assert_fields(types[0], [])

def test_parse_whitespace_and_semicolons(parser) -> None:
    assert parser.parse(" ; ;\n\t; ") == []
    assert parser.parse("") == []

def test_parse_is_deterministic(parser, logger) -> None:
    """Parsing the same input twice gives the same types and diagnostics"""
    sql = "CREATE TABLE a (x INT, PRIMARY KEY (x)); CREATE TABLE b (y DATE, z TEXT); DROP TABLE c"
    first = parse_types(parser, sql)
    first_records = list(logger.records)
    logger.clear()

    assert parse_types(parser, sql) == first
    assert logger.records == first_records

#
# Faults
#

def test_composite_primary_key(parser, logger) -> None:
    """Composite primary keys abort the whole parse

    Test contents:
    - UnsupportedPrimaryKey is raised
    - The fault is logged at ERROR level
    """
    sql = "CREATE TABLE ok (a INT); CREATE TABLE t (a INT, b INT, PRIMARY KEY (a, b))"
    with pytest.raises(UnsupportedPrimaryKey, match="Composite"):
        parser.parse(sql)
    assert logger.records[-1].level == LogLevel.ERROR

def test_multiple_primary_keys(parser) -> None:
    with pytest.raises(UnsupportedPrimaryKey):
        parser.parse("CREATE TABLE t (a INT, b INT, PRIMARY KEY (a), PRIMARY KEY (b))")

@pytest.mark.parametrize("sql", [
    "CREATE TABLE t (a INT, b DECIMAL(10,2)",
    "CREATE TABLE t a INT",
    "CREATE TABLE t",
    "CREATE TABLE t (a INT,, b INT)",
    "CREATE TABLE t (a INT, PRIMARY KEY ())",
    "CREATE TABLE t(a INT)",
    "CREATE TABLE t(a INT, b DECIMAL(10,2))",
])
def test_malformed_statement(parser, sql) -> None:
    with pytest.raises(MalformedStatement):
        parser.parse(sql)

def test_fault_message_contains_preview(parser) -> None:
    with pytest.raises(MalformedStatement) as e:
        parser.parse("CREATE TABLE broken (a INT")
    assert e.value.statement == "CREATE TABLE broken (a INT"
    assert "broken" in str(e.value)

#
# ALTER TABLE and unsupported statements
#

def test_alter_table_is_ignored(parser, logger) -> None:
    """ALTER TABLE statements do not alter earlier types"""
    sql = "CREATE TABLE t (a INT); ALTER TABLE t ADD COLUMN c INT"
    types = parse_types(parser, sql)
    assert len(types) == 1
    assert_fields(types[0], [("a", FieldType.INTEGER)])

    warnings = [r for r in logger.records if r.level == LogLevel.WARNING]
    assert len(warnings) == 1
    assert warnings[0].stage == ParseStage.ALTER_TABLE
    assert warnings[0].message == "Skipping alter table command for t"

def test_alter_table_only(parser) -> None:
    assert parser.parse("ALTER TABLE t ADD COLUMN c INT") == []

def test_unsupported_statement(parser, logger) -> None:
    """Unsupported statements are skipped with a truncated preview"""
    sql = "INSERT INTO employees (id, name) VALUES (1, 'abc'); DROP TABLE t; " \
          "create table lower (a INT)"
    assert parser.parse(sql) == []

    messages = [r.message for r in logger.records if r.stage == ParseStage.UNSUPPORTED]
    assert messages == [
        "Skipping unsupported command: [INSERT INTO employees (id, nam...]",
        "Skipping unsupported command: [DROP TABLE t]",
        "Skipping unsupported command: [create table lower (a INT)]",
    ]

def test_preview_length_setting(logger) -> None:
    parser = DdlParser(ParserConfig(preview_length=4), logger=logger)
    parser.parse("DROP TABLE t")
    assert logger.records[-1].message == "Skipping unsupported command: [DROP...]"

#
# Builders and entry points
#

class RecordingBuilder(SchemaBuilder):
    """Builder recording the calls of the parser"""
    def __init__(self, type_name: str):
        self._type_name = type_name
        self.calls: list[tuple] = []

    @property
    def type_name(self) -> str:
        return self._type_name

    def add_field(self, name, field_type) -> None:
        self.calls.append(("add_field", name, field_type))

    def set_primary_key(self, name) -> None:
        self.calls.append(("set_primary_key", name))

def test_custom_builder_factory(logger) -> None:
    parser = DdlParser(logger=logger, builder_factory=RecordingBuilder)
    builders = parser.parse("CREATE TABLE t (PRIMARY KEY (b), a SMALLINT, b TIME)")
    assert len(builders) == 1
    assert isinstance(builders[0], RecordingBuilder)
    assert builders[0].type_name == "t"
    assert builders[0].calls == [
        ("set_primary_key", "b"),
        ("add_field", "a", FieldType.SHORT),
        ("add_field", "b", FieldType.TIME),
    ]

def test_parse_sql_function() -> None:
    builders = parse_sql("CREATE TABLE t (a INT)", logger=Logger())
    assert builders[0].create().name == "t"

def test_parse_sql_file(tmp_path) -> None:
    file_path = tmp_path / "schema.sql"
    file_path.write_text("CREATE TABLE t (a INT, PRIMARY KEY (a));\nDROP TABLE x;\n",
                         encoding="utf-8")
    builders = parse_sql_file(str(file_path), logger=Logger())
    assert len(builders) == 1
    assert builders[0].create().primary_key == "a"
