"""
This module defines a parser for a restricted dialect of SQL DDL.
It recognizes `CREATE TABLE` statements (with an optional single-column
`PRIMARY KEY` clause) and populates one schema builder per table.

## Classes

- `DdlParser`: Parser holding the settings, the logger and the builder factory.

## Functions

- `get_statements`: Split SQL text into statements.
- `parse_sql`: Parse SQL text with a default parser.
- `parse_sql_file`: Parse a SQL file with a default parser.

## Supported statements

1. **CREATE TABLE**: `CREATE TABLE <name> (<clause>, ...) <ignored suffix>`
   - Column clauses: `<name> <type> <ignored constraints>`
   - Primary key clause: `PRIMARY KEY (<column>)`
2. **ALTER TABLE**: recognized, logged as skipped, and ignored.

Other statements are logged as unsupported and skipped. Keywords are
matched case-sensitively (`CREATE TABLE ` with a single space).

## Example

```sql
CREATE TABLE employees (
    id INT,
    name VARCHAR(64) NOT NULL,
    salary DECIMAL(10,2) DEFAULT 0,
    PRIMARY KEY (id)
);
ALTER TABLE employees ADD COLUMN hired DATE;
```

is parsed into one builder:

```
Type: employees
  Property: id [INTEGER]
  Property: name [TEXT]
  Property: salary [DECIMAL]
  Primary key: id
```

## Notes

- Composite primary keys are not supported and raise `UnsupportedPrimaryKey`.
- A fault aborts the whole parse: no partial result is returned.
"""
from typing import Callable, Optional

from ddl_schema._logger import Logger, ParseStage
from ddl_schema.config import ParserConfig
from ._core import SchemaBuilder, TypeDescriptorBuilder
from ._scanner import Scanner
from .errors import DdlParseError, MalformedStatement, UnsupportedPrimaryKey
from .sql_types import resolve_field_type



CREATE_TABLE_PREFIX = "CREATE TABLE "
ALTER_TABLE_PREFIX = "ALTER TABLE "
PRIMARY_KEY_PREFIX = "PRIMARY KEY "

BuilderFactory = Callable[[str], SchemaBuilder]
"""Callable creating a schema builder from a type name"""



def get_statements(sql:str) -> list[str]:
    """Split SQL text into trimmed, non-empty statements

    Examples
    --------
    >>> get_statements(" CREATE TABLE a (x INT);; DROP TABLE b ; ")
    ['CREATE TABLE a (x INT)', 'DROP TABLE b']
    """
    return [s for c in sql.split(";") if (s := c.strip())]

class DdlParser:
    """Parser of DDL text

    Examples
    --------
    >>> parser = DdlParser()
    >>> builders = parser.parse("CREATE TABLE t (a INT, PRIMARY KEY (a))")
    >>> builders[0].create().primary_key
    'a'
    """
    def __init__(self, config:Optional[ParserConfig]=None,
                 logger:Optional[Logger]=None,
                 builder_factory:BuilderFactory=TypeDescriptorBuilder):
        """
        Parameters
        ----------
        config : ParserConfig, optional
            Parser settings (default settings if omitted)
        logger : Logger, optional
            Logger of the diagnostics (created from `config` if omitted)
        builder_factory : Callable[[str], SchemaBuilder], default TypeDescriptorBuilder
            Creates the builder of each table from its name
        """
        self.config = config or ParserConfig()
        """Parser settings"""
        self.logger = logger or self.config.create_logger()
        """Logger of the diagnostics"""
        self.builder_factory = builder_factory
        """Creates the builder of each table"""

    def parse_file(self, file_path:str) -> list[SchemaBuilder]:
        """Parse a file containing DDL text

        Parameters
        ----------
        file_path : str
            Path to the file, read with the configured encoding

        Returns
        -------
        list[SchemaBuilder]
            One builder per CREATE TABLE statement
        """
        with open(file_path, 'r', encoding=self.config.encoding) as f:
            sql = f.read()

        return self.parse(sql)

    def parse(self, sql:str) -> list[SchemaBuilder]:
        """Parse DDL text

        Parameters
        ----------
        sql : str
            Zero or more statements separated by ';'

        Returns
        -------
        list[SchemaBuilder]
            One builder per CREATE TABLE statement, in statement order

        Raises
        ------
        DdlParseError
            On the first fatal fault (e.g. composite primary key)
        """
        result = []
        statements = get_statements(sql)
        self.logger.info(ParseStage.SPLITTING, f"Found {len(statements)} statement(s)")

        for statement in statements:
            sc = Scanner(statement)
            if sc.starts_with(CREATE_TABLE_PREFIX):
                try:
                    result.append(self._parse_create_table(sc, statement))
                except DdlParseError as e:
                    self.logger.error(ParseStage.CREATE_TABLE, str(e))
                    raise
            elif sc.starts_with(ALTER_TABLE_PREFIX):
                self._parse_alter_table(sc)
            else:
                self.logger.info(ParseStage.UNSUPPORTED, "Skipping unsupported command: " \
                                 f"[{sc.abbreviate(self.config.preview_length)}]")

        return result

    def _preview(self, statement:str) -> str:
        return Scanner(statement).abbreviate(self.config.preview_length)

    #
    # CREATE TABLE
    #

    def _parse_create_table(self, sc:Scanner, statement:str) -> SchemaBuilder:
        """Parse a CREATE TABLE statement"""
        sc.skip(CREATE_TABLE_PREFIX)
        sc.trim()
        type_name = sc.read_until_whitespace()
        if not type_name:
            raise MalformedStatement("Missing table name", self._preview(statement))
        if "(" in type_name or ")" in type_name:
            # e.g. 'CREATE TABLE t(a INT)': the body must be separated from the name
            raise MalformedStatement(f"Parentheses in table name '{type_name}'",
                                     self._preview(statement))
        builder = self.builder_factory(type_name)

        # Remove everything outside 'CREATE TABLE name (...) ...'
        if not sc.trim_outside_enclosing_pair('(', ')'):
            raise MalformedStatement(f"Unbalanced or missing parentheses in table '{type_name}'",
                                     self._preview(statement))

        clauses = sc.split_excluding_enclosing_pair(',', '(', ')')
        if clauses == [""]:
            # Table without any column
            clauses = []

        has_primary_key = False
        for clause in clauses:
            if not clause:
                raise MalformedStatement(f"Empty column clause in table '{type_name}'",
                                         self._preview(statement))
            if clause.startswith(PRIMARY_KEY_PREFIX):
                if has_primary_key:
                    raise UnsupportedPrimaryKey(
                        f"Multiple primary keys in table '{type_name}'",
                        self._preview(statement))
                self._parse_primary_key(clause, builder, statement)
                has_primary_key = True
            else:
                self._parse_column(clause, builder)

        self.logger.info(ParseStage.CREATE_TABLE, f"Parsed table '{type_name}' " \
                         f"({len(clauses) - int(has_primary_key)} field(s))")
        return builder

    def _parse_column(self, clause:str, builder:SchemaBuilder) -> None:
        """Parse a column clause (`name TYPE ...`); constraints after the type are ignored"""
        sc = Scanner(clause)
        name = sc.read_until_whitespace()
        sc.trim()
        sql_type = sc.read_until_whitespace()
        builder.add_field(name, resolve_field_type(sql_type, strict=self.config.strict_types))

    def _parse_primary_key(self, clause:str, builder:SchemaBuilder, statement:str) -> None:
        """Parse a `PRIMARY KEY (column)` clause"""
        sc = Scanner(clause)
        sc.skip(PRIMARY_KEY_PREFIX)
        sc.trim()
        text = sc.buffer
        if text.startswith("(") and text.endswith(")"):
            text = text[1:-1].strip()

        columns = [c.strip() for c in text.split(",")]
        if len(columns) > 1:
            raise UnsupportedPrimaryKey(
                f"Composite primary key ({', '.join(columns)}) is not supported " \
                f"in table '{builder.type_name}'", self._preview(statement))
        if not columns[0]:
            raise MalformedStatement(f"Empty primary key in table '{builder.type_name}'",
                                     self._preview(statement))

        builder.set_primary_key(columns[0])

    #
    # ALTER TABLE
    #

    def _parse_alter_table(self, sc:Scanner) -> None:
        """Log an ALTER TABLE statement as skipped; nothing is altered"""
        sc.skip(ALTER_TABLE_PREFIX)
        sc.trim()
        type_name = sc.read_until_whitespace()
        self.logger.warning(ParseStage.ALTER_TABLE, f"Skipping alter table command for {type_name}")



def parse_sql(sql:str, config:Optional[ParserConfig]=None,
              logger:Optional[Logger]=None) -> list[SchemaBuilder]:
    """Parse DDL text into `TypeDescriptorBuilder`s

    Parameters
    ----------
    sql : str
        DDL text
    config : ParserConfig, optional
        Parser settings
    logger : Logger, optional
        Logger of the diagnostics

    Returns
    -------
    list[SchemaBuilder]
        One builder per CREATE TABLE statement
        If no CREATE TABLE statement is found, an empty list is returned
    """
    return DdlParser(config, logger).parse(sql)

def parse_sql_file(file_path:str, config:Optional[ParserConfig]=None,
                   logger:Optional[Logger]=None) -> list[SchemaBuilder]:
    """Parse a DDL file into `TypeDescriptorBuilder`s

    See `parse_sql`.
    """
    return DdlParser(config, logger).parse_file(file_path)
