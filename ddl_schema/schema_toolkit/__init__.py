"""Module for parsing SQL DDL text into schema descriptions.

Classes
-------
- Canonical field types and schema structures
  - `FieldType`: Canonical field types
  - `FieldStructure`: Field structure
  - `TypeDescriptor`: Type (table) structure
- Builders
  - `SchemaBuilder`: Interface of the builders populated by the parser
  - `TypeDescriptorBuilder`: Default builder
- Parser
  - `DdlParser`: Parser of CREATE TABLE / ALTER TABLE statements
- Errors
  - `DdlParseError`, `MalformedStatement`, `UnsupportedPrimaryKey`, `UnknownSqlType`

Functions
---------
- SQL parsing functions
  - `parse_sql`: Parse DDL text.
  - `parse_sql_file`: Parse a DDL file.
- Type mapping functions
  - `resolve_field_type`: Resolve a SQL type name to a canonical field type.
"""
from ._core import (
    FieldType, FieldStructure, TypeDescriptor,
    SchemaBuilder, TypeDescriptorBuilder
)
from .errors import DdlParseError, MalformedStatement, UnsupportedPrimaryKey, UnknownSqlType

from .sql_types import resolve_field_type
from .sql_parser import DdlParser, parse_sql, parse_sql_file
