"""
ddl_schema package

Translates SQL DDL text into schema descriptions

Subpackages
-----------
- `schema_toolkit`: DDL parser and schema structures
- `config`: Parser settings
"""
__version__ = "0.1.0"
