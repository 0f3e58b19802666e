"""
ddl_schema.config package

Provides the settings of the DDL parser

Modules
-------
- `parser_config`: Load the settings from TOML files
"""
from .parser_config import LogInit, ParserConfig, load_config, load_config_data
