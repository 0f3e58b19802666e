"""
This module provides functions such as `load_config` to obtain
instances of `ParserConfig` from TOML files.

Functions
---------
- load_config: Parse a TOML file and return a ParserConfig object
- load_config_data: Parse a TOML string and return a ParserConfig object

Examples
--------
The TOML files have the following structure. Every key is optional.

```toml
[parser]
preview_length = 30
strict_types = false
encoding = "utf-8"

[logging]
log_path = "{BASE_DIR}/ddl_schema.log"
log_encoding = "utf-8"
log_init = "NEVER"
log_level = "INFO"
log_to_console = false
```

`{BASE_DIR}` in `log_path` is replaced with the `base_dir` argument
(the directory of the TOML file for `load_config`).
"""
from dataclasses import dataclass
from enum import Enum
from os import path
from typing import Any, Optional

import tomlkit as toml
import tomlkit.items as toml_items

from ddl_schema._logger import LogLevel, Logger



class LogInit(Enum):
    """When to truncate the log file"""
    NEVER = 1
    ALWAYS_ON_STARTUP = 2

@dataclass
class ParserConfig:
    """Settings of the DDL parser"""
    preview_length: int = 30
    """Maximum length of the statement previews in diagnostics"""
    strict_types: bool = False
    """Raise an error on unknown SQL type names instead of using TEXT"""
    encoding: str = "utf-8"
    """Encoding of the DDL files"""

    log_path: Optional[str] = None
    """Path of the log file (None: no file output)"""
    log_encoding: str = "utf-8"
    """Encoding of the log file"""
    log_init: LogInit = LogInit.NEVER
    """When to truncate the log file"""
    log_level: LogLevel = LogLevel.INFO
    """Minimum level of the logs"""
    log_to_console: bool = False
    """Also print the logs to the console"""

    def create_logger(self) -> Logger:
        """Create a logger following the logging settings"""
        logger = Logger(min_level=self.log_level)
        logger.init_logger(self.log_path, encoding=self.log_encoding,
                           init_log=(self.log_init == LogInit.ALWAYS_ON_STARTUP),
                           logging_to_console=self.log_to_console)
        return logger



def load_config(file_path:str) -> ParserConfig:
    """Parse a TOML file and return a ParserConfig object

    Parameters
    ----------
    file_path : str
        Path to the TOML file

    Returns
    -------
    ParserConfig
        Parser settings
    """
    with open(file_path, 'r', encoding="utf-8") as f:
        data = f.read()

    return load_config_data(data, base_dir=path.dirname(path.abspath(file_path)))

def load_config_data(data:str, base_dir:str = ".") -> ParserConfig:
    """Parse a TOML string and return a ParserConfig object

    Parameters
    ----------
    data : str
        TOML data
    base_dir : str, default "."
        Replacement of `{BASE_DIR}` in the paths

    Returns
    -------
    ParserConfig
        Parser settings

    Raises
    ------
    ValueError
        If a section or a value is not valid
    """
    toml_data = toml.loads(data)
    config = ParserConfig()

    if (parser := _get_section(toml_data, "parser")) is not None:
        if (v := _get_value(parser, "parser", "preview_length", int)) is not None:
            if v <= 0:
                raise ValueError("'parser' > 'preview_length' must be positive")
            config.preview_length = v
        if (v := _get_value(parser, "parser", "strict_types", bool)) is not None:
            config.strict_types = v
        if (v := _get_value(parser, "parser", "encoding", str)) is not None:
            config.encoding = v

    if (logging := _get_section(toml_data, "logging")) is not None:
        if (v := _get_value(logging, "logging", "log_path", str)) is not None:
            config.log_path = v.replace("{BASE_DIR}", base_dir)
        if (v := _get_value(logging, "logging", "log_encoding", str)) is not None:
            config.log_encoding = v
        if (v := _get_value(logging, "logging", "log_init", str)) is not None:
            config.log_init = _get_enum(LogInit, v, "'logging' > 'log_init'")
        if (v := _get_value(logging, "logging", "log_level", str)) is not None:
            config.log_level = _get_enum(LogLevel, v, "'logging' > 'log_level'")
        if (v := _get_value(logging, "logging", "log_to_console", bool)) is not None:
            config.log_to_console = v

    return config

#
# Helpers
#

def _get_section(toml_data:toml.TOMLDocument, name:str) -> Optional[toml_items.Table]:
    """Return the section, or None if it does not exist"""
    if (section := toml_data.get(name)) is None:
        return None
    if not isinstance(section, toml_items.Table):
        raise ValueError(f"Section '{name}' is not a table")
    return section

def _get_value(section:toml_items.Table, section_name:str,
               key:str, ttype:type) -> Optional[Any]:
    """Return the unwrapped value of the key, or None if it does not exist"""
    if (item := section.get(key)) is None:
        return None

    value = item.unwrap() if isinstance(item, toml_items.Item) else item
    # bool is a subclass of int
    if (not isinstance(value, ttype)) or (ttype is int and isinstance(value, bool)):
        raise ValueError(f"'{section_name}' > '{key}' must be of type {ttype.__name__}")
    return value

def _get_enum(enum_type:type[Enum], value:str, key_name:str) -> Any:
    """Convert the name to a member of `enum_type`"""
    try:
        return enum_type[value.upper()]
    except KeyError as e:
        raise ValueError(f"{key_name} must be one of " \
                         f"{', '.join(enum_type.__members__)}: '{value}'") from e
