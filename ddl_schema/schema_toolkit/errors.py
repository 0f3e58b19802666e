"""
Errors raised while parsing DDL text.

Classes
-------
- `DdlParseError`: Base class of all parsing errors
- `MalformedStatement`: The statement cannot be decomposed (e.g. unbalanced parentheses)
- `UnsupportedPrimaryKey`: The primary key is not a single column
- `UnknownSqlType`: The SQL type name is not known (strict mode only)
"""
from typing import Optional



class DdlParseError(ValueError):
    """Base class of the errors raised by the DDL parser

    Attributes
    ----------
    statement : str, optional
        Preview of the statement that caused the error
    """
    def __init__(self, message:str, statement:Optional[str]=None):
        if statement:
            message = f"{message}: [{statement}]"
        super().__init__(message)
        self.statement = statement
        """Preview of the statement that caused the error"""

class MalformedStatement(DdlParseError):
    """The statement could not be split into its parts

    e.g. the parentheses of a CREATE TABLE body are not balanced"""

class UnsupportedPrimaryKey(DdlParseError):
    """The primary key consists of more than one column,
    or the table declares more than one primary key"""

class UnknownSqlType(DdlParseError):
    """The SQL type name is not in the type table (raised in strict mode only)"""
