"""
Mapping from SQL type names to canonical field types.

Many SQL dialect synonyms are grouped into the small set of `FieldType`
members. Lookup is case-sensitive and exact, after removing the
parenthesized length/precision suffix (e.g. `DECIMAL(10,2)` -> `DECIMAL`).
Unknown type names resolve to `FieldType.TEXT`.

Functions
---------
- `strip_type_arguments`: Remove the parenthesized suffix of a type name
- `resolve_field_type`: Resolve a SQL type name to a canonical field type

Constants
---------
- `SQL_TYPE_MAP`: SQL type name -> canonical field type
- `DEFAULT_FIELD_TYPE`: Field type of unknown SQL type names
"""
from typing import Final

from ._core import FieldType
from .errors import UnknownSqlType



DEFAULT_FIELD_TYPE: Final = FieldType.TEXT
"""Field type of unknown SQL type names"""

_SYNONYMS: Final[dict[FieldType, tuple[str, ...]]] = {
    FieldType.TEXT: (
        "VARCHAR2", "NVARCHAR2", "NCHAR VARYING", "VARCHAR", "CHAR", "NCHAR",
        "NVARCHAR", "SYSNAME", "CLOB", "RAW", "MONEY", "SMALLMONEY", "TEXT",
        "NTEXT", "GRAPHIC", "VARGRAPHIC", "VARG", "VARBINARY", "VARBIN",
        "CHARACTER", "UNIQUEIDENTIFIER", "DECFLOAT", "LONG",
    ),
    FieldType.SHORT: ("TINYINT", "SMALLINT"),
    FieldType.INTEGER: ("INT", "INTEGER"),
    FieldType.LONG: ("BIGINT",),
    FieldType.DOUBLE: ("NUMBER", "DOUBLE", "DOUBLE PRECISION"),
    FieldType.FLOAT: ("REAL", "FLOAT"),
    FieldType.DECIMAL: ("NUMERIC", "DECIMAL"),
    FieldType.DATE: ("DATE", "DATETIME"),
    FieldType.TIMESTAMP: (
        "TIMESTAMP", "TIMESTAMP WITH TIME ZONE", "TIMESTAMP WITH LOCAL TIME ZONE",
        "TIMESTMP", "TIMESTZ",
    ),
    FieldType.TIME: ("TIME", "TIME WITH TIME ZONE"),
    FieldType.BOOLEAN: ("BOOLEAN",),
}

SQL_TYPE_MAP: Final[dict[str, FieldType]] = {
    name: ftype for ftype, names in _SYNONYMS.items() for name in names
}
"""SQL type name -> canonical field type"""



def strip_type_arguments(sql_type:str) -> str:
    """Remove the parenthesized suffix of a type name

    Examples
    --------
    >>> strip_type_arguments("DECIMAL(10,2)")
    'DECIMAL'
    >>> strip_type_arguments("INT")
    'INT'
    """
    return sql_type.split("(", 1)[0]

def resolve_field_type(sql_type:str, strict:bool=False) -> FieldType:
    """Resolve a SQL type name to a canonical field type

    Parameters
    ----------
    sql_type : str
        SQL type name, optionally with a parenthesized suffix (e.g. `CHARACTER(4)`)
    strict : bool, default False
        Raise an error instead of falling back to `DEFAULT_FIELD_TYPE`
        when the type name is unknown

    Returns
    -------
    FieldType
        Canonical field type

    Raises
    ------
    UnknownSqlType
        If `strict` is True and the type name is unknown
    """
    name = strip_type_arguments(sql_type)
    if (ftype := SQL_TYPE_MAP.get(name)) is not None:
        return ftype

    if strict:
        raise UnknownSqlType(f"Unknown SQL type '{name}'")
    return DEFAULT_FIELD_TYPE
