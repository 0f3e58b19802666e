"""
Core data structures for schema toolkit.

This module defines the core data structures used in the schema toolkit.

Classes
-------
- `FieldType`: Canonical field types
- `FieldStructure`: Field structure
- `TypeDescriptor`: Type (table) structure
- `SchemaBuilder`: Interface of the builders populated by the parser
- `TypeDescriptorBuilder`: Default builder producing `TypeDescriptor`
"""
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field
import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional



class FieldType(Enum):
    """Canonical field types

    The value of each member is the Python type a value of the field carries."""
    TEXT = (1, str)
    SHORT = (2, int)
    INTEGER = (3, int)
    LONG = (4, int)
    DOUBLE = (5, float)
    FLOAT = (6, float)
    DECIMAL = (7, Decimal)
    DATE = (8, datetime.date)
    TIMESTAMP = (9, datetime.datetime)
    TIME = (10, datetime.time)
    BOOLEAN = (11, bool)

    @property
    def python_type(self) -> type:
        """Python type of the values of this field type"""
        return self.value[1]

@dataclass(frozen=True)
class FieldStructure:
    """Field structure

    Attributes:
    -----------
    name : str
        Field name
    ftype : FieldType
        Canonical field type
    """
    name: str
    """Field name"""
    ftype: FieldType
    """Canonical field type"""

@dataclass(frozen=True)
class TypeDescriptor:
    """Type structure (one per CREATE TABLE statement)

    Attributes:
    -----------
    name : str
        Type (table) name
    fields : tuple[FieldStructure, ...]
        Fields in declaration order
    primary_key : Optional[str]
        Name of the primary key field

    Examples
    --------
    ```sql
    CREATE TABLE projects (
        project_code VARCHAR(8),
        budget DECIMAL(10,2),
        PRIMARY KEY (project_code)
    )
    ```

    is represented as:

    ```python
    TypeDescriptor(
        name='projects',
        fields=(
            FieldStructure(name='project_code', ftype=FieldType.TEXT),
            FieldStructure(name='budget', ftype=FieldType.DECIMAL)
        ),
        primary_key='project_code'
    )
    ```
    """
    name: str
    """Type (table) name"""
    fields: tuple[FieldStructure, ...] = field(default_factory=tuple)
    """Fields in declaration order"""
    primary_key: Optional[str] = None
    """Name of the primary key field"""

    def get_field(self, name:str) -> Optional[FieldStructure]:
        """Return the field with the given name, or None if not found"""
        return next((f for f in self.fields if f.name == name), None)



#
# Builders
#

class SchemaBuilder(metaclass=ABCMeta):
    """Interface of the objects populated by the DDL parser

    The parser calls the constructor with the type name, then `add_field`
    once per column (in declaration order) and `set_primary_key` at most once."""

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Type (table) name"""

    @abstractmethod
    def add_field(self, name:str, field_type:FieldType) -> None:
        """Add a field

        Parameters
        ----------
        name : str
            Field name
        field_type : FieldType
            Canonical field type
        """

    @abstractmethod
    def set_primary_key(self, name:str) -> None:
        """Set the primary key field

        Parameters
        ----------
        name : str
            Field name
        """

class TypeDescriptorBuilder(SchemaBuilder):
    """Builder producing `TypeDescriptor`"""

    def __init__(self, type_name:str):
        """
        Parameters
        ----------
        type_name : str
            Type (table) name
        """
        self._type_name = type_name
        self._fields: list[FieldStructure] = []
        self._primary_key: Optional[str] = None

    @property
    def type_name(self) -> str:
        return self._type_name

    @property
    def fields(self) -> list[FieldStructure]:
        """Fields added so far, in declaration order"""
        return list(self._fields)

    @property
    def primary_key(self) -> Optional[str]:
        """Name of the primary key field, or None if not set"""
        return self._primary_key

    def add_field(self, name:str, field_type:FieldType) -> None:
        self._fields.append(FieldStructure(name=name, ftype=field_type))

    def set_primary_key(self, name:str) -> None:
        self._primary_key = name

    def create(self) -> TypeDescriptor:
        """Create the type descriptor

        Returns
        -------
        TypeDescriptor
            Type descriptor

        Raises
        ------
        ValueError
            If a field name is duplicated, or the primary key is not one of the fields
        """
        names = [f.name for f in self._fields]
        if len(set(names)) != len(names):
            duplicated = sorted({n for n in names if names.count(n) > 1})
            raise ValueError(f"Duplicated field(s) in type '{self._type_name}': " \
                             f"{', '.join(duplicated)}")

        if (self._primary_key is not None) and (self._primary_key not in names):
            raise ValueError(f"Primary key '{self._primary_key}' is not a field " \
                             f"of type '{self._type_name}'")

        return TypeDescriptor(name=self._type_name,
                              fields=tuple(self._fields),
                              primary_key=self._primary_key)

    def __repr__(self) -> str:
        return f"TypeDescriptorBuilder(type_name={self._type_name!r}, " \
               f"fields={self._fields!r}, primary_key={self._primary_key!r})"
