"""Type-resolution oracles."""

from returntyper.oracle.base import Signature, Symbol, TypeOracle
from returntyper.oracle.table import TableOracle, TableType, TypeTable, TypeTableEntry

__all__ = [
    "Signature",
    "Symbol",
    "TableOracle",
    "TableType",
    "TypeOracle",
    "TypeTable",
    "TypeTableEntry",
]
