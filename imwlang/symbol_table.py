"""A flat table of declared variables, functions and structures."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum


class SymbolKind(Enum):
    """What sort of entity a symbol names."""

    VARIABLE = "Var"
    FUNCTION = "Func"
    STRUCT = "Struct"


class SymbolType(Enum):
    """The data type attached to a symbol."""

    INTEGER = "Integer"
    SINTEGER = "SInteger"
    CHARACTER = "Character"
    STRING = "String"
    FLOAT = "Float"
    SFLOAT = "SFloat"
    VOID = "Void"
    UNKNOWN = "Unknown"


@dataclass
class Symbol:
    """One entry of the symbol table."""

    name: str
    kind: SymbolKind
    type: SymbolType
    param_types: list[SymbolType] = field(default_factory=list)


class SymbolTable:
    """Names mapped to their symbols; each name may be declared once."""

    def __init__(self) -> None:
        self._table: dict[str, Symbol] = {}

    def _declare(self, symbol: Symbol) -> bool:
        if symbol.name in self._table:
            return False
        self._table[symbol.name] = symbol
        return True

    def declare_variable(self, name: str, symbol_type: SymbolType) -> bool:
        """Add a variable; return False if the name is already taken."""
        return self._declare(Symbol(name, SymbolKind.VARIABLE, symbol_type))

    def declare_function(
        self, name: str, return_type: SymbolType, params: Iterable[SymbolType]
    ) -> bool:
        """Add a function; return False if the name is already taken."""
        return self._declare(
            Symbol(name, SymbolKind.FUNCTION, return_type, list(params))
        )

    def declare_struct(self, name: str) -> bool:
        """Add a structure; return False if the name is already taken."""
        return self._declare(Symbol(name, SymbolKind.STRUCT, SymbolType.UNKNOWN))

    def exists(self, name: str) -> bool:
        """Tell whether the name has been declared."""
        return name in self._table

    def lookup(self, name: str) -> Symbol | None:
        """Return the symbol for a name, or None when it is undeclared."""
        return self._table.get(name)

    def format_table(self) -> str:
        """Render the table as the text block the compiler prints."""
        rows = "".join(
            f"Name: {name}, Kind: {symbol.kind.value}, Type: {symbol.type.value}\n"
            for name, symbol in self._table.items()
        )
        return "\n----- Symbol Table -----\n" + rows + "------------------------\n"

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._table.values())