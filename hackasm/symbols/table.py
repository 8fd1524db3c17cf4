from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from .errors import SymbolRedefinitionError
from .predefined import PREDEFINED_SYMBOLS

if TYPE_CHECKING:
    from collections.abc import Generator

    from hackasm.lexer.location import SourceLocation


class SymbolTable(Mapping[str, int]):
    """Mapping of an symbol name into its address, owned by single assembly run.

    Symbol names are case-sensitive, once bound symbol address never changes.
    Use `bind` to grow table, there is no way to unbind or rebind symbol.
    """

    def __init__(self) -> None:
        self._addresses: dict[str, int] = {}
        self._locations: dict[str, SourceLocation | None] = {}

    def __getitem__(self, name: str) -> int:
        return self._addresses[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._addresses)

    def __len__(self) -> int:
        return len(self._addresses)

    def __repr__(self) -> str:
        return f"SymbolTable({self._addresses!r})"

    def lookup(self, name: str) -> int | None:
        """Get address of an symbol or None if that symbol is not bound yet."""
        return self._addresses.get(name)

    def bind(
        self,
        name: str,
        address: int,
        *,
        at: SourceLocation | None = None,
    ) -> None:
        """Bind symbol to an address.

        Binding already bound symbol to the same address is no-op.
        :raises SymbolRedefinitionError: If symbol is already bound to another address
        """
        assert address >= 0, "Symbol addresses are non-negative"

        bound_address = self._addresses.get(name)
        if bound_address is None:
            self._addresses[name] = address
            self._locations[name] = at
            return

        if bound_address != address:
            raise SymbolRedefinitionError(
                name=name,
                address=address,
                bound_address=bound_address,
                redefined=at,
                original=self._locations[name],
            )

    def defined_at(self, name: str) -> SourceLocation | None:
        """Location where symbol was bound, None for predefined ones."""
        return self._locations.get(name)

    def is_predefined(self, name: str) -> bool:
        return name in PREDEFINED_SYMBOLS and self._locations.get(name) is None

    def user_defined(self) -> Generator[tuple[str, int]]:
        """Yield symbols bound by program itself (labels and variables) in order of binding."""
        for name, address in self._addresses.items():
            if not self.is_predefined(name):
                yield name, address

    def copy(self) -> SymbolTable:
        table = SymbolTable()
        table._addresses = self._addresses.copy()  # noqa: SLF001
        table._locations = self._locations.copy()  # noqa: SLF001
        return table


def new_symbol_table() -> SymbolTable:
    """Construct symbol table with all predefined symbols of the platform."""
    table = SymbolTable()
    for name, address in PREDEFINED_SYMBOLS.items():
        table.bind(name, address)
    return table
