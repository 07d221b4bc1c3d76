"""Read-only contract model consumed by the document assemblers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Parameter:
    """A named, typed slot: function input/output or struct member."""

    name: str
    type: str


@dataclass(frozen=True)
class EventParameter:
    """Event input. `type` is the canonical type name."""

    name: str
    type: str
    indexed: bool = False


@dataclass(frozen=True)
class Function:
    """An externally visible function."""

    name: str
    signature: str  # External signature, e.g. "transfer(address,uint256)"
    parameters: tuple[Parameter, ...] = ()
    returns: tuple[Parameter, ...] = ()
    constant: bool = False
    documentation: str | None = None  # Raw doc comment, None if undocumented

    @property
    def parameter_names(self) -> list[str]:
        return [p.name for p in self.parameters]

    @property
    def parameter_type_names(self) -> list[str]:
        return [p.type for p in self.parameters]

    @property
    def return_parameter_names(self) -> list[str]:
        return [p.name for p in self.returns]

    @property
    def return_parameter_type_names(self) -> list[str]:
        return [p.type for p in self.returns]


@dataclass(frozen=True)
class Constructor:
    """Contract constructor. Only its inputs are part of the interface."""

    parameters: tuple[Parameter, ...] = ()

    @property
    def parameter_names(self) -> list[str]:
        return [p.name for p in self.parameters]

    @property
    def parameter_type_names(self) -> list[str]:
        return [p.type for p in self.parameters]


@dataclass(frozen=True)
class Event:
    name: str
    parameters: tuple[EventParameter, ...] = ()
    anonymous: bool = False


@dataclass(frozen=True)
class Struct:
    name: str
    members: tuple[Parameter, ...] = ()


@dataclass(frozen=True)
class Enum:
    name: str
    members: tuple[str, ...] = ()


@dataclass(frozen=True)
class Contract:
    """
    A compiled contract as seen by the documentation assemblers.

    Ordering of functions, events, structs and enums is significant: the
    emitted documents follow it.
    """

    name: str
    library: bool = False
    documentation: str | None = None
    constructor: Constructor | None = None
    functions: tuple[Function, ...] = field(default_factory=tuple)
    events: tuple[Event, ...] = field(default_factory=tuple)
    structs: tuple[Struct, ...] = field(default_factory=tuple)
    enums: tuple[Enum, ...] = field(default_factory=tuple)

    def interface_functions(self) -> tuple[Function, ...]:
        return self.functions

    def interface_events(self) -> tuple[Event, ...]:
        return self.events
