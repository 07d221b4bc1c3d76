"""
ABI and interface text tests.

Tests for:
- Entry shapes for functions, constructor and events
- Emission order
- Interface text for contracts and libraries
- Model inconsistencies
"""

import json

import pytest

from natdoc import (
    Constructor,
    Contract,
    Enum,
    Event,
    EventParameter,
    Function,
    InternalError,
    Parameter,
    abi_entries,
    abi_interface,
    interface_text,
)


class _MismatchedFunction(Function):
    """A function whose model reports more names than types."""

    @property
    def parameter_type_names(self):
        return []


class TestAbiEntries:
    """Test the shape of each ABI entry."""

    def test_function_entry(self, token):
        entry = abi_entries(token)[0]
        assert entry == {
            "type": "function",
            "name": "transfer",
            "constant": False,
            "inputs": [
                {"name": "to", "type": "address"},
                {"name": "amount", "type": "uint256"},
            ],
            "outputs": [{"name": "ok", "type": "bool"}],
        }

    def test_constant_function(self, token):
        entry = abi_entries(token)[1]
        assert entry["name"] == "balanceOf"
        assert entry["constant"] is True

    def test_function_without_parameters(self, token):
        entry = abi_entries(token)[2]
        assert entry["inputs"] == []
        assert entry["outputs"] == []

    def test_constructor_entry(self, token):
        ctor = [e for e in abi_entries(token) if e["type"] == "constructor"]
        assert ctor == [
            {"type": "constructor", "inputs": [{"name": "supply", "type": "uint256"}]}
        ]

    def test_event_entry(self, token):
        event = abi_entries(token)[-1]
        assert event == {
            "type": "event",
            "name": "Transfer",
            "anonymous": False,
            "inputs": [
                {"name": "from", "type": "address", "indexed": True},
                {"name": "to", "type": "address", "indexed": True},
                {"name": "value", "type": "uint256", "indexed": False},
            ],
        }

    def test_anonymous_event(self):
        contract = Contract(name="C", events=(Event(name="Ping", anonymous=True),))
        assert abi_entries(contract) == [
            {"type": "event", "name": "Ping", "anonymous": True, "inputs": []}
        ]


class TestAbiOrder:
    """Test that emission order is functions, constructor, events."""

    def test_order(self, token):
        kinds = [(e["type"], e.get("name")) for e in abi_entries(token)]
        assert kinds == [
            ("function", "transfer"),
            ("function", "balanceOf"),
            ("function", "burn"),
            ("function", "kill"),
            ("constructor", None),
            ("event", "Transfer"),
        ]

    def test_single_event_only(self):
        """No functions and no constructor yields exactly the event."""
        contract = Contract(
            name="Log",
            events=(Event(name="Logged", parameters=(EventParameter("x", "uint8"),)),),
        )
        entries = abi_entries(contract)
        assert len(entries) == 1
        assert entries[0]["type"] == "event"
        assert entries[0]["name"] == "Logged"

    def test_events_in_declaration_order(self):
        contract = Contract(
            name="C", events=(Event(name="B"), Event(name="A"), Event(name="C"))
        )
        assert [e["name"] for e in abi_entries(contract)] == ["B", "A", "C"]

    def test_empty_contract(self):
        assert abi_interface(Contract(name="Empty")) == "[]"


class TestAbiSerialization:
    """Test the compact JSON form."""

    def test_compact(self, token):
        text = abi_interface(token)
        assert " " not in text
        assert json.loads(text) == abi_entries(token)

    def test_keys_in_insertion_order(self):
        contract = Contract(name="C", functions=(Function(name="f", signature="f()"),))
        assert abi_interface(contract) == (
            '[{"type":"function","name":"f","constant":false,"inputs":[],"outputs":[]}]'
        )


class TestAbiModelErrors:
    """Test inconsistencies in the contract model."""

    def test_name_type_length_mismatch(self):
        broken = _MismatchedFunction(
            name="f", signature="f(uint256)", parameters=(Parameter("a", "uint256"),)
        )
        contract = Contract(name="C", functions=(broken,))
        with pytest.raises(InternalError, match="size does not match") as exc_info:
            abi_entries(contract)
        assert exc_info.value.declaration == "f(uint256)"

    def test_mismatch_in_interface_text(self):
        broken = _MismatchedFunction(
            name="f", signature="f(uint256)", parameters=(Parameter("a", "uint256"),)
        )
        with pytest.raises(InternalError):
            interface_text(Contract(name="C", functions=(broken,)))


class TestInterfaceText:
    """Test the one-line interface declaration."""

    def test_contract(self, token):
        assert interface_text(token) == (
            "contract Token{"
            "function Token(uint256 supply);"
            "function transfer(address to,uint256 amount)returns(bool ok);"
            "function balanceOf(address who)constant returns(uint256 balance);"
            "function burn();"
            "function kill();"
            "}"
        )

    def test_library_includes_types(self, math_library):
        assert interface_text(math_library) == (
            "library Math{"
            "struct Point{uint256 x;uint256 y;}"
            "enum Rounding{Down,Up,Nearest}"
            "function max(uint256 a,uint256 b)constant returns(uint256 );"
            "}"
        )

    def test_contract_omits_types(self, math_library):
        """Only libraries carry struct and enum definitions."""
        contract = Contract(name="Math", structs=math_library.structs)
        assert interface_text(contract) == "contract Math{}"

    def test_constant_without_returns_drops_trailing_space(self):
        contract = Contract(
            name="C",
            functions=(Function(name="peek", signature="peek()", constant=True),),
        )
        assert interface_text(contract) == "contract C{function peek()constant;}"

    def test_constructor_without_parameters(self):
        contract = Contract(name="C", constructor=Constructor())
        assert interface_text(contract) == "contract C{function C();}"

    def test_empty_enum(self):
        contract = Contract(name="L", library=True, enums=(Enum(name="E"),))
        assert interface_text(contract) == "library L{enum E{}}"
