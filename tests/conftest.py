"""Shared pytest fixtures for natdoc tests."""

import pytest

from natdoc import (
    Constructor,
    Contract,
    Enum,
    Event,
    EventParameter,
    Function,
    Parameter,
    Struct,
)


@pytest.fixture
def transfer():
    """A documented, non-constant function with one return value."""
    return Function(
        name="transfer",
        signature="transfer(address,uint256)",
        parameters=(Parameter("to", "address"), Parameter("amount", "uint256")),
        returns=(Parameter("ok", "bool"),),
        documentation=(
            "@notice Send `amount` tokens to `to`.\n"
            "@dev Reverts when the balance is too low.\n"
            "@param to The recipient\n"
            "@param amount The amount\n"
            "in wei\n"
            "@return whether the transfer\n"
            "succeeded"
        ),
    )


@pytest.fixture
def token(transfer):
    """
    A token contract covering every document.

    Example:
        def test_abi(token):
            assert abi_entries(token)[0]["name"] == "transfer"
    """
    return Contract(
        name="Token",
        documentation="@title Simple token\n@author Alice",
        constructor=Constructor(parameters=(Parameter("supply", "uint256"),)),
        functions=(
            transfer,
            Function(
                name="balanceOf",
                signature="balanceOf(address)",
                parameters=(Parameter("who", "address"),),
                returns=(Parameter("balance", "uint256"),),
                constant=True,
                documentation="Balance of an account.",
            ),
            Function(
                name="burn",
                signature="burn()",
                documentation="@dev Only the owner may burn.",
            ),
            Function(name="kill", signature="kill()"),
        ),
        events=(
            Event(
                name="Transfer",
                parameters=(
                    EventParameter("from", "address", indexed=True),
                    EventParameter("to", "address", indexed=True),
                    EventParameter("value", "uint256"),
                ),
            ),
        ),
    )


@pytest.fixture
def math_library():
    """A library defining a struct and an enum."""
    return Contract(
        name="Math",
        library=True,
        structs=(
            Struct(
                name="Point",
                members=(Parameter("x", "uint256"), Parameter("y", "uint256")),
            ),
        ),
        enums=(Enum(name="Rounding", members=("Down", "Up", "Nearest")),),
        functions=(
            Function(
                name="max",
                signature="max(uint256,uint256)",
                parameters=(Parameter("a", "uint256"), Parameter("b", "uint256")),
                returns=(Parameter("", "uint256"),),
                constant=True,
            ),
        ),
    )
