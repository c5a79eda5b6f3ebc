"""
A Python module containing functions to validate different parts of the Risk
game.

Two kinds of failure exist in a game. A Player proposing an illegal action is
expected and is handled by the engine asking again; those checks return a
bool. Anything that breaks the engine's own bookkeeping raises an
InvariantViolation and should never be caught.

Author: Kieran Ahn
Date: 11/23/2023
"""
from numbers import Integral
from typing import TypeVar

_T = TypeVar('_T')


class InvariantViolation(RuntimeError):
    """
    Raised when the engine, or a trusted caller inside it, breaks one of the
    game's invariants, e.g. removing more armies than a Territory holds.
    """


def validate(toValidate, condition: bool, message: str, exceptionType: Exception = Exception):
    """
    Basic validator function, which evaluates a condition and raises an error
    if that condition is not met.

    :params:\n
    object          --  the object we are validating\n
    condition       --  the condition to evaluate, which evaluates to a boolean\n
    message         --  the error message to raise if the validator fails\n
    exceptionType   --  The type of exception to raise, if any are applicable\n

    :returns:\n
    toValidate      -- the validated object\n
    """

    if (not condition):
        raise exceptionType(message)

    return toValidate


def validate_is_type(object, desired_type: _T):
    """
    Validates whether an object is a given type or not

    :params:\n
    object  --  an object that could be a certain type\n
    type    --  the type we want the object to be\n

    :returns:\n
    object  --  the validated object confirmed to be a certain type
    """
    object_type = type(object)

    return validate(object, object_type is desired_type or issubclass(object_type, desired_type), f'Expected {desired_type}, but got {object_type}', TypeError)


def validate_player(player: int, n_players: int) -> int:
    """
    Validates that a player id refers to a player in the game

    :params:\n
    player      --  a player id\n
    n_players   --  the number of players in the game

    :returns:\n
    player      --  the validated player id
    """
    return validate(player, is_index(player, n_players),
                    f'Invalid player {player!r}; expected an id in [0, {n_players})', InvariantViolation)


def validate_territory(territory: int, n_territories: int) -> int:
    """
    Validates that a territory id refers to a Territory on the map

    :params:\n
    territory       --  a territory id\n
    n_territories   --  the number of Territories on the map

    :returns:\n
    territory       --  the validated territory id
    """
    return validate(territory, is_index(territory, n_territories),
                    f'Invalid territory {territory!r}; expected an id in [0, {n_territories})', InvariantViolation)


def is_index(value, length: int) -> bool:
    """
    Whether a value is an integer usable as an index into a sequence of the
    given length. bools are not accepted even though they are ints.
    """
    return isinstance(value, Integral) and not isinstance(value, bool) and 0 <= value < length


def is_count(value, minimum: int = 0) -> bool:
    """
    Whether a value is an integer amount of at least the given minimum
    """
    return isinstance(value, Integral) and not isinstance(value, bool) and value >= minimum
