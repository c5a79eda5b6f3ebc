"""
A python module containing all of the necessary data structures to play a game
of Risk.

Territories are plain integer ids in [0, N). Everything that describes a
Territory during a game (its owner, its armies) lives on the Board.

Author: Kieran Ahn
Date: 11/23/2023
"""
from validators import *
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum


class Design(Enum):
    """
    Designs that can appear on cards.
    """
    INFANTRY = 0
    CAVALRY = 1
    ARTILLERY = 2


# armies awarded for a set of three matching designs
UNIFORM_SET_VALUES = {
    Design.INFANTRY: 4,
    Design.CAVALRY: 6,
    Design.ARTILLERY: 8,
}

# armies awarded for one of each design, or any set built around wildcards
MIXED_SET_VALUE = 10


@dataclass(frozen=True)
class Continent:
    """
    A group of Territories that, when controlled, awards you a number of armies
    at the beginning of your turn.
    """
    name: str
    territories: frozenset[int]
    armies_awarded: int


@dataclass(frozen=True)
class Card:
    """
    Cards are awarded after you complete a turn in which you have captured a
    territory. Sets of three can be traded for armies at the beginning of a
    player's turn. If you have five or more cards in your hand at the
    beginning of your turn, you MUST trade in a set. If any card shows a
    Territory you occupy, that Territory gets two extra armies. If you defeat
    a player, you get all of their cards.

    Wildcards have neither a territory nor a design.
    """
    territory: int | None
    design: Design | None
    wildcard: bool = False

    @staticmethod
    def wild() -> 'Card':
        return Card(None, None, True)


@dataclass(frozen=True)
class DealtCard:
    """
    A Card as it sits in a player's hand. Two Cards can look alike, so the
    card_id is what the Deck uses to tell which one a player really holds.
    """
    card_id: int
    card: Card


@dataclass(frozen=True)
class Trade:
    """
    Three Cards a player offers to turn in for armies.
    """
    cards: tuple[DealtCard, DealtCard, DealtCard]

    def contains_wild(self) -> bool:
        return any(dealt.card.wildcard for dealt in self.cards)

    def designs(self) -> list[Design]:
        """
        The designs on the non-wild cards in the trade
        """
        return [dealt.card.design for dealt in self.cards if not dealt.card.wildcard]

    def is_set(self) -> bool:
        """
        A set is three cards of one design, one card of each design, or
        anything with a wildcard in it. Two of a kind plus one odd card is
        never a set.
        """
        if len(self.cards) != 3:
            return False
        if self.contains_wild():
            return True
        distinct = len(set(self.designs()))
        return distinct == 1 or distinct == 3

    def value(self) -> int:
        """
        The number of armies the trade is worth

        :returns:\n
        armies  --  0 if the trade is not a set
        """
        if not self.is_set():
            return 0

        designs = self.designs()
        if len(set(designs)) == 1 and len(designs) >= 2:
            return UNIFORM_SET_VALUES[designs[0]]
        return MIXED_SET_VALUE


@dataclass(frozen=True)
class Attack:
    """
    An attack from one of the player's Territories on an adjacent enemy one.
    """
    origin: int
    target: int
    amount: int


@dataclass(frozen=True)
class Move:
    """
    A transfer of armies between two of the player's Territories.
    """
    origin: int
    destination: int
    amount: int


@dataclass
class AttackTerritoryInfo:
    """
    What an attacking player knows about one of its own Territories during
    the attack phase.
    """
    territory: int
    armies: int
    adjacent_enemies: set[int]


class GameMap:
    """
    Which Territories border which. A GameMap never changes once it is built.
    """

    def __init__(self, adjacency: Mapping[int, Iterable[int]], n_territories: int = None):
        """
        :params:\n
        adjacency       --  each territory id mapped to the ids of its
        neighbors\n
        n_territories   --  the number of Territories, if some have no
        neighbors listed at all
        """
        if n_territories is None:
            n_territories = len(adjacency)
        validate(None, n_territories > 0,
                 'A map needs at least one Territory', ValueError)

        neighbors = [set() for _ in range(n_territories)]
        for territory, adjacent in adjacency.items():
            validate(None, is_index(territory, n_territories),
                     f'Territory {territory!r} is not on a map of {n_territories} Territories', ValueError)
            for neighbor in adjacent:
                validate(None, is_index(neighbor, n_territories),
                         f'Neighbor {neighbor!r} of {territory} is not on a map of {n_territories} Territories', ValueError)
                validate(None, neighbor != territory,
                         f'Territory {territory} cannot border itself', ValueError)
                neighbors[territory].add(neighbor)

        for territory, adjacent in enumerate(neighbors):
            for neighbor in adjacent:
                validate(None, territory in neighbors[neighbor],
                         f'{territory} borders {neighbor}, but {neighbor} does not border {territory}', ValueError)

        self._neighbors = tuple(frozenset(adjacent) for adjacent in neighbors)

    @classmethod
    def from_edges(cls, n_territories: int, edges: Iterable[tuple[int, int]]) -> 'GameMap':
        """
        Builds a map from a list of borders, each given once

        :params:\n
        n_territories   --  the number of Territories\n
        edges           --  pairs of bordering territory ids
        """
        adjacency = {territory: set() for territory in range(n_territories)}
        for a, b in edges:
            validate(None, a in adjacency and b in adjacency,
                     f'Border ({a!r}, {b!r}) is not on a map of {n_territories} Territories', ValueError)
            adjacency[a].add(b)
            adjacency[b].add(a)
        return cls(adjacency, n_territories)

    def __len__(self) -> int:
        return len(self._neighbors)

    def territories(self) -> range:
        return range(len(self._neighbors))

    def are_adjacent(self, a: int, b: int) -> bool:
        """
        Whether two Territories share a border. Unknown ids border nothing.
        """
        if not is_index(a, len(self)):
            return False
        return b in self._neighbors[a]

    def neighbors(self, territory: int) -> frozenset[int]:
        validate_territory(territory, len(self))
        return self._neighbors[territory]
