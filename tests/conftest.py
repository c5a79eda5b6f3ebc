"""Shared fixtures and stand-ins for the engine tests.

The engine only ever calls ``random()`` and ``integers()`` on its random
source, so ScriptedRng can feed it exact values. ScriptedPlayer answers every
prompt from a queue and records what it was shown.
"""

from collections import deque

import numpy as np
import pytest

from riskGame import GameMap, Continent, Card, DealtCard, Design, Trade
from riskLogic import Board, Deck, Player, Risk


class ScriptedRng:
    """A stand-in for numpy.random.Generator that replays fixed values.

    rolls feed random(); picks feed integers(). An exhausted picks queue
    falls back to the lowest allowed value, an exhausted rolls queue is an
    error so tests notice unplanned battles.
    """

    def __init__(self, rolls=(), picks=()):
        self.rolls = deque(rolls)
        self.picks = deque(picks)

    def random(self):
        return self.rolls.popleft()

    def integers(self, low, high=None):
        if high is None:
            low, high = 0, low
        if self.picks:
            pick = self.picks.popleft()
            assert low <= pick < high, f"scripted pick {pick} outside [{low}, {high})"
            return pick
        return low


class ScriptedPlayer(Player):
    """A Player whose answers come from per-phase queues.

    Each queue entry is either a value to return or a callable taking the
    same arguments as the hook. An empty queue answers None, which passes
    in every phase except placement, where the fallback puts all armies on
    the first owned territory.
    """

    def __init__(self, name, trades=(), placements=(), attacks=(), fortifies=()):
        super().__init__(name)
        self.trades = deque(trades)
        self.placements = deque(placements)
        self.attacks = deque(attacks)
        self.fortifies = deque(fortifies)
        self.seen_hands = []
        self.seen_mandatory = []
        self.seen_attack_info = []
        self.placement_calls = 0

    @staticmethod
    def _answer(queue, *args):
        if not queue:
            return None
        answer = queue.popleft()
        return answer(*args) if callable(answer) else answer

    def propose_trade(self, hand, reinforcements, mandatory):
        self.seen_hands.append(hand)
        self.seen_mandatory.append(mandatory)
        return self._answer(self.trades, hand, reinforcements, mandatory)

    def distribute_reinforcements(self, armies, owned_territories):
        self.placement_calls += 1
        if not self.placements:
            return {owned_territories[0]: armies}
        return self._answer(self.placements, armies, owned_territories)

    def propose_attack(self, attack_info):
        self.seen_attack_info.append(attack_info)
        return self._answer(self.attacks, attack_info)

    def propose_fortify(self, player, board):
        return self._answer(self.fortifies, player, board)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def dealt(card_id, territory, design):
    """A DealtCard for a regular card."""
    return DealtCard(card_id, Card(territory, design))


def wild(card_id):
    return DealtCard(card_id, Card.wild())


def trade_of(*cards):
    return Trade(tuple(cards))


def make_line_map():
    """Four territories in a row: 0 - 1 - 2 - 3."""
    return GameMap.from_edges(4, [(0, 1), (1, 2), (2, 3)])


WEST = Continent("West", frozenset({0, 1}), 2)
EAST = Continent("East", frozenset({2, 3}), 1)


def make_line_board(territories, n_players=2):
    """A Board on the line map from (owner, armies) pairs."""
    return Board(make_line_map(), [WEST, EAST], n_players, territories)


def make_small_deck(n_players=2, rng=None):
    """One card per line-map territory plus a wildcard.

    Ids: 0 infantry on 0, 1 cavalry on 1, 2 artillery on 2,
    3 infantry on 3, 4 wild.
    """
    cards = [
        Card(0, Design.INFANTRY),
        Card(1, Design.CAVALRY),
        Card(2, Design.ARTILLERY),
        Card(3, Design.INFANTRY),
        Card.wild(),
    ]
    return Deck(cards, n_players, rng if rng is not None else ScriptedRng())


def give(deck, player, *card_ids):
    """Moves specific cards from the draw pile into a player's hand."""
    for card_id in card_ids:
        deck.available.remove(card_id)
        deck.hands[player].add(card_id)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def line_map():
    return make_line_map()


@pytest.fixture
def seeded_rng():
    return np.random.default_rng(1234)


@pytest.fixture
def split_board():
    """Player 0 holds the west half, player 1 the east half."""
    return make_line_board([(0, 3), (0, 5), (1, 2), (1, 1)])


@pytest.fixture
def make_game():
    """Builds a two-player Risk game from scripted players and rolls."""
    def build(board, players, deck=None, rolls=(), picks=(), **kwargs):
        rng = ScriptedRng(rolls, picks)
        deck = deck if deck is not None else make_small_deck(len(players), rng)
        return Risk(players, board, deck, rng=rng, **kwargs)
    return build
