"""
A python module containing all the logic necessary to play a game of Risk.

Author: Kieran Ahn
Date: 11/23/2023
"""
from riskGame import *
from constants import *
import constants
from collections import deque
from collections.abc import Iterable, Mapping
from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from itertools import combinations
import numpy as np


class FortifyRule(Enum):
    """
    Which pairs of Territories a player may fortify between.
    """
    ANYWHERE = "anywhere"
    ADJACENT = "adjacent"
    CONNECTED = "connected"


class Rules:
    """
    The rules for running a game of Risk
    """

    # odds from https://www.kent.ac.uk/smsas/personal/odl/riskfaq.htm#3.2
    # (attacking dice, defending dice) -> chance the attacker loses the only army at stake
    ONE_ARMY_AT_STAKE = {
        (1, 1): 0.5833,
        (2, 1): 0.4213,
        (3, 1): 0.3403,
        (1, 2): 0.7454,
    }

    # (attacking dice, defending dice) -> (chance the attacker loses 2, chance the defender loses 2)
    # whatever is left over is both sides losing 1
    TWO_ARMIES_AT_STAKE = {
        (2, 2): (0.4483, 0.2276),
        (3, 2): (0.2926, 0.3717),
    }

    @staticmethod
    def attacking_allowed(armies: int) -> int:
        """
        The number of dice an attack with the given armies rolls
        """
        return min(ATTACK_CAP, armies)

    @staticmethod
    def defending_allowed(armies: int) -> int:
        """
        The number of dice a Territory with the given armies defends with
        """
        return min(DEFEND_CAP, armies)

    @staticmethod
    def resolve_battle(attacking: int, defending: int, roll: float) -> tuple[int, int]:
        """
        Determines how many armies each side loses in one battle. No dice are
        rolled; a single uniform draw is looked up against the odds of the
        dice instead.

        :params:\n
        attacking       --  the (capped) number of attacking armies\n
        defending       --  the (capped) number of defending armies\n
        roll            --  a uniform draw from [0, 1)

        :returns:\n
        attacker_losses --  the number of armies the attacker lost\n
        defender_losses --  the number of armies the defender lost
        """
        validate(None, 0.0 <= roll < 1.0,
                 f'Battle roll {roll} is outside [0, 1)', InvariantViolation)

        if (attacking, defending) in Rules.ONE_ARMY_AT_STAKE:
            if roll <= Rules.ONE_ARMY_AT_STAKE[(attacking, defending)]:
                return 1, 0
            return 0, 1

        if (attacking, defending) in Rules.TWO_ARMIES_AT_STAKE:
            attacker_loses_two, defender_loses_two = Rules.TWO_ARMIES_AT_STAKE[(
                attacking, defending)]
            if roll <= attacker_loses_two:
                return 2, 0
            if roll <= attacker_loses_two + defender_loses_two:
                return 0, 2
            return 1, 1

        raise InvariantViolation(
            f'No odds for {attacking} attacking armies against {defending} defending armies')

    @staticmethod
    def get_armies_from_territories_occupied(occupied_territories: int) -> int:
        """
        The amount of armies awarded from occupying territories

        :params:\n
        occupied_territories    --  the number of territories a player occupies

        :returns:\n
        armies                  --  the amount of armies awarded
        """
        return max(occupied_territories // 3, MIN_REINFORCEMENTS)

    @staticmethod
    def get_matching_cards(hand: list[DealtCard]) -> list[Trade]:
        """
        Finds all the valid sets in a hand of cards

        :params:\n
        hand    --  the DealtCards in a player's hand

        :returns:\n
        matches --  every Trade that can be made from the hand
        """
        return [trade for trade in (Trade(cards) for cards in combinations(hand, 3)) if trade.is_set()]


class Board:
    """
    The state of the game board: who owns each Territory, how many armies sit
    on it, and how many cards each player holds.
    """

    def __init__(self, game_map: GameMap, continents: Iterable[Continent], n_players: int, territories: list[tuple[int, int]]):
        """
        :params:\n
        game_map    --  the GameMap the game is played on\n
        continents  --  the Continents on the map\n
        n_players   --  the number of players in the game\n
        territories --  an (owner, armies) pair for every territory id
        """
        self.game_map = validate_is_type(game_map, GameMap)
        self.n_players = validate(n_players, is_count(n_players, MIN_PLAYERS),
                                  f'A board needs at least two players, not {n_players!r}', ValueError)
        self.continents = tuple(validate_is_type(continent, Continent)
                                for continent in continents)
        for continent in self.continents:
            validate(None, all(is_index(territory, len(game_map)) for territory in continent.territories),
                     f'{continent.name} contains territories that are not on the map', ValueError)

        validate(None, len(territories) == len(game_map),
                 f'Expected {len(game_map)} territories, but got {len(territories)}', ValueError)
        for territory, (owner, armies) in enumerate(territories):
            validate(None, is_index(owner, n_players),
                     f'Territory {territory} is owned by unknown player {owner!r}', ValueError)
            validate(None, is_count(armies, 1),
                     f'Territory {territory} must start with at least 1 army, not {armies!r}', ValueError)

        self._owners = [int(owner) for owner, _ in territories]
        self._armies = [int(armies) for _, armies in territories]
        self._num_cards = [0] * n_players

    def __len__(self) -> int:
        return len(self._owners)

    def territories(self) -> range:
        return range(len(self._owners))

    def owner(self, territory: int) -> int:
        return self._owners[validate_territory(territory, len(self))]

    def armies(self, territory: int) -> int:
        return self._armies[validate_territory(territory, len(self))]

    def owned_territories(self, player: int) -> list[int]:
        """
        The ids of every Territory a player owns, in ascending order
        """
        validate_player(player, self.n_players)
        return [territory for territory, owner in enumerate(self._owners) if owner == player]

    def num_owned_territories(self, player: int) -> int:
        validate_player(player, self.n_players)
        return self._owners.count(player)

    def is_enemy_territory(self, player: int, territory: int) -> bool:
        return self.owner(territory) != player

    def set_territory(self, territory: int, owner: int, armies: int):
        """
        Overwrites the owner and armies of a Territory. Nothing beyond the ids
        and the sign of armies is checked; callers are trusted to keep the
        board consistent.

        :params:\n
        territory   --  a territory id\n
        owner       --  the player who will own the Territory\n
        armies      --  the new number of armies on the Territory
        """
        validate_territory(territory, len(self))
        validate_player(owner, self.n_players)
        validate(None, is_count(armies),
                 f'Territory {territory} cannot hold {armies!r} armies', InvariantViolation)
        self._owners[territory] = int(owner)
        self._armies[territory] = int(armies)

    def add_armies(self, territory: int, armies: int):
        """
        Adds a number of armies to a Territory

        :params:\n
        territory   --  a territory id\n
        armies      --  the number of armies to add to the Territory
        """
        self.set_territory(territory, self.owner(territory),
                           self.armies(territory) + armies)

    def remove_armies(self, territory: int, armies: int):
        """
        Removes a number of armies from a Territory

        :params:\n
        territory   --  a territory id\n
        armies      --  the number of armies to remove from the Territory
        """
        current_armies = self.armies(territory)
        validate(None, armies <= current_armies,
                 f'Cannot remove {armies} armies from territory {territory}, which only has {current_armies}', InvariantViolation)
        self.set_territory(territory, self.owner(territory),
                           current_armies - armies)

    def player_owns_continent(self, player: int, continent: Continent) -> bool:
        return all(self.owner(territory) == player for territory in continent.territories)

    def continent_bonuses(self, player: int) -> int:
        """
        The armies a player is awarded for the Continents they control
        """
        return sum(continent.armies_awarded for continent in self.continents
                   if self.player_owns_continent(player, continent))

    def territory_reinforcements(self, player: int) -> int:
        """
        The total number of reinforcements a player receives from the
        Territories and Continents they hold

        :params:\n
        player      --  a player id

        :returns:\n
        armies      --  the number of armies to place at the start of the turn
        """
        return Rules.get_armies_from_territories_occupied(self.num_owned_territories(player)) + \
            self.continent_bonuses(player)

    def num_cards(self, player: int) -> int:
        return self._num_cards[validate_player(player, self.n_players)]

    def set_num_cards(self, player: int, num_cards: int):
        validate_player(player, self.n_players)
        validate(None, is_count(num_cards),
                 f'Player {player} cannot hold {num_cards!r} cards', InvariantViolation)
        self._num_cards[player] = int(num_cards)

    def game_is_over(self) -> bool:
        """
        Whether a single player has conquered every Territory
        """
        return len(set(self._owners)) == 1

    def player_is_defeated(self, player: int) -> bool:
        return self.num_owned_territories(player) == 0

    def view(self) -> 'BoardView':
        return BoardView(self)


class BoardView:
    """
    A read-only look at a Board, for handing to Players.
    """
    _QUERIES = frozenset({
        'game_map', 'continents', 'n_players', 'territories', 'owner', 'armies',
        'owned_territories', 'num_owned_territories', 'is_enemy_territory',
        'player_owns_continent', 'continent_bonuses', 'territory_reinforcements',
        'num_cards', 'game_is_over', 'player_is_defeated',
    })

    def __init__(self, board: Board):
        self._board = board

    def __len__(self) -> int:
        return len(self._board)

    def __getattr__(self, name: str):
        if name in BoardView._QUERIES:
            return getattr(self._board, name)
        raise AttributeError(f'BoardView has no attribute {name!r}')


class Deck:
    """
    Every card in the game and where it currently is: available to draw,
    discarded, or in some player's hand. A card is always in exactly one of
    those places.
    """

    def __init__(self, cards: list[Card], n_players: int, rng: np.random.Generator = None):
        """
        :params:\n
        cards       --  the full catalog of Cards; a card's id is its index\n
        n_players   --  the number of players in the game\n
        rng         --  the random source used for drawing
        """
        validate(None, is_count(n_players, MIN_PLAYERS),
                 f'A deck needs at least two players, not {n_players!r}', ValueError)
        self.catalog = tuple(validate_is_type(card, Card) for card in cards)
        self.n_players = n_players
        self.available = set(range(len(self.catalog)))
        self.discarded = set()
        self.hands = {player: set() for player in range(n_players)}
        self.rng = rng if rng is not None else constants.rng

    @classmethod
    def standard_deck(cls, n_players: int, rng: np.random.Generator = None, n_territories: int = NUM_CLASSIC_TERRITORIES) -> 'Deck':
        """
        Creates a deck with one card per Territory, plus two wildcards. Designs
        cycle infantry, cavalry, artillery from a random starting point.

        :params:\n
        n_players       --  the number of players in the game\n
        rng             --  the random source\n
        n_territories   --  the number of Territories on the map

        :returns:\n
        deck            --  a Deck with every card available
        """
        rng = rng if rng is not None else constants.rng
        offset = int(rng.integers(0, len(Design)))
        cards = [Card(territory, Design((territory + offset) % len(Design)))
                 for territory in range(n_territories)]
        cards += [Card.wild() for _ in range(WILDCARDS_PER_DECK)]
        return cls(cards, n_players, rng)

    def _validate_card(self, card_id: int) -> int:
        return validate(card_id, is_index(card_id, len(self.catalog)),
                        f'There is no card with id {card_id!r}', InvariantViolation)

    def recycle(self):
        """
        Shuffles the discard pile back into the cards available to draw
        """
        self.available |= self.discarded
        self.discarded = set()

    def draw_random_for(self, player: int) -> DealtCard | None:
        """
        Deals a uniformly random available card to a player, recycling the
        discard pile first if nothing is available

        :params:\n
        player  --  a player id

        :returns:\n
        card    --  the card drawn, or None if every card is in someone's hand
        """
        validate_player(player, self.n_players)
        if not self.available:
            self.recycle()
        if not self.available:
            return None

        pool = sorted(self.available)
        card_id = pool[int(self.rng.integers(len(pool)))]
        self.available.remove(card_id)
        self.hands[player].add(card_id)
        return DealtCard(card_id, self.catalog[card_id])

    def discard(self, player: int, card_id: int):
        """
        Moves a card from a player's hand to the discard pile

        :params:\n
        player  --  a player id\n
        card_id --  the id of a card the player holds
        """
        validate_player(player, self.n_players)
        self._validate_card(card_id)
        validate(None, card_id in self.hands[player],
                 f'Player {player} does not hold card {card_id}', InvariantViolation)
        self.hands[player].remove(card_id)
        self.discarded.add(card_id)

    def transfer_hand(self, from_player: int, to_player: int):
        """
        Hands every card of a defeated player to the player who defeated them
        """
        validate_player(from_player, self.n_players)
        validate_player(to_player, self.n_players)
        if from_player == to_player:
            return
        self.hands[to_player] |= self.hands[from_player]
        self.hands[from_player] = set()

    def hand(self, player: int) -> list[DealtCard]:
        validate_player(player, self.n_players)
        return [DealtCard(card_id, self.catalog[card_id]) for card_id in sorted(self.hands[player])]

    def num_cards(self, player: int) -> int:
        return len(self.hands[validate_player(player, self.n_players)])

    def player_has_exactly_these_three(self, player: int, cards) -> bool:
        """
        Checks a player's claim to hold three particular cards. Every id has to
        be distinct and in the player's hand, and the card the player thinks it
        is has to be the card it actually is.

        :params:\n
        player  --  a player id\n
        cards   --  the DealtCards the player claims to hold

        :returns:\n
        valid   --  True if the claim checks out
        """
        validate_player(player, self.n_players)
        if not isinstance(cards, (tuple, list)) or len(cards) != CARDS_FOR_TRADE:
            return False
        if not all(isinstance(dealt, DealtCard) for dealt in cards):
            return False

        card_ids = [dealt.card_id for dealt in cards]
        if not all(is_index(card_id, len(self.catalog)) for card_id in card_ids):
            return False
        if len(set(card_ids)) != CARDS_FOR_TRADE:
            return False

        return all(dealt.card_id in self.hands[player] and self.catalog[dealt.card_id] == dealt.card
                   for dealt in cards)

    def total_cards(self) -> int:
        """
        The number of cards accounted for anywhere. Always the catalog size.
        """
        return len(self.available) + len(self.discarded) + sum(len(hand) for hand in self.hands.values())


@dataclass
class Player:
    """
    An agent who will play Risk. Interface to be implemented.

    A Player keeps no game state of its own; the engine tells it everything
    it needs at each decision and checks everything it answers.

    :fields:\n
    name        --  the Player's name
    """
    name: str

    def propose_trade(self, hand: list[DealtCard], reinforcements: int, mandatory: bool) -> Trade | None:
        """
        Ask the Player which set of Cards they would like to turn in at the
        beginning of their turn, if any

        :params:\n
        hand            --  the Player's hand\n
        reinforcements  --  the armies the Player gets from Territories alone\n
        mandatory       --  whether the Player must turn in a set

        :returns:\n
        trade           --  the set to turn in, or None. Cannot be None if the
        trade is mandatory.
        """
        raise NotImplementedError(
            "Cannot call propose_trade from base Player class")

    def distribute_reinforcements(self, armies: int, owned_territories: list[int]) -> dict[int, int]:
        """
        Ask the Player how to split their reinforcements among their
        Territories

        :params:\n
        armies              --  the total number of armies to place\n
        owned_territories   --  the Territories the Player owns

        :returns:\n
        placements          --  armies to add per territory id, summing
        exactly to armies
        """
        raise NotImplementedError(
            "Cannot call distribute_reinforcements on base Player class")

    def propose_attack(self, attack_info: dict[int, AttackTerritoryInfo]) -> Attack | None:
        """
        Ask the Player which Territory they would like to attack next

        :params:\n
        attack_info --  the Player's Territories, with their armies and the
        enemy Territories next to them

        :returns:\n
        attack      --  the attack to make, or None to stop attacking
        """
        raise NotImplementedError(
            "Cannot call propose_attack on base Player class")

    def propose_fortify(self, player: int, board: BoardView) -> Move | None:
        """
        Asks the Player which Territory they would like to fortify at the end
        of their turn

        :params:\n
        player      --  the Player's id\n
        board       --  a read-only view of the Board

        :returns:\n
        move        --  the armies to move, or None if the Player does not
        want to fortify
        """
        raise NotImplementedError(
            "Cannot call propose_fortify on base Player class")


class Risk:
    """
    A game of Risk, which handles turn order, soliciting actions from Players,
    and applying those actions to the Board.
    """

    def __init__(self, players: list[Player], board: Board, deck: Deck, rules: Rules = None,
                 rng: np.random.Generator = None, max_rounds: int = MAX_ROUNDS,
                 fortify_rule: FortifyRule = FortifyRule.ANYWHERE):
        """
        A Risk game needs players, a board to play on, and a deck of cards.
        A player's id is their index in players.

        :params:\n
        players         --  a list of Players\n
        board           --  a Board\n
        deck            --  a Deck\n
        rules           --  a Rules\n
        rng             --  the random source for battles\n
        max_rounds      --  the number of rounds after which the game is
        called off\n
        fortify_rule    --  which Territories may fortify each other
        """
        self.players = [validate_is_type(player, Player)
                        for player in players]
        self.board = validate_is_type(board, Board)
        self.deck = validate_is_type(deck, Deck)
        validate(None, len(self.players) >= MIN_PLAYERS,
                 'Risk needs at least two players', ValueError)
        validate(None, board.n_players == len(self.players) and deck.n_players == len(self.players),
                 f'Board and deck must be set up for {len(self.players)} players', ValueError)
        validate(None, all(card.territory is None or is_index(card.territory, len(board)) for card in deck.catalog),
                 f'Deck has cards for territories that are not on a board of {len(board)} territories', ValueError)
        self.rules = rules if rules is not None else Rules()
        self.rng = rng if rng is not None else constants.rng
        self.max_rounds = max_rounds
        self.fortify_rule = validate_is_type(fortify_rule, FortifyRule)
        self.rounds = 0

        for player_id in range(len(self.players)):
            self.sync_cards(player_id)

    def sync_cards(self, player_id: int):
        """
        Copies a player's hand size from the Deck onto the Board
        """
        self.board.set_num_cards(player_id, self.deck.num_cards(player_id))

    def play(self, quiet=True) -> int:
        """
        Plays rounds until one player owns every Territory

        :params:\n
        quiet       --  whether game updates to console are muted

        :returns:\n
        winner      --  the id of the winning player
        """
        while True:
            if self.board.game_is_over():
                winner = self.board.owner(0)
                if not quiet:
                    print(f'{self.players[winner].name} has won the game!')
                return winner

            if self.rounds >= self.max_rounds:
                raise TimeoutError('Game went on too long!')

            for player_id in range(len(self.players)):
                if self.board.player_is_defeated(player_id):
                    continue
                self.take_turn(player_id, quiet)
                if self.board.game_is_over():
                    break

            self.rounds += 1

    def take_turn(self, player_id: int, quiet=True):
        """
        Runs one player's turn: trading, reinforcing, attacking and fortifying
        """
        if not quiet:
            print(f"{self.players[player_id].name}'s turn!")

        card_armies = self.tradein(player_id, quiet)
        self.placement(player_id, card_armies, quiet)
        self.attack_phase(player_id, quiet)

        if self.board.game_is_over():
            return

        self.fortify_phase(player_id, quiet)

    def tradein(self, player_id: int, quiet=True) -> int:
        """
        Handles the logic for players trading in cards

        :params:\n
        player_id   --  the player trading in the cards\n
        quiet       --  whether game updates to console are muted

        :returns:
        card_armies --  the number of armies awarded for turning in cards
        """
        player = self.players[player_id]
        card_armies = 0

        if self.deck.num_cards(player_id) < CARDS_FOR_TRADE:
            return card_armies

        reinforcements = self.board.territory_reinforcements(player_id)

        while self.deck.num_cards(player_id) >= CARDS_FOR_TRADE:
            mandatory = self.deck.num_cards(player_id) >= MANDATORY_TRADE_HAND
            trade = player.propose_trade(
                self.deck.hand(player_id), reinforcements, mandatory)

            if not self.verify_trade(player_id, trade, mandatory):
                if not quiet:
                    print(f'{player.name} chose an invalid trade. Choose again.')
                continue

            if trade is None:
                break

            card_armies += self.perform_trade(player_id, trade, quiet)

        return card_armies

    def verify_trade(self, player_id: int, trade: Trade | None, mandatory: bool) -> bool:
        if trade is None:
            return not mandatory
        if not isinstance(trade, Trade):
            return False
        return self.deck.player_has_exactly_these_three(player_id, trade.cards) and trade.is_set()

    def perform_trade(self, player_id: int, trade: Trade, quiet=True) -> int:
        """
        Turns in a verified set. Cards showing the player's own Territories
        put extra armies straight onto those Territories.

        :returns:\n
        armies      --  the armies the set is worth
        """
        player = self.players[player_id]
        for dealt in trade.cards:
            self.deck.discard(player_id, dealt.card_id)
        self.sync_cards(player_id)

        for dealt in trade.cards:
            territory = dealt.card.territory
            if territory is not None and self.board.owner(territory) == player_id:
                self.board.add_armies(territory, TERRITORY_CARD_BONUS)
                if not quiet:
                    print(
                        f'{player.name} gets {TERRITORY_CARD_BONUS} extra armies on territory {territory}.')

        card_armies = trade.value()
        if not quiet:
            print(f'{player.name} traded in three cards for {card_armies} armies.')
        return card_armies

    def placement(self, player_id: int, card_armies: int, quiet=True):
        """
        Handles players placing their reinforcements on their territories

        :params:\n
        player_id   --  the player placing the armies\n
        card_armies --  armies earned from trading in cards this turn
        """
        player = self.players[player_id]
        armies_awarded = self.board.territory_reinforcements(
            player_id) + card_armies
        owned = self.board.owned_territories(player_id)

        if not quiet:
            print(f'{player.name} is distributing {armies_awarded} reinforcements.')

        while True:
            placements = player.distribute_reinforcements(
                armies_awarded, list(owned))
            if self.verify_reinforcement(player_id, armies_awarded, placements):
                break
            if not quiet:
                print(f'{player.name} chose an invalid reinforcement. Choose again.')

        for territory, armies in placements.items():
            if armies > 0:
                self.board.add_armies(territory, armies)
                if not quiet:
                    print(
                        f'  territory {territory} gained {armies} armies (now {self.board.armies(territory)} in total)')

    def verify_reinforcement(self, player_id: int, armies_awarded: int, placements) -> bool:
        if not isinstance(placements, Mapping):
            return False

        total = 0
        for territory, armies in placements.items():
            if not is_index(territory, len(self.board)) or self.board.is_enemy_territory(player_id, territory):
                return False
            if not is_count(armies):
                return False
            total += armies
        return total == armies_awarded

    def attack_territory_info(self, player_id: int) -> dict[int, AttackTerritoryInfo]:
        """
        Builds the attack phase's picture of a player's Territories: their
        armies and which enemy Territories border them
        """
        return {territory: AttackTerritoryInfo(territory, self.board.armies(territory),
                                               {neighbor for neighbor in self.board.game_map.neighbors(territory)
                                                if self.board.is_enemy_territory(player_id, neighbor)})
                for territory in self.board.owned_territories(player_id)}

    def attack_phase(self, player_id: int, quiet=True) -> bool:
        """
        Asks a player for attacks until they stop, and awards a card if they
        captured anything

        :returns:\n
        captured    --  whether at least one Territory was captured
        """
        player = self.players[player_id]
        attack_info = self.attack_territory_info(player_id)
        captured_any = False

        while not self.board.game_is_over():
            attack = player.propose_attack(deepcopy(attack_info))
            if attack is None:
                break

            if not self.verify_attack(player_id, attack):
                if not quiet:
                    print(f'{player.name} chose an invalid attack. Choose again.')
                continue

            captured = self.perform_battle(player_id, attack, quiet)

            if captured:
                captured_any = True
                for info in attack_info.values():
                    info.adjacent_enemies.discard(attack.target)

            origin_armies = self.board.armies(attack.origin)
            if origin_armies == 1:
                attack_info.pop(attack.origin, None)
            elif attack.origin in attack_info:
                attack_info[attack.origin].armies = origin_armies

        if captured_any:
            self.draw_card(player_id, quiet)

        return captured_any

    def verify_attack(self, player_id: int, attack: Attack) -> bool:
        if not isinstance(attack, Attack):
            return False
        if not (is_index(attack.origin, len(self.board)) and is_index(attack.target, len(self.board))):
            return False
        if not (is_count(attack.amount, 1) and attack.amount <= ATTACK_CAP):
            return False
        return self.board.owner(attack.origin) == player_id \
            and self.board.armies(attack.origin) - 1 >= attack.amount \
            and self.board.game_map.are_adjacent(attack.origin, attack.target) \
            and self.board.is_enemy_territory(player_id, attack.target)

    def perform_battle(self, player_id: int, attack: Attack, quiet=True) -> bool:
        """
        Fights one verified battle and, if the target is wiped out, moves the
        surviving attackers in

        :returns:\n
        captured    --  whether the target was captured
        """
        defender_id = self.board.owner(attack.target)
        attacking = self.rules.attacking_allowed(attack.amount)
        defending = self.rules.defending_allowed(
            self.board.armies(attack.target))
        roll = float(self.rng.random())

        attacker_losses, defender_losses = self.rules.resolve_battle(
            attacking, defending, roll)

        if not quiet:
            print(f'{self.players[player_id].name} attacks territory {attack.target} from {attack.origin} with {attacking} armies. '
                  f'{self.players[defender_id].name} defends with {defending} armies.')

        if attacker_losses > 0:
            self.board.remove_armies(attack.origin, attacker_losses)
        if defender_losses > 0:
            self.board.remove_armies(attack.target, defender_losses)

        if not quiet:
            print(f'attacker losses: {attacker_losses}; defender losses: {defender_losses}')

        if self.board.armies(attack.target) > 0:
            return False

        survivors = attacking - attacker_losses
        self.board.remove_armies(attack.origin, survivors)
        self.board.set_territory(attack.target, player_id, survivors)

        if not quiet:
            print(f'{self.players[player_id].name} has captured territory {attack.target}, moving {survivors} armies over from {attack.origin}.')

        if self.board.player_is_defeated(defender_id):
            self.eliminate(defender_id, player_id, quiet)

        return True

    def eliminate(self, defeated_id: int, conqueror_id: int, quiet=True):
        """
        Hands a defeated player's cards to the player who defeated them
        """
        self.deck.transfer_hand(defeated_id, conqueror_id)
        self.sync_cards(defeated_id)
        self.sync_cards(conqueror_id)
        if not quiet:
            print(f'{self.players[conqueror_id].name} has eliminated {self.players[defeated_id].name}!')

    def draw_card(self, player_id: int, quiet=True) -> DealtCard | None:
        dealt = self.deck.draw_random_for(player_id)
        self.sync_cards(player_id)
        if not quiet:
            if dealt is None:
                print(f'No cards left for {self.players[player_id].name} to draw.')
            else:
                print(f'{self.players[player_id].name} received card {dealt.card}')
        return dealt

    def fortify_phase(self, player_id: int, quiet=True):
        """
        Lets a player make at most one move between their own Territories
        """
        player = self.players[player_id]

        while True:
            move = player.propose_fortify(player_id, self.board.view())
            if move is None:
                if not quiet:
                    print(f'{player.name} chose not to fortify.')
                return
            if self.verify_fortify(player_id, move):
                break
            if not quiet:
                print(f'{player.name} chose an invalid fortification. Choose again.')

        self.board.remove_armies(move.origin, move.amount)
        self.board.add_armies(move.destination, move.amount)

        if not quiet:
            print(f'{player.name} has fortified territory {move.destination} with {move.amount} armies from {move.origin}.')

    def verify_fortify(self, player_id: int, move: Move) -> bool:
        if not isinstance(move, Move):
            return False
        if not (is_index(move.origin, len(self.board)) and is_index(move.destination, len(self.board))):
            return False
        if move.origin == move.destination:
            return False
        if self.board.owner(move.origin) != player_id or self.board.owner(move.destination) != player_id:
            return False
        if not (is_count(move.amount, 1) and move.amount < self.board.armies(move.origin)):
            return False

        match self.fortify_rule:
            case FortifyRule.ADJACENT:
                return self.board.game_map.are_adjacent(move.origin, move.destination)
            case FortifyRule.CONNECTED:
                return self.are_connected(player_id, move.origin, move.destination)
        return True

    def are_connected(self, player_id: int, start: int, end: int) -> bool:
        """
        Whether a path runs from start to end through nothing but the
        player's own Territories
        """
        seen = {start}
        frontier = deque([start])
        while frontier:
            territory = frontier.popleft()
            if territory == end:
                return True
            for neighbor in self.board.game_map.neighbors(territory):
                if neighbor not in seen and self.board.owner(neighbor) == player_id:
                    seen.add(neighbor)
                    frontier.append(neighbor)
        return False

    def get_leader(self) -> int:
        """
        Gets the current strongest player

        :returns:\n
        leader      --  the id of the Player with the most Territories plus
        Continent bonuses
        """
        current_leader = None
        leader_points = -1
        for player_id in range(len(self.players)):
            player_points = self.board.num_owned_territories(
                player_id) + self.board.continent_bonuses(player_id)
            if player_points > leader_points:
                current_leader = player_id
                leader_points = player_points

        return current_leader
