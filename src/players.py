"""
Different types of Players that can play in Risk.

Author: Kieran Ahn
Date: 11/27/2023
"""
from riskGame import Trade, Attack, Move, DealtCard, AttackTerritoryInfo
from riskLogic import BoardView, Player, Rules
from collections.abc import Callable
from dataclasses import dataclass
import constants
import numpy as np


@dataclass
class RandomPlayer(Player):
    """
    A very simple Player that just makes random choices in all situations.

    :fields:\n
    rng             --  the random source for every choice\n
    param_nnt       --  how often the Player passes on a trade that is not
    necessary ('nnt' stands for non necessary trade-in)\n
    param_attack    --  how often the Player passes on an attack it could make
    """
    rng: np.random.Generator = None
    param_nnt: float = None
    param_attack: float = None

    def __post_init__(self):
        if self.rng is None:
            self.rng = constants.rng
        if self.param_nnt is None:
            self.param_nnt = float(self.rng.random())
        if self.param_attack is None:
            self.param_attack = float(self.rng.random())

    def propose_trade(self, hand: list[DealtCard], reinforcements: int, mandatory: bool) -> Trade | None:
        if not mandatory and self.rng.random() < self.param_nnt:
            return None

        shuffled = [hand[int(index)]
                    for index in self.rng.permutation(len(hand))]
        matches = Rules.get_matching_cards(shuffled)
        if len(matches) == 0:
            return None
        return matches[0]

    def distribute_reinforcements(self, armies: int, owned_territories: list[int]) -> dict[int, int]:
        placements = dict()
        for _ in range(armies):
            territory = int(owned_territories[int(
                self.rng.integers(len(owned_territories)))])
            placements[territory] = placements.get(territory, 0) + 1
        return placements

    def propose_attack(self, attack_info: dict[int, AttackTerritoryInfo]) -> Attack | None:
        for info in attack_info.values():
            if info.armies > 1 and len(info.adjacent_enemies) > 0:
                if self.rng.random() >= self.param_attack:
                    enemies = sorted(info.adjacent_enemies)
                    target = enemies[int(self.rng.integers(len(enemies)))]
                    # always attacks with as many armies as it is allowed
                    return Attack(info.territory, target, Rules.attacking_allowed(info.armies - 1))
        return None

    def propose_fortify(self, player: int, board: BoardView) -> Move | None:
        owned = set(board.owned_territories(player))
        possible_origins = [(territory, sorted(neighbor for neighbor in board.game_map.neighbors(territory) if neighbor in owned))
                            for territory in sorted(owned) if board.armies(territory) > 1]
        possible_origins = [(territory, destinations) for territory, destinations in possible_origins
                            if len(destinations) != 0]

        if len(possible_origins) == 0:
            return None

        origin, destinations = possible_origins[int(
            self.rng.integers(len(possible_origins)))]
        destination = destinations[int(self.rng.integers(len(destinations)))]
        armies = int(self.rng.integers(1, board.armies(origin)))

        return Move(origin, destination, armies)


@dataclass
class HumanPlayer(Player):
    """
    A Player who makes their choices at the console.

    :fields:\n
    ask     --  reads one line of input after showing a prompt\n
    say     --  shows a line of output
    """
    ask: Callable[[str], str] = input
    say: Callable[[str], None] = print

    def ask_int(self, message: str, accept: Callable[[int], bool] = None) -> int:
        """
        Prompts until the answer is a whole number that accept allows
        """
        while True:
            answer = self.ask(message).strip()
            try:
                value = int(answer)
            except ValueError:
                self.say(f'{answer!r} is not a whole number.')
                continue
            if accept is None or accept(value):
                return value
            self.say(f'{value} is not allowed here.')

    def ask_yes_no(self, message: str) -> bool:
        while True:
            answer = self.ask(message).strip().lower()
            if answer in ('y', 'n'):
                return answer == 'y'
            self.say(f'{answer!r} is not y or n.')

    def propose_trade(self, hand: list[DealtCard], reinforcements: int, mandatory: bool) -> Trade | None:
        self.say('Cards:')
        for index, dealt in enumerate(hand):
            self.say(f'  [{index}] {dealt.card}')
        self.say(f'Reinforcements from territories: {reinforcements}')
        self.say(f'Trade is mandatory: {mandatory}')

        if not self.ask_yes_no('Make trade? (y/n): '):
            return None

        indices = [self.ask_int('Enter index of card to trade: ', lambda index: 0 <= index < len(hand))
                   for _ in range(3)]
        return Trade(tuple(hand[index] for index in indices))

    def distribute_reinforcements(self, armies: int, owned_territories: list[int]) -> dict[int, int]:
        self.say(f'Reinforcements to distribute: {armies}')
        self.say(f'Owned territories: {owned_territories}')

        placements = dict()
        remaining = armies
        while remaining > 0:
            territory = self.ask_int(
                'Territory to reinforce: ', lambda territory: territory in owned_territories)
            placed = self.ask_int(
                f'Number of armies to place (up to {remaining}): ', lambda amount: 1 <= amount <= remaining)
            placements[territory] = placements.get(territory, 0) + placed
            remaining -= placed

        return placements

    def propose_attack(self, attack_info: dict[int, AttackTerritoryInfo]) -> Attack | None:
        self.say('Your territories:')
        for info in attack_info.values():
            self.say(
                f'  {info.territory}: {info.armies} armies, enemies next door: {sorted(info.adjacent_enemies)}')

        if not self.ask_yes_no('Attack? (y/n): '):
            return None

        origin = self.ask_int('Attack from territory: ')
        target = self.ask_int('Attack territory: ')
        armies = self.ask_int('Number of armies to attack with (1-3): ')
        return Attack(origin, target, armies)

    def propose_fortify(self, player: int, board: BoardView) -> Move | None:
        self.say('Your territories:')
        for territory in board.owned_territories(player):
            self.say(f'  {territory}: {board.armies(territory)} armies')

        if not self.ask_yes_no('Fortify? (y/n): '):
            return None

        origin = self.ask_int('Move armies from territory: ')
        destination = self.ask_int('Move armies to territory: ')
        armies = self.ask_int('Number of armies to move: ')
        return Move(origin, destination, armies)
