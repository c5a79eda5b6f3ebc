from riskLogic import Board
from riskGame import GameMap, Continent
from validators import *
from classicGame import classic_map, classic_continents
from collections.abc import Iterable
import constants
import numpy as np


def distribute_territories(n_territories: int, n_players: int, rng: np.random.Generator = None) -> list[tuple[int, int]]:
    """
    Deals Territories out as evenly as possible. Each pass through the
    players hands one Territory to every player, in random order, so no
    player ends up with more than one Territory over anybody else.

    :params:\n
    n_territories   --  the number of Territories to deal\n
    n_players       --  the number of players\n
    rng             --  the random source

    :returns:\n
    territories     --  an (owner, 1 army) pair for every territory id
    """
    validate(None, is_count(n_players, constants.MIN_PLAYERS),
             f'Cannot deal territories to {n_players!r} players', ValueError)
    rng = rng if rng is not None else constants.rng

    territories = list()
    player_pool = list()
    for _ in range(n_territories):
        if len(player_pool) == 0:
            player_pool = list(range(n_players))
        owner = player_pool.pop(int(rng.integers(len(player_pool))))
        territories.append((owner, 1))

    return territories


def random_board(game_map: GameMap, continents: Iterable[Continent], n_players: int, rng: np.random.Generator = None) -> Board:
    """
    A Board on the given map with the Territories dealt out randomly and one
    army on each
    """
    return Board(game_map, continents, n_players,
                 distribute_territories(len(game_map), n_players, rng))


class ClassicBoard(Board):
    """
    A classic Risk board, with 42 territories organized into 6 continents,
    dealt out randomly among the players
    """

    def __init__(self, n_players: int, rng: np.random.Generator = None):
        """
        The classic board configuration is set, and the only thing that needs
        to be supplied is the number of players.

        :params:\n
        n_players   --  the number of players\n
        rng         --  the random source for dealing out Territories
        """
        game_map = classic_map()
        super().__init__(game_map, classic_continents, n_players,
                         distribute_territories(len(game_map), n_players, rng))
