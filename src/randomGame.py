"""
A demonstration of the Risk game working using RandomPlayers

Author: Kieran Ahn
Date: 11/27/2023
"""

from riskLogic import Risk, Deck
from boards import ClassicBoard
from players import RandomPlayer
from constants import rng

if __name__ == '__main__':
    players = list()
    players.append(RandomPlayer('Amogus', rng))
    players.append(RandomPlayer('Morbius', rng))
    players.append(RandomPlayer('sus'))
    players.append(RandomPlayer('bingus'))

    board = ClassicBoard(len(players), rng)
    deck = Deck.standard_deck(len(players), rng)
    game = Risk(players, board, deck, rng=rng)

    try:
        winner = game.play(quiet=False)
        print(f'\n{players[winner].name} won the game.')
    except TimeoutError:
        print(f'\nleader was: {players[game.get_leader()].name}')

    for player_id, player in enumerate(players):
        print(f'\nterritories of {player.name}:')
        print({territory: board.armies(territory)
               for territory in board.owned_territories(player_id)})
