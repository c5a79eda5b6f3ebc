"""
Game of 1 Player vs three RandomPlayers

Author: Jason Douglas
Date: 12/12/2023
"""

from riskLogic import Risk, Deck
from boards import ClassicBoard
from players import RandomPlayer, HumanPlayer
from classicGame import TERRITORY_NAMES

if __name__ == '__main__':
    players = list()
    players.append(HumanPlayer('Kieran'))
    players.append(RandomPlayer('amogus'))
    players.append(RandomPlayer('sus'))
    players.append(RandomPlayer('morbius'))

    print('Territories:')
    for territory, name in enumerate(TERRITORY_NAMES):
        print(f'  {territory}: {name}')

    board = ClassicBoard(len(players))
    game = Risk(players, board, Deck.standard_deck(len(players)))

    try:
        winner = game.play(quiet=False)
    except TimeoutError:
        print(f'\nleader was: {players[game.get_leader()].name}')
        print('\nYour territories:')
        print({territory: board.armies(territory)
               for territory in board.owned_territories(0)})
