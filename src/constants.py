"""
Constants for running a game of Risk.

Author: Kieran Ahn
Date: 12/4/2023
"""

import numpy as np

seeded = False
seed = 1234

rng = np.random.default_rng(
    seed=seed) if seeded else np.random.default_rng()

# a game that goes past this many full rounds is called off
MAX_ROUNDS = 10

NUM_CLASSIC_TERRITORIES = 42

# the most dice either side may roll in a battle
ATTACK_CAP = 3
DEFEND_CAP = 2

# nobody ever gets fewer than this many armies from their territories
MIN_REINFORCEMENTS = 3

CARDS_FOR_TRADE = 3

# holding this many cards makes trading in a set mandatory
MANDATORY_TRADE_HAND = 5

# extra armies for trading in a card showing one of your own Territories
TERRITORY_CARD_BONUS = 2

WILDCARDS_PER_DECK = 2

# fewest players a game can be set up for
MIN_PLAYERS = 2
