"""Tests for GameMap and the classic world map."""

import pytest

from riskGame import GameMap
from validators import InvariantViolation
from classicGame import (
    TERRITORY_NAMES, CLASSIC_BORDERS, territory_ids,
    classic_map, classic_continents,
)


class TestGameMap:

    def test_from_edges_is_symmetric(self, line_map):
        assert line_map.are_adjacent(0, 1)
        assert line_map.are_adjacent(1, 0)
        assert not line_map.are_adjacent(0, 2)

    def test_neighbors(self, line_map):
        assert line_map.neighbors(1) == frozenset({0, 2})
        assert line_map.neighbors(3) == frozenset({2})

    def test_len_and_territories(self, line_map):
        assert len(line_map) == 4
        assert list(line_map.territories()) == [0, 1, 2, 3]

    def test_unknown_origin_borders_nothing(self, line_map):
        assert line_map.are_adjacent(7, 0) is False
        assert line_map.are_adjacent(-1, 0) is False

    def test_neighbors_of_unknown_territory_is_fatal(self, line_map):
        with pytest.raises(InvariantViolation):
            line_map.neighbors(4)

    def test_isolated_territory_allowed_with_explicit_size(self):
        game_map = GameMap({0: [1], 1: [0]}, n_territories=3)
        assert game_map.neighbors(2) == frozenset()

    def test_asymmetric_adjacency_rejected(self):
        with pytest.raises(ValueError):
            GameMap({0: [1], 1: []})

    def test_self_loop_rejected(self):
        with pytest.raises(ValueError):
            GameMap({0: [0, 1], 1: [0]})

    def test_out_of_range_neighbor_rejected(self):
        with pytest.raises(ValueError):
            GameMap({0: [5], 1: []})

    def test_out_of_range_edge_rejected(self):
        with pytest.raises(ValueError):
            GameMap.from_edges(2, [(0, 2)])

    def test_empty_map_rejected(self):
        with pytest.raises(ValueError):
            GameMap({})


class TestClassicMap:

    def test_has_42_territories(self):
        assert len(classic_map()) == 42
        assert len(TERRITORY_NAMES) == 42
        assert len(set(TERRITORY_NAMES)) == 42

    def test_every_border_is_known(self):
        for a, b in CLASSIC_BORDERS:
            assert a in territory_ids
            assert b in territory_ids

    def test_cross_continent_borders(self):
        game_map = classic_map()
        assert game_map.are_adjacent(territory_ids['Alaska'], territory_ids['Kamchatka'])
        assert game_map.are_adjacent(territory_ids['Brazil'], territory_ids['North Africa'])
        assert game_map.are_adjacent(territory_ids['Siam'], territory_ids['Indonesia'])
        assert not game_map.are_adjacent(territory_ids['Peru'], territory_ids['Egypt'])

    def test_continents_partition_the_map(self):
        seen = set()
        for continent in classic_continents:
            assert seen.isdisjoint(continent.territories)
            seen |= continent.territories
        assert seen == set(range(42))

    def test_continent_bonuses(self):
        bonuses = {continent.name: continent.armies_awarded
                   for continent in classic_continents}
        assert bonuses == {
            'Africa': 3, 'Asia': 7, 'Australia': 2,
            'Europe': 5, 'North America': 5, 'South America': 2,
        }

    def test_map_is_connected(self):
        game_map = classic_map()
        seen = {0}
        frontier = [0]
        while frontier:
            for neighbor in game_map.neighbors(frontier.pop()):
                if neighbor not in seen:
                    seen.add(neighbor)
                    frontier.append(neighbor)
        assert len(seen) == 42
