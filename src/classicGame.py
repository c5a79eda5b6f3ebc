"""
The classic Risk world: 42 Territories in 6 Continents. Territory ids run
continent by continent, Africa first and South America last.
"""
from riskGame import GameMap, Continent

TERRITORY_NAMES = (
    # Africa: 0-5
    'North Africa', 'Egypt', 'East Africa', 'Congo', 'South Africa', 'Madagascar',
    # Asia: 6-17
    'Ural', 'Siberia', 'Yakutsk', 'Kamchatka', 'Irkutsk', 'Afghanistan',
    'China', 'Mongolia', 'Japan', 'Middle East', 'India', 'Siam',
    # Australia: 18-21
    'Indonesia', 'New Guinea', 'Western Australia', 'Eastern Australia',
    # Europe: 22-28
    'Iceland', 'Scandinavia', 'Ukraine', 'Great Britain', 'Northern Europe',
    'Western Europe', 'Southern Europe',
    # North America: 29-37
    'Alaska', 'Northwest Territory', 'Alberta', 'Ontario', 'Greenland',
    'Quebec', 'Western U.S.', 'Eastern U.S.', 'Central America',
    # South America: 38-41
    'Venezuela', 'Peru', 'Brazil', 'Argentina',
)

territory_ids = {name: territory for territory,
                 name in enumerate(TERRITORY_NAMES)}

# every border, listed once
CLASSIC_BORDERS = (
    ('Alaska', 'Northwest Territory'), ('Alaska', 'Alberta'), ('Alaska', 'Kamchatka'),
    ('Northwest Territory', 'Alberta'), ('Northwest Territory', 'Ontario'),
    ('Northwest Territory', 'Greenland'),
    ('Greenland', 'Ontario'), ('Greenland', 'Quebec'), ('Greenland', 'Iceland'),
    ('Alberta', 'Ontario'), ('Alberta', 'Western U.S.'),
    ('Ontario', 'Quebec'), ('Ontario', 'Eastern U.S.'), ('Ontario', 'Western U.S.'),
    ('Quebec', 'Eastern U.S.'),
    ('Western U.S.', 'Eastern U.S.'), ('Western U.S.', 'Central America'),
    ('Eastern U.S.', 'Central America'),
    ('Central America', 'Venezuela'),
    ('Venezuela', 'Peru'), ('Venezuela', 'Brazil'),
    ('Peru', 'Brazil'), ('Peru', 'Argentina'),
    ('Brazil', 'Argentina'), ('Brazil', 'North Africa'),
    ('North Africa', 'Western Europe'), ('North Africa', 'Southern Europe'),
    ('North Africa', 'Egypt'), ('North Africa', 'East Africa'), ('North Africa', 'Congo'),
    ('Egypt', 'Southern Europe'), ('Egypt', 'Middle East'), ('Egypt', 'East Africa'),
    ('East Africa', 'Congo'), ('East Africa', 'Madagascar'), ('East Africa', 'South Africa'),
    ('Congo', 'South Africa'),
    ('South Africa', 'Madagascar'),
    ('Iceland', 'Great Britain'), ('Iceland', 'Scandinavia'),
    ('Great Britain', 'Scandinavia'), ('Great Britain', 'Northern Europe'),
    ('Great Britain', 'Western Europe'),
    ('Scandinavia', 'Northern Europe'), ('Scandinavia', 'Ukraine'),
    ('Northern Europe', 'Ukraine'), ('Northern Europe', 'Western Europe'),
    ('Northern Europe', 'Southern Europe'),
    ('Ukraine', 'Ural'), ('Ukraine', 'Southern Europe'), ('Ukraine', 'Afghanistan'),
    ('Ukraine', 'Middle East'),
    ('Western Europe', 'Southern Europe'),
    ('Southern Europe', 'Middle East'),
    ('Ural', 'Afghanistan'), ('Ural', 'Siberia'), ('Ural', 'China'),
    ('Siberia', 'China'), ('Siberia', 'Yakutsk'), ('Siberia', 'Irkutsk'), ('Siberia', 'Mongolia'),
    ('Yakutsk', 'Irkutsk'), ('Yakutsk', 'Kamchatka'),
    ('Kamchatka', 'Irkutsk'), ('Kamchatka', 'Mongolia'), ('Kamchatka', 'Japan'),
    ('Irkutsk', 'Mongolia'),
    ('Mongolia', 'Japan'), ('Mongolia', 'China'),
    ('Afghanistan', 'China'), ('Afghanistan', 'Middle East'), ('Afghanistan', 'India'),
    ('China', 'India'), ('China', 'Siam'),
    ('Middle East', 'India'),
    ('India', 'Siam'),
    ('Siam', 'Indonesia'),
    ('Indonesia', 'New Guinea'), ('Indonesia', 'Western Australia'),
    ('New Guinea', 'Western Australia'), ('New Guinea', 'Eastern Australia'),
    ('Western Australia', 'Eastern Australia'),
)


def _continent(name: str, territories: range, armies_awarded: int) -> Continent:
    return Continent(name, frozenset(territories), armies_awarded)


africa = _continent('Africa', range(0, 6), 3)
asia = _continent('Asia', range(6, 18), 7)
australia = _continent('Australia', range(18, 22), 2)
europe = _continent('Europe', range(22, 29), 5)
north_america = _continent('North America', range(29, 38), 5)
south_america = _continent('South America', range(38, 42), 2)

classic_continents = (africa, asia, australia,
                      europe, north_america, south_america)


def classic_map() -> GameMap:
    """
    Builds the classic Risk map
    """
    return GameMap.from_edges(len(TERRITORY_NAMES), ((territory_ids[a], territory_ids[b])
                                                     for a, b in CLASSIC_BORDERS))
