"""
Double-width horizontal hex layout, see https://www.redblobgames.com/grids/hexagons/

Every cell sits two columns away from its east and west neighbours, so a
row of cells reads `X - - - O` in a text diagram. Around cell 0, the
cells marked 1 are one step away and the cells marked 2 are one leap away:

      2 2 2
     2 1 1 2
    2 1 0 1 2
     2 1 1 2
      2 2 2
"""

Pos = tuple[int, int]
Dir = tuple[int, int]

STEP_DIRECTIONS: list[Dir] = [
    (2, 0),  # E
    (1, 1),  # NE
    (-1, 1),  # NW
    (-2, 0),  # W
    (-1, -1),  # SW
    (1, -1),  # SE
]

LEAP_DIRECTIONS: list[Dir] = [
    (4, 0),  # E
    (3, 1),  # ENE
    (2, 2),  # NE
    (0, 2),  # N
    (-2, 2),  # NW
    (-3, 1),  # WNW
    (-4, 0),  # W
    (-3, -1),  # WSW
    (-2, -2),  # SW
    (0, -2),  # S
    (2, -2),  # SE
    (3, -1),  # ESE
]


def offset(pos: Pos, direction: Dir) -> Pos:
    x, y = pos
    dx, dy = direction
    return (x + dx, y + dy)
