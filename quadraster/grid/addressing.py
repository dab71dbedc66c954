"""
Quadtree tile addressing

Tiles are named by their path from the root: one digit per level, where
each digit selects a quadrant of the parent tile::

    +---+---+
    | 1 | 2 |
    +---+---+
    | 3 | 4 |
    +---+---+

The root tile is named "root". Tiles are also numbered breadth-first with
a flat index (root = 0, "1".."4" = 1..4, "11" = 5, ...). Because digits run
1-4 instead of 0-3 the name is the bijective base-4 numeral of the index.
"""

from quadraster.core.exceptions import AddressingError

ROOT = "root"

QUADRANTS = "1234"

# Quadrant reached by each move, and whether the move stays inside the parent
_RIGHT = {"1": ("2", True), "3": ("4", True), "2": ("1", False), "4": ("3", False)}
_DOWN = {"1": ("3", True), "2": ("4", True), "3": ("1", False), "4": ("2", False)}


def validate_identity(identity: str) -> str:
    """
    Check that a tile identity is well formed

    Returns:
        The identity unchanged

    Raises:
        AddressingError: If the identity is empty or has a digit outside 1-4
    """
    if not isinstance(identity, str):
        raise AddressingError(f"Tile identity must be a string, got {type(identity).__name__}")
    if identity == ROOT:
        return identity
    if not identity or any(c not in QUADRANTS for c in identity):
        raise AddressingError(f"Invalid tile identity: {identity!r}")
    return identity


def depth(identity: str) -> int:
    """Quadtree level of a tile (root is 0)"""
    validate_identity(identity)
    return 0 if identity == ROOT else len(identity)


def index_to_identity(n: int) -> str:
    """
    Convert a flat breadth-first index to a tile identity

    Args:
        n: Non-negative flat index

    Returns:
        Tile identity (e.g. "root", "3", "142")

    Raises:
        AddressingError: If n is negative or not an integer

    Examples:
        >>> index_to_identity(0)
        'root'
        >>> index_to_identity(4)
        '4'
        >>> index_to_identity(5)
        '11'
        >>> index_to_identity(20)
        '44'
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise AddressingError(f"Tile index must be an integer, got {n!r}")
    if n < 0:
        raise AddressingError(f"Tile index must be non-negative, got {n}")
    if n == 0:
        return ROOT

    digits = []
    while n > 4:
        n, x = divmod(n, 4)
        if x == 0:
            x = 4
            n -= 1
        digits.append(str(x))
    digits.append(str(n))
    return "".join(reversed(digits))


def identity_to_index(identity: str) -> int:
    """
    Convert a tile identity to its flat breadth-first index

    Examples:
        >>> identity_to_index("root")
        0
        >>> identity_to_index("11")
        5
    """
    validate_identity(identity)
    if identity == ROOT:
        return 0

    n = 0
    for c in identity:
        n = n * 4 + int(c)
    return n


def parent(identity: str) -> str:
    """Identity of the tile one level up"""
    validate_identity(identity)
    if identity == ROOT:
        raise AddressingError("The root tile has no parent")
    return identity[:-1] or ROOT


def children(identity: str) -> list[str]:
    """Identities of the four sub-tiles, in quadrant order 1, 2, 3, 4"""
    validate_identity(identity)
    prefix = "" if identity == ROOT else identity
    return [prefix + q for q in QUADRANTS]


def _step(identity: str, moves: dict, direction: str) -> str:
    validate_identity(identity)
    if identity == ROOT:
        raise AddressingError(f"The root tile has no {direction} neighbor")

    digits = list(identity)
    i = len(digits) - 1
    while i >= 0:
        digits[i], stop = moves[digits[i]]
        if stop:
            return "".join(digits)
        # Carry: this quadrant sits on its parent's edge
        i -= 1
    raise AddressingError(f"Tile {identity} has no {direction} neighbor inside the tree")


def neighbor_right(identity: str) -> str:
    """
    Identity of the adjacent tile to the east at the same depth

    Raises:
        AddressingError: If the tile is in the rightmost column

    Examples:
        >>> neighbor_right("1")
        '2'
        >>> neighbor_right("12")
        '21'
    """
    return _step(identity, _RIGHT, "right")


def neighbor_down(identity: str) -> str:
    """
    Identity of the adjacent tile to the south at the same depth

    Raises:
        AddressingError: If the tile is in the bottom row

    Examples:
        >>> neighbor_down("1")
        '3'
        >>> neighbor_down("14")
        '32'
    """
    return _step(identity, _DOWN, "down")


def tile_position(identity: str) -> tuple[int, int]:
    """
    Row and column of a tile within its level

    Row 0 is the northern edge, column 0 the western edge.

    Examples:
        >>> tile_position("4")
        (1, 1)
        >>> tile_position("23")
        (1, 2)
    """
    validate_identity(identity)
    row = col = 0
    if identity == ROOT:
        return row, col
    for c in identity:
        q = int(c) - 1
        row = row * 2 + (q >> 1)
        col = col * 2 + (q & 1)
    return row, col


def level_range(level: int) -> range:
    """Flat indices of all tiles at a given depth"""
    if level < 0:
        raise AddressingError(f"Depth must be non-negative, got {level}")
    return range((4**level - 1) // 3, (4 ** (level + 1) - 1) // 3)


def total_tile_count(max_depth: int) -> int:
    """Number of tiles in a complete tree with levels 0..max_depth"""
    return level_range(max_depth).stop
