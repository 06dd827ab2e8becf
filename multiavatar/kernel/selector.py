from .characters import CharacterType, Coordinate, Theme

BAND = len(CharacterType)  # 16 characters per theme band
MAX_PART = 3 * BAND - 1


def part_number(decimal: int) -> int:
    """
    Map 0-99 onto 0-47 as round(47/100 * decimal), rounding halves up.
    Integer arithmetic keeps 50 -> 24 exact.
    """
    return (47 * int(decimal) + 50) // 100


def to_coordinate(nr: int) -> Coordinate:
    if not 0 <= nr <= MAX_PART:
        raise ValueError(f"part number out of range: {nr}")
    if nr > 31:
        nr, theme = nr - 32, Theme.C
    elif nr > 15:
        nr, theme = nr - 16, Theme.B
    else:
        theme = Theme.A
    return Coordinate(CharacterType.from_index(nr), theme)


def select(decimal: int) -> Coordinate:
    return to_coordinate(part_number(decimal))
