from enum import Enum
from functools import total_ordering
from typing import NamedTuple, Optional


@total_ordering
class CharacterType(Enum):
    """
    The 16 base characters. Position in the enum is the character index
    the selector produces, so the order here is fixed.
    """
    ROBO = ("00", "Robo")
    GIRL = ("01", "Girl")
    BLONDE = ("02", "Blonde")
    GUY = ("03", "Guy")
    COUNTRY = ("04", "Country")
    GEEKNOT = ("05", "Geeknot")
    ASIAN = ("06", "Asian")
    PUNK = ("07", "Punk")
    AFROHAIR = ("08", "Afrohair")
    NORMIE_FEMALE = ("09", "Normie Female")
    OLDER = ("10", "Older")
    FIREHAIR = ("11", "Firehair")
    BLOND = ("12", "Blond")
    ATEAM = ("13", "Ateam")
    RASTA = ("14", "Rasta")
    STREET = ("15", "Street")

    def __init__(self, id_: str, display_name: str):
        self.id = id_
        self.display_name = display_name

    @property
    def index(self) -> int:
        return int(self.id)

    def __lt__(self, other):
        if not isinstance(other, CharacterType):
            return NotImplemented
        return self.id < other.id

    @staticmethod
    def from_id(id_: str) -> Optional["CharacterType"]:
        for character in CharacterType:
            if character.id == id_:
                return character
        return None

    @staticmethod
    def from_index(index: int) -> Optional["CharacterType"]:
        members = list(CharacterType)
        if 0 <= index < len(members):
            return members[index]
        return None


class Theme(Enum):
    A = "A"
    B = "B"
    C = "C"

    @property
    def code(self) -> str:
        return self.value

    @staticmethod
    def from_code(code: str) -> Optional["Theme"]:
        for theme in Theme:
            if theme.value == code:
                return theme
        return None


class AvatarPart(Enum):
    # declaration order is draw order
    ENV = "env"
    HEAD = "head"
    CLO = "clo"
    TOP = "top"
    EYES = "eyes"
    MOUTH = "mouth"

    @staticmethod
    def from_name(name: str) -> Optional["AvatarPart"]:
        for part in AvatarPart:
            if part.value == name:
                return part
        return None


DRAW_ORDER = tuple(AvatarPart)

# order in which the six fingerprint groups are assigned to parts
FINGERPRINT_ORDER = (
    AvatarPart.ENV,
    AvatarPart.CLO,
    AvatarPart.HEAD,
    AvatarPart.MOUTH,
    AvatarPart.EYES,
    AvatarPart.TOP,
)


class Coordinate(NamedTuple):
    """One concrete visual variant: a character drawn in one theme."""
    character: CharacterType
    theme: Theme

    @property
    def code(self) -> str:
        return f"{self.character.id}{self.theme.code}"

    @staticmethod
    def from_code(code: str) -> "Coordinate":
        """Parse codes like "08B" (character id + theme letter)."""
        if not isinstance(code, str) or len(code) != 3:
            raise ValueError(f"bad coordinate code {code!r}")
        character = CharacterType.from_id(code[:2])
        theme = Theme.from_code(code[2].upper())
        if character is None or theme is None:
            raise ValueError(f"unknown coordinate code {code!r}")
        return Coordinate(character, theme)

    def __str__(self) -> str:
        return self.code
