import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Union

from .catalog import METADATA, PART_COUNT, SVG_END, SVG_START, lookup
from .characters import DRAW_ORDER, FINGERPRINT_ORDER, AvatarPart, CharacterType, Coordinate, Theme
from .colorizer import colorize
from .fingerprint import fingerprint
from .selector import part_number, to_coordinate

log = logging.getLogger(__name__)

Version = Union[Coordinate, str]


class Avatar:
    """
    One coordinate per part. Built fresh for every generate call.
    descriptor: "05C07C06A06A06C07C" (env, clo, head, mouth, eyes, top)
    """
    def __init__(self, parts: Mapping[AvatarPart, Coordinate]):
        missing = [p.value for p in AvatarPart if parts.get(p) is None]
        if missing:
            raise ValueError(f"avatar is missing parts: {', '.join(missing)}")
        self._parts = MappingProxyType(dict(parts))

    def __getitem__(self, part: AvatarPart) -> Coordinate:
        return self._parts[part]

    def __eq__(self, other):
        if not isinstance(other, Avatar):
            return NotImplemented
        return dict(self._parts) == dict(other._parts)

    def __hash__(self):
        return hash(self.descriptor())

    def __repr__(self):
        return f"Avatar({self.descriptor()})"

    @property
    def coordinates(self) -> Dict[AvatarPart, Coordinate]:
        return dict(self._parts)

    def is_pure(self) -> bool:
        return len(set(self._parts.values())) == 1

    def descriptor(self) -> str:
        return "".join(self._parts[p].code for p in FINGERPRINT_ORDER)

    @staticmethod
    def from_descriptor(desc: str) -> "Avatar":
        if not isinstance(desc, str) or len(desc) != 3 * len(FINGERPRINT_ORDER):
            raise ValueError(f"bad avatar descriptor {desc!r}")
        codes = [desc[i:i + 3] for i in range(0, len(desc), 3)]
        return Avatar({p: Coordinate.from_code(c) for p, c in zip(FINGERPRINT_ORDER, codes)})

    @staticmethod
    def pure(character: CharacterType, theme: Theme) -> "Avatar":
        coordinate = Coordinate(character, theme)
        return Avatar({p: coordinate for p in AvatarPart})

    @staticmethod
    def from_part_numbers(numbers: Sequence[int]) -> "Avatar":
        if len(numbers) != len(FINGERPRINT_ORDER):
            raise ValueError(f"expected {len(FINGERPRINT_ORDER)} part numbers, got {len(numbers)}")
        return Avatar({p: to_coordinate(nr) for p, nr in zip(FINGERPRINT_ORDER, numbers)})

    @staticmethod
    def from_fingerprint(decimals: Sequence[int]) -> "Avatar":
        return Avatar.from_part_numbers([part_number(d) for d in decimals])

    @staticmethod
    def from_id(identifier: str) -> "Avatar":
        return Avatar.from_fingerprint(fingerprint(identifier))

    @staticmethod
    def from_random(rnd) -> "Avatar":
        """rnd needs randrange(); random.Random(seed) gives repeatable avatars."""
        return Avatar.from_part_numbers([rnd.randrange(PART_COUNT) for _ in FINGERPRINT_ORDER])

    @staticmethod
    def forced(version: Version) -> "Avatar":
        """Every part drawn from one coordinate, given as a Coordinate or a code like "01A"."""
        if isinstance(version, str):
            version = Coordinate.from_code(version)
        return Avatar.pure(version.character, version.theme)

    def with_version(self, version: Version) -> "Avatar":
        return Avatar.forced(version)

    def render(self, sans_env: bool = False) -> str:
        return render(self._parts, sans_env)


def render_part(coordinate: Optional[Coordinate], part: AvatarPart) -> str:
    entry = lookup(coordinate, part)
    if entry is None:
        return ""
    template, colors = entry
    return colorize(template, colors)


def render(coordinates: Mapping[AvatarPart, Coordinate], sans_env: bool = False) -> str:
    out = [SVG_START, METADATA]
    for part in DRAW_ORDER:
        if part is AvatarPart.ENV and sans_env:
            continue
        out.append(render_part(coordinates.get(part), part))
    out.append(SVG_END)
    return "".join(out)


def generate(identifier: Optional[str], sans_env: bool = False, version: Optional[Version] = None) -> str:
    """
    SVG for an identifier such as a user name or e-mail. Same input, same
    avatar. Empty or None gives "". version forces every part to one
    coordinate (a Coordinate or a code like "01A").
    """
    if not identifier:
        return ""
    avatar = Avatar.from_id(identifier)
    if version is not None:
        avatar = avatar.with_version(version)
    log.debug("generated %s", avatar.descriptor())
    return avatar.render(sans_env)


def generate_pure(character: CharacterType, theme: Theme, sans_env: bool = False) -> str:
    return Avatar.pure(character, theme).render(sans_env)


def generate_random(rnd, sans_env: bool = False) -> str:
    avatar = Avatar.from_random(rnd)
    log.debug("random avatar %s", avatar.descriptor())
    return avatar.render(sans_env)
