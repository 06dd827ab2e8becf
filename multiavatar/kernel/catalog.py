import logging
from typing import Dict, List, Optional, Tuple

from .characters import AvatarPart, CharacterType, Coordinate, Theme
from .svg_parts import SHARED, SVG_PARTS
from .themes import THEMES

log = logging.getLogger(__name__)

SVG_START = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 231 231">'
SVG_END = "</svg>"
METADATA = (
    '<metadata xmlns:dc="http://purl.org/dc/elements/1.1/">'
    "<dc:creator>Multiavatar</dc:creator>"
    "<dc:source>https://multiavatar.com</dc:source>"
    "</metadata>"
)

PART_COUNT = len(CharacterType) * len(Theme)  # 48 part numbers
AVATAR_SPACE = PART_COUNT ** len(AvatarPart)  # 12,230,590,464

Key = Tuple[CharacterType, Theme, AvatarPart]
Entry = Tuple[str, Tuple[str, ...]]


def _build() -> Dict[Key, Entry]:
    table = {}
    for character in CharacterType:
        themes = THEMES.get(character.id)
        if themes is None:
            continue
        parts = SVG_PARTS.get(character.id, {})
        for theme in Theme:
            colors = themes.get(theme.code)
            if colors is None:
                continue
            for part in AvatarPart:
                template = parts.get(part.value) or SHARED.get(part.value)
                if not template or part.value not in colors:
                    continue
                table[(character, theme, part)] = (template, tuple(colors[part.value]))
    return table


CATALOG: Dict[Key, Entry] = _build()


def lookup(coordinate: Optional[Coordinate], part: AvatarPart) -> Optional[Entry]:
    """(template, colors) for one part of a coordinate, or None on a miss."""
    if coordinate is None:
        return None
    entry = CATALOG.get((coordinate.character, coordinate.theme, part))
    if entry is None:
        log.debug("no catalog entry for %s/%s", coordinate.code, part.value)
    return entry


def template_for(character: CharacterType, part: AvatarPart) -> Optional[str]:
    entry = CATALOG.get((character, Theme.A, part))
    return entry[0] if entry else None


def colors_for(coordinate: Coordinate, part: AvatarPart) -> List[str]:
    entry = lookup(coordinate, part)
    return list(entry[1]) if entry else []
