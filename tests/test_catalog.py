from multiavatar.kernel.catalog import AVATAR_SPACE, CATALOG, PART_COUNT, colors_for, lookup, template_for
from multiavatar.kernel.characters import AvatarPart, CharacterType, Coordinate, Theme
from multiavatar.kernel.colorizer import colorize, placeholders

# (character, theme, part) -> (colors, placeholders), carried over as-is
KNOWN_MISMATCHES = {
    (CharacterType.ASIAN, Theme.A, AvatarPart.TOP): (6, 8),
    (CharacterType.PUNK, Theme.A, AvatarPart.CLO): (1, 3),
    (CharacterType.BLOND, Theme.B, AvatarPart.HEAD): (2, 1),
}

def test_catalog_is_complete():
    assert len(CATALOG) == 16 * 3 * 6
    assert PART_COUNT == 48
    assert AVATAR_SPACE == 12230590464

def test_color_counts_match_placeholders():
    for (character, theme, part), (template, colors) in CATALOG.items():
        expected = KNOWN_MISMATCHES.get((character, theme, part))
        if expected:
            assert (len(colors), len(placeholders(template))) == expected
        else:
            assert len(colors) == len(placeholders(template)), (character, theme, part)

def test_templates_shared_across_themes():
    for (character, theme, part), (template, _) in CATALOG.items():
        assert template == template_for(character, part)

def test_lookup():
    coordinate = Coordinate(CharacterType.STREET, Theme.A)
    template, colors = lookup(coordinate, AvatarPart.EYES)
    assert colors == ("black", "#008;opacity:0.67", "aqua")
    assert colors_for(coordinate, AvatarPart.EYES) == list(colors)
    assert lookup(None, AvatarPart.EYES) is None

def test_under_applied_part_keeps_template_colors():
    template, colors = lookup(Coordinate(CharacterType.ASIAN, Theme.A), AvatarPart.TOP)
    out = colorize(template, colors)
    assert placeholders(out)[-2:] == placeholders(template)[-2:]
    assert "none;" in out
