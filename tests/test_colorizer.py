from multiavatar.kernel.avatar import render_part
from multiavatar.kernel.characters import AvatarPart, CharacterType, Coordinate, Theme
from multiavatar.kernel.colorizer import colorize, placeholders

TEMPLATE = '<path style="fill:#111;"/><path style="fill:none;stroke:#222;stroke-width:3;"/>'

def test_placeholders_in_order():
    assert placeholders(TEMPLATE) == ["#111;", "#222;"]
    assert placeholders("<g/>") == []

def test_colorize_in_order():
    out = colorize(TEMPLATE, ["#abc", "none"])
    assert out == '<path style="fill:#abc;"/><path style="fill:none;stroke:none;stroke-width:3;"/>'

def test_fewer_colors_leave_tokens():
    out = colorize(TEMPLATE, ["red"])
    assert out == '<path style="fill:red;"/><path style="fill:none;stroke:#222;stroke-width:3;"/>'

def test_extra_colors_ignored():
    assert colorize(TEMPLATE, ["#1", "#2", "#3", "#4"]) == colorize(TEMPLATE, ["#1", "#2"])

def test_extra_declarations_pass_through():
    out = colorize('<path style="fill:#008;"/>', ["#008;opacity:0.67"])
    assert out == '<path style="fill:#008;opacity:0.67;"/>'

def test_substituted_text_is_matched_again():
    # step 1 writes "#000;" into slot 1, step 2 then finds slot 1 before slot 2
    template = '<a style="fill:#fff;"/><b style="fill:#000;"/>'
    out = colorize(template, ["#000", "#fff"])
    assert out == '<a style="fill:#fff;"/><b style="fill:#000;"/>'

def test_repeated_tokens_fill_left_to_right():
    template = '<a fill="#000;"/><b fill="#000;"/><c fill="#000;"/>'
    out = colorize(template, ["#1", "#2", "#3"])
    assert out == '<a fill="#1;"/><b fill="#2;"/><c fill="#3;"/>'

def test_catalog_part_with_rematch():
    # Robo theme B clothing: colors ["#000", "#fff"] land back on slot 1
    out = render_part(Coordinate(CharacterType.ROBO, Theme.B), AvatarPart.CLO)
    assert placeholders(out) == ["#fff;", "#000;"]

def test_missing_coordinate_renders_empty():
    assert render_part(None, AvatarPart.TOP) == ""
