import hashlib
import os
import random

import pytest
from multiavatar.kernel import catalog
from multiavatar.kernel.avatar import Avatar, generate, generate_pure, generate_random, render, render_part
from multiavatar.kernel.catalog import METADATA, SVG_END, SVG_START
from multiavatar.kernel.characters import AvatarPart, CharacterType, Coordinate, Theme

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")

def test_binx_bond_golden():
    with open(os.path.join(FIXTURES, "binx_bond.svg"), encoding="utf-8") as f:
        golden = f.read()
    assert generate("Binx Bond") == golden

def test_empty_and_none():
    assert generate("") == ""
    assert generate(None) == ""
    assert generate("", sans_env=True, version="01A") == ""

def test_deterministic():
    assert generate("Same Input") == generate("Same Input")
    assert generate("测试用户") == generate("测试用户")

def test_different_inputs():
    outputs = {generate(f"user-{i}") for i in range(50)}
    assert generate("Input A") != generate("Input B")
    assert len(outputs) > 45

@pytest.mark.parametrize("text", ["Binx Bond", "Test@User#123!", "测试用户", "x"])
def test_structure(text):
    svg = generate(text)
    assert svg.startswith(SVG_START + METADATA)
    assert svg.endswith(SVG_END)
    assert svg.count("<svg") == 1
    assert svg.count("</svg>") == 1
    assert "<path" in svg

def test_sans_env_drops_only_background():
    avatar = Avatar.from_id("Test User")
    env = render_part(avatar[AvatarPart.ENV], AvatarPart.ENV)
    with_env = generate("Test User")
    without_env = generate("Test User", sans_env=True)
    assert env
    assert with_env != without_env
    assert with_env.replace(env, "", 1) == without_env

def test_draw_order():
    coordinate = Coordinate(CharacterType.PUNK, Theme.B)
    svg = generate_pure(CharacterType.PUNK, Theme.B)
    pieces = [render_part(coordinate, p) for p in AvatarPart]
    assert svg == SVG_START + METADATA + "".join(pieces) + SVG_END

@pytest.mark.parametrize("character", list(CharacterType))
def test_themes_differ(character):
    a = generate_pure(character, Theme.A)
    b = generate_pure(character, Theme.B)
    c = generate_pure(character, Theme.C)
    assert len({a, b, c}) == 3

def test_version_forces_pure_avatar():
    version = Coordinate(CharacterType.GIRL, Theme.B)
    forced = generate("Test", version=version)
    assert forced == generate_pure(CharacterType.GIRL, Theme.B)
    assert forced == generate("Anything else", version="01B")
    assert Avatar.forced(version) == Avatar.forced("01b") == Avatar.pure(CharacterType.GIRL, Theme.B)
    assert Avatar.forced(version).is_pure()
    assert Avatar.from_id("Test").with_version(version) == Avatar.forced(version)
    with pytest.raises(ValueError):
        Avatar.forced("01D")

def test_random_source():
    svg1 = generate_random(random.Random(42))
    svg2 = generate_random(random.Random(42))
    assert svg1 == svg2
    assert svg1.startswith(SVG_START)
    avatar = Avatar.from_random(random.Random(7))
    assert len(avatar.descriptor()) == 18

def test_random_uses_randrange_over_48():
    class Fixed:
        def __init__(self):
            self.calls = []
        def randrange(self, n):
            self.calls.append(n)
            return 24
    rnd = Fixed()
    avatar = Avatar.from_random(rnd)
    assert rnd.calls == [48] * 6
    assert avatar == Avatar.pure(CharacterType.AFROHAIR, Theme.B)

def test_missing_catalog_entry_renders_empty(monkeypatch):
    table = dict(catalog.CATALOG)
    del table[(CharacterType.RASTA, Theme.C, AvatarPart.TOP)]
    monkeypatch.setattr(catalog, "CATALOG", table)
    svg = generate_pure(CharacterType.RASTA, Theme.C)
    assert svg.startswith(SVG_START) and svg.endswith(SVG_END)
    assert render_part(Coordinate(CharacterType.RASTA, Theme.C), AvatarPart.TOP) == ""

def test_render_partial_mapping():
    coordinate = Coordinate(CharacterType.ROBO, Theme.A)
    svg = render({AvatarPart.HEAD: coordinate})
    assert svg == SVG_START + METADATA + render_part(coordinate, AvatarPart.HEAD) + SVG_END

def test_avatar_needs_all_parts():
    with pytest.raises(ValueError):
        Avatar({AvatarPart.HEAD: Coordinate(CharacterType.ROBO, Theme.A)})
    with pytest.raises(ValueError):
        Avatar.from_part_numbers([1, 2, 3])

def test_hash_failure_reaches_caller(monkeypatch):
    def broken(data):
        raise RuntimeError("digest unavailable")
    monkeypatch.setattr(hashlib, "sha256", broken)
    with pytest.raises(RuntimeError, match="digest unavailable"):
        generate("Binx Bond")
