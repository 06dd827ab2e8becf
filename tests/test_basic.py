import pytest
from multiavatar.kernel.avatar import Avatar
from multiavatar.kernel.characters import AvatarPart, CharacterType, Coordinate, Theme
from multiavatar.kernel.fingerprint import digits, fingerprint, fingerprint_hex, sha256_hex
from multiavatar.kernel.selector import part_number, select, to_coordinate

def test_fingerprint_binx_bond():
    assert sha256_hex("Binx Bond").startswith("e79d8ab3")
    assert fingerprint("Binx Bond") == [79, 83, 13, 12, 81, 83]
    assert fingerprint("Alice") == [35, 10, 62, 97, 34, 58]

def test_fingerprint_drops_hex_letters():
    assert digits("e79d8ab31312") == "79831312"
    assert all(0 <= d <= 99 for d in fingerprint("user@example.com"))

def test_fingerprint_short_digest_does_not_raise():
    assert fingerprint_hex("abcdef12") == [12, 0, 0, 0, 0, 0]
    assert fingerprint_hex("a1b2c") == [12, 0, 0, 0, 0, 0]
    assert fingerprint_hex("1234567") == [12, 34, 56, 7, 0, 0]
    assert fingerprint_hex("") == [0] * 6

def test_unicode_and_lone_surrogate():
    assert fingerprint("测试用户") == fingerprint("测试用户")
    assert len(fingerprint("bad \ud800 text")) == 6

def test_part_number_rounds_half_up():
    assert part_number(0) == 0
    assert part_number(50) == 24
    assert part_number(99) == 47
    assert part_number(1) == 0
    assert part_number(2) == 1
    assert max(part_number(d) for d in range(100)) == 47

def test_part_number_to_coordinate_bands():
    assert to_coordinate(0) == Coordinate(CharacterType.ROBO, Theme.A)
    assert to_coordinate(15) == Coordinate(CharacterType.STREET, Theme.A)
    assert to_coordinate(16) == Coordinate(CharacterType.ROBO, Theme.B)
    assert to_coordinate(31) == Coordinate(CharacterType.STREET, Theme.B)
    assert to_coordinate(32) == Coordinate(CharacterType.ROBO, Theme.C)
    assert to_coordinate(47) == Coordinate(CharacterType.STREET, Theme.C)
    with pytest.raises(ValueError):
        to_coordinate(48)

def test_decimal_50_is_afrohair_b():
    assert select(50) == Coordinate(CharacterType.AFROHAIR, Theme.B)

def test_binx_bond_coordinates():
    avatar = Avatar.from_id("Binx Bond")
    assert avatar[AvatarPart.ENV].code == "05C"
    assert avatar[AvatarPart.CLO].code == "07C"
    assert avatar[AvatarPart.HEAD].code == "06A"
    assert avatar[AvatarPart.MOUTH].code == "06A"
    assert avatar[AvatarPart.EYES].code == "06C"
    assert avatar[AvatarPart.TOP].code == "07C"
    assert avatar.descriptor() == "05C07C06A06A06C07C"

def test_descriptor_roundtrip():
    avatar = Avatar.from_id("sun")
    desc = avatar.descriptor()
    avatar2 = Avatar.from_descriptor(desc)
    assert avatar == avatar2
    assert avatar2.render() == avatar.render()

def test_bad_codes():
    with pytest.raises(ValueError):
        Coordinate.from_code("16A")
    with pytest.raises(ValueError):
        Coordinate.from_code("01D")
    with pytest.raises(ValueError):
        Avatar.from_descriptor("05C07C")
    assert Coordinate.from_code("08b") == Coordinate(CharacterType.AFROHAIR, Theme.B)

def test_enum_lookups():
    assert CharacterType.from_id("09") is CharacterType.NORMIE_FEMALE
    assert CharacterType.NORMIE_FEMALE.display_name == "Normie Female"
    assert CharacterType.from_index(16) is None
    assert CharacterType.from_id("99") is None
    assert Theme.from_code("C") is Theme.C
    assert Theme.from_code("x") is None
    assert AvatarPart.from_name("clo") is AvatarPart.CLO
    assert AvatarPart.from_name("hat") is None
    assert sorted(CharacterType, reverse=True)[0] is CharacterType.STREET
    assert [p.value for p in AvatarPart] == ["env", "head", "clo", "top", "eyes", "mouth"]

def test_character_total_ordering():
    assert CharacterType.ROBO < CharacterType.GIRL
    assert CharacterType.ROBO <= CharacterType.GIRL
    assert CharacterType.ROBO <= CharacterType.ROBO
    assert CharacterType.STREET > CharacterType.RASTA
    assert CharacterType.STREET >= CharacterType.STREET
    assert not CharacterType.GIRL >= CharacterType.BLONDE
    assert min(CharacterType) is CharacterType.ROBO
    assert max(CharacterType) is CharacterType.STREET
