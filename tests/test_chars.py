from laoroman.script import (
    ELLIPSIS_MARK,
    REDUPLICATION_MARK,
    is_consonant,
    is_final_consonant,
    is_front_vowel,
    is_lao,
    is_lao_digit,
    is_tone_mark,
    is_vowel_or_tone,
)


def test_lao_block_bounds() -> None:
    assert is_lao("ກ")
    assert is_lao("ໝ")
    assert is_lao("໙")
    assert is_lao(REDUPLICATION_MARK)
    assert is_lao(ELLIPSIS_MARK)
    assert not is_lao("a")
    assert not is_lao("ก")
    assert not is_lao("ໞ")


def test_digits() -> None:
    assert all(is_lao_digit(char) for char in "໐໑໒໓໔໕໖໗໘໙")
    assert not is_lao_digit("1")
    assert not is_lao_digit("")


def test_consonants_and_vowels() -> None:
    assert is_consonant("ກ")
    assert is_consonant("ໜ")
    assert is_consonant("ຼ")
    assert not is_consonant("າ")
    assert is_front_vowel("ເ")
    assert is_front_vowel("ໄ")
    assert not is_front_vowel("າ")


def test_tone_marks_are_part_of_vowel_run() -> None:
    for tone in "່້໊໋":
        assert is_tone_mark(tone)
        assert is_vowel_or_tone(tone)
    assert is_vowel_or_tone("ຳ")
    assert is_vowel_or_tone("ອ")
    assert not is_vowel_or_tone("ເ")


def test_final_consonants() -> None:
    assert all(is_final_consonant(char) for char in "ກງຍຽດນບມຣວ")
    assert not is_final_consonant("ສ")
    assert not is_final_consonant("ອ")
