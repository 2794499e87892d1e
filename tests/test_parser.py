from laoroman.syllables import parse_one


def test_open_syllable_stops_before_next_consonant() -> None:
    syllable = parse_one("ພາສາລາວ")

    assert syllable is not None
    assert syllable.text == "ພາ"
    assert syllable.initial == "ພ"
    assert syllable.nucleus == "a"
    assert syllable.final is None


def test_final_consonant_at_end_of_word() -> None:
    syllable = parse_one("ລາວ")

    assert syllable is not None
    assert syllable.text == "ລາວ"
    assert syllable.final == "ວ"


def test_ho_cluster_with_wo() -> None:
    syllable = parse_one("ຫວັນນະເຂດ")

    assert syllable is not None
    assert syllable.text == "ຫວັນ"
    assert syllable.initial == "ຫວ"
    assert syllable.nucleus == "a"
    assert syllable.final == "ນ"


def test_fronting_vowel() -> None:
    syllable = parse_one("ເຂດ")

    assert syllable is not None
    assert syllable.pre_vowel == "ເ"
    assert syllable.initial == "ຂ"
    assert syllable.nucleus == "e"
    assert syllable.final == "ດ"


def test_two_character_vowel_swallows_trailing_yo() -> None:
    syllable = parse_one("ເບຍ")

    assert syllable is not None
    assert syllable.text == "ເບຍ"
    assert syllable.nucleus == "ia"
    assert syllable.final is None


def test_ambiguous_letter_followed_by_vowel_opens_next_syllable() -> None:
    syllable = parse_one("ກັນຍາ")

    assert syllable is not None
    assert syllable.text == "ກັນ"
    assert syllable.final == "ນ"


def test_ambiguous_letter_without_vowel_blocks_final() -> None:
    syllable = parse_one("ກັນຍ")

    assert syllable is not None
    assert syllable.text == "ກັ"
    assert syllable.final is None


def test_candidate_final_followed_by_vowel_is_next_initial() -> None:
    syllable = parse_one("ພະບາງ")

    assert syllable is not None
    assert syllable.text == "ພະ"
    assert syllable.final is None


def test_tone_is_kept_in_reading_order() -> None:
    syllable = parse_one("ເກົ່າ")

    assert syllable is not None
    assert syllable.text == "ເກົ່າ"
    assert syllable.tone == "່"
    assert syllable.nucleus == "ao"


def test_sala_am_in_both_spellings() -> None:
    composed = parse_one("ຄຳ")
    decomposed = parse_one("ຄໍາ")

    assert composed is not None
    assert decomposed is not None
    assert composed.text == "ຄຳ"
    assert decomposed.text == "ຄໍາ"
    assert composed.nucleus == decomposed.nucleus == "am"


def test_sala_am_never_takes_a_final() -> None:
    syllable = parse_one("ຄຳນ")

    assert syllable is not None
    assert syllable.text == "ຄຳ"
    assert syllable.final is None


def test_o_vowel_with_tone_and_final() -> None:
    syllable = parse_one("ນ້ອຍ")

    assert syllable is not None
    assert syllable.text == "ນ້ອຍ"
    assert syllable.tone == "້"
    assert syllable.nucleus == "aw"
    assert syllable.final == "ຍ"


def test_compound_vowel() -> None:
    syllable = parse_one("ເຮືອນ")

    assert syllable is not None
    assert syllable.text == "ເຮືອນ"
    assert syllable.nucleus == "uea"
    assert syllable.final == "ນ"


def test_combining_lo_cluster() -> None:
    syllable = parse_one("ຫຼວງພະບາງ")

    assert syllable is not None
    assert syllable.text == "ຫຼວງ"
    assert syllable.initial == "ຫຼ"
    assert syllable.nucleus == "ua"
    assert syllable.final == "ງ"


def test_ho_digraphs() -> None:
    nyo = parse_one("ຫຍ້າ")
    no = parse_one("ຫນ້າ")
    fronted = parse_one("ແຫນ")

    assert nyo is not None and nyo.initial == "ຫຍ"
    assert no is not None
    assert no.text == "ຫ"
    assert no.nucleus is None
    assert fronted is not None
    assert fronted.initial == "ຫ"
    assert fronted.final == "ນ"


def test_final_with_cancellation_mark() -> None:
    syllable = parse_one("ເບີຣ໌")

    assert syllable is not None
    assert syllable.text == "ເບີຣ໌"
    assert syllable.nucleus == "oe"
    assert syllable.final == "ຣ໌"


def test_bare_consonant() -> None:
    syllable = parse_one("ສ")

    assert syllable is not None
    assert syllable.text == "ສ"
    assert syllable.nucleus is None


def test_no_leading_consonant_fails() -> None:
    assert parse_one("") is None
    assert parse_one("ເ") is None
    assert parse_one("າ") is None
    assert parse_one("abc") is None


def test_cancelled_final_that_cannot_close_is_not_a_final() -> None:
    syllable = parse_one("ເບີຣ໌ວກ")

    assert syllable is not None
    assert syllable.text == "ເບີ"
    assert syllable.final is None


def test_bare_consonant_keeps_cancellation_mark() -> None:
    syllable = parse_one("ຣ໌ວກ")

    assert syllable is not None
    assert syllable.text == "ຣ໌"
    assert syllable.initial == "ຣ"
    assert syllable.nucleus is None
