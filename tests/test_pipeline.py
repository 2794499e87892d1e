import pytest

from laoroman.core import run_romanization
from laoroman.models import RomanizeRequest


def test_run_romanization() -> None:
    response = run_romanization(RomanizeRequest(text="ພາສາລາວ ສະຫວັນນະເຂດ"))

    assert response.romanized == "phasalao savannakhét"
    assert response.metadata.standard == "bgn-pcgn-1966"
    assert response.metadata.hyphen is False
    assert response.metadata.join_mode == "space"
    assert response.metadata.word_count == 2
    assert response.metadata.syllable_count == 7
    assert response.syllables[0].original == "ພາ"
    assert response.syllables[0].romanized == "pha"


def test_run_romanization_hyphen_and_document_mode() -> None:
    response = run_romanization(
        RomanizeRequest(text="ພາສາ ລາວ", hyphen=True, join_mode="document")
    )

    assert response.romanized == "pha-salao"
    assert response.metadata.join_mode == "document"


def test_default_join_mode_applies_when_request_has_none() -> None:
    response = run_romanization(
        RomanizeRequest(text="ພາສາ ລາວ"),
        default_join_mode="document",
    )

    assert response.romanized == "phasalao"


def test_run_romanization_without_syllables() -> None:
    response = run_romanization(RomanizeRequest(text="ພາສາລາວ", include_syllables=False))

    assert response.syllables == []
    assert response.metadata.syllable_count == 3


def test_whitespace_only_text_fails() -> None:
    with pytest.raises(ValueError, match="at least one word"):
        run_romanization(RomanizeRequest(text="   "))
