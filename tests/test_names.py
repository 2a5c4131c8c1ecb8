import pytest

from feda_elo.ingest import decode_text, split_name


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("GARCIA LOPEZ, Juan", ("GARCIA LOPEZ", "Juan")),
        ("GARCIA LOPEZ,Juan", ("GARCIA LOPEZ", "Juan")),
        ("GARCIA LOPEZ   ,   Juan Carlos", ("GARCIA LOPEZ", "Juan Carlos")),
        ("PEREZ, Ana, extra", ("PEREZ", "Ana")),
        ("  MARTIN, Luis  ", ("MARTIN", "Luis")),
    ],
)
def test_comma_separates_surname_and_given_name(raw, expected):
    assert split_name(raw) == expected


def test_period_used_when_comma_missing():
    assert split_name("Smith. J") == ("Smith", "J")
    assert split_name("Smith.J") == ("Smith", "J")


def test_period_without_given_name():
    assert split_name("Smith.") == ("Smith", None)


def test_comma_wins_over_period():
    assert split_name("DE LA FUENTE, J.") == ("DE LA FUENTE", "J.")


def test_single_token_gets_placeholder():
    assert split_name("Smith") == ("Smith", "***")
    assert split_name("Smith,") == ("Smith", "***")


@pytest.mark.parametrize("raw", [None, "", "   ", ", Juan", ","])
def test_unparseable_names_do_not_raise(raw):
    assert split_name(raw) == (None, None)


def test_decode_text_handles_latin1_bytes():
    assert decode_text("MU\xd1OZ, Jos\xe9".encode("latin-1")) == "MUÑOZ, José"


def test_decode_text_passes_text_through():
    assert decode_text("MUÑOZ, José") == "MUÑOZ, José"
    assert decode_text(None) is None
    assert decode_text(1234.0) == "1234"
