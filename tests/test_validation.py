import pytest

from kartcup.exceptions import InvalidPlayerDataException, InvalidPositionException
from kartcup.utils import generate_id
from kartcup.utils.validation import (
    validate_gamer_tag,
    validate_non_empty,
    validate_player_strict,
    validate_position,
    validate_position_strict,
)


def test_validate_position_accepts_range_bounds():
    assert validate_position(1).sanitized_value == 1
    assert validate_position(24).sanitized_value == 24
    assert validate_position(" 7 ").sanitized_value == 7


@pytest.mark.parametrize("value", [0, 25, -1, "abc", None, 2.5, True])
def test_validate_position_rejects(value):
    result = validate_position(value)
    assert not result
    assert result.error_message


def test_validate_position_strict():
    assert validate_position_strict("12") == 12
    with pytest.raises(InvalidPositionException):
        validate_position_strict(30)


def test_validate_non_empty_strips():
    assert validate_non_empty("  Bowser ").sanitized_value == "Bowser"
    assert not validate_gamer_tag("")


def test_validate_player_strict():
    assert validate_player_strict(" Daisy", "Flower ") == ("Daisy", "Flower")
    with pytest.raises(InvalidPlayerDataException, match="Gamer tag"):
        validate_player_strict("Daisy", " ")


def test_generate_id_is_unique():
    ids = {generate_id("Player") for _ in range(100)}
    assert len(ids) == 100
    assert all(i.startswith("player_") for i in ids)
