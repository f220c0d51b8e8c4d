"""Tests for the persisted GameResult model."""

import pytest
from pydantic import ValidationError

from klaverjas.tests.factories import make_result, result_json
from shared.dal.models import Card, GameResult


class TestGameResultParsing:
    def test_parses_stored_pascal_case_document(self):
        result = GameResult.model_validate(result_json())

        assert result.players == ("Alice", "Bob", "Carol", "Dave")
        assert result.starting_player == 0
        assert result.rounds[0][1] == Card("SEVEN", "SPADES")
        assert len(result.round_winners) == 8

    def test_accepts_snake_case_names(self):
        data = make_result().model_dump()
        assert GameResult.model_validate(data) == make_result()

    def test_dumps_pascal_case_for_storage(self):
        data = make_result().model_dump(mode="json", by_alias=True)
        assert set(data) == {
            "Players",
            "StartingPlayer",
            "Trump",
            "Scores",
            "Glory",
            "Rounds",
            "RoundWinners",
            "RoundGlory",
        }
        assert data["Rounds"][0][0] == ["SEVEN", "CLUBS"]

    def test_is_frozen(self):
        result = make_result()
        with pytest.raises(ValidationError):
            result.trump = "CLUBS"


class TestGameResultValidation:
    @pytest.mark.parametrize("seat", [-1, 4])
    def test_starting_player_out_of_range(self, seat):
        with pytest.raises(ValidationError, match="StartingPlayer"):
            GameResult.model_validate(result_json(StartingPlayer=seat))

    def test_round_winner_out_of_range(self):
        with pytest.raises(ValidationError, match="RoundWinners"):
            GameResult.model_validate(result_json(RoundWinners=[0, 1, 2, 3, 4, 0, 0, 0]))

    def test_seven_rounds_rejected(self):
        data = result_json()
        data["Rounds"] = data["Rounds"][:7]
        with pytest.raises(ValidationError, match="Rounds"):
            GameResult.model_validate(data)

    def test_nine_round_winners_rejected(self):
        with pytest.raises(ValidationError, match="RoundWinners"):
            GameResult.model_validate(result_json(RoundWinners=[0] * 9))

    def test_short_round_glory_rejected(self):
        with pytest.raises(ValidationError, match="RoundGlory"):
            GameResult.model_validate(result_json(RoundGlory=[0] * 7))

    def test_three_cards_in_a_round_rejected(self):
        data = result_json()
        data["Rounds"][2] = data["Rounds"][2][:3]
        with pytest.raises(ValidationError, match="Rounds"):
            GameResult.model_validate(data)

    def test_five_players_rejected(self):
        with pytest.raises(ValidationError, match="Players"):
            GameResult.model_validate(result_json(Players=["a", "b", "c", "d", "e"]))

    def test_three_scores_rejected(self):
        with pytest.raises(ValidationError, match="Scores"):
            GameResult.model_validate(result_json(Scores=[1, 2, 3]))
