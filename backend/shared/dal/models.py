"""Persistence models for the data access layer."""

from typing import Annotated, NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

NUM_PLAYERS = 4
NUM_ROUNDS = 8

Seat = Annotated[int, Field(ge=0, lt=NUM_PLAYERS)]


class Card(NamedTuple):
    """A played card as stored: value tag (e.g. "SEVEN") and suit tag (e.g. "CLUBS")."""

    value: str
    suit: str


# One round of play, indexed by physical seat (not turn order).
RoundCards = tuple[Card, Card, Card, Card]


class GameResult(BaseModel):
    """Record of a completed game persisted to storage.

    Stored JSON uses PascalCase keys (``StartingPlayer``, ``RoundWinners``, ...);
    snake_case names are accepted as well. Scores and glory are ordered
    playing team first, where the playing team contains the starting player.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_pascal,
        validate_by_name=True,
        validate_by_alias=True,
    )

    players: tuple[str, str, str, str]
    starting_player: Seat
    trump: str
    scores: tuple[int, int]
    glory: tuple[int, int]
    rounds: Annotated[tuple[RoundCards, ...], Field(min_length=NUM_ROUNDS, max_length=NUM_ROUNDS)]
    round_winners: Annotated[tuple[Seat, ...], Field(min_length=NUM_ROUNDS, max_length=NUM_ROUNDS)]
    round_glory: Annotated[tuple[int, ...], Field(min_length=NUM_ROUNDS, max_length=NUM_ROUNDS)]


class SeedSummary(BaseModel, frozen=True):
    """A seed and the number of stored results sharing it."""

    seed: str
    num_games: int
