"""
Pydantic view models produced by the comparison builder.

These are handed to the HTML templates and serialised as-is by the JSON API.
Suit and value fields keep the stored tags; templates turn them into glyphs.
"""

from pydantic import BaseModel


class PlayedCard(BaseModel, frozen=True):
    """The card one seat played in one round."""

    value: str
    suit: str
    value_label: str
    winner: bool  # this seat won the round
    differs: bool  # not every game in the group played the same card at this turn position


class RenderableRound(BaseModel, frozen=True):
    leader: str  # name of the player who led the round
    leader_seat: int
    glory: int
    cards: tuple[PlayedCard, ...]  # indexed by physical seat


class TeamResult(BaseModel, frozen=True):
    players: tuple[str, str]
    score: int
    glory: int
    score_excl_glory: int


class RenderableGame(BaseModel, frozen=True):
    """One game of a seed group, resolved for side-by-side display."""

    players: tuple[str, ...]
    unique_players: tuple[str, ...]  # names that appear in no other seat of the group
    starting_player: str
    trump: str
    playing_team: TeamResult
    opposing_team: TeamResult
    rounds: tuple[RenderableRound, ...]
