"""
Side-by-side comparison of games played from the same seed.

Every game in a group is rendered against the whole group: each played card
is flagged when the games disagree about the card played at that turn
position, regardless of which physical seat played it.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from klaverjas.logic.alignment import align_seat, round_leader
from klaverjas.logic.display import card_value_label
from klaverjas.logic.types import PlayedCard, RenderableGame, RenderableRound, TeamResult
from shared.dal.models import NUM_PLAYERS, NUM_ROUNDS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shared.dal.models import Card, GameResult

MIN_GROUP_SIZE = 2

NO_GAMES_MESSAGE = "No games found with this seed"
ONE_GAME_MESSAGE = "Only 1 game found with this seed, not enough to compare"


def insufficient_group_message(count: int) -> str | None:
    """Return the user-facing message when a group is too small to compare, else None."""
    if count == 0:
        return NO_GAMES_MESSAGE
    if count == 1:
        return ONE_GAME_MESSAGE
    return None


def count_player_occurrences(group: Sequence[GameResult]) -> Counter[str]:
    """Count how many seats across the whole group carry each player name."""
    return Counter(name for game in group for name in game.players)


def _cards_at_turn(game: GameResult, group: Sequence[GameResult], round_index: int, seat: int) -> set[Card]:
    """Distinct cards the group played at the turn position ``seat`` holds in ``game``."""
    return {og.rounds[round_index][align_seat(game, og, round_index, seat)] for og in group}


def _render_round(game: GameResult, group: Sequence[GameResult], round_index: int) -> RenderableRound:
    leader = round_leader(game, round_index)
    cards = []
    for seat in range(NUM_PLAYERS):
        card = game.rounds[round_index][seat]
        cards.append(
            PlayedCard(
                value=card.value,
                suit=card.suit,
                value_label=card_value_label(card.value),
                winner=game.round_winners[round_index] == seat,
                differs=len(_cards_at_turn(game, group, round_index, seat)) != 1,
            ),
        )
    return RenderableRound(
        leader=game.players[leader],
        leader_seat=leader,
        glory=game.round_glory[round_index],
        cards=tuple(cards),
    )


def _team(game: GameResult, team: int, first_seat: int) -> TeamResult:
    return TeamResult(
        players=(game.players[first_seat], game.players[(first_seat + 2) % NUM_PLAYERS]),
        score=game.scores[team],
        glory=game.glory[team],
        score_excl_glory=game.scores[team] - game.glory[team],
    )


def render_game(
    game: GameResult,
    group: Sequence[GameResult],
    occurrences: Counter[str] | None = None,
) -> RenderableGame:
    """
    Build the display structure for one game of a seed group.

    Args:
        game: The game to render; must be a member of ``group``
        group: All games sharing the seed, including ``game``
        occurrences: Precomputed ``count_player_occurrences(group)``, if available

    Raises:
        ValueError: If ``game`` is not part of ``group``

    """
    if game not in group:
        raise ValueError("Game to render must be part of its comparison group")
    if occurrences is None:
        occurrences = count_player_occurrences(group)

    sp = game.starting_player
    return RenderableGame(
        players=game.players,
        unique_players=tuple(p for p in game.players if occurrences[p] == 1),
        starting_player=game.players[sp],
        trump=game.trump,
        playing_team=_team(game, 0, sp),
        opposing_team=_team(game, 1, (sp + 1) % NUM_PLAYERS),
        rounds=tuple(_render_round(game, group, i) for i in range(NUM_ROUNDS)),
    )


def build_comparison(group: Sequence[GameResult]) -> list[RenderableGame]:
    """Render every game of a seed group, in input order.

    Callers handle groups that are too small via insufficient_group_message().
    """
    if len(group) < MIN_GROUP_SIZE:
        raise ValueError(f"Need at least {MIN_GROUP_SIZE} games to compare, got {len(group)}")
    occurrences = count_player_occurrences(group)
    return [render_game(game, group, occurrences) for game in group]
