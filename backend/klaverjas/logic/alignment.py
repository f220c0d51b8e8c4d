"""
Seat and turn-order arithmetic for comparing games of the same deal.

A seat is a fixed physical position (0-3). A turn position is the order of
play within a round, where position 0 is the round leader. Round 0 is led by
the game's starting player; every later round is led by the winner of the
previous round, so two playthroughs of one deal usually have different
leaders for the same round. Aligning by turn position lets their plays be
compared "at the same turn".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared.dal.models import NUM_PLAYERS, NUM_ROUNDS

if TYPE_CHECKING:
    from shared.dal.models import GameResult


def _check_round(round_index: int) -> None:
    if not (0 <= round_index < NUM_ROUNDS):
        raise ValueError(f"Invalid round {round_index}, expected 0-{NUM_ROUNDS - 1}")


def _check_seat(seat: int, what: str = "seat") -> None:
    if not (0 <= seat < NUM_PLAYERS):
        raise ValueError(f"Invalid {what} {seat}, expected 0-{NUM_PLAYERS - 1}")


def round_leader(game: GameResult, round_index: int) -> int:
    """Return the seat that leads the given round."""
    _check_round(round_index)
    if round_index == 0:
        return game.starting_player
    return game.round_winners[round_index - 1]


def turn_position(game: GameResult, round_index: int, seat: int) -> int:
    """Return the turn position (0 = leader) of a seat in the given round."""
    _check_seat(seat)
    return (seat - round_leader(game, round_index)) % NUM_PLAYERS


def seat_at_position(game: GameResult, round_index: int, position: int) -> int:
    """Return the seat playing at a turn position in the given round."""
    _check_seat(position, "turn position")
    return (round_leader(game, round_index) + position) % NUM_PLAYERS


def align_seat(game: GameResult, other_game: GameResult, round_index: int, seat: int) -> int:
    """
    Translate a seat of ``game`` into the seat of ``other_game`` with the same turn position.

    If seat 2 leads round 1 in ``game`` and seat 1 leads it in ``other_game``,
    seat 2 aligns with seat 1: both play first. Aligning a game with itself
    is the identity.
    """
    return seat_at_position(other_game, round_index, turn_position(game, round_index, seat))
