"""Unit tests for /src/xox/game.py"""

import pytest

from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    InvalidRequestError,
    NotYourTurnError,
    PlayerNotFoundError,
    RepositoryError,
)
from src.core.models import GameModel, PlayerModel
from src.core.shared_types import Status
from src.xox.actions import ClaimFieldAction
from src.xox.cell import Cell
from src.xox.game import Game
from src.xox.player import Player

MAX = Player("Max", "#CAFFEE")
MORITZ = Player("Moritz", "#1CE7EA")


@pytest.fixture
def game() -> Game:
    """Fresh game, Max to move."""
    return Game.new_game([MAX, MORITZ], starting_player="Max")


def play(game: Game, *indices: int) -> None:
    """Helper: players take turns claiming the given cells, starting with whoever is to move."""
    for index in indices:
        game.claim(game.current_player, index)


# --- NEW GAME ---
def test_new_game(game: Game) -> None:
    assert game.board.is_empty
    assert game.players == [MAX, MORITZ]
    assert game.current_player == "Max"
    assert game.status == Status.IN_PROGRESS
    assert not game.is_over


def test_second_player_may_start() -> None:
    game = Game.new_game([MAX, MORITZ], starting_player="Moritz")
    assert game.current_player == "Moritz"
    assert len(game.actions("Moritz")) == 9
    assert game.actions("Max") == []


@pytest.mark.parametrize(
    "players, starting_player",
    [
        ([MAX], "Max"),  # not enough players
        ([MAX, MORITZ, Player("Witwe Bolte", "#000000")], "Max"),  # too many
        ([MAX, Player("Max", "#1CE7EA")], "Max"),  # duplicate names
        ([MAX, Player("  ", "#1CE7EA")], "Max"),  # blank name
        ([MAX, MORITZ], "Lempel"),  # starting player not in the game
    ],
)
def test_invalid_new_game(players: list[Player], starting_player: str) -> None:
    with pytest.raises(InvalidRequestError):
        Game.new_game(players, starting_player)


# --- ACTIONS ---
def test_actions_on_empty_board(game: Game) -> None:
    """Turn player can claim every cell, the opponent nothing."""
    actions = game.actions("Max")
    assert len(actions) == 9
    assert [action.index for action in actions] == list(range(9))
    assert all(action.player == "Max" for action in actions)
    assert actions[0] == ClaimFieldAction(0, 0, "Max")
    assert game.actions("Moritz") == []


def test_actions_for_unknown_player(game: Game) -> None:
    with pytest.raises(PlayerNotFoundError):
        game.actions("Struwwelpeter")


def test_actions_after_first_claim(game: Game) -> None:
    game.claim("Max", 0)
    assert game.actions("Max") == []
    actions = game.actions("Moritz")
    assert len(actions) == 8
    assert 0 not in [action.index for action in actions]


# --- CLAIMS ---
def test_claim_passes_turn(game: Game) -> None:
    action = game.claim("Max", 4)
    assert action == ClaimFieldAction(1, 1, "Max")
    assert game.board.owner(action.cell) == "Max"
    assert game.current_player == "Moritz"
    assert game.status == Status.IN_PROGRESS


def test_not_your_turn(game: Game) -> None:
    with pytest.raises(NotYourTurnError):
        game.claim("Moritz", 0)
    assert game.board.is_empty
    assert game.current_player == "Max"


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_index_out_of_range(game: Game, index: int) -> None:
    with pytest.raises(IllegalMoveError):
        game.claim("Max", index)
    assert game.board.is_empty
    assert game.current_player == "Max"


def test_cell_already_claimed(game: Game) -> None:
    game.claim("Max", 0)
    with pytest.raises(IllegalMoveError):
        game.claim("Moritz", 0)
    assert game.board.owner(Cell(0, 0)) == "Max"
    assert game.current_player == "Moritz"


def test_claim_for_unknown_player(game: Game) -> None:
    with pytest.raises(PlayerNotFoundError):
        game.claim("Struwwelpeter", 0)


# --- END OF GAME ---
def test_three_in_a_line_wins(game: Game) -> None:
    """Max: 0, 1, 2 (top row). Moritz: 3, 4"""
    play(game, 0, 3, 1, 4, 2)

    assert game.status == Status.WON
    assert game.is_over
    assert game.ranking.game_over
    assert game.ranking.scores == {"Max": 1, "Moritz": 0}
    # Nobody can do anything anymore
    assert game.actions("Max") == []
    assert game.actions("Moritz") == []


def test_no_claims_after_game_over(game: Game) -> None:
    play(game, 0, 3, 1, 4, 2)
    for player in ["Max", "Moritz"]:
        with pytest.raises(GameStateError):
            game.claim(player, 8)


def test_full_board_is_a_draw(game: Game) -> None:
    """
    Max | Mor | Max
    Max | Mor | Mor
    Mor | Max | Max
    """
    play(game, 0, 1, 2, 4, 3, 5, 7, 6, 8)

    assert game.board.is_full
    assert game.status == Status.DRAW
    assert game.ranking.game_over
    assert game.ranking.scores == {"Max": 0, "Moritz": 0}
    assert game.actions("Max") == []
    assert game.actions("Moritz") == []


def test_winning_on_the_last_cell_is_a_win(game: Game) -> None:
    """
    Max | Mor | Max
    Mor | Mor | Max
    Mor | Max | Max  <- the last free cell completes the right column
    """
    play(game, 0, 1, 2, 3, 5, 4, 7, 6)
    game.claim("Max", 8)
    assert game.board.is_full
    assert game.status == Status.WON
    assert game.ranking.scores == {"Max": 1, "Moritz": 0}


# --- MODEL CONVERSION ---
def test_to_model(game: Game) -> None:
    game.claim("Max", 4)
    model = game.to_model()
    assert model == GameModel(
        players=[
            PlayerModel("Max", "#CAFFEE"),
            PlayerModel("Moritz", "#1CE7EA"),
        ],
        current_player="Moritz",
        status="in progress",
        cells=[None, None, None, None, "Max", None, None, None, None],
    )


def test_from_model_round_trip(game: Game) -> None:
    play(game, 0, 4, 8)
    assert Game.from_model(game.to_model()) == game


def test_from_model_invalid_status(game: Game) -> None:
    model = game.to_model()
    model.status = "resigned"
    with pytest.raises(RepositoryError):
        Game.from_model(model)


def test_from_model_unknown_current_player(game: Game) -> None:
    model = game.to_model()
    model.current_player = "Lempel"
    with pytest.raises(RepositoryError):
        Game.from_model(model)
