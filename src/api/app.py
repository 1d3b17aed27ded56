"""
FastAPI application - REST resources for xox games.

Endpoints (relative to the configured base path, default /xox):
    GET    /                                      List game IDs
    POST   /                                      Create game, returns its ID as plain text
    GET    /{id}                                  Ranking
    DELETE /{id}                                  Delete game
    GET    /{id}/board                            Board
    GET    /{id}/players                          Players, in creation order
    GET    /{id}/players/{name}/actions           Cells the player may claim
    POST   /{id}/players/{name}/actions/{index}   Claim a cell

Domain errors are turned into JSON error responses by the exception handlers registered in create_app().
"""

import logging
from typing import Any, Optional, Sequence

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.models import (
    ActionResponse,
    ActionsRequest,
    BoardResponse,
    ClaimFieldRequest,
    CreateGameRequest,
    DeleteGameRequest,
    ErrorResponse,
    GameId,
    GetGameRequest,
    PlayerSchema,
    RankingResponse,
)
from src.core.config import Settings
from src.core.exceptions import GameError
from src.core.shared_types import ErrorKind
from src.db.memory_repository import InMemoryGameRepository
from src.services.xox_service import XoxService

logger = logging.getLogger(__name__)

HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.INVALID_STATE: 409,
    ErrorKind.STORAGE: 500,
}

ERROR_RESPONSES = {
    status: {"model": ErrorResponse, "description": kind.value}
    for kind, status in HTTP_STATUS.items()
}


def make_error_response(kind: ErrorKind, message: str) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=HTTP_STATUS[kind],
        content=ErrorResponse(error=kind, detail=message).model_dump(mode="json"),
    )


def format_validation_errors(errors: Sequence[Any]) -> str:
    """One "location: message" entry per error, ex. "body.startingPlayer: Field required"."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in errors
    )


def create_router(service: XoxService, base_path: str = "") -> APIRouter:
    router = APIRouter(prefix=base_path, tags=["xox"], responses=ERROR_RESPONSES)

    def list_games() -> list[GameId]:
        return service.list_games()

    def create_game(request: CreateGameRequest) -> PlainTextResponse:
        """The new game's ID is returned as plain text."""
        game_id = service.create_game(request)
        return PlainTextResponse(str(game_id))

    # The collection answers at the base path itself and with a trailing slash (no redirects).
    # Without a base path only "/" exists.
    collection_paths = ["", "/"] if base_path else ["/"]
    for path in collection_paths:
        router.add_api_route(
            path,
            list_games,
            methods=["GET"],
            response_model=list[GameId],
            summary="List all games",
            include_in_schema=path == collection_paths[0],
        )
        router.add_api_route(
            path,
            create_game,
            methods=["POST"],
            response_class=PlainTextResponse,
            summary="Create a new game",
            include_in_schema=path == collection_paths[0],
        )

    @router.get(
        "/{game_id}", response_model=RankingResponse, summary="Get the ranking"
    )
    def get_ranking(game_id: GameId) -> RankingResponse:
        return service.get_ranking(GetGameRequest(game_id=game_id))

    @router.delete("/{game_id}", summary="Delete a game")
    def delete_game(game_id: GameId) -> Response:
        service.delete_game(DeleteGameRequest(game_id=game_id))
        return Response(status_code=200)

    @router.get(
        "/{game_id}/board", response_model=BoardResponse, summary="Get the board"
    )
    def get_board(game_id: GameId) -> BoardResponse:
        return service.get_board(GetGameRequest(game_id=game_id))

    @router.get(
        "/{game_id}/players",
        response_model=list[PlayerSchema],
        summary="Get both players",
    )
    def get_players(game_id: GameId) -> list[PlayerSchema]:
        return service.get_players(GetGameRequest(game_id=game_id))

    @router.get(
        "/{game_id}/players/{player_name}/actions",
        response_model=list[ActionResponse],
        summary="Get the cells a player may claim",
    )
    def get_actions(game_id: GameId, player_name: str) -> list[ActionResponse]:
        """Empty unless it is this player's turn and the game is still running."""
        return service.get_actions(
            ActionsRequest(game_id=game_id, player_name=player_name)
        )

    @router.post(
        "/{game_id}/players/{player_name}/actions/{action_index}",
        summary="Claim a cell",
    )
    def claim_field(game_id: GameId, player_name: str, action_index: int) -> Response:
        service.claim_field(
            ClaimFieldRequest(
                game_id=game_id, player_name=player_name, action_index=action_index
            )
        )
        return Response(status_code=200)

    return router


def create_app(
    service: Optional[XoxService] = None, settings: Optional[Settings] = None
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: XoxService instance (a new one backed by an in-memory repository if not provided)
        settings: Settings (read from the environment if not provided)
    """
    settings = settings or Settings.from_env()
    if service is None:
        service = XoxService(InMemoryGameRepository())

    app = FastAPI(
        title="XOX Game Service",
        description="Tic-tac-toe games as REST resources.",
        version="1.0.0",
    )
    app.include_router(create_router(service, settings.base_path))

    @app.exception_handler(GameError)
    async def handle_game_error(request: Request, exc: GameError) -> JSONResponse:
        logger.warning(
            "%s %s rejected (%s): %s", request.method, request.url.path, exc.kind, exc
        )
        return make_error_response(exc.kind, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning(
            "%s %s rejected (malformed request): %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return make_error_response(
            ErrorKind.INVALID_INPUT, format_validation_errors(exc.errors())
        )

    return app
