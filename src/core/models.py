"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field

# Type aliases to make GameModel easier to read
PlayerName = str
Colour = str


@dataclass
class PlayerModel:
    name: PlayerName
    preferred_colour: Colour


@dataclass
class GameModel:
    """Transport-safe representation of an xox game used between API, Service, DB, and Game layers.

    cells are stored row by row: the cell (x, y) lives at cells[y * 3 + x] and holds the name of the player that claimed it.
    """

    players: list[PlayerModel]
    current_player: PlayerName
    status: str
    cells: list[PlayerName | None] = field(default_factory=lambda: [None] * 9)
