"""Defines the participants of a game"""

from dataclasses import dataclass
from typing import Self

from src.core.models import PlayerModel


@dataclass(frozen=True)
class Player:
    name: str
    # Any string is accepted, usually a hex colour like "#CAFFEE"
    preferred_colour: str

    @classmethod
    def from_model(cls, model: PlayerModel) -> Self:
        return cls(model.name, model.preferred_colour)

    def to_model(self) -> PlayerModel:
        return PlayerModel(name=self.name, preferred_colour=self.preferred_colour)
