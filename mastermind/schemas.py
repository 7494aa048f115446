"""
Explicit validation & Pydantic models
- Define the structure of API requests and responses.
- Range limits here are the UI's limits (length 2..10, attempts 1..20);
  the game core itself accepts any positive values.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

Status = Literal["in_progress", "won", "lost"]


# 1. One palette entry (label/hex are display-only)
class PaletteColorIn(BaseModel):
    key: str = Field(..., min_length=1, description="Short identifying key, ex. 'r'")
    label: Optional[str] = Field(None, description="Display name, ex. 'Red'")
    hex: Optional[str] = Field(None, description="Swatch color, ex. '#ef4444'")


class PaletteColorOut(BaseModel):
    key: str
    label: str
    hex: Optional[str] = None


class PaletteOut(BaseModel):
    default: List[PaletteColorOut] = Field(..., description="Standard colors")
    extra: List[PaletteColorOut] = Field(..., description="Optional colors the UI can add")


# 2. Starting a game; anything left out comes from the server defaults
class NewGameRequest(BaseModel):
    length: Optional[int] = Field(None, ge=2, le=10, description="Code length")
    max_attempts: Optional[int] = Field(None, ge=1, le=20, description="Attempt budget")
    allow_duplicates: Optional[bool] = Field(None, description="May the secret repeat colors?")
    palette: Optional[List[PaletteColorIn]] = Field(None, description="Custom palette (keys must be unique)")
    extra_colors: bool = Field(False, description="Add cyan & magenta to the palette")

    @field_validator("palette")
    @classmethod
    def validate_palette(cls, palette: Optional[List[PaletteColorIn]]) -> Optional[List[PaletteColorIn]]:
        if palette is None:
            return palette
        if len(palette) == 0:
            raise ValueError("Palette must contain at least one color.")
        keys = [color.key for color in palette]
        if len(set(keys)) != len(keys):
            raise ValueError("Palette keys must be unique.")
        return palette

    model_config = {
        "json_schema_extra": {
            "examples": [
                {},
                {"length": 5, "max_attempts": 12, "allow_duplicates": False},
                {"length": 4, "extra_colors": True},
            ]
        }
    }


class ConfigOut(BaseModel):
    length: int
    max_attempts: int
    allow_duplicates: bool
    palette: List[PaletteColorOut]


class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; secret is never returned")
    status: Status = Field(..., description="Current state of the game")
    attempts_left: int = Field(..., description="How many guesses remain")
    config: ConfigOut


# 3. A guess; empty slots are sent as null and rejected by the game
class GuessRequest(BaseModel):
    guess: List[Optional[str]] = Field(..., description="One palette key per slot")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": ["r", "b", "g", "y"]},
            ]
        }
    }


class AttemptOut(BaseModel):
    guess: List[str] = Field(..., description="The player's guess")
    exact: int = Field(..., description="Right color, right position")
    partial: int = Field(..., description="Right color, wrong position")


class GameStateOut(BaseModel):
    game_id: str
    status: Status
    attempts_used: int
    attempts_left: int
    history: List[AttemptOut] = Field(..., description="All guesses made so far with feedback")
    config: ConfigOut
    secret: Optional[List[str]] = Field(None, description="Only filled once the game is over")


class GuessResponse(BaseModel):
    attempt: AttemptOut
    status: Status
    attempts_left: int
    secret: Optional[List[str]] = Field(None, description="The secret code (only revealed if game is over)")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Game lost. No more guesses allowed.')")


class SecretOut(BaseModel):
    game_id: str
    status: Status
    secret: List[str]
