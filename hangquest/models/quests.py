"""Quest model."""

from pydantic import BaseModel, ConfigDict, Field


class Quest(BaseModel):
    """Objective tracked across rounds."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    quest_id: str = Field(description="Unique quest identifier")
    name: str = Field(description="Quest name")
    description: str = Field(default="", description="Quest description")
    objective: str = Field(description="Event key that advances the quest (e.g. 'win_games')")
    progress: int = Field(ge=0, default=0, description="Current progress")
    target: int = Field(ge=1, description="Progress needed to complete the quest")
    completed: bool = Field(default=False, description="Whether the quest is completed")
    reward: int = Field(ge=0, default=0, description="Experience granted on completion")
