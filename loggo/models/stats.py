"""Statistics data models."""

from pydantic import BaseModel, Field


class ActivityStats(BaseModel):
    """Summary statistics over a list of activities."""

    total_gains: float = Field(default=0.0, ge=0, description="Sum of win amounts")
    total_losses: float = Field(default=0.0, ge=0, description="Sum of loss amounts")
    net_profit: float = Field(default=0.0, description="Gains minus losses")
    win_rate: float = Field(default=0.0, ge=0, le=100, description="Win rate percentage")
    total_activities: int = Field(default=0, ge=0, description="Number of activities")
    gains_count: int = Field(default=0, ge=0, description="Number of wins")
    losses_count: int = Field(default=0, ge=0, description="Number of losses")

    model_config = {"frozen": True}


class CumulativePoint(BaseModel):
    """One point of the cumulative profit/loss series."""

    index: int = Field(..., ge=1, description="1-based position in timestamp order")
    value: float = Field(..., description="Running total after this activity")

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return f"Activity {self.index}"
