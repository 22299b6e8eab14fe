from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from portfolio_blend.analysis.universe import (
    normalize_risk,
    normalize_symbols,
    parse_symbol_list,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AllocationEntry(_CamelModel):
    symbol: str
    weight: float = Field(ge=0.0)


class PortfolioStats(_CamelModel):
    expected_return: float = 0.0
    expected_volatility: float = Field(default=0.0, ge=0.0)


class OptimizeRequest(_CamelModel):
    symbols: list[str] = Field(default_factory=list, validate_default=True)
    risk: float = 0.6

    @field_validator("symbols", mode="before")
    @classmethod
    def clean_symbols(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            value = parse_symbol_list(value)
        elif not isinstance(value, (list, tuple)):
            value = []
        return normalize_symbols(value)

    @field_validator("risk", mode="before")
    @classmethod
    def clean_risk(cls, value: Any) -> float:
        return normalize_risk(value)


class OptimizeResponse(_CamelModel):
    allocations: list[AllocationEntry] = []
    expected_return: float = 0.0
    expected_volatility: float = Field(default=0.0, ge=0.0)
    rationale: str = ""


class GoalInterpretation(BaseModel):
    risk: float
    horizon_years: int
    notes: list[str] = []
