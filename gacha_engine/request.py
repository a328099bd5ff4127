"""
Normalize raw JSON-style payloads into ``GachaRequest`` and back.
"""
import math
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from gacha_engine.config import DEFAULT_CONFIG
from gacha_engine.errors import InvalidRequest
from gacha_engine.types import GachaRequest, InitialState

VALID_POOLS = {
    "genshin": ("character", "weapon"),
    "hsr": ("character", "lightcone"),
    "zzz": ("character", "weapon"),
}


def _floor_or_zero(value):
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return int(math.floor(number))


class InitialStateBody(BaseModel):
    """``initialState`` object; bad counters fall back to 0 instead of failing."""

    pity: int = 0
    is_guaranteed: bool = Field(False, alias="isGuaranteed")
    mingguang_counter: int = Field(0, alias="mingguangCounter")
    fate_point: int = Field(0, alias="fatePoint")

    @field_validator("pity", "mingguang_counter", "fate_point", mode="before")
    @classmethod
    def _non_negative(cls, value):
        return _floor_or_zero(value)

    @field_validator("is_guaranteed", mode="before")
    @classmethod
    def _guaranteed_flag(cls, value):
        if isinstance(value, str):
            return value == "true"
        return bool(value)

    def to_state(self):
        return InitialState(
            pity=self.pity,
            is_guaranteed=self.is_guaranteed,
            mingguang_counter=self.mingguang_counter,
            fate_point=self.fate_point,
        )


class RequestBody(BaseModel):
    """Request body as posted by the calculator page."""

    game: str
    pool: str
    target_count: float = Field(1.0, gt=0, allow_inf_nan=False, alias="targetCount")
    budget: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    mode: str = "expectation"
    up4_c6: bool = Field(False, alias="up4C6")
    initial_state: InitialStateBody = Field(default_factory=InitialStateBody, alias="initialState")

    @field_validator("target_count", mode="before")
    @classmethod
    def _default_target(cls, value):
        return 1.0 if value is None or value == "" else value

    @field_validator("budget", mode="before")
    @classmethod
    def _empty_budget(cls, value):
        return None if value == "" else value

    @field_validator("mode", mode="before")
    @classmethod
    def _known_mode(cls, value):
        return "distribution" if value == "distribution" else "expectation"

    @field_validator("up4_c6", mode="before")
    @classmethod
    def _truthy(cls, value):
        return bool(value)

    @field_validator("initial_state", mode="before")
    @classmethod
    def _missing_state(cls, value):
        return {} if value is None else value

    @model_validator(mode="after")
    def _check_pool(self):
        if self.game not in VALID_POOLS:
            raise ValueError(f"unknown game: {self.game!r}")
        if self.pool not in VALID_POOLS[self.game]:
            raise ValueError(f"pool {self.pool!r} is not valid for {self.game}")
        return self

    def to_request(self):
        return GachaRequest(
            game=self.game,
            pool=self.pool,
            target_count=max(1, int(math.floor(self.target_count))),
            initial_state=self.initial_state.to_state(),
            budget=self.budget,
            mode=self.mode,
            up4_c6=self.up4_c6,
        )


def parse_request(payload):
    """Validate a request body and return a ``GachaRequest``."""
    try:
        body = RequestBody.model_validate(payload)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}" for err in e.errors()
        )
        raise InvalidRequest(f"invalid request: {details}") from e
    return body.to_request()


def clamp_simulation_count(count, config=None):
    config = DEFAULT_CONFIG if config is None else config
    if count is None:
        return None
    if count <= 0:
        raise InvalidRequest("simulation count must be positive")
    return min(int(count), config.max_simulation_count)


def build_response(request, result):
    """Wire payload for a finished request."""
    out = {"mode": request.mode, "args": request.to_dict()}
    if request.mode == "distribution":
        data = result.to_dict()
        out["pulls"] = data["pulls"]
        if "successRate" in data:
            out["success_rate"] = data["successRate"]
        if "returns" in data:
            out["returns"] = data["returns"]
    else:
        out["pulls"] = result.to_dict()
    return out
