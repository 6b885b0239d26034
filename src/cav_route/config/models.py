import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


class InputModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file: str
    delimiter: str = ","

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))

    @field_validator("delimiter")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("delimiter must not be empty")
        return v


class GraphOptionsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # "incoming": neighbors of j are rows i with matrix[i][j] == 1
    adjacency: Literal["incoming", "outgoing"] = "incoming"
    require_symmetric: bool = False


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    priority_key: Literal["exact", "truncated"] = "exact"
    start: int = Field(default=0, ge=0)
    goal: int | None = Field(default=None, ge=0)  # None => last node


class RunModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    input: InputModel
    graph: GraphOptionsModel = GraphOptionsModel()
    search: SearchModel = SearchModel()
    log: LogModel = LogModel()
