"""
Query Result Schemas.

Pydantic models for the JSON envelope returned by the /query endpoint:

    {"results": [{"series": [{"name": ..., "tags": {...},
                              "columns": [...], "values": [[...]]}],
                  "error": ...}],
     "error": ...}

Missing or null collections decode as empty so partially populated
responses still render. Unknown keys (statement_id, partial) are ignored.
"""

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

Scalar = Union[str, int, float, bool, None]
"""One cell of a result row."""


def _none_as_empty(value: Any, empty: Any) -> Any:
    return empty if value is None else value


class Series(BaseModel):
    """One named, tagged table of rows."""

    name: str = ""
    tags: dict[str, str] = Field(default_factory=dict)
    columns: list[str] = Field(default_factory=list)
    values: list[list[Scalar]] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> Any:
        return _none_as_empty(value, "")

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, value: Any) -> Any:
        return _none_as_empty(value, {})

    @field_validator("columns", "values", mode="before")
    @classmethod
    def _lists(cls, value: Any) -> Any:
        return _none_as_empty(value, [])


class SeriesResult(BaseModel):
    """Result of one statement."""

    series: list[Series] = Field(default_factory=list)
    error: str | None = None

    @field_validator("series", mode="before")
    @classmethod
    def _series(cls, value: Any) -> Any:
        return _none_as_empty(value, [])


class QueryResult(BaseModel):
    """Top-level response body."""

    results: list[SeriesResult] = Field(default_factory=list)
    error: str | None = None

    @field_validator("results", mode="before")
    @classmethod
    def _results(cls, value: Any) -> Any:
        return _none_as_empty(value, [])
