from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import rules


class JoinConfig(BaseModel):
    """Column layout and category rules for one join run."""

    model_config = ConfigDict(frozen=True)

    skip_rows: int = Field(default=rules.SKIP_LINES, ge=0)
    id_index: int = Field(default=rules.ITEM_ID_INDEX, ge=0)
    name_index: int = Field(default=rules.NAME_CN_INDEX, ge=0)
    type_index: int = Field(default=rules.TYPE_ID_INDEX, ge=0)
    secondary_id_index: int = Field(default=rules.ITEM_ID_INDEX, ge=0)
    secondary_name_index: int = Field(default=rules.NAME_EN_INDEX, ge=0)
    allowed_types: FrozenSet[str] = Field(default=rules.TARGET_TYPE_IDS)
    type_labels: Mapping[str, str] = Field(default_factory=lambda: dict(rules.ITEM_TYPE_MAPPING), validate_default=True)
    missing_name: str = rules.MISSING_NAME
    unknown_type: str = rules.UNKNOWN_TYPE
    header: Tuple[str, ...] = rules.OUTPUT_HEADER

    @field_validator("type_labels", mode="after")
    @classmethod
    def _read_only_labels(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


class ResultRow(BaseModel):
    id: str
    cn_name: str
    en_name: str
    item_type: str


class JoinStats(BaseModel):
    primary_records: int = 0
    secondary_records: int = 0
    lookup_entries: int = 0
    rows: int = 0
    lookup_misses: int = 0
    unknown_types: int = 0


class CombinedCsv(BaseModel):
    sha256: str
    encoding: str = Field(default=rules.OUTPUT_ENCODING)
    content_b64: str


class JoinReport(BaseModel):
    summary: JoinStats
    primary_encoding: Optional[str] = Field(default=None, examples=["utf-8"])
    secondary_encoding: Optional[str] = Field(default=None, examples=["utf-8"])


class JoinResponse(BaseModel):
    combined_csv: CombinedCsv
    report: JoinReport

class HealthResponse(BaseModel):
    ok: bool = True
