# langpack/core/models.py

"""
Core models for langpack.

Catalog entries are pydantic models so static data and user-supplied
catalogs go through the same validation. Per-run values (artifacts,
progress events, results) are plain dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, List, Union

from pydantic import (
    BaseModel,
    Field,
    field_validator,
    ConfigDict,
)

from langpack.core.constants import BASE_LANGUAGE, BASE_ARTIFACT_ID

# ==============================================================
# CATALOG ENTRY
# ==============================================================

class Component(BaseModel):
    """One selectable language pack."""
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    id: str = Field(
        ...,
        pattern=r"^[a-z]{2,3}$",
        description="Language code of the pack (ISO 639)"
    )
    display_name: str = Field(..., alias="displayName", min_length=1)
    size_estimate: str = Field(default="", alias="sizeEstimate")
    required: bool = False
    default_selected: bool = Field(default=False, alias="defaultSelected")

    @field_validator("id")
    @classmethod
    def _not_base_language(cls, v: str) -> str:
        if v == BASE_LANGUAGE:
            raise ValueError(f"'{BASE_LANGUAGE}' is the base language and is always installed")
        return v

# ==============================================================
# RUN VALUES
# ==============================================================

@dataclass(frozen=True)
class ArtifactRef:
    """A resolved download unit for one provisioning run."""
    component_id: str
    url: str
    staging_path: Path

    @property
    def is_base(self) -> bool:
        return self.component_id == BASE_ARTIFACT_ID

    @property
    def filename(self) -> str:
        return self.staging_path.name


class Phase(str, Enum):
    DOWNLOAD = "download"
    EXTRACT = "extract"


@dataclass(frozen=True)
class PhaseProgress:
    """Byte progress (download) or step progress (extract)."""
    phase: Phase
    unit_label: str
    completed: int
    total: int


@dataclass(frozen=True)
class LogMessage:
    """Free-form log line."""
    message: str


ProgressEvent = Union[PhaseProgress, LogMessage]


class RunState(str, Enum):
    IDLE = "idle"
    SELECTING = "selecting"
    DOWNLOADING = "downloading"
    EXTRACTING = "extracting"
    MANIFEST_WRITING = "manifest-writing"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (RunState.DONE, RunState.FAILED)


@dataclass
class ProvisioningResult:
    """Outcome of a run that reached DONE."""
    state: RunState
    skipped: bool = False
    installed_ids: List[str] = field(default_factory=list)
    warning: Optional[Exception] = None

    @property
    def manifest_written(self) -> bool:
        return not self.skipped and self.warning is None
