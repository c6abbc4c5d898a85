"""Reusable form type aliases for FastAPI form parameters."""

from __future__ import annotations

from typing import Annotated, Literal, Optional, TypeAlias

from fastapi import File, Form, UploadFile

UploadForm: TypeAlias = Annotated[UploadFile, File(...)]
OptStrForm: TypeAlias = Annotated[Optional[str], Form()]
StrategyForm: TypeAlias = Annotated[Literal["auto", "heuristic", "llm"], Form()]
BoolForm: TypeAlias = Annotated[bool, Form()]
