"""Pydantic schemas for export files."""

from pydantic import BaseModel


class ExportFile(BaseModel):
    """A generated file ready for download."""

    filename: str
    media_type: str
    content: str
    count: int
