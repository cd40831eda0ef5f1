"""
Model for repository summaries returned by the repository listing.
"""

from typing import Optional
from pydantic import BaseModel, Field


class Repo(BaseModel):
    """Model for a repository entry in the listing."""
    key: str
    rtype: str = Field(..., alias="type")
    description: Optional[str] = None
    url: Optional[str] = None

    model_config = {
        "extra": "ignore",
        "populate_by_name": True
    }
