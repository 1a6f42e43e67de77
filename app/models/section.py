from pydantic import BaseModel, ConfigDict


class Section(BaseModel):
    """One heading-delimited region of a draft, with its character offsets."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    level: int
    content: str
    start_index: int
    end_index: int
