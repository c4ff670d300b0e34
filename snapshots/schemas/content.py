from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Literal, Union


class ContentItem(BaseModel):
    """One swipeable snapshot card: a title and a markdown summary."""
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    title: str = Field(min_length=1)
    summary: str


class OutlineItem(BaseModel):
    """One content area of an outline with its subtopic lines."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = Field(min_length=1)
    subtopics: List[str] = Field(default_factory=list)


class Initial(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["initial"] = "initial"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    content_list: List[Union[ContentItem, OutlineItem]] = Field(default_factory=list)


class Error(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    message: str


UiState = Annotated[Union[Initial, Loading, Success, Error], Field(discriminator="status")]
