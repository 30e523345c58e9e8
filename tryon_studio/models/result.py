"""Try-on outcome models."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ImageArtifact(BaseModel):
    """A generated image, ready for display and download."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    data_url: str = Field(repr=False)


class NoImageFound(BaseModel):
    """The provider answered, but without any inline image."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["no_image"] = "no_image"


class Failure(BaseModel):
    """The request failed before a result could be extracted."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    message: str


TryOnResult = Annotated[
    Union[ImageArtifact, NoImageFound, Failure],
    Field(discriminator="kind"),
]
