"""Résumé and code sample data models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .consts import LANGUAGE_LEVEL_FLUENT, LANGUAGE_LEVELS
from .form import parse_schema


class ApiModel(BaseModel):
    """Base model for payloads of the résumé service (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalData(ApiModel):
    name: str
    description: str = ""
    location: str = ""
    photo_url: str = ""
    email_address: str = ""
    linkedin_url: str = ""
    github_url: str = ""


class Introduction(ApiModel):
    title: str
    description: str = ""


class Skill(ApiModel):
    description: str
    image_url: str = ""


class Company(ApiModel):
    name: str
    period: str = ""
    location: str = ""


class Role(ApiModel):
    name: str
    period: str = ""
    description: str = ""


class Experience(ApiModel):
    company: Company
    roles: list[Role] = Field(default_factory=list)


class Language(ApiModel):
    name: str
    level: int
    description: str = ""
    image_url: str = ""

    @property
    def level_name(self) -> str:
        return LANGUAGE_LEVELS.get(self.level, LANGUAGE_LEVEL_FLUENT)


class Education(ApiModel):
    title: str
    institution: str = ""
    period: str = ""
    location: str = ""


class Article(ApiModel):
    """Placeholder for articles; the service currently returns none."""

    model_config = ConfigDict(extra="allow")


class Resume(ApiModel):
    personal_data: PersonalData
    introduction: Introduction
    skills: list[Skill] = Field(default_factory=list)
    experiences: list[Experience] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    articles: list[Article] = Field(default_factory=list)


class CodeSample(BaseModel):
    """A remotely executable snippet parameterized by an input schema."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="ID")
    name: str = Field(alias="Name")
    description: str = Field(default="", alias="Description")
    input_schema: str = Field(default="", alias="InputSchema")
    thumbnail_url: str = Field(default="", alias="ThumbnailURL")

    def parse_schema(self):
        """Parse ``input_schema`` into form field descriptors.

        Returns:
            Tuple of (fields, error) as returned by ``vitae.form.parse_schema``
        """
        return parse_schema(self.input_schema)


class RunRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sample_id: str = Field(alias="sampleId")
    input: dict[str, Any] = Field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class RunResult(BaseModel):
    """Outcome of a code sample execution.

    A detailed result carries ``source_code``, ``output``, ``duration`` and
    ``log``; a simple one carries ``result``. Anything else the service
    answers is kept verbatim in ``raw``.
    """

    result: Optional[str] = None
    source_code: Optional[str] = None
    output: Optional[str] = None
    duration: Optional[str] = None
    log: list[str] = Field(default_factory=list)
    raw: Optional[str] = None

    @property
    def is_detailed(self) -> bool:
        return self.source_code is not None

    @classmethod
    def from_response(cls, data: Any, text: str) -> "RunResult":
        """Interpret a decoded response body.

        Args:
            data: Decoded JSON body
            text: Raw response text, kept when the body has no known shape
        """
        if isinstance(data, dict):
            if isinstance(data.get("result"), str):
                return cls(result=data["result"])

            source_code = data.get("sourceCode")
            output = data.get("output")
            duration = data.get("duration")
            if all(isinstance(v, str) for v in (source_code, output, duration)):
                log = data.get("log")
                if not isinstance(log, list):
                    log = []
                return cls(
                    source_code=source_code,
                    output=output,
                    duration=duration,
                    log=[str(line) for line in log],
                )

        return cls(raw=text)
