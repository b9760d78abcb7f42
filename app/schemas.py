"""Pydantic models for generated word details and saved words.

Field names are snake_case in Python and camelCase on the wire, matching the
JSON shape the model returns and the shape persisted in local storage.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    """Immutable record that keeps any extra keys the model returned."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Example(_Record):
    sentence: str = ""
    translation: str = ""


class WordForm(_Record):
    pos: str = ""
    word: str = ""
    definition: str = ""
    example: str = ""
    example_translation: str = ""


class RelatedWord(_Record):
    word: str = ""
    translation: str = ""
    breakdown: str = ""


class Etymology(_Record):
    root: str = ""
    root_source: str = ""
    root_meaning: str = ""
    root_development: str = ""
    related_words: list[RelatedWord] = Field(default_factory=list)


class Synonym(_Record):
    word: str = ""
    usage_difference: str = ""
    example: str = ""
    example_translation: str = ""


class ConfusableWord(_Record):
    word: str = ""
    pos: str = ""
    definition: str = ""


class WordDetails(_Record):
    """Full linguistic breakdown of a single headword."""

    pos: str = ""
    syllabification: str = ""
    pronunciation: str = ""
    common_meaning: str = ""
    etymological_meaning: str = ""
    examples: list[Example] = Field(default_factory=list)
    forms: list[WordForm] = Field(default_factory=list)
    etymology: Etymology = Field(default_factory=Etymology)
    synonyms: list[Synonym] = Field(default_factory=list)
    confusable_words: list[ConfusableWord] = Field(default_factory=list)


class SavedWord(_Record):
    """Snapshot of a looked-up word plus the user's similar-word annotations."""

    word: str
    details: WordDetails
    similar_words: list[str] = Field(default_factory=list)
