"""Declarative description of the structured word-details response.

The descriptor is plain data so any completion transport can render it into
whatever schema dialect it needs; ``to_json_schema`` produces standard JSON
Schema.
"""

from dataclasses import dataclass
from typing import Any, Literal

FieldType = Literal["string", "array", "object"]


@dataclass(frozen=True)
class FieldSpec:
    """One field of the expected response."""

    name: str
    type: FieldType = "string"
    description: str = ""
    # Child fields for objects, or the item fields for arrays of objects
    fields: tuple["FieldSpec", ...] = ()
    required: bool = True


@dataclass(frozen=True)
class ResponseSpec:
    """Top-level object the model is asked to return."""

    name: str
    fields: tuple[FieldSpec, ...] = ()


def _string(name: str, description: str) -> FieldSpec:
    return FieldSpec(name=name, type="string", description=description)


WORD_DETAILS_SCHEMA = ResponseSpec(
    name="word_details",
    fields=(
        _string("pos", "The primary part of speech of the word, e.g., 'Verb'."),
        _string("syllabification", "The word divided into syllables, e.g., 'beau-ti-ful'."),
        _string(
            "pronunciation",
            "The International Phonetic Alphabet (IPA) pronunciation, e.g., '/ˈbjuːtɪfl/'.",
        ),
        _string(
            "commonMeaning",
            "A common, easy-to-understand definition of the word in Chinese.",
        ),
        _string(
            "etymologicalMeaning",
            "An explanation of the word's meaning based on its root and affixes, in Chinese.",
        ),
        FieldSpec(
            name="examples",
            type="array",
            description=(
                "At least three example sentences using the word in its primary form, "
                "with Chinese translations."
            ),
            fields=(
                _string("sentence", "The example sentence in English."),
                _string("translation", "The Chinese translation of the example sentence."),
            ),
        ),
        FieldSpec(
            name="forms",
            type="array",
            description=(
                "Different forms of the word (e.g., noun, verb, adjective, adverb), each "
                "with a definition and an example sentence with translation."
            ),
            fields=(
                _string("pos", "Part of speech for this form."),
                _string("word", "The word in that form."),
                _string("definition", "The definition of this specific form in Chinese."),
                _string("example", "An example sentence using this form."),
                _string(
                    "exampleTranslation",
                    "The Chinese translation of the example for this form.",
                ),
            ),
        ),
        FieldSpec(
            name="etymology",
            type="object",
            fields=(
                _string("root", "The primary root of the word."),
                _string(
                    "rootSource",
                    "The language of origin for the root, e.g., 'Latin', 'Greek'.",
                ),
                _string("rootMeaning", "The meaning of the root in Chinese."),
                _string(
                    "rootDevelopment",
                    "A brief history in Chinese of the root's development, its evolution, "
                    "and how it entered English.",
                ),
                FieldSpec(
                    name="relatedWords",
                    type="array",
                    description=(
                        "Other English words from the same root, with translations and "
                        "breakdowns."
                    ),
                    fields=(
                        _string("word", "The related word."),
                        _string("translation", "The Chinese translation of the related word."),
                        _string(
                            "breakdown",
                            "The morphological breakdown, e.g., 'prefix + root = meaning'.",
                        ),
                    ),
                ),
            ),
        ),
        FieldSpec(
            name="synonyms",
            type="array",
            description=(
                "A list of synonyms. For each synonym, provide its usage difference "
                "compared to the searched word and an example sentence with a Chinese "
                "translation illustrating that difference."
            ),
            fields=(
                _string("word", "The synonym."),
                _string(
                    "usageDifference",
                    "Explanation of the nuance or usage difference compared to the "
                    "original word, in Chinese.",
                ),
                _string("example", "An example sentence using the synonym."),
                _string(
                    "exampleTranslation",
                    "The Chinese translation of the synonym's example sentence.",
                ),
            ),
        ),
        FieldSpec(
            name="confusableWords",
            type="array",
            description=(
                "A list of visually or phonetically similar English words that are "
                "commonly confused with the primary word. For each, provide its primary "
                "part of speech and a concise Chinese definition."
            ),
            fields=(
                _string("word", "The confusable word."),
                _string("pos", "The primary part of speech of the confusable word."),
                _string("definition", "A concise Chinese definition of the confusable word."),
            ),
        ),
    ),
)


def _object_schema(fields: tuple[FieldSpec, ...]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {f.name: _field_schema(f) for f in fields},
        "required": [f.name for f in fields if f.required],
    }


def _field_schema(spec: FieldSpec) -> dict[str, Any]:
    if spec.type == "object":
        schema = _object_schema(spec.fields)
    elif spec.type == "array":
        items = _object_schema(spec.fields) if spec.fields else {"type": "string"}
        schema = {"type": "array", "items": items}
    else:
        schema = {"type": "string"}

    if spec.description:
        schema["description"] = spec.description
    return schema


def to_json_schema(spec: ResponseSpec) -> dict[str, Any]:
    """Render a response descriptor as a JSON Schema object."""
    return _object_schema(spec.fields)
