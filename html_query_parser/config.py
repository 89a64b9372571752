import codecs

from lxml import etree
from pydantic import BaseModel, Field, field_validator

# Python codec names mapped to the spelling libxml2 handles without iconv
LIBXML2_ENCODINGS = {
    "utf-8": "UTF-8",
    "utf-16-le": "UTF-16LE",
    "utf-16-be": "UTF-16BE",
    "iso8859-1": "ISO-8859-1",
    "ascii": "ASCII",
}


class ParseOptions(BaseModel):
    """Options forwarded to the lxml HTML parser.

    ``encoding`` only applies to bytes input; text input is always parsed
    as UTF-8.
    """

    encoding: str = Field(default="UTF-8")
    remove_comments: bool = Field(default=False)
    remove_pis: bool = Field(default=False)
    huge_tree: bool = Field(default=False)

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            value = LIBXML2_ENCODINGS.get(codecs.lookup(value).name, value)
        except LookupError:
            pass
        try:
            etree.HTMLParser(encoding=value)
        except LookupError:
            raise ValueError(f"Unknown encoding: {value}")
        return value
