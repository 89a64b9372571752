from typing import Optional, Union
import logging

from lxml import etree, html

from .config import ParseOptions
from .exceptions import ParseError
from .tree import Document

logger = logging.getLogger(__name__)


def build_parser(options: Optional[ParseOptions] = None, encoding: Optional[str] = None) -> html.HTMLParser:
    """Create a recovering lxml HTML parser from *options*.

    *encoding* overrides ``options.encoding``.
    """
    options = options or ParseOptions()
    return html.HTMLParser(
        recover=True,
        encoding=encoding or options.encoding,
        remove_comments=options.remove_comments,
        remove_pis=options.remove_pis,
        huge_tree=options.huge_tree,
    )


def parse_markup(markup: Union[str, bytes], options: Optional[ParseOptions] = None) -> Document:
    """
    Parse HTML markup into a :class:`Document`.

    Args:
        markup: HTML text, or bytes in the configured encoding
        options: Parser options; their encoding only applies to bytes

    Returns:
        Document wrapping the parsed tree. Empty, whitespace-only and
        unparseable input produce an empty document instead of an error.
    """
    options = options or ParseOptions()

    if markup is None:
        return Document()

    if isinstance(markup, str):
        # lxml rejects str input that carries an encoding declaration
        data = markup.encode("utf-8", errors="replace")
        encoding = "UTF-8"
    elif isinstance(markup, (bytes, bytearray)):
        data = bytes(markup)
        encoding = options.encoding
    else:
        raise ParseError(f"Markup must be str or bytes, not {type(markup).__name__}")

    if not data.strip():
        return Document()

    try:
        root = html.document_fromstring(data, parser=build_parser(options, encoding))
    except (etree.ParserError, etree.XMLSyntaxError) as e:
        logger.debug(f"Markup produced no tree, using an empty document: {str(e)}")
        return Document()

    return Document(root.getroottree())
