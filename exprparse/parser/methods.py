"""
Registry of parsing methods and the `parse()` entry point.

Author: xwest
"""

from typing import Dict, List, Optional, Type

from .ast_nodes import Node
from .errors import UnknownMethodError
from .parser import Parser
from .naive import NaiveParser
from .rewriting import TreeRewritingParser, CompleteTreeRewritingParser
from .pratt import PrattParser


# Ordered from most wrong to reference-correct
PARSE_METHODS: Dict[str, Type[Parser]] = {
    parser_class.name: parser_class
    for parser_class in (
        NaiveParser,
        TreeRewritingParser,
        CompleteTreeRewritingParser,
        PrattParser,
    )
}

REFERENCE_METHOD = PrattParser.name


def method_names() -> List[str]:
    return list(PARSE_METHODS)


def get_parser_class(method: str) -> Type[Parser]:
    """
    Look up a parser class by method name.

    Raises:
        UnknownMethodError: If `method` is not registered
    """
    try:
        return PARSE_METHODS[method]
    except KeyError:
        raise UnknownMethodError(method, PARSE_METHODS) from None


def parse(method: str, source: str, filename: str = "<string>") -> Optional[Node]:
    """
    Tokenize `source` and parse it with the named method.

    Args:
        method: One of naive, tree-rewriting, tree-rewriting-complete, pratt
        source: Expression text
        filename: Name used in diagnostics

    Returns:
        Root of the tree, or None if the input has no leading variable

    Raises:
        UnknownMethodError: If `method` is not registered
    """
    from ..lexer import tokenize_string

    parser_class = get_parser_class(method)
    tokens = tokenize_string(source, filename)
    return parser_class(tokens).parse()
