from functools import lru_cache

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser


@lru_cache
def _get_parser() -> Parser:
    language = Language(tree_sitter_javascript.language())
    return Parser(language)


def parse(code: str) -> Node:
    parser = _get_parser()
    return parser.parse(code.encode("utf8")).root_node
