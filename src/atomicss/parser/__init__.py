from atomicss.errors import ParseError
from atomicss.parser.transformer import parse_css

__all__ = ["ParseError", "parse_css"]
