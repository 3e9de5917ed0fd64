"""atomicss: atomic CSS compilation and runtime class merging."""

__version__ = "0.1.0"

from atomicss.compiler import (  # noqa: E402
    AtomicCompiler,
    ClassNameCollector,
    compile_tree,
    normalize_selector,
    replace_self_reference,
    to_css,
    to_stylesheet,
)
from atomicss.config import DEFAULT_CONFIG, AtomicConfig  # noqa: E402
from atomicss.errors import (  # noqa: E402
    AtomicssError,
    CompileError,
    NestedRuleError,
    ParseError,
)
from atomicss.model import (  # noqa: E402
    AtomicRule,
    Comment,
    ConditionalBlock,
    Declaration,
    Rule,
    RuleTree,
    SourcePosition,
    UnknownNode,
)
from atomicss.parser import parse_css  # noqa: E402
from atomicss.runtime import AtomicGroups, MergeCache, ac, ax  # noqa: E402
from atomicss.shorthand import SHORTHAND_FOR, order_declarations, precedes_in_cascade  # noqa: E402

__all__ = [
    "__version__",
    # config
    "AtomicConfig",
    "DEFAULT_CONFIG",
    # model
    "AtomicRule",
    "Comment",
    "ConditionalBlock",
    "Declaration",
    "Rule",
    "RuleTree",
    "SourcePosition",
    "UnknownNode",
    # errors
    "AtomicssError",
    "CompileError",
    "NestedRuleError",
    "ParseError",
    # compiler
    "AtomicCompiler",
    "ClassNameCollector",
    "compile_tree",
    "normalize_selector",
    "replace_self_reference",
    "to_css",
    "to_stylesheet",
    "parse_css",
    # shorthand
    "SHORTHAND_FOR",
    "order_declarations",
    "precedes_in_cascade",
    # runtime
    "AtomicGroups",
    "MergeCache",
    "ac",
    "ax",
]
