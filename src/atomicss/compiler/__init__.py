from atomicss.compiler.atomicify import AtomicCompiler, ClassNameCollector, compile_tree
from atomicss.compiler.naming import encode, safe_string
from atomicss.compiler.selectors import (
    normalize_selector,
    replace_self_reference,
    split_selector_list,
)
from atomicss.compiler.serialize import node_to_css, to_css, to_stylesheet

__all__ = [
    "AtomicCompiler",
    "ClassNameCollector",
    "compile_tree",
    "encode",
    "safe_string",
    "normalize_selector",
    "replace_self_reference",
    "split_selector_list",
    "node_to_css",
    "to_css",
    "to_stylesheet",
]
