from atomicss.shorthand.ordering import is_shorthand, order_declarations, precedes_in_cascade
from atomicss.shorthand.table import SHORTHAND_FOR

__all__ = ["SHORTHAND_FOR", "is_shorthand", "order_declarations", "precedes_in_cascade"]
