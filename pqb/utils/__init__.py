from pqb.utils import text, type_guards

__all__ = ("text", "type_guards")
