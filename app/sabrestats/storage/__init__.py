from .db import ensure_schema, open_store, read_all, upsert

__all__ = ["ensure_schema", "open_store", "read_all", "upsert"]
