from __future__ import annotations

from enum import StrEnum


class DataProviderEnum(StrEnum):
    LOCAL = "local"
    DOCUMENT_STORE = "document_store"
    TABLE_STORE = "table_store"
