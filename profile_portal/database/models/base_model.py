from typing import Any, Dict, List, Optional, Type, TypeVar
from uuid6 import uuid7
from profile_portal.database.db_manager import DBManager
from datetime import datetime, timezone

T = TypeVar("T", bound="BaseModel")

class BaseModel:
    _table_name: Optional[str] = None
    _allowed_fields: set[str] = set()

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize model instance, parsing ISO timestamps back into datetimes.
        """
        super().__init__()
        for key, value in kwargs.items():
            if key in ('created_at', 'updated_at', 'deleted_at') and isinstance(value, str):
                try:
                    value = datetime.fromisoformat(value)
                except (ValueError, TypeError):
                    pass
            setattr(self, key, value)

    @classmethod
    def from_row(cls: Type[T], row: Optional[Dict[str, Any]]) -> Optional[T]:
        if not row:
            return None
        return cls(**row)

    @classmethod
    def _get_base_query(cls, include_deleted: bool = False) -> str:
        return f"SELECT * FROM {cls._table_name}" + ("" if include_deleted else " WHERE deleted_at IS NULL")

    @classmethod
    def _filter_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in data.items() if not cls._allowed_fields or k in cls._allowed_fields}

    @classmethod
    def create(cls: Type[T], data: Dict[str, Any]) -> str:
        if not cls._table_name:
            raise ValueError("Model must define _table_name")
        record_id = data.get("id") or str(uuid7())
        allowed = cls._filter_fields(data)
        allowed["id"] = record_id
        allowed.setdefault("created_at", datetime.now(timezone.utc))
        columns = ", ".join(allowed.keys())
        placeholders = ", ".join(["%s"] * len(allowed))
        query = f"INSERT INTO {cls._table_name} ({columns}) VALUES ({placeholders})"
        try:
            DBManager.execute_write_query(query, tuple(allowed.values()))
            return record_id
        except Exception as e:
            raise ValueError(f"Failed to create record in {cls._table_name}: {e}")

    @classmethod
    def update(cls: Type[T], record_id: str, data: Dict[str, Any]) -> bool:
        if not cls._table_name:
            raise ValueError("Model must define _table_name")
        if not cls.find_by_id(record_id):
            return False
        data = {k: v for k, v in cls._filter_fields(data).items() if k not in ("id", "created_at")}
        if not data:
            return True
        data["updated_at"] = datetime.now(timezone.utc)
        set_clause = ", ".join([f"{k} = %s" for k in data.keys()])
        query = f"UPDATE {cls._table_name} SET {set_clause} WHERE id = %s"
        try:
            DBManager.execute_write_query(query, tuple(list(data.values()) + [record_id]))
            return True
        except Exception as e:
            raise ValueError(f"Failed to update record in {cls._table_name}: {e}")

    @classmethod
    def find_all(cls: Type[T], include_deleted: bool = False) -> List[T]:
        results: List[Dict[str, Any]] = DBManager.execute_query(cls._get_base_query(include_deleted), fetch='all') or []
        return [cls.from_row(r) for r in results if r]

    @classmethod
    def find_by_id(cls: Type[T], id: str, include_deleted: bool = False) -> Optional[T]:
        base = cls._get_base_query(include_deleted)
        clause = "AND" if "WHERE" in base else "WHERE"
        query = f"{base} {clause} id = %s"
        result = DBManager.execute_query(query, (id,), fetch='one')
        return cls.from_row(result)
