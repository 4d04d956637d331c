from .base import get_db_connection
from datetime import datetime, date

def normalize_value(value):
    """Convert values pymysql returns into JSON-friendly ones."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value

def normalize_row(row):
    # Rows are dictionaries, as provided by DictCursor
    return {k: normalize_value(v) for k, v in row.items()}

class DBManager:
    """
    Single entry point for database access.
    Hides connection and cursor handling and normalizes returned rows.
    """

    @staticmethod
    def execute_query(query, params=None, fetch=None):
        """
        Run a read query. fetch='one' returns a row dict or None,
        fetch='all' returns a list of row dicts.
        """
        conn = get_db_connection()
        try:
            with conn.cursor() as cursor:
                cursor.execute(query, params or ())

                if fetch == 'one':
                    row = cursor.fetchone()
                    return normalize_row(row) if row else None

                if fetch == 'all':
                    rows = cursor.fetchall()
                    return [normalize_row(r) for r in rows] if rows else []

                return None
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    @staticmethod
    def execute_write_query(query, params=None):
        """
        Run an INSERT/UPDATE/DELETE inside its own transaction.
        Returns the number of affected rows; rolls back and re-raises on error.
        """
        conn = get_db_connection()
        try:
            with conn.cursor() as cursor:
                affected = cursor.execute(query, params or ())
            conn.commit()
            return affected
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
