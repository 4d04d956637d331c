import os
import pymysql.cursors
from dotenv import load_dotenv

# Load environment variables from a .env file if it exists
load_dotenv()

class Config:
    """
    Database configuration for the profile store.

    All connection parameters come from environment variables so the same
    code runs locally, in CI and in the container.
    """

    MYSQL_CONFIG = {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", "root"),
        "database": os.getenv("DB_NAME", "profile_portal_db"),
        "charset": "utf8mb4",
        "cursorclass": pymysql.cursors.DictCursor
    }

    @staticmethod
    def get_db_config(db_required=True):
        """
        Return a copy of the connection settings.
        With db_required=False the database name is dropped so the server
        itself can be reached before the database exists.
        """
        config = Config.MYSQL_CONFIG.copy()
        if not db_required:
            config.pop('database', None)
        return config
