from .base import get_db_connection

USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id CHAR(36) PRIMARY KEY,
    username VARCHAR(255) NOT NULL UNIQUE,
    email VARCHAR(255) NOT NULL UNIQUE,
    password_hash VARCHAR(255) NOT NULL,
    name VARCHAR(255) DEFAULT NULL,
    phone VARCHAR(32) DEFAULT NULL,
    avatar VARCHAR(512) DEFAULT NULL,
    house_no VARCHAR(64) DEFAULT NULL,
    area_name VARCHAR(255) DEFAULT NULL,
    landmark VARCHAR(255) DEFAULT NULL,
    post_office VARCHAR(255) DEFAULT NULL,
    state VARCHAR(128) DEFAULT NULL,
    pin VARCHAR(16) DEFAULT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT NULL,
    deleted_at DATETIME DEFAULT NULL
);
"""

def create_schema():
    conn = get_db_connection()
    try:
        with conn.cursor() as cursor:
            cursor.execute(USERS_TABLE)
        conn.commit()
    finally:
        conn.close()
