import logging
import os
from profile_portal.database.base import get_db_connection
from profile_portal.database.config import Config
from profile_portal.database.schema import create_schema
from profile_portal.database.models.user import User

logger = logging.getLogger(__name__)

def init_db():
    """
    Initialize the profile database:
    1. Create the database if it does not exist
    2. Create the users table (CREATE TABLE IF NOT EXISTS)
    3. Seed a default account when no users exist
    """
    logger.info("Initializing database...")

    try:
        db_name = Config.get_db_config(db_required=True).get('database')
        if db_name:
            # Connect without selecting a DB
            conn = get_db_connection(db_required=False)
            try:
                with conn.cursor() as cursor:
                    cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{db_name}`")
                logger.info(f"Database '{db_name}' verified/created")
            finally:
                conn.close()

        create_schema()
        logger.info("Tables verified/created")

        existing_users = User.find_all()
        if existing_users:
            logger.info(f"Found {len(existing_users)} existing user(s). Skipping default account creation.")
            return

        admin_email = os.getenv('ADMIN_EMAIL', 'admin@example.com')
        User.create({
            'username': os.getenv('ADMIN_USERNAME', 'admin'),
            'email': admin_email,
            'password': os.getenv('ADMIN_PASSWORD', 'admin123'),
            'name': os.getenv('ADMIN_NAME', 'System Administrator'),
        })
        logger.info(f"Default account created: {admin_email}")

    except Exception:
        # The app can still start; requests touching the database will fail and report it.
        logger.exception("Error initializing database")
