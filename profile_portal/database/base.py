import pymysql
from profile_portal.database.config import Config

def get_db_connection(db_required=True):
    """
    Open a pymysql connection using the central Config.

    Args:
        db_required (bool): If False, connect to the server without selecting
                            the profile database (used while creating it).
    """
    return pymysql.connect(**Config.get_db_config(db_required=db_required))
