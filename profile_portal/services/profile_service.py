import logging
import threading
from profile_portal.database.models.user import User

logger = logging.getLogger(__name__)

class ProfileService:
    """
    Update collaborator behind the profile editor's submit.
    Writes happen on a background thread; the caller never waits for or sees the outcome.
    """

    @staticmethod
    def write_profile(user_id, draft):
        columns = User.draft_to_columns(draft)
        try:
            if User.update(user_id, columns):
                logger.info(f"Profile for user {user_id} saved ({', '.join(sorted(columns))})")
            else:
                logger.warning(f"Profile for user {user_id} not saved: user not found")
        except Exception:
            logger.exception(f"Failed to save profile for user {user_id}")

    @staticmethod
    def update_profile_async(user_id, draft):
        # Copy so later edits to the caller's draft cannot leak into the write
        thr = threading.Thread(target=ProfileService.write_profile, args=[user_id, dict(draft)], daemon=True)
        thr.start()
        logger.debug(f"Profile write thread started for user {user_id}")
        return thr

# Global profile service instance
profile_service = ProfileService()
