import threading
from contextlib import contextmanager


class EditorRegistry:
    """
    Keeps one mounted ProfileEditor per user for the life of the process.

    Each mounted editor comes with its own lock; callers hold it through
    session() for as long as they read or change the editor. Unmounting drops
    the editor so the next mount seeds a fresh draft.
    """

    def __init__(self):
        self._editors = {}
        self._lock = threading.Lock()

    def _entry(self, user_id, factory):
        key = str(user_id)
        with self._lock:
            entry = self._editors.get(key)
            if entry is None:
                entry = (factory(), threading.Lock())
                self._editors[key] = entry
            return entry

    def get(self, user_id):
        with self._lock:
            entry = self._editors.get(str(user_id))
        return entry[0] if entry else None

    def mount(self, user_id, factory):
        """Return the user's editor, creating it with factory() if none is mounted."""
        return self._entry(user_id, factory)[0]

    @contextmanager
    def session(self, user_id, factory):
        """Mount if needed and hold the editor's lock while the block runs."""
        editor, lock = self._entry(user_id, factory)
        with lock:
            yield editor

    def unmount(self, user_id, on_unmount=None):
        """
        Drop the user's editor. on_unmount(editor) runs under the editor's lock
        after it has left the registry.
        """
        with self._lock:
            entry = self._editors.pop(str(user_id), None)
        if entry is None:
            return False
        if on_unmount is not None:
            editor, lock = entry
            with lock:
                on_unmount(editor)
        return True

    def clear(self):
        with self._lock:
            self._editors.clear()


# Global registry instance
editor_registry = EditorRegistry()
