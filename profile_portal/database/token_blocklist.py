# JTIs of signed-out tokens. Kept in memory, so it resets when the process restarts.
BLOCKLIST = set()
