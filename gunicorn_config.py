import os

# Gunicorn configuration for the profile service container

# Port: the platform injects PORT (default 8080)
port = os.getenv("PORT", "8080")
bind = f"0.0.0.0:{port}"

# Editors are held in process memory, so every request for a user must reach
# the same worker. Scale with threads, not workers.
workers = int(os.getenv("GUNICORN_WORKERS", "1"))
threads = int(os.getenv("GUNICORN_THREADS", "8"))
worker_class = "gthread"

timeout = int(os.getenv("GUNICORN_TIMEOUT", "30"))

# Logging
accesslog = "-"  # Stdout
errorlog = "-"   # Stderr
loglevel = os.getenv("LOG_LEVEL", "info").lower()

keepalive = 5
