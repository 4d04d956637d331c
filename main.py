import os
from dotenv import load_dotenv
# Load environment variables first so the app factory sees them
load_dotenv()

from profile_portal import create_app


app = create_app()

if __name__ == "__main__":
    # Development server only; production runs under gunicorn (see gunicorn_config.py)
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", "5001")), debug=True)
