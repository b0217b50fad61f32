"""
WSGI entrypoint.

Release, then serve:

    python scripts/release.py
    gunicorn app.wsgi:app --bind 0.0.0.0:${PORT:-8080} --workers 2 --timeout 60 \
        --access-logfile - --error-logfile -
"""

from app.customer_api import create_app

app = create_app()
