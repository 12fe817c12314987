"""PADT Mock — ASGI entry point for process managers.

    gunicorn app.asgi:app -c gunicorn_conf.py
"""

from app.main import create_app

app = create_app()
