"""Gunicorn configuration for padt_mock.

Usage (from services/padt_mock):
    gunicorn app.asgi:app -c gunicorn_conf.py
"""

import os

from shared.config import parse_listen_addr

_host, _port = parse_listen_addr(os.getenv("LISTEN_ADDR", ":5000"))

bind = f"[{_host}]:{_port}" if ":" in _host else f"{_host}:{_port}"
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
worker_class = "uvicorn.workers.UvicornWorker"
worker_tmp_dir = "/dev/shm"
timeout = int(os.getenv("GUNICORN_TIMEOUT", "120"))
graceful_timeout = int(float(os.getenv("SHUTDOWN_TIMEOUT", "30")))
keepalive = int(float(os.getenv("IDLE_TIMEOUT", "15")))
accesslog = None
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
proc_name = "padt_mock"
preload_app = True
max_requests = 1000
max_requests_jitter = 50
