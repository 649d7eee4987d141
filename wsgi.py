# wsgi.py
import importlib, os

from asgiref.wsgi import WsgiToAsgi

# Load the Flask WSGI app (override with APP_MODULE="pkg.module:attr")
APP_MODULE = os.getenv("APP_MODULE", "webapp.app:APP")
module_name, attr = APP_MODULE.split(":", 1)
module = importlib.import_module(module_name)
app = getattr(module, attr)  # gunicorn wsgi:app

# Same app for ASGI servers (uvicorn wsgi:asgi_app)
asgi_app = WsgiToAsgi(app)
