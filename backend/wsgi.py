try:
    from backend.vollpfosten.server import create_app
except ImportError:  # pragma: no cover
    from vollpfosten.server import create_app

app, socketio = create_app()
