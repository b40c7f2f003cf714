# app.py
"""
Thin runner that uses the unified factory and runs Socket.IO.
"""
import os

from dotenv import load_dotenv
from flask_socketio import SocketIO

load_dotenv()

from brainrot import create_app  # noqa: E402

app = create_app()
socketio = SocketIO(app, cors_allowed_origins=app.config["CORS_ORIGINS"])

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 3000))
    app.logger.info("API de Brainrot escuchando en http://localhost:%s", port)
    socketio.run(app, host="0.0.0.0", port=port,
                 debug=os.environ.get("FLASK_DEBUG") == "1", allow_unsafe_werkzeug=True)
