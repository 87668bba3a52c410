import os
import logging
from flask import Flask, send_from_directory, abort

from config import GameConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(config: GameConfig = None) -> Flask:
    """
    Build the static file server for the browser bundle.

    Serves index.html at the root and every other file in the static
    directory by path. There are no API routes.
    """
    config = config or GameConfig.from_env()
    static_dir = os.path.abspath(config.static_dir)
    if not os.path.isdir(static_dir):
        logger.warning(f"Static directory {static_dir} does not exist; run the server from the source tree or set STATIC_DIR")

    app = Flask(__name__, static_folder=None)
    app.config["GAME_CONFIG"] = config

    @app.route("/", methods=["GET"])
    def index():
        return send_from_directory(static_dir, "index.html")

    @app.route("/<path:filename>", methods=["GET"])
    def static_files(filename):
        if not os.path.isfile(os.path.join(static_dir, filename)):
            abort(404)
        return send_from_directory(static_dir, filename)

    return app


if __name__ == "__main__":
    config = GameConfig.from_env()
    app = create_app(config)
    logger.info(f"running at http://{config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=bool(os.getenv("FLASK_DEBUG")))
