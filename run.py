import logging

from nutribase import create_app

app = create_app()

logging.basicConfig(
    level=app.config.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

if __name__ == "__main__":
    app.logger.info(f"Starting the HTTP server on port {app.config['APP_PORT']}")
    app.run(host=app.config["APP_HOST"], port=app.config["APP_PORT"])
