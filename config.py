from dotenv import load_dotenv
import os

load_dotenv()


def _database_uri():
    uri = os.getenv("SQLALCHEMY_DATABASE_URI")
    if uri:
        return uri
    username = os.getenv("DB_USERNAME", "postgres")
    password = os.getenv("DB_PASSWORD", "")
    host = os.getenv("DB_HOSTNAME", "localhost")
    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME", "nutribase")
    return f"postgresql+psycopg2://{username}:{password}@{host}:{port}/{name}"


class Config:
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bounded pool: at most DB_POOL_SIZE open connections, requests wait for a free one
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
        'pool_size': int(os.getenv("DB_POOL_SIZE", "20")),
        'max_overflow': 0,
        'pool_timeout': 30,
        'connect_args': {
            'sslmode': os.getenv("DB_SSLMODE", "disable"),
            'connect_timeout': 10,
        }
    }

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
