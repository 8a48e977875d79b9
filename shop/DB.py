# shop/DB.py
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from .settings import Settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / 'migrations'


def create_db_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith('sqlite'):
        # request handlers run in a threadpool
        connect_args['check_same_thread'] = False
    return create_engine(database_url, connect_args=connect_args)


def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def alembic_config(database_url: str) -> Config:
    config = Config()
    config.set_main_option('script_location', str(MIGRATIONS_DIR))
    # configparser interpolation
    config.set_main_option('sqlalchemy.url', database_url.replace('%', '%%'))
    return config


def migrate(database_url: str, revision: str = 'head'):
    """Bring the schema up to ``revision``. Never run implicitly at startup."""
    logger.info('Upgrading database schema to %s', revision)
    command.upgrade(alembic_config(database_url), revision)


def migrate_main():
    settings = Settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    migrate(settings.database_url)
