import logging

from pony.orm import Database
from ..config.settings import settings

logger = logging.getLogger(__name__)

# Create a single database instance
db = Database()


def _bind_params() -> dict:
    if settings.DB_PROVIDER == 'sqlite':
        return dict(provider='sqlite', filename=settings.DB_FILENAME or ':sharedmemory:', create_db=True)

    params = dict(
        provider=settings.DB_PROVIDER,
        user=settings.DB_USER,
        password=settings.DB_PASSWORD,
        host=settings.DB_HOST,
        port=settings.DB_PORT,
    )
    # psycopg2 and pymysql name the database argument differently
    if settings.DB_PROVIDER == 'mysql':
        params['db'] = settings.DB_NAME
    else:
        params['database'] = settings.DB_NAME
    return params


def connect_to_db(**bind_params):
    """Bind the shared database and generate the entity mapping.

    Keyword arguments override the provider parameters taken from settings.
    Calling it again once the mapping exists is a no-op.
    """
    if db.provider is not None:
        return db

    params = bind_params or _bind_params()
    db.bind(**params)
    logger.info("Bound %s database", params['provider'])

    # Import all models to ensure they're registered with the database
    from ..models import hr_models, finance_models  # noqa: F401

    # Generate mapping after all models are imported
    db.generate_mapping(create_tables=settings.DB_CREATE_TABLES)
    return db
