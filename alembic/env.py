from logging.config import fileConfig
from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from alembic import context

from app.config import get_settings

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
# This line sets up loggers basically.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Build the URL from the same settings the API and loader use
db_config = get_settings().db_config
sqlalchemy_url = URL.create(
    "postgresql+psycopg2",
    username=db_config["user"],
    password=db_config["password"],
    host=db_config["host"],
    port=db_config["port"],
    database=db_config["dbname"],
    query={"sslmode": db_config["sslmode"]} if "sslmode" in db_config else {},
)

# We are using raw SQL migrations, so keep empty.
target_metadata = None


def run_migrations_offline():
    context.configure(
        url=sqlalchemy_url.render_as_string(hide_password=False),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = create_engine(sqlalchemy_url, future=True)

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
