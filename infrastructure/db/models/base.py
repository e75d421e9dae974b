"""
Declarative base shared by the gateway tables.
"""
from sqlalchemy import MetaData
from sqlalchemy.orm import registry

# Stable constraint names so indexes look the same on PostgreSQL and SQLite
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}

mapper_registry = registry(metadata=MetaData(naming_convention=NAMING_CONVENTION))
Base = mapper_registry.generate_base()
