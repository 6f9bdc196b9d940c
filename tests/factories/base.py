"""Base factory configuration for polyfactory."""

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from src.tracker.models.base import utc_now

__all__ = ["BaseFactory", "utc_now"]


class BaseFactory(SQLAlchemyFactory):
    """Base factory with common configuration for all models.

    Provides:
    - No primary keys (storage assigns them on insert)
    - Disabled auto-relationship setting (we control relationships manually)
    """

    __is_base_factory__ = True
    __set_relationships__ = False
    __set_foreign_keys__ = False  # We set FK values explicitly
