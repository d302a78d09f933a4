from contextlib import contextmanager
import logging
from sqlalchemy.exc import SQLAlchemyError
from models import db
from nearfood.exceptions import DataAccessError


@contextmanager
def transactional(message="DB transaction failed"):
    """Commit the work done in the block as one store write.

    Store failures are logged, rolled back and re-raised as
    DataAccessError carrying ``message`` so callers can surface it.
    """
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as e:
        logging.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        raise DataAccessError(message) from e
    except Exception:
        db.session.rollback()
        raise


@contextmanager
def reading(message="DB read failed"):
    """Wrap store reads; failures surface as DataAccessError(message)."""
    try:
        yield
    except SQLAlchemyError as e:
        logging.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        raise DataAccessError(message) from e
