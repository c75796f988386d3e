# /schoolhub/db/base_class.py

from sqlalchemy.orm import declarative_base, declared_attr


class _Base:
    # Tables are named after the lower-cased model name unless a model
    # overrides `__tablename__` itself.
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower()


Base = declarative_base(cls=_Base)
