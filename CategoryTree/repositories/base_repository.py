from sqlmodel import SQLModel, Session, select
from typing import TypeVar, Generic, Type, Optional, List

T = TypeVar('T', bound=SQLModel)

class BaseRepository(Generic[T]):
    """
    Generic id-keyed persistence helpers.

    Writes are flushed, not committed: the owning service session decides
    when a unit of work is committed or rolled back.
    """

    def __init__(self, model_class: Type[T]):
        self.model_class = model_class

    def get_by_id(self, session: Session, id: str) -> Optional[T]:
        return session.get(self.model_class, id)

    def get_all(self, session: Session) -> List[T]:
        return list(session.exec(select(self.model_class)).all())

    def add(self, session: Session, model: T) -> T:
        session.add(model)
        session.flush()
        session.refresh(model)
        return model

    def delete(self, session: Session, id: str) -> bool:
        model = self.get_by_id(session, id)
        if model:
            session.delete(model)
            session.flush()
            return True
        return False
