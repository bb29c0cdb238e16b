from typing import Any, List

from sqlalchemy import select

from database.models import Professional
from database.repositories.base import BaseRepository
from core.exceptions import ProfessionalNotFoundError


class ProfessionalRepository(BaseRepository):
    def get_professional_pool(self, verified_only: bool) -> List[Professional]:
        stmt = select(Professional)
        if verified_only:
            stmt = stmt.where(Professional.is_verified.is_(True))
        stmt = stmt.order_by(Professional.id)
        return self.db.execute(stmt).scalars().all()

    def professional_exists(self, professional_id: Any) -> bool:
        stmt = select(Professional.id).where(Professional.id == professional_id)
        return self.db.execute(stmt).first() is not None

    def get_professional(self, professional_id: Any) -> Professional:
        professional = self.db.get(Professional, professional_id)
        if professional is None:
            raise ProfessionalNotFoundError(professional_id)
        return professional

    def get_professionals(self, professional_ids: List[Any]) -> List[Professional]:
        if not professional_ids:
            return []
        stmt = select(Professional).where(Professional.id.in_(professional_ids))
        return self.db.execute(stmt).scalars().all()
