"""
Source de données en accès direct à la base (contourne les hooks et validations du CMS).

L'objet Database est construit par le point d'entrée et injecté ici ;
une session courte est ouverte pour chaque opération.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Type

from pydantic import BaseModel
from sqlalchemy import String, cast, or_, select
from sqlalchemy.exc import IntegrityError

from backoffice.database import Database
from backoffice.datasources.base import DataSource, NotFoundError
from backoffice.models.appointment import Appointment as AppointmentModel
from backoffice.models.article import Article as ArticleModel
from backoffice.models.contact import Contact as ContactModel
from backoffice.models.custom_programme import CustomProgramme as CustomProgrammeModel
from backoffice.models.learner import Learner as LearnerModel
from backoffice.models.programme import Programme as ProgrammeModel
from backoffice.models.user import User as UserModel
from backoffice.schemas.appointment import Appointment
from backoffice.schemas.article import Article
from backoffice.schemas.contact import Contact
from backoffice.schemas.custom_programme import CustomProgramme
from backoffice.schemas.learner import Learner
from backoffice.schemas.programme import Programme
from backoffice.schemas.user import User
from backoffice.security import hash_password

logger = logging.getLogger(__name__)


def _column_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class SqlRepository:
    def __init__(
        self,
        database: Database,
        model,
        entity: Type[BaseModel],
        search_columns: Sequence[str],
        label: str,
    ):
        self.database = database
        self.model = model
        self.entity = entity
        self.search_columns = search_columns
        self.label = label

    def _to_columns(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {k: _column_value(v) for k, v in data.items() if hasattr(self.model, k)}

    def _commit(self, db, action: str) -> None:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning("Contrainte violée (%s %s) : %s", action, self.label, e.orig)
            raise ValueError(f"{self.label} : conflit avec un enregistrement existant.")

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Any]:
        stmt = select(self.model)
        for key, value in self._to_columns(filters or {}).items():
            stmt = stmt.where(getattr(self.model, key) == value)
        stmt = stmt.order_by(self.model.created_at.desc())
        with self.database.session() as db:
            return [self.entity.model_validate(row) for row in db.execute(stmt).scalars().all()]

    def get(self, entity_id: str) -> Optional[Any]:
        with self.database.session() as db:
            row = db.get(self.model, entity_id)
            return self.entity.model_validate(row) if row is not None else None

    def create(self, data: Dict[str, Any]) -> Any:
        with self.database.session() as db:
            row = self.model(**self._to_columns(data))
            db.add(row)
            self._commit(db, "création")
            db.refresh(row)
            return self.entity.model_validate(row)

    def update(self, entity_id: str, data: Dict[str, Any]) -> Any:
        with self.database.session() as db:
            row = db.get(self.model, entity_id)
            if row is None:
                raise NotFoundError(self.label, entity_id)
            for key, value in self._to_columns(data).items():
                setattr(row, key, value)
            self._commit(db, "mise à jour")
            db.refresh(row)
            return self.entity.model_validate(row)

    def delete(self, entity_id: str) -> None:
        with self.database.session() as db:
            row = db.get(self.model, entity_id)
            if row is None:
                raise NotFoundError(self.label, entity_id)
            db.delete(row)
            db.commit()

    def search(self, query: str) -> List[Any]:
        pattern = f"%{query}%"
        conditions = [cast(getattr(self.model, c), String).ilike(pattern) for c in self.search_columns]
        stmt = select(self.model).where(or_(*conditions)).order_by(self.model.created_at.desc())
        with self.database.session() as db:
            return [self.entity.model_validate(row) for row in db.execute(stmt).scalars().all()]


class UserSqlRepository(SqlRepository):
    """Le mot de passe fourni est haché avant d'atteindre la table."""

    def _to_columns(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(data)
        password = data.pop("password", None)
        columns = super()._to_columns(data)
        if password:
            columns["password_hash"] = hash_password(password)
        return columns


class DatabaseDataSource(DataSource):
    mode = "database"

    def __init__(self, database: Database):
        self.database = database
        super().__init__(
            programmes=SqlRepository(
                database, ProgrammeModel, Programme, ("title", "description", "code"), "Programme"
            ),
            learners=SqlRepository(
                database, LearnerModel, Learner, ("last_name", "first_name", "email"), "Apprenant"
            ),
            appointments=SqlRepository(
                database, AppointmentModel, Appointment, ("client", "programme_title", "notes"), "Rendez-vous"
            ),
            users=UserSqlRepository(
                database, UserModel, User, ("email", "first_name", "last_name"), "Utilisateur"
            ),
            articles=SqlRepository(
                database, ArticleModel, Article, ("title", "summary", "content"), "Article"
            ),
            custom_programmes=SqlRepository(
                database, CustomProgrammeModel, CustomProgramme, ("title", "code", "description"),
                "Formation personnalisée",
            ),
            contacts=SqlRepository(
                database, ContactModel, Contact, ("name", "email", "subject"), "Contact"
            ),
        )
