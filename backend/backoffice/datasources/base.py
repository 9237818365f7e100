"""
Façade d'accès aux données.

Une DataSource regroupe sept dépôts (un par entité) qui respectent tous le même
contrat, quelle que soit la persistance : données fictives en mémoire, base de
données en accès direct ou API du CMS. Les opérations métier (recherche par
code, bascule de statut, vues d'articles, statistiques...) sont écrites une
seule fois ici, au-dessus des dépôts.

Aucun cache : chaque appel relit la source.
"""

import datetime as dt
import logging
from typing import Any, Dict, List, Optional, Protocol

from backoffice.schemas.appointment import Appointment, AppointmentCreate, AppointmentUpdate
from backoffice.schemas.article import Article, ArticleCreate, ArticleUpdate, TermCount
from backoffice.schemas.contact import Contact, ContactCreate, ContactUpdate
from backoffice.schemas.custom_programme import CustomProgramme, CustomProgrammeCreate, CustomProgrammeUpdate
from backoffice.schemas.enums import (
    AppointmentStatus,
    ContactStatus,
    LearnerStatus,
    LocationMode,
    UserRole,
    UserStatus,
)
from backoffice.schemas.learner import Learner, LearnerCreate, LearnerUpdate
from backoffice.schemas.programme import Programme, ProgrammeCreate, ProgrammeUpdate
from backoffice.schemas.stats import DashboardStats
from backoffice.schemas.user import User, UserCreate, UserUpdate
from backoffice.services import article_fields, stats_service
from backoffice.services.contact_service import determine_priority

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """Mise à jour ou suppression d'une entité inexistante."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} introuvable : {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class Repository(Protocol):
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Any]: ...

    def get(self, entity_id: str) -> Optional[Any]: ...

    def create(self, data: Dict[str, Any]) -> Any: ...

    def update(self, entity_id: str, data: Dict[str, Any]) -> Any: ...

    def delete(self, entity_id: str) -> None: ...

    def search(self, query: str) -> List[Any]: ...


def _first(items: List[Any]) -> Optional[Any]:
    return items[0] if items else None


def _check_unique(existing: Optional[Any], entity_id: str, message: str) -> None:
    """Lors d'une mise à jour, la clé ne doit appartenir à aucune autre entité."""
    if existing is not None and existing.id != entity_id:
        raise ValueError(message)


class DataSource:
    """Stratégie de persistance choisie une fois au démarrage (mock, database ou cms)."""

    mode = "abstract"

    def __init__(
        self,
        programmes: Repository,
        learners: Repository,
        appointments: Repository,
        users: Repository,
        articles: Repository,
        custom_programmes: Repository,
        contacts: Repository,
    ):
        self.programmes = programmes
        self.learners = learners
        self.appointments = appointments
        self.users = users
        self.articles = articles
        self.custom_programmes = custom_programmes
        self.contacts = contacts

    # ------------------------------------------------------------------
    # Programmes
    # ------------------------------------------------------------------

    def get_programmes(self, filters: Optional[Dict[str, Any]] = None) -> List[Programme]:
        return self.programmes.list(filters)

    def get_programme(self, programme_id: str) -> Optional[Programme]:
        return self.programmes.get(programme_id)

    def get_programme_by_code(self, code: str) -> Optional[Programme]:
        return _first(self.programmes.list({"code": code}))

    def create_programme(self, data: ProgrammeCreate) -> Programme:
        """Lève une ValueError si le code formation est déjà utilisé."""
        if self.get_programme_by_code(data.code) is not None:
            raise ValueError(f"Un programme avec le code '{data.code}' existe déjà.")
        return self.programmes.create(data.model_dump())

    def update_programme(self, programme_id: str, data: ProgrammeUpdate) -> Programme:
        """Lève une ValueError si le nouveau code appartient à un autre programme."""
        changes = data.model_dump(exclude_unset=True)
        code = changes.get("code")
        if code is not None:
            _check_unique(
                self.get_programme_by_code(code), programme_id,
                f"Un programme avec le code '{code}' existe déjà.",
            )
        return self.programmes.update(programme_id, changes)

    def delete_programme(self, programme_id: str) -> None:
        self.programmes.delete(programme_id)

    def search_programmes(self, query: str) -> List[Programme]:
        return self.programmes.search(query)

    # ------------------------------------------------------------------
    # Apprenants
    # ------------------------------------------------------------------

    def get_learners(self, filters: Optional[Dict[str, Any]] = None) -> List[Learner]:
        return self.learners.list(filters)

    def get_learner(self, learner_id: str) -> Optional[Learner]:
        return self.learners.get(learner_id)

    def get_learner_by_email(self, email: str) -> Optional[Learner]:
        return _first(self.learners.list({"email": email}))

    def get_learners_by_status(self, status: LearnerStatus) -> List[Learner]:
        return self.learners.list({"status": status})

    def create_learner(self, data: LearnerCreate) -> Learner:
        return self.learners.create(data.model_dump())

    def update_learner(self, learner_id: str, data: LearnerUpdate) -> Learner:
        return self.learners.update(learner_id, data.model_dump(exclude_unset=True))

    def update_progression(self, learner_id: str, progression: int) -> Learner:
        """Progression bornée à 0–100, vérifiée avant tout appel."""
        if not 0 <= progression <= 100:
            raise ValueError("La progression doit être comprise entre 0 et 100.")
        return self.learners.update(learner_id, {"progression": progression})

    def delete_learner(self, learner_id: str) -> None:
        self.learners.delete(learner_id)

    def search_learners(self, query: str) -> List[Learner]:
        return self.learners.search(query)

    # ------------------------------------------------------------------
    # Rendez-vous
    # ------------------------------------------------------------------

    def get_appointments(self, filters: Optional[Dict[str, Any]] = None) -> List[Appointment]:
        return self.appointments.list(filters)

    def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        return self.appointments.get(appointment_id)

    def get_appointments_by_status(self, status: AppointmentStatus) -> List[Appointment]:
        return self.appointments.list({"status": status})

    def get_upcoming_appointments(self, today: Optional[dt.date] = None) -> List[Appointment]:
        """Rendez-vous à venir (aujourd'hui inclus), ni annulés ni terminés, triés par date et heure."""
        today = today or dt.date.today()
        closed = (AppointmentStatus.CANCELLED, AppointmentStatus.DONE)
        upcoming = [
            a for a in self.appointments.list()
            if a.date >= today and a.status not in closed
        ]
        return sorted(upcoming, key=lambda a: (a.date, a.time))

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        return self.appointments.create(data.model_dump())

    def update_appointment(self, appointment_id: str, data: AppointmentUpdate) -> Appointment:
        """
        L'adresse n'existe qu'en présentiel et le lien visio qu'en visio : quand le lieu
        ou l'un de ces champs change, le champ qui ne s'applique plus est vidé.
        """
        changes = data.model_dump(exclude_unset=True)
        if changes.get("location") is None:
            changes.pop("location", None)
        if {"location", "address", "video_link"} & changes.keys():
            location = changes.get("location")
            if location is None:
                current = self.appointments.get(appointment_id)
                if current is None:
                    raise NotFoundError("Rendez-vous", appointment_id)
                location = current.location
            if location != LocationMode.IN_PERSON:
                changes["address"] = None
            if location != LocationMode.VIDEO:
                changes["video_link"] = None
        return self.appointments.update(appointment_id, changes)

    def confirm_appointment(self, appointment_id: str) -> Appointment:
        return self.appointments.update(appointment_id, {"status": AppointmentStatus.CONFIRMED})

    def cancel_appointment(self, appointment_id: str) -> Appointment:
        return self.appointments.update(appointment_id, {"status": AppointmentStatus.CANCELLED})

    def delete_appointment(self, appointment_id: str) -> None:
        self.appointments.delete(appointment_id)

    def search_appointments(self, query: str) -> List[Appointment]:
        return self.appointments.search(query)

    # ------------------------------------------------------------------
    # Utilisateurs
    # ------------------------------------------------------------------

    def get_users(self, filters: Optional[Dict[str, Any]] = None) -> List[User]:
        return self.users.list(filters)

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return _first(self.users.list({"email": email}))

    def get_users_by_role(self, role: UserRole) -> List[User]:
        return self.users.list({"role": role})

    def create_user(self, data: UserCreate) -> User:
        """Lève une ValueError si l'email est déjà utilisé."""
        if self.get_user_by_email(data.email) is not None:
            raise ValueError(f"Un utilisateur avec l'email '{data.email}' existe déjà.")
        return self.users.create(data.model_dump())

    def update_user(self, user_id: str, data: UserUpdate) -> User:
        """
        Lève une ValueError si le nouvel email appartient à un autre utilisateur.
        Prénom et nom sont toujours transmis ensemble (le nom complet en dépend).
        """
        changes = data.model_dump(exclude_unset=True)
        email = changes.get("email")
        if email is not None:
            _check_unique(
                self.get_user_by_email(email), user_id,
                f"Un utilisateur avec l'email '{email}' existe déjà.",
            )
        if ("first_name" in changes) != ("last_name" in changes):
            current = self.users.get(user_id)
            if current is None:
                raise NotFoundError("Utilisateur", user_id)
            changes.setdefault("first_name", current.first_name)
            changes.setdefault("last_name", current.last_name)
        return self.users.update(user_id, changes)

    def toggle_user_status(self, user_id: str) -> User:
        """active ↔ inactive ; un compte en attente devient actif."""
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("Utilisateur", user_id)
        new_status = UserStatus.INACTIVE if user.status == UserStatus.ACTIVE else UserStatus.ACTIVE
        logger.info("Utilisateur %s : statut %s → %s", user_id, user.status.value, new_status.value)
        return self.users.update(user_id, {"status": new_status})

    def change_password(self, user_id: str, new_password: str) -> None:
        self.users.update(user_id, {"password": new_password})

    def delete_user(self, user_id: str) -> None:
        self.users.delete(user_id)

    def search_users(self, query: str) -> List[User]:
        return self.users.search(query)

    def get_current_user(self) -> Optional[User]:
        """Utilisateur courant : le premier administrateur, sinon le premier utilisateur."""
        users = self.users.list()
        admin = next((u for u in users if u.role == UserRole.ADMIN), None)
        return admin or _first(users)

    # ------------------------------------------------------------------
    # Articles
    # ------------------------------------------------------------------

    def get_articles(self, filters: Optional[Dict[str, Any]] = None) -> List[Article]:
        return self.articles.list(filters)

    def get_article(self, article_id: str) -> Optional[Article]:
        return self.articles.get(article_id)

    def get_article_by_slug(self, slug: str) -> Optional[Article]:
        return _first(self.articles.list({"slug": slug}))

    def create_article(self, data: ArticleCreate) -> Article:
        """Slug et temps de lecture calculés ici ; lève une ValueError si le slug existe déjà."""
        record = article_fields.for_create(data.model_dump())
        if self.get_article_by_slug(record["slug"]) is not None:
            raise ValueError(f"Un article avec le slug '{record['slug']}' existe déjà.")
        return self.articles.create(record)

    def update_article(self, article_id: str, data: ArticleUpdate) -> Article:
        changes = data.model_dump(exclude_unset=True)
        current = self.articles.get(article_id) if ("title" in changes or "content" in changes) else None
        record = article_fields.for_update(current, changes)
        slug = record.get("slug")
        if slug is not None:
            _check_unique(
                self.get_article_by_slug(slug), article_id,
                f"Un article avec le slug '{slug}' existe déjà.",
            )
        return self.articles.update(article_id, record)

    def increment_views(self, article_id: str) -> Article:
        """Lecture puis écriture : deux appels concurrents peuvent perdre une vue."""
        article = self.articles.get(article_id)
        if article is None:
            raise NotFoundError("Article", article_id)
        return self.articles.update(article_id, {"views": article.views + 1})

    def delete_article(self, article_id: str) -> None:
        self.articles.delete(article_id)

    def search_articles(self, query: str) -> List[Article]:
        return self.articles.search(query)

    def get_categories(self) -> List[TermCount]:
        return stats_service.term_counts(self.articles.list(), "categories")

    def get_tags(self) -> List[TermCount]:
        return stats_service.term_counts(self.articles.list(), "tags")

    # ------------------------------------------------------------------
    # Formations personnalisées
    # ------------------------------------------------------------------

    def get_custom_programmes(self, filters: Optional[Dict[str, Any]] = None) -> List[CustomProgramme]:
        return self.custom_programmes.list(filters)

    def get_custom_programme(self, custom_programme_id: str) -> Optional[CustomProgramme]:
        return self.custom_programmes.get(custom_programme_id)

    def create_custom_programme(self, data: CustomProgrammeCreate) -> CustomProgramme:
        return self.custom_programmes.create(data.model_dump())

    def update_custom_programme(self, custom_programme_id: str, data: CustomProgrammeUpdate) -> CustomProgramme:
        return self.custom_programmes.update(custom_programme_id, data.model_dump(exclude_unset=True))

    def delete_custom_programme(self, custom_programme_id: str) -> None:
        self.custom_programmes.delete(custom_programme_id)

    def search_custom_programmes(self, query: str) -> List[CustomProgramme]:
        return self.custom_programmes.search(query)

    # ------------------------------------------------------------------
    # Messages de contact
    # ------------------------------------------------------------------

    def get_contacts(self, filters: Optional[Dict[str, Any]] = None) -> List[Contact]:
        return self.contacts.list(filters)

    def get_contact(self, contact_id: str) -> Optional[Contact]:
        return self.contacts.get(contact_id)

    def create_contact(self, data: ContactCreate) -> Contact:
        """Sans priorité fournie, elle est déduite du sujet, du message et du type."""
        record = data.model_dump()
        if record.get("priority") is None:
            record["priority"] = determine_priority(data.subject, data.message, data.type)
        return self.contacts.create(record)

    def update_contact(self, contact_id: str, data: ContactUpdate) -> Contact:
        """Passage à "traité" avec une réponse : la date de réponse est posée une seule fois."""
        changes = data.model_dump(exclude_unset=True)
        if changes.get("status") == ContactStatus.PROCESSED and changes.get("response"):
            current = self.contacts.get(contact_id)
            if current is None:
                raise NotFoundError("Contact", contact_id)
            if current.responded_at is None:
                changes["responded_at"] = dt.datetime.now()
        return self.contacts.update(contact_id, changes)

    def mark_contact_processed(self, contact_id: str, response: Optional[str] = None) -> Contact:
        current = self.contacts.get(contact_id)
        if current is None:
            raise NotFoundError("Contact", contact_id)
        changes: Dict[str, Any] = {"status": ContactStatus.PROCESSED, "responded_at": dt.datetime.now()}
        if response:
            changes["response"] = response
        return self.contacts.update(contact_id, changes)

    def close_contact(self, contact_id: str) -> Contact:
        return self.contacts.update(contact_id, {"status": ContactStatus.CLOSED})

    def delete_contact(self, contact_id: str) -> None:
        self.contacts.delete(contact_id)

    def search_contacts(self, query: str) -> List[Contact]:
        return self.contacts.search(query)

    # ------------------------------------------------------------------
    # Statistiques
    # ------------------------------------------------------------------

    def get_stats(self, today: Optional[dt.date] = None) -> DashboardStats:
        return stats_service.dashboard_stats(self, today=today)
