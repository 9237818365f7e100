"""
Énumérations métier partagées par les schémas, les modèles et les mappers.
Les valeurs sont celles manipulées par l'application (format canonique) ;
les conversions vers le format du CMS se font dans les services CMS.
"""

from enum import Enum


class UserRole(str, Enum):
    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    FORMATEUR = "FORMATEUR"
    GESTIONNAIRE = "GESTIONNAIRE"
    APPRENANT = "APPRENANT"
    BENEFICIAIRE = "BENEFICIAIRE"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class Level(str, Enum):
    BEGINNER = "DEBUTANT"
    INTERMEDIATE = "INTERMEDIAIRE"
    ADVANCED = "AVANCE"


class Modality(str, Enum):
    IN_PERSON = "PRESENTIEL"
    REMOTE = "DISTANCIEL"
    HYBRID = "HYBRIDE"


class ProgrammeStatus(str, Enum):
    DRAFT = "BROUILLON"
    PUBLISHED = "PUBLIE"
    ARCHIVED = "ARCHIVE"


class LearnerStatus(str, Enum):
    ACTIVE = "ACTIF"
    INACTIVE = "INACTIF"
    COMPLETED = "TERMINE"


class AppointmentType(str, Enum):
    POSITIONING = "positionnement"
    INFORMATION = "information"
    ENROLLMENT = "inscription"
    FOLLOW_UP = "suivi"


class AppointmentStatus(str, Enum):
    PENDING = "enAttente"
    CONFIRMED = "confirme"
    CANCELLED = "annule"
    DONE = "termine"
    POSTPONED = "reporte"


class LocationMode(str, Enum):
    IN_PERSON = "presentiel"
    VIDEO = "visio"
    PHONE = "telephone"


class ArticleStatus(str, Enum):
    DRAFT = "brouillon"
    PUBLISHED = "publie"
    ARCHIVED = "archive"


class CustomProgrammeStatus(str, Enum):
    IN_PROGRESS = "EN_COURS"
    FINALISED = "FINALISEE"
    DELIVERED = "LIVREE"
    ARCHIVED = "ARCHIVE"


class ContactType(str, Enum):
    QUESTION = "question"
    COMPLAINT = "reclamation"
    TRAINING = "formation"
    QUOTE = "devis"


class ContactStatus(str, Enum):
    NEW = "nouveau"
    IN_PROGRESS = "enCours"
    PROCESSED = "traite"
    CLOSED = "ferme"


class ContactPriority(str, Enum):
    LOW = "basse"
    NORMAL = "normale"
    HIGH = "haute"
    URGENT = "urgente"
