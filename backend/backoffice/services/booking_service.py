"""
Prise de rendez-vous avec création optionnelle de la fiche apprenant B2B.

Deux créations successives, sans transaction commune :
1. le rendez-vous ;
2. si c'est un rendez-vous de positionnement et que le sous-formulaire B2B est
   renseigné (nom de structure + SIRET), la fiche apprenant.

Un échec de l'étape 2 n'annule pas l'étape 1 : le rendez-vous reste créé et
un avertissement distinct est émis.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from backoffice.cms.notifications import Notifier
from backoffice.schemas.appointment import Appointment, AppointmentCreate
from backoffice.schemas.enums import AppointmentType
from backoffice.schemas.learner import Learner, LearnerB2BCreate

logger = logging.getLogger(__name__)

MSG_APPOINTMENT_CREATED = "Rendez-vous créé avec succès!"
MSG_BOTH_CREATED = "Rendez-vous et fiche apprenant créés avec succès!"
MSG_LEARNER_FAILED = "Rendez-vous créé mais erreur apprenant: {error}"
MSG_APPOINTMENT_FAILED = "Erreur lors de la création du rendez-vous"


@dataclass
class BookingResult:
    appointment: Appointment
    learner: Optional[Learner] = None
    learner_error: Optional[str] = None


def book_appointment(
    source,
    notifier: Notifier,
    appointment: AppointmentCreate,
    b2b: Optional[LearnerB2BCreate] = None,
) -> BookingResult:
    """
    Crée le rendez-vous puis, le cas échéant, l'apprenant.
    Relance l'exception si la création du rendez-vous échoue.
    """
    try:
        created = source.create_appointment(appointment)
    except Exception:
        notifier.error(MSG_APPOINTMENT_FAILED)
        raise

    wants_learner = (
        appointment.type == AppointmentType.POSITIONING
        and b2b is not None
        and b2b.is_populated()
    )
    if not wants_learner:
        notifier.success(MSG_APPOINTMENT_CREATED)
        return BookingResult(appointment=created)

    try:
        learner = source.create_learner(b2b.to_learner_create())
    except Exception as e:
        logger.warning("Rendez-vous %s créé, échec de la fiche apprenant : %s", created.id, e)
        notifier.warning(MSG_LEARNER_FAILED.format(error=e))
        return BookingResult(appointment=created, learner_error=str(e))

    notifier.success(MSG_BOTH_CREATED)
    return BookingResult(appointment=created, learner=learner)
