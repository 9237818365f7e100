# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant Database.create_all().

from backoffice.models.user import User  # noqa: F401
from backoffice.models.programme import Programme  # noqa: F401
from backoffice.models.learner import Learner  # noqa: F401
from backoffice.models.appointment import Appointment  # noqa: F401
from backoffice.models.article import Article  # noqa: F401
from backoffice.models.custom_programme import CustomProgramme  # noqa: F401
from backoffice.models.contact import Contact  # noqa: F401
