"""
Source de données adossée au CMS headless : chaque dépôt est un service d'entité CMS.
"""

from backoffice.cms.client import CmsClient
from backoffice.datasources.base import DataSource
from backoffice.services.appointment_service import AppointmentCmsService
from backoffice.services.article_service import ArticleCmsService
from backoffice.services.contact_service import ContactCmsService
from backoffice.services.custom_programme_service import CustomProgrammeCmsService
from backoffice.services.learner_service import LearnerCmsService
from backoffice.services.programme_service import ProgrammeCmsService
from backoffice.services.user_service import UserCmsService


class CmsDataSource(DataSource):
    mode = "cms"

    def __init__(self, client: CmsClient):
        self.client = client
        super().__init__(
            programmes=ProgrammeCmsService(client),
            learners=LearnerCmsService(client),
            appointments=AppointmentCmsService(client),
            users=UserCmsService(client),
            articles=ArticleCmsService(client),
            custom_programmes=CustomProgrammeCmsService(client),
            contacts=ContactCmsService(client),
        )
