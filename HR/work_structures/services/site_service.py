from HR.work_structures.dtos import (
    ProjectCreateDTO,
    ProjectUpdateDTO,
    ShiftCreateDTO,
    ShiftUpdateDTO,
    SiteCreateDTO,
    SiteUpdateDTO,
)
from HR.work_structures.models import Project, Shift, Site
from HR.work_structures.services.reference_service import ReferenceService, sent_fields
from core.base.exceptions import ValidationError


class SiteService(ReferenceService):
    """Service for Site business logic"""
    model = Site
    label = 'Site'

    @classmethod
    def create_fields(cls, dto: SiteCreateDTO) -> dict:
        return {'name': dto.name, 'address': dto.address or ''}

    @classmethod
    def update_fields(cls, dto: SiteUpdateDTO) -> dict:
        return sent_fields(dto, ['name', 'address'])


class ProjectService(ReferenceService):
    """
    Service for Project business logic.

    Validates that the referenced site exists.
    """
    model = Project
    label = 'Project'

    @classmethod
    def queryset(cls):
        return Project.objects.select_related('site')

    @classmethod
    def list(cls, filters: dict = None):
        """
        List projects.

        Args:
            filters: code / name / search, plus site_id
        """
        filters = filters or {}
        queryset = super().list(filters)
        if filters.get('site_id'):
            queryset = queryset.filter(site_id=filters['site_id'])
        return queryset

    @classmethod
    def create_fields(cls, dto: ProjectCreateDTO) -> dict:
        return {'name': dto.name, 'site': _get_site(dto.site_id)}

    @classmethod
    def update_fields(cls, dto: ProjectUpdateDTO) -> dict:
        field_updates = sent_fields(dto, ['name'])
        if dto.site_id is not None:
            field_updates['site'] = _get_site(dto.site_id)
        return field_updates


class ShiftService(ReferenceService):
    """Service for Shift business logic"""
    model = Shift
    label = 'Shift'

    @classmethod
    def create_fields(cls, dto: ShiftCreateDTO) -> dict:
        return {
            'name': dto.name,
            'start_time': dto.start_time,
            'end_time': dto.end_time,
        }

    @classmethod
    def update_fields(cls, dto: ShiftUpdateDTO) -> dict:
        return sent_fields(dto, ['name', 'start_time', 'end_time'])


def _get_site(site_id):
    try:
        return Site.objects.get(pk=site_id)
    except Site.DoesNotExist:
        raise ValidationError(
            "Site not found",
            fields={'siteId': [f"Site {site_id} does not exist"]}
        )
