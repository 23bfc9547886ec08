from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from HR.work_structures.services import SiteService, ProjectService, ShiftService
from HR.work_structures.serializers import (
    SiteSerializer,
    SiteCreateSerializer,
    SiteUpdateSerializer,
    ProjectSerializer,
    ProjectCreateSerializer,
    ProjectUpdateSerializer,
    ShiftSerializer,
    ShiftCreateSerializer,
    ShiftUpdateSerializer
)


@api_view(['GET', 'POST'])
def site_list(request):
    """
    List sites or create a new one.

    GET /sites/
    - Filters: code, name, search

    POST /sites/
    - code is optional; when omitted it is derived from name ('Lima Norte' -> LIMA-NORTE)
    """
    if request.method == 'GET':
        sites = SiteService.list(request.query_params)
        serializer = SiteSerializer(sites, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        serializer = SiteCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        site = SiteService.create(serializer.to_dto())
        return Response(SiteSerializer(site).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
def site_detail(request, pk):
    """
    Retrieve, update or delete a site.

    PUT only changes the fields that are sent.
    DELETE answers 409 while other records still reference it.
    """
    if request.method == 'GET':
        site = SiteService.get(pk)
        return Response(SiteSerializer(site).data, status=status.HTTP_200_OK)

    elif request.method == 'PUT':
        serializer = SiteUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        site = SiteService.update(pk, serializer.to_dto(pk))
        return Response(SiteSerializer(site).data, status=status.HTTP_200_OK)

    elif request.method == 'DELETE':
        SiteService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET', 'POST'])
def project_list(request):
    """
    List projects or create a new one.

    GET /projects/
    - Filters: code, name, search, site_id

    POST /projects/
    - code is optional; when omitted it is derived from name (unique, LIMA-NORTE-2 on collision)
    """
    if request.method == 'GET':
        projects = ProjectService.list(request.query_params)
        serializer = ProjectSerializer(projects, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        serializer = ProjectCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.create(serializer.to_dto())
        return Response(ProjectSerializer(project).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
def project_detail(request, pk):
    """
    Retrieve, update or delete a project.

    PUT only changes the fields that are sent.
    DELETE answers 409 while other records still reference it.
    """
    if request.method == 'GET':
        project = ProjectService.get(pk)
        return Response(ProjectSerializer(project).data, status=status.HTTP_200_OK)

    elif request.method == 'PUT':
        serializer = ProjectUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.update(pk, serializer.to_dto(pk))
        return Response(ProjectSerializer(project).data, status=status.HTTP_200_OK)

    elif request.method == 'DELETE':
        ProjectService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET', 'POST'])
def shift_list(request):
    """
    List shifts or create a new one.

    GET /shifts/
    - Filters: code, name, search

    POST /shifts/
    - code is optional; when omitted it is derived from name (e.g. 'Mañana' -> MANANA)
    """
    if request.method == 'GET':
        shifts = ShiftService.list(request.query_params)
        serializer = ShiftSerializer(shifts, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        serializer = ShiftCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        shift = ShiftService.create(serializer.to_dto())
        return Response(ShiftSerializer(shift).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
def shift_detail(request, pk):
    """
    Retrieve, update or delete a shift.

    PUT only changes the fields that are sent.
    DELETE answers 409 while other records still reference it.
    """
    if request.method == 'GET':
        shift = ShiftService.get(pk)
        return Response(ShiftSerializer(shift).data, status=status.HTTP_200_OK)

    elif request.method == 'PUT':
        serializer = ShiftUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        shift = ShiftService.update(pk, serializer.to_dto(pk))
        return Response(ShiftSerializer(shift).data, status=status.HTTP_200_OK)

    elif request.method == 'DELETE':
        ShiftService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
