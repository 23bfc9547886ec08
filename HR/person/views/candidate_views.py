from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from core.base.exceptions import ValidationError
from HR.person.services.candidate_service import CandidateService
from HR.person.serializers.candidate_serializers import (
    CandidateSerializer,
    CandidateDetailSerializer,
    CandidateCreateSerializer,
    CandidateUpdateSerializer,
    CandidateListQuerySerializer,
    CandidateStatusSerializer
)
from HR.person.serializers.document_serializers import (
    CandidateDocumentSerializer,
    collect_document_files
)
from staffing_project.exception_handler import success_response


@api_view(['GET', 'POST'])
def candidate_list(request):
    """
    List candidates or register a new one.

    GET /candidates/
    - Filters: year, month (number or ALL), status, groupStart, groupEnd

    POST /candidates/ (multipart)
    - nationalId, lastName1, lastName2, firstNames, site, shift, group
    - File fields named after the document category (identity, certificates, ...)
    """
    if request.method == 'GET':
        query = CandidateListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        candidates = CandidateService.list_candidates(query.validated_data)

        serializer = CandidateSerializer(candidates, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        serializer = CandidateCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        files = collect_document_files(request.FILES)

        candidate = CandidateService.create(serializer.to_dto(files))
        return success_response({'id': candidate.id}, status_code=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT'])
def candidate_detail(request, pk):
    """
    Retrieve or partially update a candidate.

    GET /candidates/{id}/
    - Candidate with its documents, newest first

    PUT /candidates/{id}/ (multipart)
    - Only sent, non-blank fields change; attached files are appended
    """
    if request.method == 'GET':
        candidate = CandidateService.get_candidate(pk)
        serializer = CandidateDetailSerializer(candidate)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'PUT':
        serializer = CandidateUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        files = collect_document_files(request.FILES)

        CandidateService.update(serializer.to_dto(pk, files))
        return success_response()


@api_view(['PUT'])
def candidate_status(request, pk):
    """
    Change a candidate's review status.

    PUT /candidates/{id}/status/
    {
        "status": "under_review" | "cancelled" | "approved"
    }
    """
    serializer = CandidateStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    CandidateService.set_status(pk, serializer.validated_data['status'])
    return success_response()


@api_view(['GET', 'POST'])
def candidate_documents(request, pk):
    """
    Document history of a candidate, or append new documents.

    GET /candidates/{id}/documents/
    POST /candidates/{id}/documents/ (multipart, file fields per category)
    """
    if request.method == 'GET':
        documents = CandidateService.list_documents(pk)
        serializer = CandidateDocumentSerializer(documents, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        files = collect_document_files(request.FILES)
        if not files:
            raise ValidationError(
                'No files uploaded',
                fields={'files': ['Attach at least one document.']},
            )

        CandidateService.add_documents(pk, files)
        documents = CandidateService.list_documents(pk)
        serializer = CandidateDocumentSerializer(documents, many=True)
        return Response(serializer.data, status=status.HTTP_201_CREATED)
