from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from core.base.exceptions import ValidationError
from HR.person.models.document import EMPLOYEE_DOCUMENT_CATEGORIES
from HR.person.services.employee_service import EmployeeService
from HR.person.serializers.candidate_serializers import RecordListQuerySerializer
from HR.person.serializers.employee_serializers import (
    EmployeeSerializer,
    EmployeeDetailSerializer,
    EmployeeCreateSerializer,
    EmployeeUpdateSerializer
)
from HR.person.serializers.document_serializers import (
    EmployeeDocumentSerializer,
    collect_document_files
)
from staffing_project.exception_handler import success_response


@api_view(['GET', 'POST'])
def employee_list(request):
    """
    List employees or create a new one.

    GET /employees/
    - Filters: year, month (number or ALL), groupStart, groupEnd

    POST /employees/ (multipart)
    - name, site, group plus file fields per category
    """
    if request.method == 'GET':
        query = RecordListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        employees = EmployeeService.list_employees(query.validated_data)

        serializer = EmployeeSerializer(employees, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        serializer = EmployeeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        files = collect_document_files(request.FILES, EMPLOYEE_DOCUMENT_CATEGORIES)

        employee = EmployeeService.create(serializer.to_dto(files))
        return success_response({'id': employee.id}, status_code=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT'])
def employee_detail(request, pk):
    """
    Retrieve or partially update an employee.

    GET /employees/{id}/
    - Deprecated shape: one URL per category, the first upload wins.
      Use /employees/{id}/documents/ for the full history.
    """
    if request.method == 'GET':
        employee = EmployeeService.get_employee(pk)
        serializer = EmployeeDetailSerializer(employee)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'PUT':
        serializer = EmployeeUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        files = collect_document_files(request.FILES, EMPLOYEE_DOCUMENT_CATEGORIES)

        EmployeeService.update(serializer.to_dto(pk, files))
        return success_response()


@api_view(['GET', 'POST'])
def employee_documents(request, pk):
    """
    Document history of an employee, or append new documents.

    GET /employees/{id}/documents/
    POST /employees/{id}/documents/ (multipart, file fields per category)
    """
    if request.method == 'GET':
        documents = EmployeeService.list_documents(pk)
        serializer = EmployeeDocumentSerializer(documents, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        files = collect_document_files(request.FILES, EMPLOYEE_DOCUMENT_CATEGORIES)
        if not files:
            raise ValidationError(
                'No files uploaded',
                fields={'files': ['Attach at least one document.']},
            )

        EmployeeService.add_documents(pk, files)
        documents = EmployeeService.list_documents(pk)
        serializer = EmployeeDocumentSerializer(documents, many=True)
        return Response(serializer.data, status=status.HTTP_201_CREATED)
