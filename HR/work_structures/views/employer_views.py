from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from HR.work_structures.services import (
    EmployerService,
    EmployerTaxRegimeService,
    TaxRegimeService
)
from HR.work_structures.serializers import (
    EmployerSerializer,
    EmployerCreateSerializer,
    EmployerUpdateSerializer,
    TaxRegimeSerializer,
    TaxRegimeCreateSerializer,
    TaxRegimeUpdateSerializer,
    EmployerTaxRegimeSerializer,
    EmployerTaxRegimeCreateSerializer
)


@api_view(['GET', 'POST'])
def employer_profile(request):
    """
    Employer profile (singleton, first by id).

    GET /employer/ -> 404 when no profile exists
    POST /employer/
    """
    if request.method == 'GET':
        employer = EmployerService.get_profile()
        return Response(EmployerSerializer(employer).data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        serializer = EmployerCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        employer = EmployerService.create(serializer.to_dto())
        return Response(EmployerSerializer(employer).data, status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
def employer_detail(request, pk):
    """
    Update or delete the employer profile.

    DELETE answers 409 while tax regime history exists.
    """
    if request.method == 'PUT':
        serializer = EmployerUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        employer = EmployerService.update(serializer.to_dto(pk))
        return Response(EmployerSerializer(employer).data, status=status.HTTP_200_OK)

    elif request.method == 'DELETE':
        EmployerService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET', 'POST'])
def employer_tax_regime(request):
    """
    Current tax regime of the employer, or switch to another one.

    GET /employer/tax-regime/ -> open period, 404 when none

    POST /employer/tax-regime/
    {
        "taxRegimeId": 3,
        "validFrom": "2025-01-01"    # optional, default today
    }
    Closes the open period the day before validFrom and opens the new one.
    """
    if request.method == 'GET':
        period = EmployerTaxRegimeService.get_current()
        return Response(EmployerTaxRegimeSerializer(period).data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        serializer = EmployerTaxRegimeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        period = EmployerTaxRegimeService.set_regime(serializer.to_dto())
        return Response(EmployerTaxRegimeSerializer(period).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
def employer_tax_regime_history(request):
    """
    All tax regime periods of the employer, most recent start first.

    GET /employer/tax-regime/history/
    """
    periods = EmployerTaxRegimeService.get_history()
    serializer = EmployerTaxRegimeSerializer(periods, many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)


@api_view(['GET', 'POST'])
def tax_regime_list(request):
    """
    List the tax regime catalog or add an entry.

    GET /tax-regimes/
    - Filters: code, name, search, is_active
    """
    if request.method == 'GET':
        regimes = TaxRegimeService.list(request.query_params)
        serializer = TaxRegimeSerializer(regimes, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        serializer = TaxRegimeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        regime = TaxRegimeService.create(serializer.to_dto())
        return Response(TaxRegimeSerializer(regime).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
def tax_regime_detail(request, pk):
    """
    Retrieve, update or delete a catalog entry.

    DELETE answers 409 once the regime appears in the employer's history.
    """
    if request.method == 'GET':
        regime = TaxRegimeService.get(pk)
        return Response(TaxRegimeSerializer(regime).data, status=status.HTTP_200_OK)

    elif request.method == 'PUT':
        serializer = TaxRegimeUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        regime = TaxRegimeService.update(pk, serializer.to_dto(pk))
        return Response(TaxRegimeSerializer(regime).data, status=status.HTTP_200_OK)

    elif request.method == 'DELETE':
        TaxRegimeService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
