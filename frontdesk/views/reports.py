from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.report import ReportQuerySerializer
from ..services import tables
from ..services.reports import aggregate


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def period_report(request):
    """Revenue and patient counts per day, month or year.

    ``selected`` narrows the rows to the period containing that date and
    defaults to today, so the first view is today, this month or this year.
    An empty ``data`` list means no activity in the period.
    """
    q = ReportQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    granularity = q.validated_data['granularity']
    selected = q.validated_data.get('selected') or timezone.localdate()
    rows = aggregate(tables.invoices.all(), tables.patients.all(), granularity, selected)
    return Response({
        'ok': True,
        'data': rows,
        'meta': {
            'granularity': granularity,
            'selected': selected.isoformat(),
            'empty': not rows,
        },
    })
