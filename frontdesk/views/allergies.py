from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.report import AllergySuggestQuerySerializer
from ..services.allergies import suggest


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def allergy_suggestions(request):
    q = AllergySuggestQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    exclude = [e.strip() for e in (q.validated_data.get('exclude') or '').split(',') if e.strip()]
    return Response({'ok': True, 'data': suggest(q.validated_data.get('q'), exclude)})
