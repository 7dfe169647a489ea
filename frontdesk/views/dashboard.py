"""
Dashboard endpoints: hospital statistics and the recent activity feed.

Statistics are recomputed on every request so that a failed read
surfaces as an error response.  ``manage.py poll_stats`` refreshes the
same figures on a timer and pushes them to WebSocket clients.
"""
from __future__ import annotations

from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..services.activity import recent_activity
from ..services.stats import dashboard_stats


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def stats(request):
    return Response({'ok': True, 'data': dashboard_stats(), 'meta': {'generatedAt': timezone.now().isoformat()}})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def activity(request):
    return Response({'ok': True, 'data': recent_activity()})
