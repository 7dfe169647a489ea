from django.db import connections
from django.http import JsonResponse


def healthz(request):
    """Database round trip; 500 when the database is unreachable."""
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
        return JsonResponse({'ok': True, 'db': bool(row and row[0] == 1)})
    except Exception as e:
        return JsonResponse({'ok': False, 'error': {'code': 'server_error', 'message': str(e)}}, status=500)
