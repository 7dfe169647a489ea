"""
URL configuration for the hospital administration backend.

The `urlpatterns` list routes URLs to views.  This module includes
both the Django admin and the API routes provided by the frontdesk app.
OpenAPI documentation is exposed at ``/swagger/`` and ``/redoc/``.
Unknown paths fall through to the JSON not-found handler.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Hospital Administration API",
    default_version='v1',
    description="Admissions, doctors, rooms, appointments, billing, face sheets and reports.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    # Django admin site (useful for development)
    path('admin/', admin.site.urls),
    # Include API routes from the frontdesk app
    path('', include('frontdesk.routers')),
    # Swagger and ReDoc
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]

handler404 = 'frontdesk.views.index.not_found'
