"""
Authentication views.

Login and sign-up return both a DRF token (``Authorization: Token``)
and a JWT pair.  ``session`` is the "is anyone signed in" probe the
front-end calls on start-up; it answers 200 either way.  Keeping these
views apart from :mod:`frontdesk.authentication` avoids circular
imports while REST framework loads its settings.
"""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from django.db import transaction
from django.utils import timezone
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken, OutstandingToken
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView

from .models import User
from .permissions import capabilities_for
from .serializers.auth import LoginSerializer, SignupSerializer
from .services.activity import log_activity

logger = logging.getLogger(__name__)


def user_payload(user: User) -> dict:
    return {
        'id': user.id,
        'username': user.username,
        'email': user.email,
        'fullName': user.full_name or user.get_full_name() or user.username,
        'role': user.role,
        'department': user.department,
        'isActive': user.is_active,
    }


def _tokens_for(user: User) -> dict:
    token_obj, _ = Token.objects.get_or_create(user=user)
    refresh = RefreshToken.for_user(user)
    return {
        'token': token_obj.key,
        'jwt_access': str(refresh.access_token),
        'jwt_refresh': str(refresh),
    }


@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """Username (or email) and password login."""
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    username = s.validated_data['username']
    password = s.validated_data['password']

    user = authenticate(request, username=username, password=password)
    if user is None and '@' in username:
        match = User.objects.filter(email__iexact=username).first()
        if match is not None:
            user = authenticate(request, username=match.username, password=password)
    if not user:
        logger.info("Failed login for %s from %s", username, request.META.get('REMOTE_ADDR'))
        return Response({'ok': False, 'error': {'code': 'invalid_credentials', 'message': 'Invalid username or password'}},
                        status=400)

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])
    log_activity(f"{user.username} signed in", user=user)
    return Response({'ok': True, **_tokens_for(user), 'role': user.role, 'user': user_payload(user)}, status=200)

# DRF ScopedRateThrottle uses throttle_scope on the view function
login_view.throttle_scope = 'login'


@api_view(['POST'])
@permission_classes([AllowAny])
def signup_view(request):
    """Create an account; the role defaults to staff."""
    s = SignupSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    v = s.validated_data
    email = v['email'].lower()
    if User.objects.filter(username=email).exists() or User.objects.filter(email__iexact=email).exists():
        raise ValidationError({'email': ['An account with this email already exists.']})
    now = timezone.now()
    with transaction.atomic():
        user = User.objects.create_user(
            username=email,
            email=email,
            password=v['password'],
            full_name=v['fullName'],
            role=v['role'],
            phone=v.get('phone', ''),
            department=v.get('department', ''),
            created_at=now,
            updated_at=now,
        )
    logger.info("Registered user %s (%s)", user.username, user.role)
    log_activity(f"New {user.role} account {user.username}", user=user)
    return Response({'ok': True, **_tokens_for(user), 'role': user.role, 'user': user_payload(user)}, status=201)

signup_view.throttle_scope = 'signup'


@api_view(['GET'])
@permission_classes([AllowAny])
def session_view(request):
    user = request.user
    if not (user and user.is_authenticated):
        return Response({'ok': True, 'authenticated': False, 'user': None})
    return Response({
        'ok': True,
        'authenticated': True,
        'user': user_payload(user),
        'capabilities': capabilities_for(user),
    })


@api_view(['POST'])
@permission_classes([AllowAny])
def jwt_refresh_view(request):
    """Return a new access token from refresh token."""
    view = TokenRefreshView.as_view()
    resp = view(request._request)
    if isinstance(resp, Response):
        data = dict(resp.data)
        if 'access' in data and 'jwt_access' not in data:
            data['jwt_access'] = data.pop('access')
        return Response(data, status=resp.status_code)
    return resp


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_view(request):
    """Blacklist the given refresh token, or all of the user's tokens."""
    refresh = request.data.get('refresh')
    count = 0
    if refresh:
        try:
            RefreshToken(refresh).blacklist()
            count = 1
        except TokenError as exc:
            raise ValidationError({'refresh': [str(exc)]})
    else:
        for token in OutstandingToken.objects.filter(user=request.user):
            _, created = BlacklistedToken.objects.get_or_create(token=token)
            count += int(created)
    Token.objects.filter(user=request.user).delete()
    log_activity(f"{request.user.username} signed out", user=request.user)
    return Response({'ok': True, 'blacklisted': count})
