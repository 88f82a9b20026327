import logging

from django.contrib.auth import login as auth_login, logout as auth_logout
from django.contrib.auth.forms import AuthenticationForm
from django.db import IntegrityError
from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from apps.core.decorators import login_required_json
from apps.core.http import BadJSON, form_error_response, json_error, parse_body
from .forms import SignupForm

logger = logging.getLogger(__name__)


def user_to_dict(user):
    return {
        'id': user.pk,
        'username': user.username,
        'email': user.email,
        'first_name': user.first_name,
        'last_name': user.last_name,
    }


@require_POST
def register(request):
    """
    Registration
    - the new user is signed in right away
    """
    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    form = SignupForm(payload)
    if not form.is_valid():
        return form_error_response(form)

    try:
        user = form.save()
    except IntegrityError as e:
        logger.error(f"Registration failed (duplicate data): {e}")
        return json_error('User already exists')

    auth_login(request, user)
    logger.info(f"New user registered: {user.username} (ID: {user.id}, Email: {user.email})")
    return JsonResponse(user_to_dict(user), status=201)


@require_POST
def login(request):
    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    form = AuthenticationForm(request, data=payload)
    if not form.is_valid():
        logger.info(f"Failed login for '{payload.get('username', '')}'")
        return json_error('Invalid username or password', status=401)

    user = form.get_user()
    auth_login(request, user)
    return JsonResponse(user_to_dict(user))


@require_POST
def logout(request):
    auth_logout(request)
    return JsonResponse({'message': 'Logged out'})


@login_required_json
@require_GET
def me(request):
    return JsonResponse(user_to_dict(request.user))
