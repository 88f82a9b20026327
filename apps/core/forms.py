from django.db.models import Q


def owned_choices(model, user, current_pk=None):
    """
    Choices for an owner-scoped FK field: the user's active rows, plus the
    row the instance already points at even if it was deleted since.
    """
    condition = Q(user=user, is_active=True)
    if current_pk:
        condition |= Q(user=user, pk=current_pk)
    return model.objects.filter(condition)
