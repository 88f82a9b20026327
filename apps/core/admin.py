class SoftDeleteAdminMixin:
    """Admin lists deleted rows too (the default manager filters nothing)"""

    def get_queryset(self, request):
        return self.model.objects.all()
