import pytest

from apps.properties.models import Property


@pytest.mark.django_db
class TestSoftDelete:
    def test_soft_delete_and_restore(self, prop):
        prop.soft_delete()
        assert prop.is_active is False
        assert not Property.active.filter(pk=prop.pk).exists()
        assert Property.objects.filter(pk=prop.pk).exists()

        prop.restore()
        assert Property.active.filter(pk=prop.pk).exists()

    def test_timestamps(self, prop):
        created = prop.created_at
        prop.notes = 'updated'
        prop.save()
        assert prop.created_at == created
        assert prop.updated_at >= created

    def test_owner_related_name(self, prop, test_user):
        assert list(test_user.property_set.all()) == [prop]
