from unittest import mock

import pytest
from django.contrib import admin
from django.test import RequestFactory

from pendaftar.admin import RegistrationAdmin
from pendaftar.models import Registration
from ukm.models import Anggota
from users.tests.factories import AdminFactory
from .factories import RegistrationFactory

pytestmark = pytest.mark.django_db


def test_accept_action_runs_the_workflow():
    staff = AdminFactory(is_staff=True)
    pending = RegistrationFactory()
    untouched = RegistrationFactory()
    request = RequestFactory().post('/admin/pendaftar/registration/')
    request.user = staff

    model_admin = RegistrationAdmin(Registration, admin.site)
    with mock.patch.object(model_admin, 'message_user') as message_user:
        model_admin.accept_selected(request, Registration.objects.filter(pk=pending.pk))

    pending.refresh_from_db()
    untouched.refresh_from_db()
    assert pending.status == Registration.Status.ACCEPTED
    assert pending.decided_by_id == staff.id
    assert untouched.status == Registration.Status.PENDING
    assert Anggota.objects.filter(ukm=pending.ukm).count() == 1
    message_user.assert_called_once()
