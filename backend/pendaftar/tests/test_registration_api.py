import pytest

from pendaftar.models import Registration
from ukm.tests.factories import KegiatanFactory, UkmFactory
from users.tests.factories import AdminFactory, UserFactory
from .factories import RegistrationFactory

pytestmark = pytest.mark.django_db


class TestCreateRegistration:
    def test_member_registers_as_anggota(self, client_for, member):
        ukm = UkmFactory()

        resp = client_for(member).post('/pendaftar', {'ukm_id': ukm.id, 'type': 'anggota'}, format='json')

        assert resp.status_code == 201
        body = resp.json()
        assert body['message'] == '✅ Berhasil daftar! Menunggu konfirmasi admin'
        reg = body['registration']
        assert reg['user_id'] == member.id
        assert reg['ukm_id'] == ukm.id
        assert reg['kegiatan_id'] is None
        assert reg['type'] == 'anggota'
        assert reg['status'] == 'pending'

    def test_register_for_kegiatan(self, client_for, member):
        kegiatan = KegiatanFactory()

        resp = client_for(member).post(
            '/pendaftar',
            {'ukm_id': kegiatan.ukm_id, 'kegiatan_id': kegiatan.id, 'type': 'kegiatan'},
            format='json',
        )

        assert resp.status_code == 201
        assert resp.json()['registration']['kegiatan_id'] == kegiatan.id

    def test_kegiatan_must_belong_to_ukm(self, client_for, member):
        kegiatan = KegiatanFactory()
        other = UkmFactory()

        resp = client_for(member).post(
            '/pendaftar', {'ukm_id': other.id, 'kegiatan_id': kegiatan.id, 'type': 'kegiatan'}, format='json',
        )

        assert resp.status_code == 404
        assert resp.json() == {'error': 'Kegiatan not found'}

    def test_unknown_ukm(self, client_for, member):
        resp = client_for(member).post('/pendaftar', {'ukm_id': 999999, 'type': 'anggota'}, format='json')

        assert resp.status_code == 404
        assert resp.json() == {'error': 'UKM not found'}

    @pytest.mark.parametrize('payload', [
        {'type': 'anggota'},
        {'ukm_id': 1},
        {'ukm_id': 1, 'type': 'pengurus'},
    ])
    def test_missing_or_invalid_fields(self, client_for, member, payload):
        resp = client_for(member).post('/pendaftar', payload, format='json')

        assert resp.status_code == 400
        assert resp.json() == {'error': 'ukm_id dan type wajib diisi'}

    def test_duplicate_is_rejected_whatever_the_status(self, client_for, member):
        existing = RegistrationFactory(user=member, status=Registration.Status.REJECTED)

        resp = client_for(member).post(
            '/pendaftar', {'ukm_id': existing.ukm_id, 'type': 'anggota'}, format='json',
        )

        assert resp.status_code == 400
        assert resp.json() == {'error': 'Sudah terdaftar'}
        assert Registration.objects.filter(user=member).count() == 1

    def test_other_type_for_same_ukm_is_allowed(self, client_for, member):
        existing = RegistrationFactory(user=member)

        resp = client_for(member).post(
            '/pendaftar', {'ukm_id': existing.ukm_id, 'type': 'kegiatan'}, format='json',
        )

        assert resp.status_code == 201

    def test_admin_cannot_register(self, client_for):
        ukm = UkmFactory()

        resp = client_for(AdminFactory()).post('/pendaftar', {'ukm_id': ukm.id, 'type': 'anggota'}, format='json')

        assert resp.status_code == 403
        assert resp.json() == {'error': 'Admin cannot register'}

    def test_anonymous_cannot_register(self, api_client):
        resp = api_client.post('/pendaftar', {'ukm_id': 1, 'type': 'anggota'}, format='json')

        assert resp.status_code == 401


class TestListRegistrations:
    def test_admin_lists_all_with_filters(self, client_for):
        accepted = RegistrationFactory(status=Registration.Status.ACCEPTED)
        RegistrationFactory()

        api = client_for(AdminFactory())
        assert len(api.get('/pendaftar').json()) == 2

        rows = api.get('/pendaftar', {'status': 'accepted'}).json()
        assert [r['id'] for r in rows] == [accepted.id]
        assert rows[0]['user_nama'] == accepted.user.nama
        assert rows[0]['ukm_nama'] == accepted.ukm.nama
        assert rows[0]['fakultas'] == accepted.user.fakultas

    def test_user_sees_own_registrations_newest_first(self, client_for, member):
        first = RegistrationFactory(user=member)
        second = RegistrationFactory(user=member)
        RegistrationFactory()

        resp = client_for(member).get(f'/pendaftar/user/{member.id}')

        assert resp.status_code == 200
        rows = resp.json()
        assert [r['id'] for r in rows] == [second.id, first.id]
        assert rows[0]['ukm_nama'] == second.ukm.nama

    def test_user_cannot_read_someone_else(self, client_for, member, other_member):
        RegistrationFactory(user=other_member)

        resp = client_for(member).get(f'/pendaftar/user/{other_member.id}')

        assert resp.status_code == 403
        assert resp.json() == {'error': 'Access denied'}

    def test_admin_reads_any_user(self, client_for, member):
        RegistrationFactory(user=member)

        resp = client_for(AdminFactory()).get(f'/pendaftar/user/{member.id}')

        assert resp.status_code == 200
        assert len(resp.json()) == 1

    def test_kegiatan_list_only_has_activity_registrations(self, client_for, member):
        kegiatan = KegiatanFactory(link_wa='https://chat.whatsapp.com/lomba')
        RegistrationFactory(user=member, ukm=kegiatan.ukm, kegiatan=kegiatan, type=Registration.Type.KEGIATAN)
        RegistrationFactory(user=member, ukm=kegiatan.ukm)

        rows = client_for(member).get(f'/pendaftar/kegiatan/user/{member.id}').json()

        assert len(rows) == 1
        assert rows[0]['kegiatan_nama'] == kegiatan.nama
        assert rows[0]['link_wa'] == 'https://chat.whatsapp.com/lomba'

    def test_member_cannot_list_all(self, client_for, member):
        resp = client_for(member).get('/pendaftar')

        assert resp.status_code == 403


class TestDecideRegistration:
    def test_admin_accepts(self, client_for):
        registration = RegistrationFactory()
        admin = AdminFactory()

        resp = client_for(admin).patch(f'/pendaftar/{registration.id}', {'status': 'accepted'}, format='json')

        assert resp.status_code == 200
        assert resp.json()['message'] == '✅ Status diubah ke accepted'
        assert resp.json()['registration']['status'] == 'accepted'
        registration.refresh_from_db()
        assert registration.decided_by_id == admin.id
        assert registration.decided_at is not None

    @pytest.mark.parametrize('payload', [{'status': 'pending'}, {'status': 'maybe'}, {}])
    def test_invalid_status(self, client_for, payload):
        registration = RegistrationFactory()

        resp = client_for(AdminFactory()).patch(f'/pendaftar/{registration.id}', payload, format='json')

        assert resp.status_code == 400
        assert resp.json() == {'error': 'Status harus accepted atau rejected'}

    def test_unknown_registration(self, client_for):
        resp = client_for(AdminFactory()).patch('/pendaftar/999999', {'status': 'accepted'}, format='json')

        assert resp.status_code == 404
        assert resp.json() == {'error': 'Registration not found'}

    def test_member_cannot_decide(self, client_for, member):
        registration = RegistrationFactory(user=member)

        resp = client_for(member).patch(f'/pendaftar/{registration.id}', {'status': 'accepted'}, format='json')

        assert resp.status_code == 403
        registration.refresh_from_db()
        assert registration.status == 'pending'
