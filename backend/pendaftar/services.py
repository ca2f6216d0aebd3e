"""
Registration workflow: creating a registration and applying an admin
decision, including promotion of accepted ``anggota`` registrations into the
UKM's member list.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound

from core.exceptions import Conflict
from ukm.models import Anggota, Kegiatan, Ukm
from .models import Registration

logger = logging.getLogger(__name__)
User = get_user_model()

ALREADY_REGISTERED = 'Sudah terdaftar'


def create_registration(user_id, ukm_id, reg_type, kegiatan_id=None):
    """
    Insert a pending registration for ``user_id``.

    Raises NotFound when the UKM (or the given kegiatan under it) is missing
    and Conflict when the user already has a registration of this type for
    the UKM, whatever its status.
    """
    with transaction.atomic():
        if not Ukm.objects.filter(pk=ukm_id).exists():
            raise NotFound('UKM not found')
        if kegiatan_id is not None and not Kegiatan.objects.filter(pk=kegiatan_id, ukm_id=ukm_id).exists():
            raise NotFound('Kegiatan not found')

        if Registration.objects.filter(user_id=user_id, ukm_id=ukm_id, type=reg_type).exists():
            raise Conflict(ALREADY_REGISTERED)

        try:
            with transaction.atomic():
                registration = Registration.objects.create(
                    user_id=user_id,
                    ukm_id=ukm_id,
                    kegiatan_id=kegiatan_id,
                    type=reg_type,
                )
        except IntegrityError:
            # a parallel request inserted the same (user, ukm, type) first
            if Registration.objects.filter(user_id=user_id, ukm_id=ukm_id, type=reg_type).exists():
                raise Conflict(ALREADY_REGISTERED)
            raise

    logger.info(
        "Registration %s created: user=%s ukm=%s type=%s kegiatan=%s",
        registration.pk, user_id, ukm_id, reg_type, kegiatan_id,
    )
    return registration


def promote_to_anggota(registration):
    """
    Copy the registering user into the UKM's anggota list unless a member
    with the same nim already exists, then flag the UKM as having members.
    Users without a nim can't be matched and are always added.

    Returns the Anggota row that was created, or None if one already existed.
    """
    user = User.objects.only('nama', 'nim').get(pk=registration.user_id)

    if user.nim and Anggota.objects.filter(ukm_id=registration.ukm_id, nim=user.nim).exists():
        logger.debug("UKM %s already has anggota with nim %s; skipping", registration.ukm_id, user.nim)
        anggota = None
    else:
        anggota = Anggota.objects.create(
            ukm_id=registration.ukm_id,
            nama=user.nama,
            nim=user.nim,
            jabatan=Anggota.DEFAULT_JABATAN,
        )
        logger.info("Anggota %s added to UKM %s from registration %s", anggota.pk, registration.ukm_id, registration.pk)

    Ukm.objects.filter(pk=registration.ukm_id).update(terdaftar_anggota=True)
    return anggota


def transition_registration(registration_id, new_status, decided_by_id=None):
    """
    Apply an admin decision. Any state may be moved to accepted or rejected
    again. Repeating an acceptance adds no second anggota for a user with a
    nim.
    """
    if new_status not in Registration.DECISION_STATUSES:
        raise ValueError(f"Unsupported registration status: {new_status!r}")

    with transaction.atomic():
        registration = Registration.objects.select_for_update().filter(pk=registration_id).first()
        if registration is None:
            raise NotFound('Registration not found')

        previous = registration.status
        registration.status = new_status
        registration.decided_at = timezone.now()
        registration.decided_by_id = decided_by_id
        registration.save(update_fields=['status', 'decided_at', 'decided_by'])

        if registration.promotes_to_anggota:
            promote_to_anggota(registration)

    logger.info(
        "Registration %s: %s -> %s by admin %s",
        registration.pk, previous, new_status, decided_by_id,
    )
    return registration
