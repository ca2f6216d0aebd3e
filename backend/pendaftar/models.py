from django.conf import settings
from django.db import models


class Registration(models.Model):
    """
    A user's request to join a UKM (``anggota``) or one of its activities
    (``kegiatan``). Admins move it to accepted/rejected; rows are never
    deleted through the API.
    """
    class Type(models.TextChoices):
        ANGGOTA = 'anggota', 'Anggota'
        KEGIATAN = 'kegiatan', 'Kegiatan'

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        ACCEPTED = 'accepted', 'Accepted'
        REJECTED = 'rejected', 'Rejected'

    DECISION_STATUSES = (Status.ACCEPTED, Status.REJECTED)

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='registrations')
    ukm = models.ForeignKey('ukm.Ukm', on_delete=models.CASCADE, related_name='registrations')
    kegiatan = models.ForeignKey(
        'ukm.Kegiatan',
        on_delete=models.SET_NULL,
        related_name='registrations',
        null=True, blank=True,
    )
    type = models.CharField(max_length=20, choices=Type.choices)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING, db_index=True)
    registered_at = models.DateTimeField(auto_now_add=True)

    # last admin decision
    decided_at = models.DateTimeField(null=True, blank=True)
    decided_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name='registrations_decided',
        null=True, blank=True,
    )

    class Meta:
        db_table = 'user_ukm_registrations'
        ordering = ['-registered_at', '-id']
        constraints = [
            # one registration per (user, UKM, type), whatever its status
            models.UniqueConstraint(fields=['user', 'ukm', 'type'], name='uniq_registration_user_ukm_type'),
        ]

    def __str__(self):
        return f"{self.user_id} → {self.ukm_id} [{self.type}] {self.status}"

    @property
    def promotes_to_anggota(self):
        return self.status == self.Status.ACCEPTED and self.type == self.Type.ANGGOTA
