from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Q


class Ukm(models.Model):
    """
    A student organisation. Activities, members, reports and comments hang
    off it and are removed with it.
    """
    nama = models.CharField(max_length=255)
    deskripsi = models.TextField(blank=True, null=True)
    gambar = models.CharField(max_length=500, blank=True, null=True)
    wa_group = models.CharField(max_length=500, blank=True, null=True)
    # Derived: true once the organisation has at least one anggota row.
    terdaftar_anggota = models.BooleanField(default=False, db_column='terdaftaranggota')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'ukm'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.nama

    def refresh_member_flag(self, save=True):
        self.terdaftar_anggota = self.anggota.exists()
        if save:
            self.save(update_fields=['terdaftar_anggota'])
        return self.terdaftar_anggota


class Kegiatan(models.Model):
    ukm = models.ForeignKey(Ukm, on_delete=models.CASCADE, related_name='kegiatan')
    nama = models.CharField(max_length=255)
    deskripsi = models.TextField(blank=True, null=True)
    tanggal = models.DateField(blank=True, null=True)
    link_wa = models.CharField(max_length=500, blank=True, null=True)

    class Meta:
        db_table = 'kegiatan'
        ordering = ['id']

    def __str__(self):
        return f"{self.nama} @ {self.ukm_id}"


class Anggota(models.Model):
    DEFAULT_JABATAN = 'Anggota'

    ukm = models.ForeignKey(Ukm, on_delete=models.CASCADE, related_name='anggota')
    nama = models.CharField(max_length=255)
    nim = models.CharField(max_length=50, blank=True, null=True)
    jabatan = models.CharField(max_length=100, default=DEFAULT_JABATAN)

    class Meta:
        db_table = 'anggota'
        ordering = ['id']
        indexes = [
            models.Index(fields=['ukm', 'nim'], name='anggota_ukm_nim_idx'),
        ]

    def __str__(self):
        return f"{self.nama} ({self.jabatan})"


class Laporan(models.Model):
    ukm = models.ForeignKey(Ukm, on_delete=models.CASCADE, related_name='laporan')
    kegiatan = models.CharField(max_length=255)
    peserta = models.PositiveIntegerField(default=0)
    biaya = models.DecimalField(max_digits=14, decimal_places=2, default=0)

    class Meta:
        db_table = 'laporan'
        ordering = ['id']

    def __str__(self):
        return f"{self.kegiatan} ({self.peserta} peserta)"


class KomentarUkm(models.Model):
    """
    A user's comment and star rating on a UKM. Deleting only clears
    ``is_active``; each user keeps at most one active comment per UKM.
    """
    MIN_LENGTH = 10
    DEFAULT_RATING = 5

    ukm = models.ForeignKey(Ukm, on_delete=models.CASCADE, related_name='komentar')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='komentar_ukm')
    komentar = models.TextField()
    rating = models.PositiveSmallIntegerField(
        default=DEFAULT_RATING,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'komentar_ukm'
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'ukm'],
                condition=Q(is_active=True),
                name='uniq_active_komentar_per_user_ukm',
            ),
        ]

    def __str__(self):
        return f"{self.user_id} → {self.ukm_id} ({self.rating}★)"
