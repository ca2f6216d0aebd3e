# ukm/serializers.py
from rest_framework import serializers

from .models import Anggota, Kegiatan, KomentarUkm, Laporan, Ukm


# === Children of a UKM ===
class KegiatanSerializer(serializers.ModelSerializer):
    ukm_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Kegiatan
        fields = ['id', 'ukm_id', 'nama', 'deskripsi', 'tanggal', 'link_wa']
        read_only_fields = ['id']


class AnggotaSerializer(serializers.ModelSerializer):
    ukm_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Anggota
        fields = ['id', 'ukm_id', 'nama', 'nim', 'jabatan']
        read_only_fields = ['id']


class LaporanSerializer(serializers.ModelSerializer):
    ukm_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Laporan
        fields = ['id', 'ukm_id', 'kegiatan', 'peserta', 'biaya']
        read_only_fields = ['id']


# === UKM ===
class UkmSerializer(serializers.ModelSerializer):
    """
    Writable UKM fields plus the nested children and comment stats that the
    read endpoints return. ``komentar_count``/``avg_rating`` come from
    queryset annotations and fall back to zero on fresh instances.
    """
    kegiatan = KegiatanSerializer(many=True, read_only=True)
    anggota = AnggotaSerializer(many=True, read_only=True)
    laporan = LaporanSerializer(many=True, read_only=True)
    komentar_count = serializers.SerializerMethodField()
    avg_rating = serializers.SerializerMethodField()

    class Meta:
        model = Ukm
        fields = [
            'id', 'nama', 'deskripsi', 'gambar', 'wa_group',
            'terdaftar_anggota', 'created_at',
            'komentar_count', 'avg_rating',
            'kegiatan', 'anggota', 'laporan',
        ]
        read_only_fields = ['id', 'terdaftar_anggota', 'created_at']

    def get_komentar_count(self, obj) -> int:
        return int(getattr(obj, 'komentar_count', 0) or 0)

    def get_avg_rating(self, obj) -> float:
        return round(float(getattr(obj, 'avg_rating', 0) or 0), 2)


# === Komentar ===
class KomentarSerializer(serializers.ModelSerializer):
    ukm_id = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = KomentarUkm
        fields = ['id', 'ukm_id', 'user_id', 'komentar', 'rating', 'is_active', 'created_at', 'updated_at']
        read_only_fields = fields


class KomentarListSerializer(KomentarSerializer):
    user_nama = serializers.CharField(source='user.nama', read_only=True)
    nim = serializers.CharField(source='user.nim', read_only=True)

    class Meta(KomentarSerializer.Meta):
        fields = KomentarSerializer.Meta.fields + ['user_nama', 'nim']
        read_only_fields = fields


class KomentarWriteSerializer(serializers.Serializer):
    """Input for create and edit; rating falls back to 5 when omitted."""
    komentar = serializers.CharField(
        min_length=KomentarUkm.MIN_LENGTH,
        error_messages={
            'required': 'Komentar minimal 10 karakter',
            'blank': 'Komentar minimal 10 karakter',
            'null': 'Komentar minimal 10 karakter',
            'min_length': 'Komentar minimal 10 karakter',
        },
    )
    rating = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=1,
        max_value=5,
        error_messages={
            'invalid': 'Rating 1-5 saja',
            'min_value': 'Rating 1-5 saja',
            'max_value': 'Rating 1-5 saja',
        },
    )

    def validate_rating(self, value):
        return KomentarUkm.DEFAULT_RATING if value is None else value

    def to_internal_value(self, data):
        attrs = super().to_internal_value(data)
        attrs.setdefault('rating', KomentarUkm.DEFAULT_RATING)
        return attrs
