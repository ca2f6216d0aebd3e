# pendaftar/serializers.py
from rest_framework import serializers

from .models import Registration

REQUIRED_FIELDS_MESSAGE = 'ukm_id dan type wajib diisi'
STATUS_MESSAGE = 'Status harus accepted atau rejected'


class RegistrationSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    ukm_id = serializers.IntegerField(read_only=True)
    kegiatan_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = Registration
        fields = ['id', 'user_id', 'ukm_id', 'kegiatan_id', 'type', 'status', 'registered_at', 'decided_at']
        read_only_fields = fields


class UserRegistrationSerializer(RegistrationSerializer):
    """A user's own registrations with the UKM/activity display fields."""
    ukm_nama = serializers.CharField(source='ukm.nama', read_only=True)
    kegiatan_nama = serializers.CharField(source='kegiatan.nama', read_only=True)
    link_wa = serializers.CharField(source='kegiatan.link_wa', read_only=True)

    class Meta(RegistrationSerializer.Meta):
        fields = RegistrationSerializer.Meta.fields + ['ukm_nama', 'kegiatan_nama', 'link_wa']
        read_only_fields = fields


class AdminRegistrationSerializer(RegistrationSerializer):
    """Registrations across all users, denormalised for the admin table."""
    user_nama = serializers.CharField(source='user.nama', read_only=True)
    nim = serializers.CharField(source='user.nim', read_only=True)
    fakultas = serializers.CharField(source='user.fakultas', read_only=True)
    ukm_nama = serializers.CharField(source='ukm.nama', read_only=True)
    kegiatan_nama = serializers.CharField(source='kegiatan.nama', read_only=True)

    class Meta(RegistrationSerializer.Meta):
        fields = RegistrationSerializer.Meta.fields + ['user_nama', 'nim', 'fakultas', 'ukm_nama', 'kegiatan_nama']
        read_only_fields = fields


class RegistrationCreateSerializer(serializers.Serializer):
    ukm_id = serializers.IntegerField(
        error_messages={'required': REQUIRED_FIELDS_MESSAGE, 'null': REQUIRED_FIELDS_MESSAGE, 'invalid': REQUIRED_FIELDS_MESSAGE},
    )
    kegiatan_id = serializers.IntegerField(required=False, allow_null=True)
    type = serializers.ChoiceField(
        choices=Registration.Type.choices,
        error_messages={
            'required': REQUIRED_FIELDS_MESSAGE,
            'null': REQUIRED_FIELDS_MESSAGE,
            'invalid_choice': REQUIRED_FIELDS_MESSAGE,
        },
    )


class RegistrationStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=[(s.value, s.label) for s in Registration.DECISION_STATUSES],
        error_messages={
            'required': STATUS_MESSAGE,
            'null': STATUS_MESSAGE,
            'invalid_choice': STATUS_MESSAGE,
        },
    )
