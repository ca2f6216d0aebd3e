# pendaftar/views.py
from rest_framework import permissions, status, viewsets
from rest_framework.response import Response

from users.permissions import IsAdmin, IsMember, IsSelfOrAdmin
from .models import Registration
from .serializers import (
    AdminRegistrationSerializer,
    RegistrationCreateSerializer,
    RegistrationSerializer,
    RegistrationStatusSerializer,
    UserRegistrationSerializer,
)
from .services import create_registration, transition_registration


class RegistrationViewSet(viewsets.GenericViewSet):
    """
    Registrations to join a UKM or one of its activities.
     - LIST: admin only, every registration (?status=, ?type= filters)
     - CREATE: logged-in non-admin users, for themselves
     - PARTIAL_UPDATE: admin accepts/rejects
     - for_user / kegiatan_for_user: the user themself or an admin
    """
    queryset = Registration.objects.all()
    serializer_class = RegistrationSerializer

    def get_permissions(self):
        if self.action == 'create':
            return [permissions.IsAuthenticated(), IsMember()]
        if self.action in ['for_user', 'kegiatan_for_user']:
            return [permissions.IsAuthenticated(), IsSelfOrAdmin()]
        # list, partial_update
        return [permissions.IsAuthenticated(), IsAdmin()]

    def get_queryset(self):
        return (
            Registration.objects
            .select_related('user', 'ukm', 'kegiatan')
            .order_by('-registered_at', '-id')
        )

    def list(self, request):
        qs = self.get_queryset()
        status_q = request.query_params.get('status')
        type_q = request.query_params.get('type')
        if status_q:
            qs = qs.filter(status=status_q)
        if type_q:
            qs = qs.filter(type=type_q)
        return Response(AdminRegistrationSerializer(qs, many=True).data)

    def for_user(self, request, user_id=None):
        qs = self.get_queryset().filter(user_id=user_id)
        return Response(UserRegistrationSerializer(qs, many=True).data)

    def kegiatan_for_user(self, request, user_id=None):
        qs = self.get_queryset().filter(
            user_id=user_id,
            type=Registration.Type.KEGIATAN,
            kegiatan__isnull=False,
        )
        return Response(UserRegistrationSerializer(qs, many=True).data)

    def create(self, request):
        ser = RegistrationCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        registration = create_registration(
            user_id=request.user.id,
            ukm_id=data['ukm_id'],
            reg_type=data['type'],
            kegiatan_id=data.get('kegiatan_id'),
        )
        return Response(
            {
                'message': '✅ Berhasil daftar! Menunggu konfirmasi admin',
                'registration': RegistrationSerializer(registration).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def partial_update(self, request, pk=None):
        ser = RegistrationStatusSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        new_status = ser.validated_data['status']

        registration = transition_registration(pk, new_status, decided_by_id=request.user.id)
        return Response({
            'message': f'✅ Status diubah ke {new_status}',
            'registration': RegistrationSerializer(registration).data,
        })
