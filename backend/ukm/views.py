# ukm/views.py
import logging

from django.db import IntegrityError, transaction
from django.db.models import Avg, Count, FloatField, Q, Value
from django.db.models.functions import Coalesce
from django.utils import timezone
from rest_framework import permissions, status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from core.exceptions import Conflict
from users.permissions import IsAdmin, is_admin
from .models import Anggota, Kegiatan, KomentarUkm, Laporan, Ukm
from .serializers import (
    AnggotaSerializer,
    KegiatanSerializer,
    KomentarListSerializer,
    KomentarSerializer,
    KomentarWriteSerializer,
    LaporanSerializer,
    UkmSerializer,
)

logger = logging.getLogger(__name__)

ACTIVE_KOMENTAR = Q(komentar__is_active=True)


def ukm_queryset():
    """UKMs with nested children prefetched and active-comment stats annotated."""
    return (
        Ukm.objects
        .annotate(
            komentar_count=Count('komentar', filter=ACTIVE_KOMENTAR),
            avg_rating=Coalesce(
                Avg('komentar__rating', filter=ACTIVE_KOMENTAR),
                Value(0.0),
                output_field=FloatField(),
            ),
        )
        .prefetch_related('kegiatan', 'anggota', 'laporan')
        .order_by('-created_at', '-id')
    )


class PublicReadMixin:
    """
    Safe methods are public and skip token parsing entirely, so a stale
    token never breaks a read. Everything else is admin only.
    """

    def get_authenticators(self):
        if self.request.method in permissions.SAFE_METHODS:
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [IsAdmin()]


class UkmViewSet(PublicReadMixin, viewsets.ModelViewSet):
    """
    UKM CRUD.
     - LIST/RETRIEVE: public, with kegiatan/anggota/laporan and comment stats
     - CREATE/UPDATE/DELETE: admin only
    """
    serializer_class = UkmSerializer
    not_found_message = 'UKM not found'
    unauthenticated_message = 'Login required (Admin only)'

    def get_queryset(self):
        return ukm_queryset()

    def perform_update(self, serializer):
        ukm = serializer.save()
        ukm.refresh_member_flag()

    def destroy(self, request, *args, **kwargs):
        ukm = self.get_object()
        ukm_id = ukm.pk
        ukm.delete()
        logger.info("UKM %s deleted by user %s", ukm_id, request.user.id)
        return Response({'message': 'UKM deleted successfully'}, status=status.HTTP_200_OK)


class UkmChildViewSet(PublicReadMixin, viewsets.ModelViewSet):
    """
    Base for resources nested under /ukm/<ukm_pk>/. Every lookup is scoped
    by the parent id so a child can't be reached through another UKM.
    """
    model = None
    label = None
    unauthenticated_message = 'Login required (Admin only)'

    @property
    def not_found_message(self):
        return f'{self.label} not found'

    def get_queryset(self):
        return self.model.objects.filter(ukm_id=self.kwargs['ukm_pk'])

    def create(self, request, *args, **kwargs):
        # a missing parent wins over an invalid body
        self.parent_ukm = Ukm.objects.filter(pk=self.kwargs['ukm_pk']).first()
        if self.parent_ukm is None:
            raise NotFound('UKM not found')
        return super().create(request, *args, **kwargs)

    def perform_create(self, serializer):
        serializer.save(ukm=self.parent_ukm)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)
        return Response({'message': f'{self.label} deleted'}, status=status.HTTP_200_OK)


class KegiatanViewSet(UkmChildViewSet):
    model = Kegiatan
    label = 'Kegiatan'
    serializer_class = KegiatanSerializer


class LaporanViewSet(UkmChildViewSet):
    model = Laporan
    label = 'Laporan'
    serializer_class = LaporanSerializer


class AnggotaViewSet(UkmChildViewSet):
    model = Anggota
    label = 'Anggota'
    serializer_class = AnggotaSerializer

    def perform_create(self, serializer):
        with transaction.atomic():
            super().perform_create(serializer)
            serializer.instance.ukm.refresh_member_flag()

    def perform_destroy(self, instance):
        with transaction.atomic():
            ukm = instance.ukm
            instance.delete()
            ukm.refresh_member_flag()


class KomentarViewSet(PublicReadMixin, viewsets.GenericViewSet):
    """
    Comments on a UKM.
     - GET  /ukm-komentar/<ukm_id>  public, active comments newest first
     - POST /ukm-komentar/<ukm_id>  any logged-in user, one active comment per UKM
     - PUT  /ukm-komentar/<id>      owner only
     - DELETE /ukm-komentar/<id>    owner or admin (soft delete)
    """
    serializer_class = KomentarSerializer
    unauthenticated_message = 'Login diperlukan untuk komen!'
    not_found_message = 'Komentar tidak ditemukan'

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated()]

    def get_queryset(self):
        return KomentarUkm.objects.filter(is_active=True)

    def for_ukm(self, request, pk=None):
        qs = (
            self.get_queryset()
            .filter(ukm_id=pk)
            .select_related('user')
            .order_by('-created_at', '-id')
        )
        return Response(KomentarListSerializer(qs, many=True).data)

    def create(self, request, pk=None):
        ser = KomentarWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        user_id = request.user.id

        if not Ukm.objects.filter(pk=pk).exists():
            raise NotFound('UKM not found')

        try:
            with transaction.atomic():
                if self.get_queryset().filter(ukm_id=pk, user_id=user_id).exists():
                    raise Conflict('Sudah komen untuk UKM ini!')
                komentar = KomentarUkm.objects.create(
                    ukm_id=pk,
                    user_id=user_id,
                    komentar=data['komentar'],
                    rating=data['rating'],
                )
        except IntegrityError:
            # lost a race against a parallel create for the same user/UKM
            if self.get_queryset().filter(ukm_id=pk, user_id=user_id).exists():
                raise Conflict('Sudah komen untuk UKM ini!')
            raise

        return Response(
            {'message': '✅ Komentar berhasil ditambahkan!', 'komentar': KomentarSerializer(komentar).data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None):
        ser = KomentarWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        komentar = self.get_queryset().filter(pk=pk, user_id=request.user.id).first()
        if komentar is None:
            raise NotFound('Komentar tidak ditemukan atau bukan milik Anda')

        komentar.komentar = data['komentar']
        komentar.rating = data['rating']
        komentar.save(update_fields=['komentar', 'rating', 'updated_at'])
        return Response({'message': '✅ Komentar diperbarui!', 'komentar': KomentarSerializer(komentar).data})

    def destroy(self, request, pk=None):
        qs = self.get_queryset().filter(pk=pk)
        if not is_admin(request.user):
            qs = qs.filter(user_id=request.user.id)

        if not qs.update(is_active=False, updated_at=timezone.now()):
            raise NotFound('Komentar tidak ditemukan')

        logger.info("Komentar %s deactivated by user %s", pk, request.user.id)
        return Response({'message': '✅ Komentar dihapus'})
