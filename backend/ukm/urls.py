# ukm/urls.py
from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import (
    AnggotaViewSet,
    KegiatanViewSet,
    KomentarViewSet,
    LaporanViewSet,
    UkmViewSet,
)


router = SimpleRouter(trailing_slash=False)
router.register(r'ukm', UkmViewSet, basename='ukm')

child_list = {'get': 'list', 'post': 'create'}
child_detail = {'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}

urlpatterns = [
    path('ukm/<int:ukm_pk>/kegiatan', KegiatanViewSet.as_view(child_list), name='kegiatan-list'),
    path('ukm/<int:ukm_pk>/kegiatan/<int:pk>', KegiatanViewSet.as_view(child_detail), name='kegiatan-detail'),
    path('ukm/<int:ukm_pk>/laporan', LaporanViewSet.as_view(child_list), name='laporan-list'),
    path('ukm/<int:ukm_pk>/laporan/<int:pk>', LaporanViewSet.as_view(child_detail), name='laporan-detail'),
    path('ukm/<int:ukm_pk>/anggota', AnggotaViewSet.as_view(child_list), name='anggota-list'),
    path('ukm/<int:ukm_pk>/anggota/<int:pk>', AnggotaViewSet.as_view(child_detail), name='anggota-detail'),

    # GET/POST take a UKM id, PUT/DELETE take a komentar id
    path(
        'ukm-komentar/<int:pk>',
        KomentarViewSet.as_view({'get': 'for_ukm', 'post': 'create', 'put': 'update', 'delete': 'destroy'}),
        name='komentar',
    ),

    path('', include(router.urls)),
]
