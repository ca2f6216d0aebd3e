# pendaftar/urls.py
from django.urls import path

from .views import RegistrationViewSet


urlpatterns = [
    path('pendaftar', RegistrationViewSet.as_view({'get': 'list', 'post': 'create'}), name='pendaftar-list'),
    path('pendaftar/<int:pk>', RegistrationViewSet.as_view({'patch': 'partial_update'}), name='pendaftar-detail'),
    path('pendaftar/user/<int:user_id>', RegistrationViewSet.as_view({'get': 'for_user'}), name='pendaftar-user'),
    path(
        'pendaftar/kegiatan/user/<int:user_id>',
        RegistrationViewSet.as_view({'get': 'kegiatan_for_user'}),
        name='pendaftar-kegiatan-user',
    ),
]
