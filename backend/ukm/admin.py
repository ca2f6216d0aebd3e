from django.contrib import admin
from .models import Anggota, Kegiatan, KomentarUkm, Laporan, Ukm


class KegiatanInline(admin.TabularInline):
    model = Kegiatan
    extra = 0


class AnggotaInline(admin.TabularInline):
    model = Anggota
    extra = 0


class LaporanInline(admin.TabularInline):
    model = Laporan
    extra = 0


@admin.register(Ukm)
class UkmAdmin(admin.ModelAdmin):
    list_display  = ['id', 'nama', 'terdaftar_anggota', 'created_at']
    list_filter   = ['terdaftar_anggota']
    search_fields = ['nama']
    readonly_fields = ['terdaftar_anggota', 'created_at']
    inlines = [KegiatanInline, AnggotaInline, LaporanInline]


@admin.register(Kegiatan)
class KegiatanAdmin(admin.ModelAdmin):
    list_display = ['id', 'nama', 'ukm', 'tanggal']
    list_filter  = ['ukm']
    search_fields = ['nama', 'ukm__nama']


@admin.register(Anggota)
class AnggotaAdmin(admin.ModelAdmin):
    list_display = ['id', 'nama', 'nim', 'jabatan', 'ukm']
    list_filter  = ['ukm', 'jabatan']
    search_fields = ['nama', 'nim', 'ukm__nama']


@admin.register(Laporan)
class LaporanAdmin(admin.ModelAdmin):
    list_display = ['id', 'kegiatan', 'peserta', 'biaya', 'ukm']
    list_filter  = ['ukm']
    search_fields = ['kegiatan', 'ukm__nama']


@admin.register(KomentarUkm)
class KomentarUkmAdmin(admin.ModelAdmin):
    list_display = ['id', 'ukm', 'user', 'rating', 'is_active', 'created_at']
    list_filter  = ['is_active', 'rating', 'ukm']
    search_fields = ['komentar', 'user__nama', 'user__email', 'ukm__nama']
