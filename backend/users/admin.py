from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('id', 'email', 'nama', 'nim', 'fakultas', 'role', 'is_active')
    list_filter = ('role', 'fakultas', 'is_active')
    search_fields = ('email', 'nama', 'nim')
    ordering = ('-date_joined',)
