from django.contrib import admin
from .models import Registration
from .services import transition_registration


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'ukm', 'kegiatan', 'type', 'status', 'registered_at', 'decided_at']
    list_filter  = ['type', 'status', 'ukm']
    search_fields = ['user__nama', 'user__nim', 'user__email', 'ukm__nama']
    # status changes go through the workflow so accepted anggota get promoted
    readonly_fields = ['status', 'registered_at', 'decided_at', 'decided_by']
    actions = ['accept_selected', 'reject_selected']

    def _decide(self, request, queryset, new_status):
        for registration_id in queryset.values_list('pk', flat=True):
            transition_registration(registration_id, new_status, decided_by_id=request.user.pk)
        self.message_user(request, f"{queryset.count()} registration(s) marked {new_status}.")

    @admin.action(description="Accept selected registrations")
    def accept_selected(self, request, queryset):
        self._decide(request, queryset, Registration.Status.ACCEPTED)

    @admin.action(description="Reject selected registrations")
    def reject_selected(self, request, queryset):
        self._decide(request, queryset, Registration.Status.REJECTED)
