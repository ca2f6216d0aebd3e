import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Ukm',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nama', models.CharField(max_length=255)),
                ('deskripsi', models.TextField(blank=True, null=True)),
                ('gambar', models.CharField(blank=True, max_length=500, null=True)),
                ('wa_group', models.CharField(blank=True, max_length=500, null=True)),
                ('terdaftar_anggota', models.BooleanField(db_column='terdaftaranggota', default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'ukm',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='Kegiatan',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nama', models.CharField(max_length=255)),
                ('deskripsi', models.TextField(blank=True, null=True)),
                ('tanggal', models.DateField(blank=True, null=True)),
                ('link_wa', models.CharField(blank=True, max_length=500, null=True)),
                ('ukm', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='kegiatan', to='ukm.ukm')),
            ],
            options={
                'db_table': 'kegiatan',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Anggota',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nama', models.CharField(max_length=255)),
                ('nim', models.CharField(blank=True, max_length=50, null=True)),
                ('jabatan', models.CharField(default='Anggota', max_length=100)),
                ('ukm', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='anggota', to='ukm.ukm')),
            ],
            options={
                'db_table': 'anggota',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['ukm', 'nim'], name='anggota_ukm_nim_idx')],
            },
        ),
        migrations.CreateModel(
            name='Laporan',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('kegiatan', models.CharField(max_length=255)),
                ('peserta', models.PositiveIntegerField(default=0)),
                ('biaya', models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ('ukm', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='laporan', to='ukm.ukm')),
            ],
            options={
                'db_table': 'laporan',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='KomentarUkm',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('komentar', models.TextField()),
                ('rating', models.PositiveSmallIntegerField(default=5, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('ukm', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='komentar', to='ukm.ukm')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='komentar_ukm', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'komentar_ukm',
                'ordering': ['-created_at', '-id'],
                'constraints': [models.UniqueConstraint(condition=models.Q(('is_active', True)), fields=('user', 'ukm'), name='uniq_active_komentar_per_user_ukm')],
            },
        ),
    ]
