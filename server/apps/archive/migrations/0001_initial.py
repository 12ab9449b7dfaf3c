from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Entry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(db_index=True, help_text='Base name, matches the last segment of the remote path', max_length=255)),
                ('path', models.CharField(default='/', help_text='Parent folder in the remote namespace', max_length=1024)),
                ('is_directory', models.BooleanField(default=False)),
                ('visible', models.BooleanField(default=True, help_text='Cleared when a member removes the entry')),
                ('owner', models.CharField(blank=True, default='', max_length=255)),
                ('group_affiliation', models.CharField(blank=True, default='', help_text='Group of the uploading member', max_length=64)),
                ('size_bytes', models.BigIntegerField(default=0)),
                ('remote_modified', models.DateTimeField(blank=True, null=True)),
                ('revision', models.CharField(blank=True, default='', max_length=128)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Entry',
                'verbose_name_plural': 'Entries',
                'ordering': ['-is_directory', 'name'],
                'indexes': [models.Index(fields=['path', 'visible'], name='archive_path_visible_idx')],
                'constraints': [models.UniqueConstraint(fields=('path', 'name'), name='archive_path_name_unique')],
            },
        ),
    ]
