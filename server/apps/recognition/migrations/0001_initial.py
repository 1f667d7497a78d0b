from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('files', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='RecognitionLabel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('confidence', models.FloatField(help_text='Confidence reported by the recognition service, in percent')),
                ('parents', models.JSONField(blank=True, default=list, help_text='Names of the broader labels this label belongs to')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('file', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='recognition_labels', to='files.file')),
            ],
            options={
                'verbose_name': 'Recognition label',
                'verbose_name_plural': 'Recognition labels',
                'ordering': ['file', '-confidence'],
                'indexes': [
                    models.Index(fields=['name'], name='recognition_label_name_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('file', 'name'), name='recognition_file_label_unique'),
                ],
            },
        ),
    ]
